class VenueResolverError(Exception):
    """Base exception for the venue resolver package."""


class ConfigurationError(VenueResolverError):
    """Raised when resolver configuration is missing or invalid."""


class PayloadValidationError(VenueResolverError):
    """Raised when a caller payload cannot be turned into resolver input."""
