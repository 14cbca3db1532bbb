"""
Deterministic venue-name resolution for event drafts.

    from venue_resolver import CatalogEntry, ResolverInput, resolve_venue

    outcome = resolve_venue(ResolverInput(
        user_message="meet at ltb tonight",
        catalog=[CatalogEntry(id="1", name="Long Table Brewhouse")],
    ))
"""
from .config import ResolverConfig
from .exceptions import ConfigurationError, PayloadValidationError, VenueResolverError
from .models import CatalogEntry, ResolverInput, ScoredCandidate
from .resolution import (
    Ambiguous,
    CustomLocation,
    OnlineExplicit,
    Resolved,
    ResolutionSource,
    Unresolved,
    VenueResolutionOutcome,
    VenueResolver,
    fold_outcome,
    resolve_venue,
    should_resolve_venue,
)

__all__ = [
    "ResolverConfig",
    "VenueResolverError",
    "ConfigurationError",
    "PayloadValidationError",
    "CatalogEntry",
    "ResolverInput",
    "ScoredCandidate",
    "Resolved",
    "Ambiguous",
    "Unresolved",
    "OnlineExplicit",
    "CustomLocation",
    "ResolutionSource",
    "VenueResolutionOutcome",
    "VenueResolver",
    "fold_outcome",
    "resolve_venue",
    "should_resolve_venue",
]
