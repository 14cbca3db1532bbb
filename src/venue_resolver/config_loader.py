"""
Configuration loader with validation.

Reads resolver thresholds from the environment (and a local .env file in
development) and returns a validated ResolverConfig.
"""
from dotenv import load_dotenv

from .config import (
    AMBIGUOUS_THRESHOLD,
    EXACT_SOURCE_THRESHOLD,
    MAX_AMBIGUOUS_CANDIDATES,
    RESOLVE_THRESHOLD,
    TIE_GAP,
    ResolverConfig,
)
from .config_validator import get_float_env, get_int_env


def _config_from_environment() -> ResolverConfig:
    return ResolverConfig(
        resolve_threshold=get_float_env("VENUE_RESOLVE_THRESHOLD", RESOLVE_THRESHOLD),
        ambiguous_threshold=get_float_env("VENUE_AMBIGUOUS_THRESHOLD", AMBIGUOUS_THRESHOLD),
        tie_gap=get_float_env("VENUE_TIE_GAP", TIE_GAP),
        max_ambiguous_candidates=get_int_env(
            "VENUE_MAX_AMBIGUOUS_CANDIDATES", MAX_AMBIGUOUS_CANDIDATES
        ),
        exact_source_threshold=get_float_env(
            "VENUE_EXACT_SOURCE_THRESHOLD", EXACT_SOURCE_THRESHOLD
        ),
    )


def load_config_from_env() -> ResolverConfig:
    """
    Load resolver configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        resolver = VenueResolver(config)
    
    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if a value is malformed or out of range
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    return _config_from_environment()


def create_config_for_production() -> ResolverConfig:
    """
    Create configuration for production deployment.
    
    Environment variables only; no .env file is read.
    
    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if a value is malformed or out of range
    """
    return _config_from_environment()
