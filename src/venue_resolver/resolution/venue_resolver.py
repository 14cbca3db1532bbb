"""
Venue resolver: the public entry point of the resolution layer.

Combines the short-circuit checks, the deterministic matchers and the fuzzy
fallback into a single decision per call.
"""
import logging
from typing import Mapping, Optional, Sequence

from ..config import ResolverConfig
from ..models import ResolverInput
from .fuzzy_matcher import FuzzyVenueMatcher
from .outcomes import VenueResolutionOutcome
from .resolution_metadata import ResolutionMetadata
from .resolution_policy import ResolutionPolicy, default_stages
from .resolution_stage import ResolutionContext, Scorer

logger = logging.getLogger(__name__)


class VenueResolver:
    """
    Resolves a proposed or mentioned venue against a catalog snapshot.
    
    Holds configuration only; the catalog arrives with each request, so one
    instance can serve any number of callers.
    
    Usage:
        resolver = VenueResolver()
        outcome = resolver.resolve(ResolverInput(proposed_name="LTB", catalog=catalog))
        if isinstance(outcome, Resolved):
            venue_id = outcome.venue_id
    """
    
    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        scorer: Optional[Scorer] = None,
        alias_overrides: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        """
        :param config: Thresholds (defaults to ResolverConfig())
        :param scorer: Replacement similarity function for the fuzzy stage
        :param alias_overrides: Curated aliases keyed by slug (defaults to ALIAS_OVERRIDES)
        """
        self.config = config or ResolverConfig()
        self._alias_overrides = alias_overrides
        self._policy = ResolutionPolicy(default_stages(FuzzyVenueMatcher(scorer=scorer)))
    
    def resolve(self, request: ResolverInput) -> VenueResolutionOutcome:
        """
        Resolve one request.
        
        :param request: Proposed venue fields, message text and catalog
        :return: One of Resolved, Ambiguous, Unresolved, OnlineExplicit, CustomLocation
        """
        context = ResolutionContext(request, self.config, self._alias_overrides)
        outcome = self._policy.resolve(context)
        logger.info(f"Venue resolution: {ResolutionMetadata.from_outcome(outcome).to_dict()}")
        return outcome


def resolve_venue(
    request: ResolverInput,
    config: Optional[ResolverConfig] = None,
) -> VenueResolutionOutcome:
    """Resolve one request with a default-configured VenueResolver."""
    return VenueResolver(config).resolve(request)
