"""
Stages that decide before any name matching happens.
"""
import logging
from typing import Optional

from .outcomes import CustomLocation, OnlineExplicit, Resolved, ResolutionSource, Unresolved
from .resolution_stage import ResolutionContext, ResolutionStage

logger = logging.getLogger(__name__)

ONLINE_LOCATION_MODE = "online"


def _has_text(value: Optional[str]) -> bool:
    return isinstance(value, str) and bool(value.strip())


class OnlineShortCircuit(ResolutionStage):
    """An online event with a URL never gets a venue, whatever else the draft says."""
    
    name = "online"
    
    def evaluate(self, context: ResolutionContext):
        request = context.request
        if request.location_mode == ONLINE_LOCATION_MODE and _has_text(request.online_url):
            logger.debug("Online event with URL; skipping venue matching")
            return OnlineExplicit()
        return None


class TrustedIdCheck(ResolutionStage):
    """
    Accept a proposed venue id when it exists in the catalog.
    
    Unknown ids (stale, or invented upstream) are ignored and resolution
    continues by name.
    """
    
    name = "trusted_id"
    
    def evaluate(self, context: ResolutionContext):
        proposed_id = context.request.proposed_id
        if not _has_text(proposed_id):
            return None
        
        proposed_id = proposed_id.strip()
        for entry in context.catalog:
            if entry.id == proposed_id:
                return Resolved(
                    venue_id=entry.id,
                    venue_name=entry.name,
                    confidence=1.0,
                    source=ResolutionSource.TRUSTED_ID,
                )
        
        logger.debug(f"Proposed venue id '{proposed_id}' not in catalog; matching by name")
        return None


class CandidateCheck(ResolutionStage):
    """Stop early when there is no name to match or nothing to match it against."""
    
    name = "candidate"
    
    def evaluate(self, context: ResolutionContext):
        candidate = context.candidate_name
        if candidate and context.catalog:
            return None
        
        request = context.request
        if request.is_custom_location and _has_text(request.proposed_name):
            return CustomLocation()
        return Unresolved(input_name=candidate)
