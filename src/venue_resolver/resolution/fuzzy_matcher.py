"""
Fuzzy matching strategy for venue resolution.

Scores every catalog entry against the candidate name and applies the
resolve / tie / ambiguous thresholds.
"""
import logging
from typing import List, Optional

from ..models import ScoredCandidate
from .match_scorer import score_venue_match
from .outcomes import CustomLocation, Resolved, ResolutionSource, Unresolved
from .resolution_stage import ResolutionContext, ResolutionStage, Scorer

logger = logging.getLogger(__name__)


class FuzzyVenueMatcher(ResolutionStage):
    """
    Threshold-based fallback over similarity scores.
    
    - best >= resolve threshold and clearly ahead of the runner-up -> resolved
    - best >= resolve threshold but the runner-up is within the tie gap -> ambiguous
    - best >= ambiguous threshold -> ambiguous
    - otherwise -> custom location (when flagged) or unresolved
    
    This is the last stage, so it always returns an outcome.
    """
    
    name = "fuzzy"
    
    def __init__(self, scorer: Optional[Scorer] = None):
        """
        :param scorer: Function scoring (candidate, entry) in [0, 1]; defaults to score_venue_match
        """
        self._scorer = scorer or score_venue_match
    
    def score_catalog(self, candidate: str, context: ResolutionContext) -> List[ScoredCandidate]:
        """Score all entries, highest first (catalog order among equal scores)."""
        scored = [
            ScoredCandidate.from_entry(entry, self._scorer(candidate, entry))
            for entry in context.catalog
        ]
        return sorted(scored, key=lambda item: item.score, reverse=True)
    
    def evaluate(self, context: ResolutionContext):
        config = context.config
        candidate = context.candidate_name or ""
        scored = self.score_catalog(candidate, context) if candidate else []
        plausible = [item for item in scored if item.score >= config.ambiguous_threshold]
        
        if scored:
            best = scored[0]
            second = scored[1] if len(scored) > 1 else None
            
            if best.score >= config.resolve_threshold:
                if (
                    second is not None
                    and second.score >= config.resolve_threshold
                    and best.score - second.score < config.tie_gap
                ):
                    logger.debug(
                        f"Fuzzy tie for '{candidate}': '{best.name}' ({best.score:.2f}) "
                        f"vs '{second.name}' ({second.score:.2f})"
                    )
                    return context.ambiguous(plausible)
                
                source = (
                    ResolutionSource.EXACT
                    if best.score >= config.exact_source_threshold
                    else ResolutionSource.FUZZY
                )
                return Resolved(
                    venue_id=best.id,
                    venue_name=best.name,
                    confidence=best.score,
                    source=source,
                )
            
            if best.score >= config.ambiguous_threshold:
                return context.ambiguous(plausible)
            
            logger.debug(f"Best fuzzy score for '{candidate}' is {best.score:.2f}; below thresholds")
        
        if context.request.is_custom_location:
            return CustomLocation()
        return Unresolved(input_name=context.candidate_name)
