"""
Resolution metadata for logging a venue decision.

Condenses an outcome into a flat dict that is safe to log: ids, scores and
the input name, never the full catalog.
"""
from dataclasses import dataclass
from typing import Optional

from .outcomes import (
    Ambiguous,
    Resolved,
    Unresolved,
    VenueResolutionOutcome,
    fold_outcome,
)


@dataclass
class ResolutionMetadata:
    """
    Summary of one resolution for explainability.
    
    Tracks:
    - Outcome status
    - Source and confidence of a resolved venue
    - Number of candidates of an ambiguous result
    - The input name that was matched
    """
    status: str
    source: Optional[str] = None
    confidence: Optional[float] = None
    venue_id: Optional[str] = None
    candidate_count: Optional[int] = None
    input_name: Optional[str] = None
    
    @classmethod
    def from_outcome(cls, outcome: VenueResolutionOutcome) -> "ResolutionMetadata":
        def _resolved(result: Resolved):
            return cls(
                status=result.status,
                source=result.source.value,
                confidence=result.confidence,
                venue_id=result.venue_id,
            )
        
        def _ambiguous(result: Ambiguous):
            return cls(
                status=result.status,
                candidate_count=len(result.candidates),
                input_name=result.input_name,
            )
        
        def _unresolved(result: Unresolved):
            return cls(status=result.status, input_name=result.input_name)
        
        def _no_venue(result):
            return cls(status=result.status)
        
        return fold_outcome(
            outcome,
            on_resolved=_resolved,
            on_ambiguous=_ambiguous,
            on_unresolved=_unresolved,
            on_online_explicit=_no_venue,
            on_custom_location=_no_venue,
        )
    
    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        result = {"status": self.status}
        
        if self.source:
            result["source"] = self.source
        
        if self.confidence is not None:
            result["confidence"] = self.confidence
        
        if self.venue_id:
            result["venue_id"] = self.venue_id
        
        if self.candidate_count is not None:
            result["candidate_count"] = self.candidate_count
        
        if self.input_name:
            result["input_name"] = self.input_name
        
        return result
