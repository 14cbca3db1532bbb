"""
Value objects shared by the resolution layer.

All of them are immutable: the catalog and the request are owned by the
caller and passed in by value on every call.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    name: str
    slug: Optional[str] = None


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog entry paired with its match score against one candidate name."""
    id: str
    name: str
    score: float

    def __post_init__(self):
        """Validate score."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Score must be between 0.0 and 1.0, got {self.score}")

    @classmethod
    def from_entry(cls, entry: CatalogEntry, score: float) -> "ScoredCandidate":
        return cls(id=entry.id, name=entry.name, score=score)


@dataclass(frozen=True)
class ResolverInput:
    """
    Everything the resolver needs for a single decision.

    Attributes:
        proposed_id: Venue id proposed upstream (may be stale or invented)
        proposed_name: Venue name proposed upstream (venue name or custom location)
        user_message: The user's original message text
        catalog: Snapshot of known venues
        location_mode: Draft location mode ("venue", "online", "hybrid", ...)
        online_url: Draft online URL
        is_custom_location: True when proposed_name came from a free-text
            custom location field rather than a venue name field
    """
    proposed_id: Optional[str] = None
    proposed_name: Optional[str] = None
    user_message: str = ""
    catalog: Tuple[CatalogEntry, ...] = field(default_factory=tuple)
    location_mode: Optional[str] = None
    online_url: Optional[str] = None
    is_custom_location: bool = False

    def __post_init__(self):
        # Accept any iterable of entries but store a tuple so the input stays hashable.
        if not isinstance(self.catalog, tuple):
            object.__setattr__(self, "catalog", tuple(self.catalog))
