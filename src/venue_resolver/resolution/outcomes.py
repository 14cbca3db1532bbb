"""
Outcome types for venue resolution.

Every call to the resolver returns exactly one of five variants. None of
them is an error: "ambiguous" and "unresolved" are ordinary results that
callers are expected to branch on, and fold_outcome makes that branching
exhaustive.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, TypeVar, Union

from ..models import ScoredCandidate

T = TypeVar("T")


class ResolutionSource(str, Enum):
    """Which check produced a resolved venue."""
    TRUSTED_ID = "trusted-id"
    EXACT = "exact"
    ALIAS = "alias"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class Resolved:
    """
    Exactly one catalog venue matched.
    
    Attributes:
        venue_id: Id of the matched catalog entry
        venue_name: Catalog name of the matched entry
        confidence: Match strength between 0.0 and 1.0
        source: Check that produced the match
    """
    venue_id: str
    venue_name: str
    confidence: float
    source: ResolutionSource
    status: str = field(default="resolved", init=False)
    
    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")


@dataclass(frozen=True)
class Ambiguous:
    """Several catalog venues are plausible; the caller must ask which one."""
    candidates: Tuple[ScoredCandidate, ...]
    input_name: str
    status: str = field(default="ambiguous", init=False)
    
    def __post_init__(self):
        if not isinstance(self.candidates, tuple):
            object.__setattr__(self, "candidates", tuple(self.candidates))
        scores = [candidate.score for candidate in self.candidates]
        if scores != sorted(scores, reverse=True):
            raise ValueError("Ambiguous candidates must be sorted by score, highest first")
    
    @property
    def candidate_names(self) -> Tuple[str, ...]:
        return tuple(candidate.name for candidate in self.candidates)


@dataclass(frozen=True)
class Unresolved:
    """Nothing in the catalog matched the input well enough."""
    input_name: Optional[str]
    status: str = field(default="unresolved", init=False)


@dataclass(frozen=True)
class OnlineExplicit:
    """The event is explicitly online; no venue applies."""
    status: str = field(default="online_explicit", init=False)


@dataclass(frozen=True)
class CustomLocation:
    """A free-text location was given on purpose and is kept as-is."""
    status: str = field(default="custom_location", init=False)


VenueResolutionOutcome = Union[Resolved, Ambiguous, Unresolved, OnlineExplicit, CustomLocation]


def fold_outcome(
    outcome: VenueResolutionOutcome,
    *,
    on_resolved: Callable[[Resolved], T],
    on_ambiguous: Callable[[Ambiguous], T],
    on_unresolved: Callable[[Unresolved], T],
    on_online_explicit: Callable[[OnlineExplicit], T],
    on_custom_location: Callable[[CustomLocation], T],
) -> T:
    """
    Dispatch an outcome to the handler for its variant.
    
    All five handlers are required, so a caller cannot forget a branch.
    
    :param outcome: Resolver outcome
    :return: Whatever the selected handler returns
    :raises TypeError: If outcome is not one of the five variants
    """
    if isinstance(outcome, Resolved):
        return on_resolved(outcome)
    if isinstance(outcome, Ambiguous):
        return on_ambiguous(outcome)
    if isinstance(outcome, Unresolved):
        return on_unresolved(outcome)
    if isinstance(outcome, OnlineExplicit):
        return on_online_explicit(outcome)
    if isinstance(outcome, CustomLocation):
        return on_custom_location(outcome)
    raise TypeError(f"Unknown venue resolution outcome: {outcome!r}")
