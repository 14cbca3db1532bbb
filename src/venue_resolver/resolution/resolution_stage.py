"""
Core abstractions for the resolution pipeline.

The resolver is an ordered list of stages. Each stage looks at the shared
context and either returns a final outcome or returns None to defer to the
next stage.
"""
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Callable, Iterable, Mapping, Optional, Sequence

from ..config import ResolverConfig
from ..models import CatalogEntry, ResolverInput, ScoredCandidate
from .alias_index import AliasIndex, build_alias_index
from .entity_extractor import select_candidate_name
from .outcomes import Ambiguous, VenueResolutionOutcome

Scorer = Callable[[str, CatalogEntry], float]


class ResolutionContext:
    """
    Per-call state shared by the stages of one resolution.
    
    The alias index and the candidate name are computed on first use, so
    calls that end at the online or trusted-id checks never build them.
    """
    
    def __init__(
        self,
        request: ResolverInput,
        config: ResolverConfig,
        alias_overrides: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.request = request
        self.config = config
        self._alias_overrides = alias_overrides
    
    @property
    def catalog(self) -> Sequence[CatalogEntry]:
        return self.request.catalog
    
    @cached_property
    def alias_index(self) -> AliasIndex:
        return build_alias_index(self.request.catalog, self._alias_overrides)
    
    @cached_property
    def candidate_name(self) -> Optional[str]:
        return select_candidate_name(
            self.request.proposed_name,
            self.request.user_message,
            self.request.catalog,
            self.alias_index,
        )
    
    def ambiguous(self, scored: Iterable[ScoredCandidate]) -> Ambiguous:
        """Build an ambiguous outcome from candidates already sorted by score."""
        candidates = tuple(scored)[: self.config.max_ambiguous_candidates]
        return Ambiguous(candidates=candidates, input_name=self.candidate_name or "")


class ResolutionStage(ABC):
    """One step of the resolution pipeline."""
    
    name: str = "stage"
    
    @abstractmethod
    def evaluate(self, context: ResolutionContext) -> Optional[VenueResolutionOutcome]:
        """
        Decide or defer.
        
        :param context: Shared per-call context
        :return: Final outcome, or None to let the next stage decide
        """
        pass
