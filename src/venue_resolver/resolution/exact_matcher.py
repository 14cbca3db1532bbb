"""
Deterministic matching strategies: exact name, slug and alias.

Fast checks that run before fuzzy scoring. Each one collects every catalog
entry it matches; a single match resolves, several matches are reported as
ambiguous rather than picking one.
"""
import logging
from abc import abstractmethod
from typing import List

from ..config import ALIAS_CONFIDENCE, EXACT_NAME_CONFIDENCE, SLUG_CONFIDENCE
from ..models import CatalogEntry, ScoredCandidate
from .match_scorer import entry_slug
from .normalizer import match_slug, normalize_for_match
from .outcomes import Resolved, ResolutionSource
from .resolution_stage import ResolutionContext, ResolutionStage

logger = logging.getLogger(__name__)


class DeterministicMatcher(ResolutionStage):
    """
    Base class for fixed-confidence matchers.
    
    Subclasses only say which entries match; the resolve/ambiguous/defer
    decision is shared.
    """
    
    confidence: float = 1.0
    source: ResolutionSource = ResolutionSource.EXACT
    
    @abstractmethod
    def find_matches(self, candidate: str, context: ResolutionContext) -> List[CatalogEntry]:
        """Return every catalog entry this check considers a match."""
        pass
    
    def evaluate(self, context: ResolutionContext):
        candidate = context.candidate_name
        if not candidate:
            return None
        
        matches = self.find_matches(candidate, context)
        if not matches:
            return None
        
        if len(matches) == 1:
            entry = matches[0]
            logger.debug(f"{self.name} match: '{candidate}' -> '{entry.name}' ({entry.id})")
            return Resolved(
                venue_id=entry.id,
                venue_name=entry.name,
                confidence=self.confidence,
                source=self.source,
            )
        
        logger.debug(f"{self.name} match is ambiguous: '{candidate}' -> {len(matches)} venues")
        return context.ambiguous(
            ScoredCandidate.from_entry(entry, self.confidence) for entry in matches
        )


class ExactNameMatcher(DeterministicMatcher):
    """Case- and punctuation-insensitive name equality."""
    
    name = "exact"
    confidence = EXACT_NAME_CONFIDENCE
    source = ResolutionSource.EXACT
    
    def find_matches(self, candidate, context):
        normalized = normalize_for_match(candidate)
        if not normalized:
            return []
        return [entry for entry in context.catalog if normalize_for_match(entry.name) == normalized]


class SlugMatcher(DeterministicMatcher):
    """Candidate slug equals the catalog slug (or the slug derived from the name)."""
    
    name = "slug"
    confidence = SLUG_CONFIDENCE
    source = ResolutionSource.EXACT
    
    def find_matches(self, candidate, context):
        slug = match_slug(candidate)
        if not slug:
            return []
        return [entry for entry in context.catalog if entry_slug(entry) == slug]


class AliasMatcher(DeterministicMatcher):
    """Candidate is a known acronym or curated nickname."""
    
    name = "alias"
    confidence = ALIAS_CONFIDENCE
    source = ResolutionSource.ALIAS
    
    def find_matches(self, candidate, context):
        return list(context.alias_index.get(normalize_for_match(candidate), []))
