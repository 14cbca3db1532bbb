"""
Alias index builder for venue resolution.

Derives short nicknames for catalog venues (acronyms plus curated
overrides) so that a message like "meet at ltb" can reach
"Long Table Brewhouse".
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..models import CatalogEntry
from .normalizer import match_slug, normalize_for_match, ordered_tokens

logger = logging.getLogger(__name__)

AliasIndex = Dict[str, List[CatalogEntry]]

STOPWORDS = frozenset({"the", "and", "of", "at", "in", "on", "for", "to", "a", "an"})

MIN_ALIAS_LENGTH = 2

# Hand-maintained nicknames, keyed by venue slug
ALIAS_OVERRIDES: Mapping[str, Sequence[str]] = MappingProxyType({
    "sunshine-studios-live": ("ssl", "sslive"),
})


def acronym_for(name: str) -> Optional[str]:
    """
    Build an acronym from the significant words of a name.
    
    "Long Table Brewhouse" -> "ltb". Names with fewer than two significant
    words have no acronym.
    
    :param name: Venue name
    :return: Acronym or None
    """
    words = [token for token in ordered_tokens(name) if token not in STOPWORDS]
    if len(words) < 2:
        return None
    return "".join(word[0] for word in words)


class AliasIndexBuilder:
    """
    Builds the alias -> venues index for one catalog snapshot.
    
    Several venues may share an alias (two "ltb"s, say). They are all kept
    under that key; picking one is left to the resolver, which reports the
    collision as ambiguous.
    """
    
    def __init__(
        self,
        catalog: Iterable[CatalogEntry],
        overrides: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        """
        :param catalog: Catalog entries to index
        :param overrides: Extra aliases keyed by venue slug (defaults to ALIAS_OVERRIDES)
        """
        self._catalog = tuple(catalog)
        self._overrides = ALIAS_OVERRIDES if overrides is None else overrides
        self._index: AliasIndex = {}
        
        self._build_index()
    
    def aliases_for(self, entry: CatalogEntry) -> List[str]:
        """Normalized aliases generated for a single entry."""
        raw_aliases = []
        
        acronym = acronym_for(entry.name)
        if acronym:
            raw_aliases.append(acronym)
        
        slug = entry.slug or match_slug(entry.name)
        raw_aliases.extend(self._overrides.get(slug, ()))
        
        aliases = []
        for raw in raw_aliases:
            alias = normalize_for_match(raw)
            if len(alias) >= MIN_ALIAS_LENGTH and alias not in aliases:
                aliases.append(alias)
        return aliases
    
    def _build_index(self):
        for entry in self._catalog:
            for alias in self.aliases_for(entry):
                entries = self._index.setdefault(alias, [])
                if entry not in entries:
                    entries.append(entry)
        
        collisions = [alias for alias, entries in self._index.items() if len(entries) > 1]
        if collisions:
            logger.debug(f"Alias collisions kept as ambiguous: {sorted(collisions)}")
    
    def get_index(self) -> AliasIndex:
        """Copy of the alias index."""
        return {alias: list(entries) for alias, entries in self._index.items()}


def build_alias_index(
    catalog: Iterable[CatalogEntry],
    overrides: Optional[Mapping[str, Sequence[str]]] = None,
) -> AliasIndex:
    """Build the alias index for a catalog snapshot."""
    return AliasIndexBuilder(catalog, overrides).get_index()
