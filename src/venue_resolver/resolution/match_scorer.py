"""
Similarity scoring between a candidate name and a catalog entry.
"""
from ..config import EXACT_NAME_CONFIDENCE, SLUG_CONFIDENCE
from ..models import CatalogEntry
from .normalizer import match_slug, normalize_for_match, ordered_tokens, token_jaccard_score

FIRST_TOKEN_BOOST = 0.05


def entry_slug(entry: CatalogEntry) -> str:
    """The entry's own slug, or one derived from its name."""
    return entry.slug or match_slug(entry.name)


def score_venue_match(candidate: str, entry: CatalogEntry) -> float:
    """
    Score how well a candidate name matches a catalog entry.
    
    1. Normalized names equal -> 1.0
    2. Candidate slug equals the entry slug -> 0.95
    3. Otherwise token Jaccard similarity, +0.05 when both names start with
       the same word (capped at 1.0)
    
    :param candidate: Free-text venue name
    :param entry: Catalog entry
    :return: Score between 0.0 and 1.0
    """
    if normalize_for_match(candidate) == normalize_for_match(entry.name):
        return EXACT_NAME_CONFIDENCE
    
    candidate_slug = match_slug(candidate)
    if candidate_slug and candidate_slug == entry_slug(entry):
        return SLUG_CONFIDENCE
    
    candidate_tokens = ordered_tokens(candidate)
    entry_tokens = ordered_tokens(entry.name)
    score = token_jaccard_score(set(candidate_tokens), set(entry_tokens))
    
    # First-token boost
    if candidate_tokens and entry_tokens and candidate_tokens[0] == entry_tokens[0]:
        score = min(1.0, score + FIRST_TOKEN_BOOST)
    
    return score
