"""
Text normalization for venue matching.

Pure string-shaping helpers shared by the alias index, the extractor and the
scorer. Only ASCII letters and digits survive; there is no diacritic folding,
so "Café" normalizes to "caf" and never equals "cafe".
"""
import re
from typing import AbstractSet, List, Set

_NON_MATCH_CHARS = re.compile(r"[^a-z0-9\s]")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def normalize_for_match(text: str) -> str:
    """
    Normalize a name for exact comparison.
    
    Lowercases, spells out "&", drops punctuation and collapses whitespace.
    Idempotent.
    
    :param text: Raw name or message
    :return: Normalized string (possibly empty)
    """
    text = text.lower().replace("&", "and")
    text = _NON_MATCH_CHARS.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def match_slug(text: str) -> str:
    """
    Build a URL slug from a name, e.g. "Long Table Brewhouse" -> "long-table-brewhouse".
    
    :param text: Raw name
    :return: Slug (possibly empty)
    """
    text = _NON_SLUG_CHARS.sub("", text.lower().strip())
    text = _WHITESPACE.sub("-", text)
    text = _HYPHENS.sub("-", text)
    return text.strip("-")


def ordered_tokens(text: str) -> List[str]:
    """
    Split text into lowercase alphanumeric tokens, de-duplicated, in order of first appearance.
    
    :param text: Raw name or message
    :return: List of unique tokens
    """
    parts = _TOKEN_SPLIT.split(text.lower().replace("&", "and"))
    return list(dict.fromkeys(part for part in parts if part))


def tokenize(text: str) -> Set[str]:
    """Return the set of tokens in text."""
    return set(ordered_tokens(text))


def token_jaccard_score(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Jaccard similarity |a & b| / |a | b|; 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union
