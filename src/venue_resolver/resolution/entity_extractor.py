"""
Candidate extraction for venue resolution.

Pulls a single venue name guess out of a user message before scoring.
"""
import logging
from typing import Mapping, Optional, Sequence

from ..models import CatalogEntry
from .alias_index import MIN_ALIAS_LENGTH, STOPWORDS
from .normalizer import normalize_for_match, ordered_tokens

logger = logging.getLogger(__name__)


def extract_name_from_message(
    message: str,
    catalog: Sequence[CatalogEntry],
) -> Optional[str]:
    """
    Find the catalog name mentioned in a message.
    
    Every catalog name is normalized and looked up as a substring of the
    normalized message. The longest hit wins, so "The Rusty Mic Room" beats
    "The Rusty Mic" when both occur.
    
    :param message: User message text
    :param catalog: Known venues
    :return: Catalog name as written in the catalog, or None
    """
    if not message.strip() or not catalog:
        return None
    
    normalized_message = normalize_for_match(message)
    best_match: Optional[str] = None
    best_length = 0
    
    for entry in catalog:
        normalized_name = normalize_for_match(entry.name)
        if len(normalized_name) > best_length and normalized_name in normalized_message:
            best_match = entry.name
            best_length = len(normalized_name)
    
    return best_match


def extract_alias_from_message(
    message: str,
    alias_index: Mapping[str, object],
) -> Optional[str]:
    """
    Find a known alias among the words of a message.
    
    Stopwords and one-letter tokens are skipped. Longer tokens are tried
    first; equal lengths keep message order.
    
    :param message: User message text
    :param alias_index: Alias index (only its keys are consulted)
    :return: Matching alias or None
    """
    if not alias_index:
        return None
    
    tokens = [
        token for token in ordered_tokens(message)
        if token not in STOPWORDS and len(token) >= MIN_ALIAS_LENGTH
    ]
    for token in sorted(tokens, key=len, reverse=True):
        if token in alias_index:
            return token
    
    return None


def select_candidate_name(
    proposed_name: Optional[str],
    message: str,
    catalog: Sequence[CatalogEntry],
    alias_index: Mapping[str, object],
) -> Optional[str]:
    """
    Choose the one name the resolver will score.
    
    Precedence: explicit proposed name, then a catalog name found verbatim in
    the message, then an alias token from the message.
    
    :return: Candidate name or None when nothing usable was found
    """
    if proposed_name and proposed_name.strip():
        return proposed_name.strip()
    
    literal = extract_name_from_message(message, catalog)
    if literal:
        logger.debug(f"Candidate from message text: '{literal}'")
        return literal
    
    alias = extract_alias_from_message(message, alias_index)
    if alias:
        logger.debug(f"Candidate from message alias: '{alias}'")
    return alias
