"""
Gate deciding whether venue resolution should run for a request.

Edits that don't touch the location should not re-trigger venue matching
or venue clarification questions.
"""
import logging
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

VENUE_SIGNAL_FIELDS = ("venue_id", "venue_name", "custom_location_name", "online_url")


class InterpretMode(str, Enum):
    """Request modes of the event interpreter."""
    CREATE = "create"
    EDIT_SERIES = "edit_series"
    EDIT_OCCURRENCE = "edit_occurrence"


def _has_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def has_venue_signals_in_draft(draft_payload: Mapping[str, Any]) -> bool:
    """
    True when the draft carries a concrete location hint.
    
    location_mode alone does not count; upstream models tend to fill it in
    by default.
    
    :param draft_payload: Draft event fields
    :return: Whether any venue id, name, custom location or online URL is set
    """
    return any(_has_non_empty_string(draft_payload.get(key)) for key in VENUE_SIGNAL_FIELDS)


def should_resolve_venue(
    mode: str,
    has_location_intent: bool,
    draft_payload: Mapping[str, Any],
) -> bool:
    """
    Decide whether to run the venue resolver.
    
    - create: always
    - edit_series: only with location intent in the message or location
      hints in the draft
    - any other mode: never
    
    :param mode: Request mode
    :param has_location_intent: Location intent detected in the message
    :param draft_payload: Draft event fields
    :return: True if resolution should run
    """
    if mode == InterpretMode.CREATE:
        return True
    if mode != InterpretMode.EDIT_SERIES:
        logger.debug(f"Venue resolution skipped for mode '{mode}'")
        return False
    return has_location_intent or has_venue_signals_in_draft(draft_payload)
