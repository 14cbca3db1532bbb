"""
Applies a venue resolution outcome to an event draft.

Only escalates: a resolved venue overwrites the draft's venue fields, an
ambiguous or unresolved result turns the reply into a clarification
question, and explicit online or custom locations leave everything alone.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..resolution.outcomes import (
    Ambiguous,
    Resolved,
    Unresolved,
    VenueResolutionOutcome,
    fold_outcome,
)

logger = logging.getLogger(__name__)

ASK_CLARIFICATION = "ask_clarification"

# Location modes that already imply a physical venue
VENUE_LOCATION_MODES = frozenset({"venue", "hybrid"})


@dataclass
class DraftUpdate:
    """Draft state after a resolution outcome has been applied."""
    draft_payload: Dict[str, Any]
    next_action: str
    blocking_fields: List[str] = field(default_factory=list)
    clarification_question: Optional[str] = None


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def ambiguous_question(outcome: Ambiguous) -> str:
    """Clarification question listing the candidate venues."""
    candidate_list = ", ".join(
        f"{position}. {candidate.name}"
        for position, candidate in enumerate(outcome.candidates, start=1)
    )
    return (
        f'I found multiple possible venues matching "{outcome.input_name}": '
        f"{candidate_list}. Which one did you mean?"
    )


def unresolved_question(outcome: Unresolved, needs_online_url: bool) -> str:
    """Clarification question for a venue that could not be matched."""
    if needs_online_url:
        return "Please provide the online event URL (Zoom, YouTube, etc.) for this online event."
    
    input_hint = f' matching "{outcome.input_name}"' if outcome.input_name else ""
    return (
        f"I couldn't find a known venue{input_hint}. "
        f"Could you provide the venue name, or specify if this is an online event?"
    )


def apply_venue_resolution(
    draft_payload: Mapping[str, Any],
    outcome: VenueResolutionOutcome,
    next_action: str,
    blocking_fields: Sequence[str] = (),
    clarification_question: Optional[str] = None,
) -> DraftUpdate:
    """
    Apply an outcome to a draft without mutating the caller's objects.
    
    If the reply is already a clarification request, its question is kept;
    the venue field is still added to the blocking fields.
    
    :param draft_payload: Current draft event fields
    :param outcome: Resolver outcome
    :param next_action: Next action chosen so far
    :param blocking_fields: Fields currently blocking progress
    :param clarification_question: Question chosen so far, if any
    :return: DraftUpdate with the new draft, action, blocking fields and question
    """
    update = DraftUpdate(
        draft_payload=dict(draft_payload),
        next_action=next_action,
        blocking_fields=[name.strip() for name in blocking_fields if name and name.strip()],
        clarification_question=clarification_question,
    )
    
    def _block(field_name: str):
        if field_name not in update.blocking_fields:
            update.blocking_fields.append(field_name)
    
    def _ask(question: str):
        if update.next_action != ASK_CLARIFICATION:
            update.next_action = ASK_CLARIFICATION
            update.clarification_question = question
    
    def _resolved(result: Resolved):
        draft = update.draft_payload
        draft["venue_id"] = result.venue_id
        draft["venue_name"] = result.venue_name
        if draft.get("location_mode") not in VENUE_LOCATION_MODES:
            draft["location_mode"] = "venue"
    
    def _ambiguous(result: Ambiguous):
        _ask(ambiguous_question(result))
        _block("venue_id")
    
    def _unresolved(result: Unresolved):
        draft = update.draft_payload
        needs_online_url = draft.get("location_mode") == "online" and not _has_text(
            draft.get("online_url")
        )
        _ask(unresolved_question(result, needs_online_url))
        _block("online_url" if needs_online_url else "venue_id")
    
    def _unchanged(result):
        return None
    
    fold_outcome(
        outcome,
        on_resolved=_resolved,
        on_ambiguous=_ambiguous,
        on_unresolved=_unresolved,
        on_online_explicit=_unchanged,
        on_custom_location=_unchanged,
    )
    
    logger.debug(
        f"Applied venue outcome '{outcome.status}': next_action={update.next_action}, "
        f"blocking={update.blocking_fields}"
    )
    return update
