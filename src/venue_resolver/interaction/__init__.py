"""
Caller-side helpers around the resolver.

- detect_location_intent: does a message talk about where the event is?
- apply_venue_resolution: fold an outcome back into a draft
"""
from .location_intent import detect_location_intent
from .outcome_applier import DraftUpdate, apply_venue_resolution

__all__ = [
    "detect_location_intent",
    "DraftUpdate",
    "apply_venue_resolution",
]
