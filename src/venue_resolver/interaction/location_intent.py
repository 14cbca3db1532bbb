"""
Location intent detection - decides if a message is about the event location.
"""
import re
import logging

from ..resolution.resolution_gate import InterpretMode

logger = logging.getLogger(__name__)

LOCATION_INTENT_PATTERN = re.compile(
    r"\b(venue|location|address|move|moved|switch|relocat\w*|different venue|online|virtual|zoom|livestream)\b",
    re.IGNORECASE,
)


def detect_location_intent(mode: str, message: str) -> bool:
    """
    Determine if a message concerns where the event happens.
    
    New events always need a location, so create mode is always true.
    Otherwise the message must mention venues, addresses, moving or going
    online.
    
    :param mode: Request mode
    :param message: User's message
    :return: True if the message carries location intent
    """
    if mode == InterpretMode.CREATE:
        return True
    
    match = LOCATION_INTENT_PATTERN.search(message or "")
    if match:
        logger.debug(f"Location intent: matched '{match.group(0)}'")
        return True
    return False
