"""Conversion of Slack Events API payloads into InboundMessage."""

from typing import Any, Dict, Optional

from spoticus.models import InboundMessage


def to_inbound_message(event: Dict[str, Any]) -> Optional[InboundMessage]:
    """Convert a Slack ``message`` event into an InboundMessage.

    Args:
        event: The inner ``event`` object of an events_api envelope

    Returns:
        InboundMessage, or None for anything that is not a message event
    """
    if event.get("type") != "message":
        return None

    return InboundMessage(
        text=event.get("text") or "",
        user=event.get("user") or "",
        channel=event.get("channel") or "",
        is_bot=bool(event.get("bot_id")) or event.get("subtype") == "bot_message",
    )
