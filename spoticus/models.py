"""Data models shared by the dispatcher, the handlers and the transport."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel

CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class InboundMessage:
    """A chat message as delivered by the transport.

    Attributes:
        text: Raw message text
        user: Sender identifier
        channel: Channel the message was posted in
        is_bot: True when the sender is an automated (bot) user
    """

    text: str
    user: str
    channel: str
    is_bot: bool = False


@dataclass(frozen=True)
class ParsedCommand:
    """Keyword plus positional arguments extracted from a message."""

    keyword: str
    args: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CommandContext:
    """Everything a command handler gets to see about one invocation."""

    args: Tuple[str, ...]
    channel: str
    user: str


class ClusterSummary(BaseModel):
    """Read-only projection of a mapt cluster resource."""

    name: str
    namespace: str = ""
    kind: Literal["Kubernetes", "OpenShift"]
    creation_timestamp: Optional[datetime] = None

    @classmethod
    def from_resource(cls, item: Dict[str, Any], kind: str) -> "ClusterSummary":
        """Build a summary from the generic dict returned by the control plane."""
        metadata = item.get("metadata") or {}
        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace") or "",
            kind=kind,
            creation_timestamp=metadata.get("creationTimestamp"),
        )

    @property
    def created(self) -> str:
        """Creation time as YYYY-MM-DD HH:MM:SS, or "unknown"."""
        if self.creation_timestamp is None:
            return "unknown"
        return self.creation_timestamp.strftime(CREATED_FORMAT)
