"""Data models for the conversation.

Hides the internal representation of chat messages.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Message:
    """A chat message in the conversation."""

    id: int
    content: str
    is_user: bool
    timestamp: datetime = field(default_factory=datetime.now)
    category: str | None = None  # assistant replies only

    @property
    def role(self) -> str:
        return "user" if self.is_user else "assistant"
