"""Conversation module: message history and simulated reply timing."""

from .delay import DEFAULT_MAX_DELAY, DEFAULT_MIN_DELAY, ReplyDelay
from .models import Message
from .state import Conversation, ConversationBusyError, ConversationListener

__all__ = [
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MIN_DELAY",
    "Conversation",
    "ConversationBusyError",
    "ConversationListener",
    "Message",
    "ReplyDelay",
]
