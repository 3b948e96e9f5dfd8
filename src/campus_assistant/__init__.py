"""
Campus Assistant: a terminal chat widget that answers common campus questions.

Answers come from a static knowledge base of canned responses, picked by
keyword matching. Each subpackage hides one design decision:
knowledge (data and matching), conversation (message history and reply
timing), ui (Textual widgets), cli (commands and configuration).
"""

__version__ = "0.1.0"

from .conversation import Conversation, ConversationBusyError, Message, ReplyDelay
from .knowledge import (
    GENERAL_CATEGORY,
    CampusData,
    CampusDataError,
    KeywordMatcher,
    MatchResult,
    QuickAction,
    find_relevant_info,
    load_builtin_campus_data,
    load_campus_data,
)

__all__ = [
    "GENERAL_CATEGORY",
    "CampusData",
    "CampusDataError",
    "Conversation",
    "ConversationBusyError",
    "KeywordMatcher",
    "MatchResult",
    "Message",
    "QuickAction",
    "ReplyDelay",
    "find_relevant_info",
    "load_builtin_campus_data",
    "load_campus_data",
]
