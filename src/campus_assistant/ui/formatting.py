"""Text formatting utilities for the TUI and console.

Hides the details of turning canned responses (which use ``**bold**``
markers) into Rich markup or plain text.
"""

import re
from datetime import datetime

from rich.markup import escape

from ..knowledge import GENERAL_CATEGORY
from .config import CHAT_TIMESTAMP_FORMAT

_BOLD = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)


def to_rich_markup(text: str) -> str:
    """Convert ``**bold**`` markers to Rich markup, escaping everything else."""
    return _BOLD.sub(r"[b]\1[/b]", escape(text))


def strip_markdown(text: str) -> str:
    """Remove ``**bold**`` markers, leaving plain text."""
    return _BOLD.sub(r"\1", text)


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime(CHAT_TIMESTAMP_FORMAT)


def category_badge(category: str | None) -> str | None:
    """Badge text for a reply category; None for untagged or fallback replies."""
    if not category or category == GENERAL_CATEGORY:
        return None
    return category


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
