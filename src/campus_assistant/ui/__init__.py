"""Terminal UI module for the campus assistant.

Provides a Textual-based TUI for chatting with the assistant.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (quick actions, chat bubbles, input history, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- formatting.py: Turning canned responses into Rich markup or plain text
- callbacks.py: Conversation integration (how the TUI receives updates)
- app.py: Application orchestration (user interaction flow)
"""

from .app import CampusAssistantApp, run_textual_tui
from .callbacks import TUICallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, QuickActionBar, TypingIndicator

__all__ = [
    "CampusAssistantApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "QuickActionBar",
    "TUICallback",
    "TypingIndicator",
    "run_textual_tui",
]
