"""Conversation integration for the TUI.

Hides the details of how the TUI receives updates from the conversation:
appended messages go to the chat history, and the composing flag drives the
typing indicator and disables input while a reply is pending.
"""

import threading
from typing import TYPE_CHECKING, Any

from ..conversation import Message
from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, QuickActionBar, TypingIndicator


class TUICallback:
    """Conversation listener that renders into the TUI widgets.

    Uses call_from_thread for thread-safe UI updates when invoked off the
    app's thread.
    """

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        typing: "TypingIndicator",
        input_bar: "ChatInputBar",
        quick_actions: "QuickActionBar | None" = None,
        log_panel: "DebugPanel | None" = None,
        app: "App | None" = None,
    ) -> None:
        self.chat = chat
        self.typing = typing
        self.input_bar = input_bar
        self.quick_actions = quick_actions
        self.log_panel = log_panel
        self.app = app

    def _call_thread_safe(self, func: Any, *args: Any, **kwargs: Any) -> None:
        """Call a function in a thread-safe manner for UI updates."""
        if self.app is not None and self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(func, *args, **kwargs)
        else:
            func(*args, **kwargs)

    def on_message_added(self, message: Message) -> None:
        self._call_thread_safe(self.chat.add_message, message)

    def on_composing_changed(self, composing: bool) -> None:
        self._call_thread_safe(self._apply_composing, composing)

    def _apply_composing(self, composing: bool) -> None:
        if composing:
            self.typing.start()
        else:
            self.typing.stop()
        self.input_bar.set_enabled(not composing)
        if self.quick_actions is not None:
            self.quick_actions.set_enabled(not composing)

    def debug(self, level: str, component: str, message: str) -> None:
        """Route a debug message to the log panel.

        Matches the ``Callable(level, component, message)`` debug callback
        shape accepted by Conversation.set_debug_callback.
        """
        if self.log_panel is None:
            return
        self._call_thread_safe(
            self.log_panel.log_entry, component, message, LogLevel.from_string(level)
        )
