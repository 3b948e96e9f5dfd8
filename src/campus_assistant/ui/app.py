"""Main Textual TUI application.

Orchestrates the UI components and routes user input to the Conversation.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..conversation import Conversation, ConversationBusyError, ReplyDelay
from ..knowledge import CampusData, KeywordMatcher, QuickAction
from .callbacks import TUICallback
from .config import APP_SUBTITLE, APP_TITLE, LogLevel
from .formatting import strip_markdown
from .styles import APP_CSS
from .themes import CAMPUS_NIGHT
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    QuickActionBar,
    TypingIndicator,
)


class CampusAssistantApp(App):
    """Textual TUI for the campus assistant chat."""

    CSS = APP_CSS
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "toggle_debug", "Log"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+y", "copy_transcript", "Copy Chat"),
    ]

    def __init__(
        self,
        data: CampusData,
        delay: ReplyDelay | None = None,
        log_level: str | None = None,
        data_source: str = "built-in",
    ) -> None:
        super().__init__()
        self._data = data
        self._delay = delay
        self._log_level = log_level
        self._data_source = data_source
        self._conversation: Conversation | None = None
        self._callback: TUICallback | None = None
        self._reply_pending = False

    @property
    def conversation(self) -> Conversation | None:
        return self._conversation

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield QuickActionBar(self._data.quick_actions, id="quick-actions")
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(CAMPUS_NIGHT)
        self.theme = "campus-night"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        self._callback = TUICallback(
            chat=chat,
            typing=self.query_one("#typing-indicator", TypingIndicator),
            input_bar=self.query_one("#chat-input-bar", ChatInputBar),
            quick_actions=self.query_one("#quick-actions", QuickActionBar),
            log_panel=log_panel,
            app=self,
        )

        self._conversation = Conversation(KeywordMatcher(self._data), delay=self._delay)
        # The greeting is appended before anyone is listening
        for message in self._conversation.messages:
            chat.add_message(message)
        self._conversation.add_listener(self._callback)
        self._conversation.set_debug_callback(self._callback.debug)

        log_panel.info(
            "Data",
            f"Loaded {len(self._data.categories)} categories and "
            f"{len(self._data.quick_actions)} quick actions from {self._data_source}",
        )
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if not event.value.strip():
            return
        self._dispatch(event.value)

    def on_quick_action_bar_selected(self, event: QuickActionBar.Selected) -> None:
        """Submit a quick action's preset query."""
        self._dispatch(event.action.query, event.action)

    @property
    def reply_pending(self) -> bool:
        """True from dispatching a message until its worker finishes."""
        return self._reply_pending

    def _dispatch(self, text: str, action: QuickAction | None = None) -> None:
        if self._conversation is None:
            return
        # The worker has not started yet when a second event arrives in the same turn
        if self._reply_pending or self._conversation.is_composing:
            self.query_one("#debug-panel", DebugPanel).warning(
                "TUI", f"Ignored '{text[:50]}' while a reply is pending"
            )
            self.notify("The assistant is still typing", severity="warning", timeout=2)
            return
        self._reply_pending = True
        self._send_message(text, action)

    @work(group="reply")
    async def _send_message(self, text: str, action: QuickAction | None = None) -> None:
        """Send a message as a background async worker."""
        conversation = self._conversation
        log_panel = self.query_one("#debug-panel", DebugPanel)
        try:
            if action is not None:
                await conversation.send_quick_action(action)
            else:
                await conversation.send(text)
        except ConversationBusyError as e:
            log_panel.warning("TUI", str(e))
            self.notify(str(e), severity="warning", timeout=2)
        except asyncio.CancelledError:
            log_panel.warning("TUI", "Reply cancelled")
            raise
        except Exception as e:
            log_panel.error("TUI", f"Exception: {e}")
            self.notify(f"Error: {str(e)[:50]}", severity="error", timeout=5)
        finally:
            self._reply_pending = False

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self._conversation.get_last_response() if self._conversation else None
        if response:
            self.copy_to_clipboard(strip_markdown(response))
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")

    def action_copy_transcript(self) -> None:
        """Copy the whole conversation to clipboard."""
        if self._conversation is None:
            return
        self.copy_to_clipboard(strip_markdown(self._conversation.to_transcript()))
        self.notify("Conversation copied")


async def run_textual_tui(
    data: CampusData,
    delay: ReplyDelay | None = None,
    log_level: str | None = None,
    data_source: str = "built-in",
) -> None:
    """Run the Textual TUI.

    Args:
        data: Knowledge base to answer from
        delay: Simulated reply delay, defaults to 1-2 seconds
        log_level: Log level for panel (debug/info/warning/error), None to hide
        data_source: Description of where the data came from, for the log
    """
    app = CampusAssistantApp(
        data=data,
        delay=delay,
        log_level=log_level,
        data_source=data_source,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
