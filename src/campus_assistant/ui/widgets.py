"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Quick action buttons
- Chat message rendering (bubbles, timestamps, category badges)
- Typing indicator animation
- Log rendering and level filtering
"""

from collections import deque
from datetime import datetime

from rich.markup import escape
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.timer import Timer
from textual.widgets import Button, Input, RichLog, Static

from ..conversation import Message
from ..knowledge import QuickAction
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_MAX_LINES,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    TYPING_FRAME_INTERVAL,
    TYPING_FRAMES,
    LogLevel,
)
from .formatting import category_badge, format_timestamp, strip_markdown, to_rich_markup, truncate


class ClickableMessage(Vertical):
    """A chat bubble that copies its raw content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def copy_content(self) -> None:
        """Copy the message text without bold markers."""
        self.app.copy_to_clipboard(strip_markdown(self._content))
        self.app.notify("Copied to clipboard", timeout=2)

    def on_click(self, event: Click) -> None:
        event.stop()
        self.copy_content()


class HistoryInput(Input):
    """Single-line input with command history.

    Use Up/Down arrow keys to navigate through previously sent messages.
    """

    BINDINGS = [
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def action_history_previous(self) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)

    def add_to_history(self, command: str) -> None:
        """Add a command to history."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Chat input bar with a text field and Send button.

    Enter or the Send button submits. Blank input is never submitted.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_input_changed(self, event: Input.Changed) -> None:
        send = self.query_one("#send-btn", Button)
        send.disabled = self.disabled or not event.value.strip()

    def _submit(self) -> None:
        field = self.query_one("#chat-input", HistoryInput)
        if field.disabled:
            return
        value = field.value
        if value.strip():
            field.add_to_history(value)
            field.value = ""
            self.post_message(self.Submitted(value))

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable typing and sending."""
        field = self.query_one("#chat-input", HistoryInput)
        field.disabled = not enabled
        self.query_one("#send-btn", Button).disabled = not enabled or not field.value.strip()
        if enabled:
            field.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class QuickActionBar(Horizontal):
    """Row of preset query buttons."""

    class Selected(TextualMessage):
        """Message sent when a quick action button is pressed."""

        def __init__(self, action: QuickAction) -> None:
            super().__init__()
            self.action = action

    def __init__(self, actions: list[QuickAction], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._actions = list(actions)

    def compose(self):
        for index, action in enumerate(self._actions):
            label = f"{action.icon} {action.label}" if action.icon else action.label
            yield Button(label, id=f"quick-{index}", classes="quick-action").with_tooltip(
                action.query
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("quick-"):
            event.stop()
            action = self._actions[int(button_id[len("quick-"):])]
            self.post_message(self.Selected(action))

    def set_enabled(self, enabled: bool) -> None:
        for button in self.query(Button):
            button.disabled = not enabled


class TypingIndicator(Static):
    """Animated "assistant is typing" line, hidden while idle."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("", *args, **kwargs)
        self._frame = 0
        self._timer: Timer | None = None

    def on_mount(self) -> None:
        self.display = False

    @property
    def is_active(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        if self._timer is not None:
            return
        self._frame = 0
        self._render_frame()
        self.display = True
        self._timer = self.set_interval(TYPING_FRAME_INTERVAL, self._advance)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self.display = False

    def _advance(self) -> None:
        self._frame = (self._frame + 1) % len(TYPING_FRAMES)
        self._render_frame()

    def _render_frame(self) -> None:
        self.update(f"Assistant is typing {TYPING_FRAMES[self._frame]}")


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+L.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "bright_green",
        "Match": "bright_magenta",
        "Data": "bright_blue",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            max_lines=LOG_MAX_LINES,
            **kwargs
        )
        self._log_level = log_level
        self._entries: deque[str] = deque(maxlen=LOG_MAX_LINES)

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[str]:
        """Plain-text entries that passed the level filter."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, Match, Data)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_name = LogLevel.name(level)
        message = truncate(message, LOG_MAX_MESSAGE_LENGTH)
        self._entries.append(f"{timestamp} {level_name:<5} [{component}] {message}")

        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {to_rich_markup(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history. Messages are only ever appended."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message_ids: list[int] = []

    @property
    def message_count(self) -> int:
        return len(self._message_ids)

    @property
    def message_ids(self) -> list[int]:
        """Ids of rendered messages, in display order."""
        return list(self._message_ids)

    def add_message(self, message: Message) -> None:
        """Render a message at the bottom of the history."""
        self._message_ids.append(message.id)
        self.mount(self._build_bubble(message))
        self.border_subtitle = f"{self.message_count} messages"
        self.scroll_end(animate=False)

    def _build_bubble(self, message: Message) -> ClickableMessage:
        stamp = escape(f"[{format_timestamp(message.timestamp)}]")
        if message.is_user:
            header = f"You {stamp}"
            bubble_class = "user-message"
        else:
            header = f"Assistant {stamp}"
            badge = category_badge(message.category)
            if badge:
                header += f"  [reverse] {escape(badge)} [/reverse]"
            bubble_class = "assistant-message"

        # Clicking the bubble copies the raw content
        container = ClickableMessage(
            content=message.content,
            id=f"message-{message.id}",
            classes=f"chat-message {bubble_class}",
        )
        container.compose_add_child(Static(header, classes="message-header"))
        container.compose_add_child(
            Static(to_rich_markup(message.content), classes="message-content")
        )
        return container
