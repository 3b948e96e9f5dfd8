"""Conversation state: append-only message history and the composing flag.

Hides:
- Message id allocation
- The order of state changes around a reply (user message, composing on,
  delay, assistant message, composing off)
- How observers are told about those changes
"""

import asyncio
import itertools
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ..knowledge import KeywordMatcher, QuickAction
from .delay import ReplyDelay
from .models import Message


class ConversationBusyError(RuntimeError):
    """Raised when a message is sent while a reply is still being composed."""


class ConversationListener(Protocol):
    """Observer notified of conversation changes."""

    def on_message_added(self, message: Message) -> None: ...

    def on_composing_changed(self, composing: bool) -> None: ...


class Conversation:
    """Ordered, append-only chat between the user and the campus assistant.

    At most one reply is pending at a time. Messages are never mutated or
    removed once appended.

    Example:
        conversation = Conversation(KeywordMatcher(load_builtin_campus_data()))
        reply = await conversation.send("What are the library hours?")
    """

    def __init__(
        self,
        matcher: KeywordMatcher,
        delay: ReplyDelay | None = None,
        greeting: str | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._matcher = matcher
        self._delay = delay if delay is not None else ReplyDelay()
        self._sleep = sleep
        self._messages: list[Message] = []
        self._ids = itertools.count(1)
        self._composing = False
        self._listeners: list[ConversationListener] = []
        self._debug_callback: Any | None = None

        greeting_text = greeting if greeting is not None else matcher.data.greeting
        if greeting_text:
            self._append(Message(id=next(self._ids), content=greeting_text, is_user=False))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the history, oldest first."""
        return tuple(self._messages)

    @property
    def is_composing(self) -> bool:
        """True while an assistant reply is pending."""
        return self._composing

    @property
    def delay(self) -> ReplyDelay:
        return self._delay

    @property
    def matcher(self) -> KeywordMatcher:
        return self._matcher

    def add_listener(self, listener: ConversationListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ConversationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _append(self, message: Message) -> Message:
        self._messages.append(message)
        for listener in list(self._listeners):
            listener.on_message_added(message)
        return message

    def _set_composing(self, composing: bool) -> None:
        self._composing = composing
        for listener in list(self._listeners):
            listener.on_composing_changed(composing)

    async def send(self, text: str) -> Message | None:
        """Send a user message and wait for the assistant's reply.

        Args:
            text: Raw user input

        Returns:
            The assistant reply, or None if the input was empty or blank

        Raises:
            ConversationBusyError: If a reply is already being composed
        """
        if not text or not text.strip():
            self._debug("debug", "Chat", "Ignored empty input")
            return None

        if self._composing:
            raise ConversationBusyError("Assistant is still composing a reply")

        self._append(Message(id=next(self._ids), content=text, is_user=True))
        self._set_composing(True)
        try:
            seconds = self._delay.next_delay()
            self._debug("debug", "Chat", f"Composing reply in {seconds:.2f}s")
            if seconds > 0:
                await self._sleep(seconds)

            result = self._matcher.match(text)
            if result.is_fallback:
                self._debug("info", "Match", f"No match for '{text[:50]}', using fallback")
            else:
                self._debug(
                    "info", "Match", f"'{text[:50]}' -> {result.category} ({result.phrase})"
                )

            reply = self._append(
                Message(
                    id=next(self._ids),
                    content=result.content,
                    is_user=False,
                    category=result.category,
                )
            )
        finally:
            self._set_composing(False)
        return reply

    async def send_quick_action(self, action: QuickAction) -> Message | None:
        """Submit a quick action's preset query."""
        self._debug("debug", "Chat", f"Quick action: {action.label}")
        return await self.send(action.query)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for message in reversed(self._messages):
            if not message.is_user:
                return message.content
        return None

    def to_transcript(self) -> str:
        """Render the history as plain text, one block per message."""
        blocks = []
        for message in self._messages:
            speaker = "You" if message.is_user else "Assistant"
            stamp = message.timestamp.strftime("%H:%M")
            blocks.append(f"[{stamp}] {speaker}: {message.content}")
        return "\n\n".join(blocks)
