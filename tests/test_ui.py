"""Tests for the Textual UI, driven headless through the pilot."""
from datetime import datetime

import pytest
from textual.widgets import Button

from campus_assistant.conversation import ReplyDelay
from campus_assistant.ui import (
    CampusAssistantApp,
    ChatHistoryWidget,
    DebugPanel,
    LogLevel,
    QuickActionBar,
    TypingIndicator,
)
from campus_assistant.ui.config import LOG_MAX_LINES
from campus_assistant.ui.formatting import (
    category_badge,
    format_timestamp,
    strip_markdown,
    to_rich_markup,
    truncate,
)
from campus_assistant.ui.widgets import ClickableMessage, HistoryInput

SCREEN_SIZE = (120, 40)


class TestFormatting:
    """Tests for text formatting helpers."""

    def test_bold_to_markup(self):
        """Test converting bold markers to Rich markup."""
        assert to_rich_markup("**Library Hours**\n• open") == "[b]Library Hours[/b]\n• open"

    def test_markup_is_escaped(self):
        """Test that literal brackets are not treated as markup."""
        assert to_rich_markup("[red]not a tag[/red]") == "\\[red]not a tag\\[/red]"

    def test_strip_markdown(self):
        """Test removing bold markers."""
        assert strip_markdown("**Menu**: soup") == "Menu: soup"

    def test_category_badge(self):
        """Test that only real categories get a badge."""
        assert category_badge("dining") == "dining"
        assert category_badge("general") is None
        assert category_badge(None) is None

    def test_format_timestamp(self):
        """Test the hour:minute timestamp."""
        assert format_timestamp(datetime(2024, 3, 15, 9, 5, 30)) == "09:05"

    def test_truncate(self):
        """Test truncating long text."""
        assert truncate("abc", 5) == "abc"
        assert truncate("abcdefgh", 5) == "abcde..."


class TestLogLevel:
    """Tests for LogLevel."""

    def test_from_string(self):
        """Test parsing level names."""
        assert LogLevel.from_string("INFO") == LogLevel.INFO
        assert LogLevel.from_string("bogus") == LogLevel.DEBUG

    def test_ordering(self):
        """Test the level hierarchy."""
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.name(LogLevel.WARNING) == "WARNING"


@pytest.mark.integration
class TestCampusAssistantApp:
    """Tests for the full TUI."""

    @pytest.mark.asyncio
    async def test_greeting_rendered_on_start(self, campus_data):
        """Test that the greeting is the first rendered message."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.pause()
            chat = app.query_one("#chat-history", ChatHistoryWidget)

            assert chat.message_count == 1
            assert app.conversation.messages[0].content == campus_data.greeting
            assert len(app.query(".quick-action")) == len(campus_data.quick_actions)

    @pytest.mark.asyncio
    async def test_quick_action_sends_its_query(self, campus_data):
        """Test that pressing a quick action submits its preset query."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#quick-2")
            await app.workers.wait_for_complete()
            await pilot.pause()

            messages = app.conversation.messages
            assert messages[-2].is_user
            assert messages[-2].content == "What are the dining hall hours?"
            assert messages[-1].category == "dining"
            assert "Dining Hall Hours" in messages[-1].content

            chat = app.query_one("#chat-history", ChatHistoryWidget)
            assert chat.message_ids == [message.id for message in messages]

    @pytest.mark.asyncio
    async def test_typed_query_gets_reply(self, campus_data):
        """Test typing a question and pressing Enter."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            app.query_one("#chat-input", HistoryInput).value = "xyz123"
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            messages = app.conversation.messages
            assert [m.is_user for m in messages] == [False, True, False]
            assert messages[-1].category == "general"
            assert app.query_one("#chat-input", HistoryInput).value == ""
            assert app.query_one("#chat-input", HistoryInput).history == ["xyz123"]

    @pytest.mark.asyncio
    async def test_blank_input_not_sent(self, campus_data):
        """Test that Enter on blank input appends nothing."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            app.query_one("#chat-input", HistoryInput).value = "    "
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert len(app.conversation.messages) == 1
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 1
            assert app.query_one("#send-btn", Button).disabled

    @pytest.mark.asyncio
    async def test_input_disabled_while_composing(self, campus_data):
        """Test the typing indicator and disabled input during the delay."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.fixed(0.5))
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            app.query_one("#chat-input", HistoryInput).value = "menu"
            await pilot.press("enter")
            await pilot.pause(0.1)

            assert app.conversation.is_composing
            assert app.query_one("#typing-indicator", TypingIndicator).is_active
            assert app.query_one("#chat-input", HistoryInput).disabled
            assert app.query_one("#quick-0", Button).disabled

            await app.workers.wait_for_complete()
            await pilot.pause()

            assert not app.conversation.is_composing
            assert not app.query_one("#typing-indicator", TypingIndicator).is_active
            assert not app.query_one("#chat-input", HistoryInput).disabled
            assert not app.query_one("#quick-0", Button).disabled
            assert app.conversation.messages[-1].category == "dining"

    @pytest.mark.asyncio
    async def test_log_panel(self, campus_data):
        """Test that the log panel shows traced sends at the chosen level."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none(), log_level="info")
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#quick-0")
            await app.workers.wait_for_complete()
            await pilot.pause()

            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display
            assert panel.log_level == LogLevel.INFO
            assert any("[Match]" in entry and "schedules" in entry for entry in panel.entries)
            # Debug entries are filtered out at INFO
            assert not any(" DEBUG " in entry for entry in panel.entries)

            app.action_toggle_debug()
            assert not panel.display

    @pytest.mark.asyncio
    async def test_input_history_navigation(self, campus_data):
        """Test recalling previous messages with the arrow keys."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            field = app.query_one("#chat-input", HistoryInput)
            for text in ("menu", "library hours"):
                field.value = text
                await pilot.press("enter")
                await app.workers.wait_for_complete()
                await pilot.pause()

            field.focus()
            await pilot.press("up")
            assert field.value == "library hours"
            await pilot.press("up")
            assert field.value == "menu"
            await pilot.press("down")
            assert field.value == "library hours"
            await pilot.press("down")
            assert field.value == ""

    @pytest.mark.asyncio
    async def test_typed_query_keeps_spacing(self, campus_data):
        """Test that typed text is stored as entered."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            app.query_one("#chat-input", HistoryInput).value = "  menu  "
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            messages = app.conversation.messages
            assert messages[1].content == "  menu  "
            assert messages[2].category == "dining"

    @pytest.mark.asyncio
    async def test_back_to_back_quick_actions(self, campus_data):
        """Test that a second selection in the same turn does not replace the first."""
        actions = campus_data.quick_actions
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.fixed(0.2))
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            bar = app.query_one("#quick-actions", QuickActionBar)
            bar.post_message(QuickActionBar.Selected(actions[0]))
            bar.post_message(QuickActionBar.Selected(actions[2]))
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            messages = app.conversation.messages
            assert [m.is_user for m in messages] == [False, True, False]
            assert messages[1].content == actions[0].query
            assert messages[2].category == "schedules"
            assert not app.reply_pending

            # Input is accepted again once the reply arrived
            bar.post_message(QuickActionBar.Selected(actions[2]))
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            messages = app.conversation.messages
            assert [m.is_user for m in messages] == [False, True, False, True, False]
            assert messages[-1].category == "dining"

    @pytest.mark.asyncio
    async def test_bubble_copy_strips_bold(self, campus_data):
        """Test that copying a bubble drops the bold markers."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none())
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#quick-2")
            await app.workers.wait_for_complete()
            await pilot.pause()

            reply = app.conversation.messages[-1]
            app.query_one(f"#message-{reply.id}", ClickableMessage).copy_content()

            assert "Dining Hall Hours" in app.clipboard
            assert "**" not in app.clipboard

    @pytest.mark.asyncio
    async def test_log_panel_is_bounded(self, campus_data):
        """Test that the log panel keeps only the newest entries."""
        app = CampusAssistantApp(campus_data, delay=ReplyDelay.none(), log_level="debug")
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            for index in range(LOG_MAX_LINES + 5):
                panel.debug("TUI", f"line {index}")
            await pilot.pause()

            entries = panel.entries
            assert len(entries) == LOG_MAX_LINES
            assert entries[-1].endswith(f"line {LOG_MAX_LINES + 4}")
            assert not any(entry.endswith("line 0") for entry in entries)
