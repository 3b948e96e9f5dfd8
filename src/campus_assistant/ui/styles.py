"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout, top to bottom: header, quick actions, chat history, typing
indicator, log panel (hidden by default), input bar, footer.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Quick Actions - Preset Query Buttons
   ============================================ */
#quick-actions {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-bottom: solid $border;
    overflow-x: auto;
}

.quick-action {
    width: auto;
    min-width: 12;
    margin: 0 1 0 0;
    border: tall $accent 40%;
    background: $surface;
    color: $foreground;

    &:hover {
        background: $accent 20%;
        border: tall $accent;
    }

    &:focus {
        border: tall $accent;
        text-style: bold;
    }

    &:disabled {
        color: $text-disabled;
        border: tall $border-blurred;
    }
}

/* ============================================
   Chat History Panel - Primary Focus Area
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages - Conversation Display
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    border: none;
    background: transparent;
}

/* User messages - right side, primary accent */
.user-message {
    border-right: tall $primary;
    background: $primary 10%;
    margin-left: 8;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    &:hover {
        background: $primary 15%;
    }
}

/* Assistant messages - left side, secondary accent */
.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;
    margin-right: 8;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &:hover {
        background: $secondary 12%;
    }
}

.message-header {
    height: auto;
    padding: 0;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

/* ============================================
   Typing Indicator
   ============================================ */
#typing-indicator {
    height: 1;
    padding: 0 2;
    color: $warning;
    background: $panel;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#chat-input {
    width: 1fr;
    border: tall $primary 60%;
    background: $surface;

    &:focus {
        border: tall $primary;
    }

    &:disabled {
        border: tall $border-blurred;
        color: $text-disabled;
    }
}

#send-btn {
    width: 10;
    min-width: 8;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
        border: tall $success-lighten-1;
    }

    &:disabled {
        background: $surface;
        border: tall $border-blurred;
        color: $text-disabled;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

/* ============================================
   Scrollbars, Header, Footer
   ============================================ */
* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}

Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}
"""
