"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def is_valid(cls, level_str: str) -> bool:
        return level_str.lower() in cls._from_string


# App identity
APP_TITLE = "Campus AI Assistant"
APP_SUBTITLE = "Your 24/7 campus information companion"

# Input configuration
INPUT_PLACEHOLDER = "Ask me anything about campus services..."
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Chat display configuration
CHAT_TIMESTAMP_FORMAT = "%H:%M"
TYPING_FRAME_INTERVAL = 0.3  # Seconds between typing indicator frames
TYPING_FRAMES = ("●○○", "○●○", "○○●")

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
LOG_MAX_LINES = 1000  # Entries kept by the log panel
