"""Provider functions for the CLI.

Centralizes creation of the knowledge base and reply delay from command-line
options and environment variables. Hides configuration details from command
implementations.

Environment variables:
    CAMPUS_ASSISTANT_DATA: Path to a YAML knowledge base (default: built-in)
    CAMPUS_ASSISTANT_MIN_DELAY: Minimum reply delay in seconds (default: 1.0)
    CAMPUS_ASSISTANT_MAX_DELAY: Maximum reply delay in seconds (default: 2.0)
    CAMPUS_ASSISTANT_LOG_LEVEL: Log panel level (debug/info/warning/error)
"""

import os
from pathlib import Path

from ..conversation import DEFAULT_MAX_DELAY, DEFAULT_MIN_DELAY, ReplyDelay
from ..knowledge import CampusData, load_builtin_campus_data, load_campus_data
from ..ui.config import LogLevel

ENV_DATA = "CAMPUS_ASSISTANT_DATA"
ENV_MIN_DELAY = "CAMPUS_ASSISTANT_MIN_DELAY"
ENV_MAX_DELAY = "CAMPUS_ASSISTANT_MAX_DELAY"
ENV_LOG_LEVEL = "CAMPUS_ASSISTANT_LOG_LEVEL"


def get_campus_data(path: Path | None = None) -> tuple[CampusData, str]:
    """Load the knowledge base.

    Args:
        path: Explicit data file; falls back to CAMPUS_ASSISTANT_DATA, then
              the built-in data

    Returns:
        Tuple of (data, description of its source)

    Raises:
        CampusDataError: If the selected file is missing or invalid
    """
    source = path or os.getenv(ENV_DATA)
    if source:
        return load_campus_data(source), str(source)
    return load_builtin_campus_data(), "built-in data"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


def get_reply_delay(
    min_delay: float | None = None,
    max_delay: float | None = None,
    no_delay: bool = False,
) -> ReplyDelay:
    """Build the simulated reply delay.

    Command-line values win over environment variables, which win over the
    defaults.

    Raises:
        ValueError: If a value is not a number or the range is invalid
    """
    if no_delay:
        return ReplyDelay.none()
    low = min_delay if min_delay is not None else _env_float(ENV_MIN_DELAY, DEFAULT_MIN_DELAY)
    high = max_delay if max_delay is not None else _env_float(ENV_MAX_DELAY, DEFAULT_MAX_DELAY)
    return ReplyDelay(low, high)


def get_log_level(level: str | None = None) -> str | None:
    """Resolve the log panel level, None to keep the panel hidden.

    Raises:
        ValueError: If the level name is not recognized
    """
    value = level or os.getenv(ENV_LOG_LEVEL)
    if not value:
        return None
    if not LogLevel.is_valid(value):
        raise ValueError(f"Unknown log level: {value}. Use debug, info, warning or error")
    return value.lower()
