"""Simulated "thinking" delay before an assistant reply."""

import random
from dataclasses import dataclass, field

DEFAULT_MIN_DELAY = 1.0  # seconds
DEFAULT_MAX_DELAY = 2.0  # seconds


@dataclass(frozen=True)
class ReplyDelay:
    """Uniformly random delay in ``[min_seconds, max_seconds]``.

    Equal bounds give a fixed delay; ``ReplyDelay.none()`` disables it.
    """

    min_seconds: float = DEFAULT_MIN_DELAY
    max_seconds: float = DEFAULT_MAX_DELAY
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.min_seconds < 0 or self.max_seconds < 0:
            raise ValueError("Reply delay must not be negative")
        if self.min_seconds > self.max_seconds:
            raise ValueError(
                f"Minimum delay ({self.min_seconds}s) exceeds maximum delay ({self.max_seconds}s)"
            )

    @classmethod
    def none(cls) -> "ReplyDelay":
        return cls(0.0, 0.0)

    @classmethod
    def fixed(cls, seconds: float) -> "ReplyDelay":
        return cls(seconds, seconds)

    def next_delay(self) -> float:
        """Draw the delay for the next reply."""
        if self.min_seconds == self.max_seconds:
            return self.min_seconds
        return self.rng.uniform(self.min_seconds, self.max_seconds)
