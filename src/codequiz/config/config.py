"""Runtime configuration for a quiz session."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from codequiz.config.settings import DEFAULT_CONTEXT_RADIUS, DEFAULT_REVEAL_RADIUS


@final
@dataclass(slots=True, frozen=True)
class QuizConfig:
    """Immutable options parsed once at startup."""

    # Root of the tree to quiz on
    root: Path = Path(".")

    # Lines shown above and below the target before and after the reveal
    context: int = DEFAULT_CONTEXT_RADIUS
    reveal: int = DEFAULT_REVEAL_RADIUS

    # Print eligible file/line totals instead of running the quiz
    line_count_only: bool = False

    # Loop until interrupted, or play a single round
    loop: bool = True

    # Base seed for reproducible sessions; None seeds from pid and clock
    seed: int | None = None

    def __post_init__(self) -> None:
        """Reject negative radii regardless of how the config was built."""
        if self.context < 0:
            raise ValueError(f"context must be a non-negative integer, got {self.context}")
        if self.reveal < 0:
            raise ValueError(f"reveal must be a non-negative integer, got {self.reveal}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be a non-negative integer, got {self.seed}")


__all__ = ["QuizConfig"]
