"""
Summary: Value object describing one quiz round.
Why: Carry the sampled file and line from the sampler to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class QuizRound:
    """The file and line chosen for a single prompt/reveal cycle."""

    path: Path
    total_lines: int
    line_number: int
    line: str
    blank_retries: int = 0
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.line_number <= self.total_lines:
            raise ValueError(
                f"line_number {self.line_number} outside 1..{self.total_lines} for {self.path}"
            )

    @property
    def is_blank(self) -> bool:
        """Whether the sampler gave up and kept a whitespace-only line."""
        return not self.line.strip()


__all__ = ["QuizRound"]
