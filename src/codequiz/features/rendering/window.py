"""
Summary: Compute the clamped line window shown around a target line.
Why: Both the hint and the reveal show a radius of lines bounded by the file.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ContextWindow:
    """Inclusive 1-based line range plus how to number and style it."""

    start: int
    end: int
    offset: int
    style: str | None = None

    @property
    def line_count(self) -> int:
        return max(0, self.end - self.start + 1)

    def contains(self, line_number: int) -> bool:
        return self.start <= line_number <= self.end


def compute_window(
    line_number: int,
    radius: int,
    total_lines: int,
    style: str | None = None,
) -> ContextWindow:
    """Return ``max(1, n - radius)..min(total, n + radius)`` numbered from its start.

    Raises:
        ValueError: If ``radius`` is negative or ``line_number`` is outside the file.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if not 1 <= line_number <= total_lines:
        raise ValueError(f"line {line_number} outside 1..{total_lines}")

    start = max(1, line_number - radius)
    end = min(total_lines, line_number + radius)
    return ContextWindow(start=start, end=end, offset=start, style=style)


__all__ = ["ContextWindow", "compute_window"]
