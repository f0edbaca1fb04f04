"""
Summary: Sum eligible files and lines instead of running the quiz.
Why: Give a quick size estimate of the quiz pool for a root.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from codequiz.platform.filesystem import count_lines
from codequiz.platform.logging import logger


@dataclass(slots=True, frozen=True)
class LineCountReport:
    """Totals over the eligible file set."""

    total_files: int
    total_lines: int

    def render(self) -> str:
        return f"Eligible files: {self.total_files}\nEligible lines: {self.total_lines}"


def build_line_count_report(files: Iterable[Path]) -> LineCountReport:
    """Count lines in every file; unreadable files contribute zero lines."""

    total_files = 0
    total_lines = 0
    for path in files:
        total_files += 1
        try:
            total_lines += count_lines(path)
        except OSError as exc:
            logger.debug("Counting %s as 0 lines: %s", path, exc)
    return LineCountReport(total_files=total_files, total_lines=total_lines)


__all__ = ["LineCountReport", "build_line_count_report"]
