"""
Summary: Render a numbered, optionally styled slice of a file.
Why: Each phase re-reads the file from disk and formats ``<n>: <line>`` rows.
"""

from __future__ import annotations

from pathlib import Path

from rich.text import Text

from codequiz.errors import RoundReadError
from codequiz.platform.filesystem import read_line_range

from .window import ContextWindow


def format_line(number: int, content: str, style: str | None = None) -> Text:
    """Build one ``<number>: <content>`` row; unstyled when ``style`` is None."""

    return Text(f"{number}: {content}", style=style or "")


def render_window(path: Path, window: ContextWindow) -> list[Text]:
    """Read ``window`` from ``path`` and return one row per line.

    The displayed number of the first row is ``window.offset`` and increases
    by one per row.

    Raises:
        RoundReadError: If the file can no longer be read.
    """
    try:
        lines = read_line_range(path, window.start, window.end)
    except OSError as exc:
        raise RoundReadError(path, exc.strerror or str(exc)) from exc

    return [
        format_line(window.offset + index, content, window.style)
        for index, content in enumerate(lines)
    ]


__all__ = ["format_line", "render_window"]
