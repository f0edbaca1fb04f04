"""Rich handler that renders structured quiz events.

Where: platform/logging/handlers.py
What: Style ``quiz_event`` log records with an icon, colour and compact path.
Why: Keep diagnostics on the error stream readable next to quiz output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class QuizRichHandler(RichHandler):
    """Rich handler with dedicated rendering for quiz events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "quiz.enumeration.complete": ("📂", "cyan"),
        "quiz.enumeration.empty": ("❌", "red"),
        "quiz.round.start": ("🎲", "blue"),
        "quiz.round.read_error": ("⛔", "yellow"),
        "quiz.round.blank_fallback": ("↪️", "yellow"),
        "quiz.session.end": ("👋", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with quiz defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` relative to ``base`` when possible, keeping the last segments.

        Args:
            path: Absolute or relative path string to format.
            base: Optional root used to relativize ``path``.

        Returns:
            Text: Path with magenta separators and an ellipsis when truncated.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative_path = pure_path.relative_to(base_path)
            except ValueError:
                relative_path = None
            if relative_path is not None and str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = anchor.rstrip("\\/") + separator if anchor else ""
            display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying a ``quiz_event`` attribute."""

        event = getattr(record, "quiz_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" @ ", style=Style(color=color))
            _ = text.append_text(self.format_path(str(path), base=getattr(record, "root", None)))
        return text

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for quiz events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["QuizRichHandler"]
