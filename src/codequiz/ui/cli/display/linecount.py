"""Line-count report display."""

from __future__ import annotations

from typing import final

from rich.console import Console

from codequiz.features.linecount import LineCountReport


@final
class LineCountDisplay:
    """Print eligible file and line totals."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console(markup=False, highlight=False)

    def show_report(self, report: LineCountReport) -> None:
        self.console.print(report.render())
