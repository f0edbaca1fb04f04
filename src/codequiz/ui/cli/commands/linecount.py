"""Line-count command: report eligible totals without quizzing."""

from typing import final

from codequiz.config import QuizConfig
from codequiz.features.linecount import build_line_count_report
from codequiz.ui.cli.commands.executor import CommandExecutor
from codequiz.ui.cli.display import LineCountDisplay


@final
class LineCountCommand(CommandExecutor):
    """Count eligible files and lines, print the totals and exit."""

    display: LineCountDisplay

    def __init__(self, config: QuizConfig) -> None:
        super().__init__(config)
        self.display = LineCountDisplay()

    def execute(self) -> int:
        report = build_line_count_report(self.eligible_files())
        self.display.show_report(report)
        return 0
