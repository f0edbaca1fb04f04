"""Command implementations for CLI."""

from codequiz.ui.cli.commands.executor import CommandExecutor
from codequiz.ui.cli.commands.linecount import LineCountCommand
from codequiz.ui.cli.commands.quiz import QuizCommand

__all__ = ["CommandExecutor", "LineCountCommand", "QuizCommand"]
