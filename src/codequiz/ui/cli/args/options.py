"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from codequiz.config import QuizConfig


@final
@dataclass(slots=True)
class CLIArgs:
    """Parsed command line: the quiz configuration plus logging switches."""

    config: QuizConfig
    verbose: bool
    quiet: bool
    log_file: Path | None


__all__ = ["CLIArgs"]
