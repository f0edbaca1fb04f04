"""src/codequiz/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Both commands start from the same eligible file set.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from codequiz.config import QuizConfig
from codequiz.features.enumeration import enumerate_eligible_files


class CommandExecutor(ABC):
    """Base class for command execution."""

    config: QuizConfig

    def __init__(self, config: QuizConfig) -> None:
        """Initialize command executor.

        Args:
            config: Parsed quiz configuration.
        """
        self.config = config

    def eligible_files(self) -> list[Path]:
        """Enumerate the root once; raises ``NoEligibleFilesError`` when empty."""

        return enumerate_eligible_files(self.config.root)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
