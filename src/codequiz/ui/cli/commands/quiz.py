"""Quiz command: run the interactive prompt/reveal loop."""

from typing import final

from codequiz.application.services.quiz_session import QuizSession
from codequiz.config import QuizConfig
from codequiz.ui.cli.commands.executor import CommandExecutor
from codequiz.ui.cli.display import QuizDisplay


@final
class QuizCommand(CommandExecutor):
    """Play quiz rounds over the eligible files under the root."""

    display: QuizDisplay

    def __init__(self, config: QuizConfig) -> None:
        super().__init__(config)
        self.display = QuizDisplay()

    def execute(self) -> int:
        files = self.eligible_files()
        session = QuizSession(self.config, files, self.display)
        _ = session.run()
        return 0
