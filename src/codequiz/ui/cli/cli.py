"""Command line interface for code-quiz."""

import sys
from typing import final

from codequiz.errors import NoEligibleFilesError, RoundReadError
from codequiz.events import QuizEvent
from codequiz.platform.logging import logger
from codequiz.ui.cli.args import ArgumentParser, CLIArgs
from codequiz.ui.cli.commands import CommandExecutor, LineCountCommand, QuizCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the line-count report or the quiz for the parsed arguments."""

        if args.config.line_count_only:
            return LineCountCommand(args.config)
        return QuizCommand(args.config)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        args = ArgumentParser.process_args(args_list)
        try:
            exit_code = CommandProcessor.build_command(args).execute()
        except NoEligibleFilesError as e:
            logger.error(str(e), extra={"quiz_event": QuizEvent.ENUMERATION_EMPTY})
            sys.exit(1)
        except RoundReadError as e:
            logger.error(
                "Could not read file: %s",
                e.reason,
                extra={
                    "quiz_event": QuizEvent.ROUND_READ_ERROR,
                    "path": str(e.path),
                    "root": str(args.config.root),
                },
            )
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nQuiz ended by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

        if exit_code:
            sys.exit(exit_code)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
