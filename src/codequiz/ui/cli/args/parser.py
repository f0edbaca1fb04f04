"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from codequiz.config import QuizConfig
from codequiz.config.settings import DEFAULT_CONTEXT_RADIUS, DEFAULT_REVEAL_RADIUS
from codequiz.platform.logging import setup_logger
from codequiz.ui.cli.args.options import CLIArgs


def non_negative_int(value: str) -> int:
    """argparse ``type`` accepting only plain decimal digits."""

    if not value.isdigit() or not value.isascii():
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value!r}")
    return int(value)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="code-quiz",
            allow_abbrev=False,
            description=(
                "Show a random line from a source tree with a little context, "
                "then reveal which file it came from."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                "examples:\n"
                "  code-quiz\n"
                "  code-quiz frontend/src -c 2\n"
                "  code-quiz . --context 1 --reveal 20\n"
                "  code-quiz . --linecount"
            ),
        )
        _ = parser.add_argument(
            "root",
            nargs="?",
            default=".",
            help="Root folder (default: .)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-c",
            "--context",
            type=non_negative_int,
            default=DEFAULT_CONTEXT_RADIUS,
            metavar="N",
            help=f"Show ±N lines before the reveal (default: {DEFAULT_CONTEXT_RADIUS})",
        )
        _ = parser.add_argument(
            "-r",
            "--reveal",
            type=non_negative_int,
            default=DEFAULT_REVEAL_RADIUS,
            metavar="N",
            help=f"Show ±N lines on reveal (default: {DEFAULT_REVEAL_RADIUS})",
        )
        _ = parser.add_argument(
            "-l",
            "--linecount",
            action="store_true",
            help="Print total eligible file and line counts and exit",
        )
        _ = parser.add_argument(
            "--once",
            action="store_true",
            help="Play a single round and exit",
        )
        _ = parser.add_argument(
            "--seed",
            type=non_negative_int,
            metavar="N",
            help="Base seed for a reproducible session",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug diagnostics on stderr",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=Path,
            metavar="FILE",
            help="Also write debug logs to FILE",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Quiz configuration and logging options.

        Raises:
            SystemExit: Code 2 on usage errors, 0 after ``--help``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(log_file=parsed_args.log_file, console_level=log_level)

        config = QuizConfig(
            root=Path(parsed_args.root),
            context=parsed_args.context,
            reveal=parsed_args.reveal,
            line_count_only=parsed_args.linecount,
            loop=not parsed_args.once,
            seed=parsed_args.seed,
        )

        return CLIArgs(
            config=config,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=parsed_args.log_file,
        )
