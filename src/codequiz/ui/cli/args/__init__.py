"""Command line argument handling package."""

from codequiz.ui.cli.args.parser import ArgumentParser, non_negative_int
from codequiz.ui.cli.args.options import CLIArgs

__all__ = ["ArgumentParser", "CLIArgs", "non_negative_int"]
