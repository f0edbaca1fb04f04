"""Command line interface package."""

from codequiz.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
