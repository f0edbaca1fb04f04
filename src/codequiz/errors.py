"""Exception types raised across the quiz layers."""

from __future__ import annotations

from pathlib import Path


class CodeQuizError(Exception):
    """Base class for code-quiz failures."""


class NoEligibleFilesError(CodeQuizError):
    """Raised when the enumerator finds nothing to quiz on."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"No files found under: {root}")
        self.root: Path = root


class RoundReadError(CodeQuizError):
    """Raised when the file chosen for a round cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read file: {path} ({reason})")
        self.path: Path = path
        self.reason: str = reason


__all__ = ["CodeQuizError", "NoEligibleFilesError", "RoundReadError"]
