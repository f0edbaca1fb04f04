"""
Summary: Walk a quiz root and collect the eligible file set.
Why: Compute the candidate files once per process so every round reuses them.
"""

from __future__ import annotations

import os
from pathlib import Path

from codequiz.errors import NoEligibleFilesError
from codequiz.events import QuizEvent
from codequiz.platform.logging import logger

from .file_filter import is_eligible_relative_path, is_excluded_dir_name, is_excluded_file_name


def _is_regular_file(path: Path) -> bool:
    return path.is_file() and not path.is_symlink()


def iter_eligible_files(root: Path) -> list[Path]:
    """Return the eligible files under ``root`` in sorted order.

    Excluded directories are pruned during the walk rather than filtered
    afterwards. Symlinks are neither followed nor returned. A root that is
    itself a regular file yields that file unless its name is excluded.
    """
    if _is_regular_file(root):
        return [] if is_excluded_file_name(root.name) else [root]
    if not root.is_dir():
        return []

    eligible: list[Path] = []
    for current, dir_names, file_names in os.walk(root):
        dir_names[:] = sorted(name for name in dir_names if not is_excluded_dir_name(name))
        current_path = Path(current)
        for file_name in sorted(file_names):
            candidate = current_path / file_name
            if not _is_regular_file(candidate):
                continue
            if is_eligible_relative_path(candidate.relative_to(root)):
                eligible.append(candidate)
    return eligible


def enumerate_eligible_files(root: Path) -> list[Path]:
    """Build the eligible file set for ``root``.

    Raises:
        NoEligibleFilesError: If nothing under ``root`` passes the filter.
    """
    files = iter_eligible_files(root)
    if not files:
        raise NoEligibleFilesError(root)

    logger.debug(
        "Found %d eligible files",
        len(files),
        extra={"quiz_event": QuizEvent.ENUMERATION_COMPLETE, "path": str(root)},
    )
    return files


__all__ = ["enumerate_eligible_files", "iter_eligible_files"]
