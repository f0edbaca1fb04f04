"""
Summary: Static eligibility predicate for files under a quiz root.
Why: Keep dependency, build, cache and binary artefacts out of the quiz.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from fnmatch import fnmatchcase
from pathlib import PurePath

from codequiz.config.settings import EXCLUDED_DIR_NAMES, EXCLUDED_NAME_PATTERNS


def is_excluded_dir_name(name: str, excluded: Collection[str] = EXCLUDED_DIR_NAMES) -> bool:
    """Return whether a directory with this name is skipped entirely."""

    return name in excluded


def is_excluded_file_name(
    name: str,
    patterns: Iterable[str] = EXCLUDED_NAME_PATTERNS,
) -> bool:
    """Return whether a file name matches one of the excluded glob patterns."""

    return any(fnmatchcase(name, pattern) for pattern in patterns)


def is_eligible_relative_path(relative_path: PurePath) -> bool:
    """Apply the full policy to a path expressed relative to the quiz root.

    Every directory segment is checked against the excluded directory names and
    the final segment against the excluded file-name patterns.
    """
    parts = relative_path.parts
    if not parts:
        return False
    if any(is_excluded_dir_name(part) for part in parts[:-1]):
        return False
    return not is_excluded_file_name(parts[-1])


__all__ = ["is_eligible_relative_path", "is_excluded_dir_name", "is_excluded_file_name"]
