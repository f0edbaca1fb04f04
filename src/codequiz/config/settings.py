"""Where: src/codequiz/config/settings.py
What: Static quiz policy shared by every layer.
Why: Keep the eligibility filter and round pacing constants in one place.
Assumptions: - The filter policy is hardcoded; only the root path is user-selectable.
"""

from __future__ import annotations

from typing import Final

# Round pacing ----------------------------------------------------------------

DEFAULT_CONTEXT_RADIUS: Final[int] = 1
DEFAULT_REVEAL_RADIUS: Final[int] = 10

# Upper bound on redraws when the drawn line is blank or whitespace-only.
MAX_BLANK_LINE_RETRIES: Final[int] = 15


# Eligibility policy ----------------------------------------------------------

# Any path segment below the root matching one of these names excludes the file.
EXCLUDED_DIR_NAMES: Final[frozenset[str]] = frozenset(
    {
        "node_modules",
        "dist",
        "build",
        ".git",
        ".next",
        ".turbo",
        "coverage",
        ".cache",
    }
)

# Case-sensitive glob patterns matched against the file name only.
EXCLUDED_NAME_PATTERNS: Final[tuple[str, ...]] = (
    "*.lock",
    "*.min.*",
    "*.map",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.webp",
    "*.ico",
    "*.pdf",
    "*.zip",
    "*.gz",
    "*.tar",
    "*.DS_Store",
)


# Presentation ----------------------------------------------------------------

RULE: Final[str] = "-" * 60
HINT_STYLE: Final[str] = "red"
PATH_STYLE: Final[str] = "green"


__all__ = [
    "DEFAULT_CONTEXT_RADIUS",
    "DEFAULT_REVEAL_RADIUS",
    "MAX_BLANK_LINE_RETRIES",
    "EXCLUDED_DIR_NAMES",
    "EXCLUDED_NAME_PATTERNS",
    "RULE",
    "HINT_STYLE",
    "PATH_STYLE",
]
