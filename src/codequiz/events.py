"""Structured event identifiers attached to quiz log records."""

from __future__ import annotations

from enum import StrEnum


class QuizEvent(StrEnum):
    """Values passed as ``extra={"quiz_event": ...}`` when logging."""

    ENUMERATION_COMPLETE = "quiz.enumeration.complete"
    ENUMERATION_EMPTY = "quiz.enumeration.empty"
    ROUND_START = "quiz.round.start"
    ROUND_READ_ERROR = "quiz.round.read_error"
    ROUND_BLANK_FALLBACK = "quiz.round.blank_fallback"
    SESSION_END = "quiz.session.end"


__all__ = ["QuizEvent"]
