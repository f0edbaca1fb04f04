"""Application services."""

from .quiz_session import QuizDisplayPort, QuizPhase, QuizSession, SessionSummary, seed_source_for

__all__ = ["QuizDisplayPort", "QuizPhase", "QuizSession", "SessionSummary", "seed_source_for"]
