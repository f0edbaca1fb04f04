"""Configuration package for code-quiz."""

from codequiz.config.config import QuizConfig

__all__ = ["QuizConfig"]
