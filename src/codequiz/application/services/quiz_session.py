"""src/codequiz/application/services/quiz_session.py
What: Drive the prompt/reveal state machine over sampled quiz rounds.
Why: Keep round orchestration independent of the Rich console front end.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

from rich.text import Text

from codequiz.config import QuizConfig
from codequiz.config.settings import HINT_STYLE
from codequiz.errors import RoundReadError
from codequiz.events import QuizEvent
from codequiz.features.rendering import compute_window, render_window
from codequiz.features.sampling import (
    FixedSeedSource,
    ProcessClockSeedSource,
    QuizRound,
    Sampler,
    SeedSource,
)
from codequiz.platform.logging import logger


class QuizPhase(StrEnum):
    """Where the session is within the current round."""

    IDLE = "idle"
    PROMPTING = "prompting"
    REVEALED = "revealed"


@runtime_checkable
class QuizDisplayPort(Protocol):
    """Output and pacing gates used by the session."""

    def show_prompt(self, quiz_round: QuizRound, rows: Sequence[Text], context: int) -> None:
        ...

    def show_reveal(self, quiz_round: QuizRound, rows: Sequence[Text], reveal: int) -> None:
        ...

    def wait_for_reveal(self) -> None:
        """Block until the user asks for the reveal. May raise ``EOFError``."""
        ...

    def wait_for_next(self, *, last: bool) -> None:
        """Block until the user acknowledges the reveal. May raise ``EOFError``."""
        ...


@dataclass(slots=True)
class SessionSummary:
    """Counters reported when a session ends."""

    rounds_played: int = 0
    read_failures: int = 0


def seed_source_for(config: QuizConfig) -> SeedSource:
    """Return a fixed seed source when the config carries a seed."""

    if config.seed is not None:
        return FixedSeedSource(config.seed)
    return ProcessClockSeedSource()


class QuizSession:
    """Run quiz rounds until interrupted, or exactly once in single-shot mode."""

    config: QuizConfig
    display: QuizDisplayPort
    seed_source: SeedSource
    rng: random.Random
    sampler: Sampler
    phase: QuizPhase
    summary: SessionSummary

    def __init__(
        self,
        config: QuizConfig,
        files: Sequence[Path],
        display: QuizDisplayPort,
        seed_source: SeedSource | None = None,
    ) -> None:
        self.config = config
        self.display = display
        self.seed_source = seed_source if seed_source is not None else seed_source_for(config)
        self.rng = random.Random()
        self.sampler = Sampler(files, rng=self.rng)
        self.phase = QuizPhase.IDLE
        self.summary = SessionSummary()
        self._round_index = 0

    def next_round(self) -> QuizRound:
        """Sample the next round with a freshly derived seed."""

        seed = self.seed_source.seed_for_round(self._round_index)
        self._round_index += 1
        quiz_round = self.sampler.draw(seed)
        logger.debug(
            "Round %d: line %d of %d (seed=%d, blank retries=%d)",
            self._round_index,
            quiz_round.line_number,
            quiz_round.total_lines,
            seed,
            quiz_round.blank_retries,
            extra={"quiz_event": QuizEvent.ROUND_START},
        )
        return quiz_round

    def play_round(self, quiz_round: QuizRound) -> None:
        """Show the hint, wait, reveal, wait.

        Both windows are read from disk before anything is printed so an
        unreadable file abandons the round without partial output.
        """
        hint_window = compute_window(
            quiz_round.line_number,
            self.config.context,
            quiz_round.total_lines,
            style=HINT_STYLE,
        )
        reveal_window = compute_window(
            quiz_round.line_number,
            self.config.reveal,
            quiz_round.total_lines,
        )
        hint_rows = render_window(quiz_round.path, hint_window)
        reveal_rows = render_window(quiz_round.path, reveal_window)

        self.phase = QuizPhase.PROMPTING
        self.display.show_prompt(quiz_round, hint_rows, self.config.context)
        self.display.wait_for_reveal()

        self.phase = QuizPhase.REVEALED
        self.display.show_reveal(quiz_round, reveal_rows, self.config.reveal)
        self.display.wait_for_next(last=not self.config.loop)

    def run(self) -> SessionSummary:
        """Play rounds until end of input, or once when looping is disabled.

        Raises:
            RoundReadError: In single-shot mode when the chosen file is unusable.
            KeyboardInterrupt: Propagated so the caller can exit with 130.
        """
        try:
            while True:
                try:
                    self.play_round(self.next_round())
                except RoundReadError as exc:
                    self.summary.read_failures += 1
                    if not self.config.loop:
                        raise
                    logger.warning(
                        "Could not read file: %s",
                        exc.reason,
                        extra={
                            "quiz_event": QuizEvent.ROUND_READ_ERROR,
                            "path": str(exc.path),
                            "root": str(self.config.root),
                        },
                    )
                    continue
                finally:
                    self.phase = QuizPhase.IDLE

                self.summary.rounds_played += 1
                if not self.config.loop:
                    break
        except EOFError:
            logger.debug("Input closed, ending session")

        logger.debug(
            "Session finished after %d rounds (%d read failures)",
            self.summary.rounds_played,
            self.summary.read_failures,
            extra={"quiz_event": QuizEvent.SESSION_END},
        )
        return self.summary


__all__ = [
    "QuizDisplayPort",
    "QuizPhase",
    "QuizSession",
    "SessionSummary",
    "seed_source_for",
]
