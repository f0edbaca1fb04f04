"""
Summary: Draw a random file and a random non-blank line for each round.
Why: Sampling is uniform over files, then uniform over lines within the file.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path
from typing import final

from codequiz.config.settings import MAX_BLANK_LINE_RETRIES
from codequiz.errors import RoundReadError
from codequiz.events import QuizEvent
from codequiz.platform.filesystem import read_lines
from codequiz.platform.logging import logger

from .models import QuizRound


@final
class Sampler:
    """Pick quiz rounds from a fixed, non-empty eligible file set.

    Every file is equally likely regardless of its length. Within the chosen
    file a line number is drawn uniformly; blank lines are redrawn (same file)
    up to ``max_blank_retries`` times, after which the last draw is kept.
    """

    files: tuple[Path, ...]
    rng: random.Random
    max_blank_retries: int

    def __init__(
        self,
        files: Sequence[Path],
        rng: random.Random | None = None,
        max_blank_retries: int = MAX_BLANK_LINE_RETRIES,
    ) -> None:
        if not files:
            raise ValueError("Sampler requires at least one eligible file")
        if max_blank_retries < 0:
            raise ValueError("max_blank_retries must be non-negative")
        self.files = tuple(files)
        self.rng = rng if rng is not None else random.Random()
        self.max_blank_retries = max_blank_retries

    def choose_file(self, seed: int) -> Path:
        """Uniformly choose one eligible file using ``seed``."""

        self.rng.seed(seed)
        return self.rng.choice(self.files)

    def choose_line_number(self, total_lines: int, seed: int) -> int:
        """Uniformly choose a 1-based line number in ``1..total_lines``."""

        self.rng.seed(seed)
        return self.rng.randint(1, total_lines)

    def draw(self, seed: int) -> QuizRound:
        """Sample a complete round.

        The file draw uses ``seed``, the first line draw ``seed + 1`` and blank
        retry ``i`` uses ``seed + 2 + i``.

        Raises:
            RoundReadError: If the chosen file cannot be read or has no lines.
        """
        path = self.choose_file(seed)
        try:
            lines = read_lines(path)
        except OSError as exc:
            raise RoundReadError(path, exc.strerror or str(exc)) from exc

        total_lines = len(lines)
        if total_lines == 0:
            raise RoundReadError(path, "file has no lines")

        line_number = self.choose_line_number(total_lines, seed + 1)
        line = lines[line_number - 1]

        retries = 0
        while not line.strip() and retries < self.max_blank_retries:
            line_number = self.choose_line_number(total_lines, seed + 2 + retries)
            line = lines[line_number - 1]
            retries += 1

        quiz_round = QuizRound(
            path=path,
            total_lines=total_lines,
            line_number=line_number,
            line=line,
            blank_retries=retries,
            seed=seed,
        )
        if quiz_round.is_blank:
            logger.debug(
                "Kept blank line %d after %d retries",
                line_number,
                retries,
                extra={"quiz_event": QuizEvent.ROUND_BLANK_FALLBACK, "path": str(path)},
            )
        return quiz_round


__all__ = ["Sampler"]
