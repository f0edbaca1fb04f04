"""
Summary: Seed sources that give every quiz round a distinct random seed.
Why: Rapid successive rounds must not repeat the same draw.
"""

from __future__ import annotations

import os
import time
import zlib
from collections.abc import Callable
from typing import Protocol, final, runtime_checkable

from codequiz.config.settings import MAX_BLANK_LINE_RETRIES

# Seeds consumed by one round: file draw, first line draw, one per blank retry.
SEEDS_PER_ROUND = MAX_BLANK_LINE_RETRIES + 2


@runtime_checkable
class SeedSource(Protocol):
    """Produce the seed used for a given round."""

    def seed_for_round(self, round_index: int) -> int:
        ...


@final
class ProcessClockSeedSource:
    """Derive seeds from the process id and a nanosecond timestamp.

    The pid/timestamp pair is hashed with CRC-32. Clocks without nanosecond
    resolution still yield distinct seeds because the round index is mixed in.
    """

    def __init__(
        self,
        clock_ns: Callable[[], int] = time.time_ns,
        pid: Callable[[], int] = os.getpid,
    ) -> None:
        self._clock_ns = clock_ns
        self._pid = pid

    def seed_for_round(self, round_index: int) -> int:
        token = f"{self._pid()}-{self._clock_ns()}-{round_index}"
        return zlib.crc32(token.encode("ascii"))


@final
class FixedSeedSource:
    """Reproducible seeds: ``base + round_index * stride``.

    The stride covers every seed a round may consume, so no seed used within
    one round is reused by a later round.
    """

    def __init__(self, base: int, stride: int = SEEDS_PER_ROUND) -> None:
        if stride < 1:
            raise ValueError("stride must be positive")
        self.base = base
        self.stride = stride

    def seed_for_round(self, round_index: int) -> int:
        return self.base + round_index * self.stride


__all__ = ["SEEDS_PER_ROUND", "FixedSeedSource", "ProcessClockSeedSource", "SeedSource"]
