"""
Summary: Expose the round sampler, its value object and seed sources.
Why: Let the session loop depend on one sampling import surface.
"""

from .models import QuizRound
from .sampler import Sampler
from .seed import FixedSeedSource, ProcessClockSeedSource, SeedSource

__all__ = ["FixedSeedSource", "ProcessClockSeedSource", "QuizRound", "Sampler", "SeedSource"]
