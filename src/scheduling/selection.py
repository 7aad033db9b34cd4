import random
from typing import Optional, Sequence

from src.scheduling.entities import Physician


class RandomPhysicianPicker:
    """Uniform choice among free physicians. Pass a seeded `random.Random` for repeatable picks."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.SystemRandom()

    def pick(self, candidates: Sequence[Physician]) -> Physician:
        if not candidates:
            raise ValueError("cannot pick from an empty candidate list")
        return self._rng.choice(list(candidates))


class FirstPhysicianPicker:
    """Lowest id wins."""

    def pick(self, candidates: Sequence[Physician]) -> Physician:
        if not candidates:
            raise ValueError("cannot pick from an empty candidate list")
        return min(candidates, key=lambda p: p.id)
