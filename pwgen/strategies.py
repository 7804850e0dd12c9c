from __future__ import annotations
import random
from typing import Any, MutableSequence, Optional, Protocol


class RandomSource(Protocol):
    """Protocol of the randomness used by the generator."""

    def randrange(self, stop: int) -> int:
        """Returns an integer drawn uniformly from [0, stop)."""
        ...

    def shuffle(self, x: MutableSequence[Any]) -> None:
        """Permutes x in place."""
        ...


# SystemRandom keeps no state in the process, so it is safe to share between threads.
_DEFAULT_SOURCE = random.SystemRandom()


def default_source() -> RandomSource:
    return _DEFAULT_SOURCE


def seeded_source(seed: int) -> RandomSource:
    """Fresh generator whose output is reproducible for a given seed."""
    return random.Random(seed)


def make_source(seed: Optional[int] = None) -> RandomSource:
    if seed is None:
        return default_source()
    return seeded_source(seed)
