from __future__ import annotations

import logging
import random
from typing import Optional

log = logging.getLogger(__name__)


class VectorRng:
    """Uniform random source for the random vector constructors."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self._seed = seed
        log.debug("Reseeding vector rng with %r", self._seed)
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def uniform(self, low: float, high: float) -> float:
        # random.uniform may return high; keep the draw in [low, high)
        return self._random.random() * (high - low) + low


_default = VectorRng()


def default_rng() -> VectorRng:
    return _default


def seed(value: Optional[int]) -> None:
    _default.reset(value)
