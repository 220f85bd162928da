"""Replayable per-year random draws.

One draw per lease year, uniform in [0, 1). The same draws are handed back
on every call until the caller rerolls or the lease length changes, so a
scenario can be recomputed deterministically while its inputs are edited.
"""

import logging
import threading
from decimal import Decimal

import numpy as np

logger = logging.getLogger(__name__)


class RandomSequence:
    """Draws are replaced whole under a per-sequence lock. Each caller gets
    a complete tuple; the last reroll wins."""

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)
        self._draws: tuple[Decimal, ...] = ()
        self._lock = threading.Lock()

    @property
    def draws(self) -> tuple[Decimal, ...]:
        return self._draws

    def __len__(self) -> int:
        return len(self._draws)

    def get_or_regenerate(self, lease_years: int, reroll: bool = False) -> tuple[Decimal, ...]:
        """Return the stored draws, regenerating on reroll or length mismatch."""
        with self._lock:
            if reroll or len(self._draws) != lease_years:
                self._draws = self._generate(lease_years)
            return self._draws

    def reroll(self, lease_years: int) -> tuple[Decimal, ...]:
        return self.get_or_regenerate(lease_years, reroll=True)

    def reset(self) -> None:
        """Drop stored draws; the next call regenerates."""
        with self._lock:
            self._draws = ()

    def _generate(self, lease_years: int) -> tuple[Decimal, ...]:
        n = max(lease_years, 0)
        logger.debug("Generating %d random draws", n)
        return tuple(Decimal(str(float(x))) for x in self._rng.random(n))
