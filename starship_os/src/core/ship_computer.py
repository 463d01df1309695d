from __future__ import annotations

"""ship_computer.py
The primary ship computer: a fixed list of :class:`Subroutine` records and a
random selector that picks the next one to dispatch.

A ship runs exactly one computer, so application code never constructs this
class directly; it asks :mod:`starship_os.src.core.registry` for the shared
instance instead.
"""

import logging
import threading
from typing import Any, Iterable, Optional

import numpy as np

from ..models.subroutine import DEFAULT_SUBROUTINES, Subroutine

__all__ = ["ShipComputer"]

logger = logging.getLogger(__name__)


class ShipComputer:
    """Dispatch subroutine requests for a single starship.

    Parameters
    ----------
    subroutines
        Records to choose from.  Copied into a tuple; must not be empty.
    rng
        Random source exposing ``integers(high)``.  Defaults to a fresh
        :func:`numpy.random.default_rng` seeded from OS entropy.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError(f"{ShipComputer.__name__} cannot be subclassed (attempted by {cls.__name__})")

    def __init__(
        self,
        subroutines: Iterable[Subroutine] = DEFAULT_SUBROUTINES,
        rng: Optional[Any] = None,
    ) -> None:
        self._subroutines: tuple[Subroutine, ...] = tuple(subroutines)
        if not self._subroutines:
            raise ValueError("ShipComputer requires at least one subroutine")

        self._rng = rng if rng is not None else np.random.default_rng()
        # Generator state is not thread-safe; serialise draws.
        self._rng_lock = threading.Lock()
        logger.debug("Ship computer loaded %d subroutines", len(self._subroutines))

    # ------------------------------------------------------------------
    @property
    def subroutines(self) -> tuple[Subroutine, ...]:
        """Loaded subroutines in insertion order (read-only)."""
        return self._subroutines

    def __len__(self) -> int:
        return len(self._subroutines)

    # ------------------------------------------------------------------
    def next_subroutine(self) -> Subroutine:
        """Return a uniformly random subroutine (sampling with replacement)."""
        with self._rng_lock:
            index = int(self._rng.integers(len(self._subroutines)))
        subroutine = self._subroutines[index]
        logger.debug("Selected subroutine %d: %s (%s)", index, subroutine.name, subroutine.location)
        return subroutine
