"""
Process-wide access point for the primary ship computer.

The registry builds the :class:`ShipComputer` lazily on first access and
hands the same object to every later caller.  Construction uses
double-checked locking, so threads that race on first access converge on a
single instance and :attr:`SingletonRegistry.construction_count` never
exceeds one between resets.
"""

import logging
import threading
from typing import Callable, ClassVar, Optional

from .ship_computer import ShipComputer

__all__ = ["SingletonRegistry", "get_instance"]

logger = logging.getLogger(__name__)


class SingletonRegistry:
    """Holds at most one :class:`ShipComputer` per process."""

    # Zero-argument callable used to build the instance.
    factory: ClassVar[Callable[[], ShipComputer]] = ShipComputer

    construction_count: ClassVar[int] = 0

    _instance: ClassVar[Optional[ShipComputer]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(cls) -> ShipComputer:
        """Return the shared ship computer, building it on first call."""
        instance = cls._instance
        if instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls.factory()
                    cls.construction_count += 1
                    logger.info("Primary ship computer online")
                instance = cls._instance
        return instance

    @classmethod
    def install_factory(cls, factory: Callable[[], ShipComputer]) -> bool:
        """Use *factory* for the next construction.

        Returns ``False`` (and leaves the factory alone) when the computer
        has already been built.
        """
        with cls._lock:
            if cls._instance is not None:
                return False
            cls.factory = factory
            return True

    @classmethod
    def reset(cls) -> None:
        """
        Drop the shared instance and zero the construction counter.

        Intended for tests; application code never tears the computer down.
        """
        with cls._lock:
            cls._instance = None
            cls.construction_count = 0


def get_instance() -> ShipComputer:
    """Shortcut for :meth:`SingletonRegistry.get_instance`."""
    return SingletonRegistry.get_instance()
