"""Dispatch operations built on the shared ship computer.

Two independent steps:

* :func:`confirm_same_instance` – verify the registry hands out one object.
* :func:`dispatch_requests` – route a batch of requests through the computer.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..models.subroutine import Subroutine
from .registry import get_instance
from .ship_computer import ShipComputer

__all__ = [
    "SAME_INSTANCE_MESSAGE",
    "confirm_same_instance",
    "dispatch_requests",
    "format_dispatch",
]

logger = logging.getLogger(__name__)

SAME_INSTANCE_MESSAGE = "Same instance"


def confirm_same_instance(count: int = 4,
                          accessor: Callable[[], ShipComputer] = get_instance) -> bool:
    """Fetch *count* handles from *accessor* and report whether all are identical.

    Args:
        count: Number of handles to fetch (at least 1).
        accessor: Zero-argument callable returning the ship computer.

    Returns:
        bool: ``True`` when every handle is the very same object.

    Raises:
        ValueError: If *count* is less than 1.

    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    handles = [accessor() for _ in range(count)]
    first = handles[0]
    same = all(handle is first for handle in handles[1:])
    logger.debug("Fetched %d handles; identical=%s", count, same)
    return same


def dispatch_requests(computer: ShipComputer, count: int = 15) -> list[Subroutine]:
    """Issue *count* sequential dispatch requests and return the chosen subroutines."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    dispatched = [computer.next_subroutine() for _ in range(count)]
    logger.info("Dispatched %d requests", len(dispatched))
    return dispatched


def format_dispatch(subroutine: Subroutine) -> str:
    return f"Dispatch request to: {subroutine.name}"
