# This file makes starship_os a Python package

"""starship_os package

The code base lives under *starship_os.src.*; the names most callers need are
re-exported here::

    from starship_os import get_instance

    ship_os = get_instance()
    ship_os.next_subroutine()
"""

from .src.core.registry import SingletonRegistry, get_instance
from .src.core.ship_computer import ShipComputer
from .src.models.subroutine import DEFAULT_SUBROUTINES, Subroutine

__all__ = [
    "DEFAULT_SUBROUTINES",
    "ShipComputer",
    "SingletonRegistry",
    "Subroutine",
    "get_instance",
]
