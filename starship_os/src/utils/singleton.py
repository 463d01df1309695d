from __future__ import annotations

"""singleton.py
Utility module providing a *Singleton* base-class that can be inherited by
services requiring a single application-wide instance.

Only one instance per class per Python process.  Creation is serialised with
a class-wide lock so threads racing on first access all receive the same
object.  Classes inheriting from :class:`Singleton` **must** implement their
own *idempotent* ``__init__`` (guarding against re-initialisation) because
Python calls ``__init__`` on every ``Cls()`` expression.
"""

import threading
from typing import Any

__all__ = ["Singleton", "reset_singleton"]


class Singleton:  # noqa: D101 – trivial helper
    _instance: Singleton | None = None
    _lock = threading.Lock()

    def __new__(cls, *args: Any, **kwargs: Any):
        # ``cls.__dict__`` rather than ``cls._instance`` so a subclass never
        # inherits its parent's cached instance.
        if cls.__dict__.get("_instance") is None:
            with Singleton._lock:
                if cls.__dict__.get("_instance") is None:
                    cls._instance = super().__new__(cls)
        return cls._instance


def reset_singleton(cls: type[Singleton]) -> None:
    """Forget the cached instance of *cls* (used by tests)."""
    with Singleton._lock:
        cls._instance = None
