"""Global test fixtures for the Starship OS suite."""
import logging
import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Ensure the repository root is on sys.path so that `import starship_os` is
# always resolvable when tests are run from any working directory (e.g., CI).
# ---------------------------------------------------------------------------
_repo_root = Path(__file__).resolve().parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from starship_os.src.core.registry import SingletonRegistry  # noqa: E402
from starship_os.src.core.ship_computer import ShipComputer  # noqa: E402
from starship_os.src.services.settings_service import SettingsService  # noqa: E402
from starship_os.src.utils.singleton import reset_singleton  # noqa: E402


class FixedIndexRng:
    """Random source stand-in that always draws the same index."""

    def __init__(self, index: int):
        self.index = index
        self.calls: list[int] = []

    def integers(self, high: int) -> int:
        self.calls.append(high)
        return self.index


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    """Every test starts before the ship computer has been built."""
    monkeypatch.setattr(SingletonRegistry, "factory", ShipComputer)
    SingletonRegistry.reset()
    yield
    SingletonRegistry.reset()


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point :class:`SettingsService` at a private file and drop any cached instance."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(SettingsService, "_path", path)
    reset_singleton(SettingsService)
    yield path
    reset_singleton(SettingsService)


@pytest.fixture
def fixed_rng():
    return FixedIndexRng


@pytest.fixture
def restore_root_logger():
    """Undo whatever ``setup_logging`` does to the root logger."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
