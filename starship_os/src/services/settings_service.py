from __future__ import annotations

"""settings_service.py
Provides application-wide persisted settings using a JSON file in the user's
home directory (``~/.starship_os/settings.json``).  Access via the *singleton*
:class:`SettingsService`.

Example
-------
>>> settings = SettingsService()
>>> settings.dispatch_count()
15
>>> settings.set("dispatch_count", 30)
>>> settings.save()
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.singleton import Singleton

__all__ = ["DispatchSettings", "SettingsService"]

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DispatchSettings(BaseModel):
    """Validated view of the settings file."""

    # Requests routed through the ship computer per run
    dispatch_count: int = Field(15, ge=0)
    # Handles fetched when confirming the shared instance
    identity_checks: int = Field(4, ge=1)
    # None → seed from OS entropy
    rng_seed: Optional[int] = Field(None, ge=0)
    log_level: LogLevel = "INFO"
    log_file: Optional[str] = None

    # Unknown keys in the file are ignored
    model_config = ConfigDict(extra="ignore")


class SettingsService(Singleton):
    """Load/save user settings to *~/.starship_os/settings.json* (singleton)."""

    _path: Path = Path.home() / ".starship_os" / "settings.json"

    _defaults: dict[str, Any] = DispatchSettings().model_dump()

    # ------------------------------------------------------------------
    def __init__(self) -> None:  # noqa: D401
        # Guard – only run once due to Singleton inheritance
        if getattr(self, "_initialized", False):  # type: ignore[attr-defined]
            return

        self._data: dict[str, Any] = {**self._defaults, **self._load()}
        self._initialized = True  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    def _load(self) -> dict[str, Any]:
        """Read and validate the JSON file; return dict or empty on failure."""
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
            validated = DispatchSettings.model_validate(data)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to load settings file %s: %s", self._path, exc)
            return {}
        except ValidationError as exc:
            logger.error("Invalid settings in %s, using defaults: %s", self._path, exc)
            return {}
        # Only keep keys actually present in the file
        return {k: v for k, v in validated.model_dump().items() if k in data}

    # ------------------------------------------------------------------
    def get(self, key: str, default: Any | None = None) -> Any | None:  # noqa: D401 – simple accessor
        """Return setting *key* or *default* if missing."""
        return self._data.get(key, default)

    # ------------------------------------------------------------------
    def set(self, key: str, value: Any) -> None:  # noqa: D401 – simple mutator
        """Update setting value in memory. Call :pymeth:`save` to persist.

        Raises ``ValueError`` when the new value does not validate.
        """
        candidate = {**self._data, key: value}
        try:
            validated = DispatchSettings.model_validate(candidate)
        except ValidationError as exc:
            raise ValueError(f"Invalid value for setting {key!r}: {value!r}") from exc
        self._data[key] = getattr(validated, key, value)

    # ------------------------------------------------------------------
    def save(self) -> None:  # noqa: D401 – straightforward persist
        """Write current settings to JSON file, creating directories as needed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as fp:
                json.dump(self._data, fp, indent=2)
            logger.info("Settings saved to %s", self._path)
        except OSError as exc:  # pragma: no cover – disk full etc.
            logger.error("Failed to save settings to %s: %s", self._path, exc)

    # --- Convenience Accessors ---
    def dispatch_count(self) -> int:
        """Number of dispatch requests issued per run."""
        return int(self.get("dispatch_count", self._defaults["dispatch_count"]))

    def identity_checks(self) -> int:
        """Number of handles fetched when confirming the shared instance."""
        return int(self.get("identity_checks", self._defaults["identity_checks"]))

    def rng_seed(self) -> Optional[int]:
        """Seed for the ship computer's random source, or ``None``."""
        seed = self.get("rng_seed", self._defaults["rng_seed"])
        return None if seed is None else int(seed)

    def log_level(self) -> str:
        return str(self.get("log_level", self._defaults["log_level"]))

    def log_file(self) -> Optional[str]:
        return self.get("log_file", self._defaults["log_file"])
