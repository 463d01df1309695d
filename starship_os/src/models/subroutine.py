from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Subroutine:
    """Named ship task and the location on board that issues it."""

    name: str
    location: str

    # --- (de)serialization ---
    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Subroutine":
        return cls(
            name=str(d["name"]),
            location=str(d["location"]),
        )


# Reference data loaded into the primary ship computer.  Order matters:
# selection indexes into this sequence.
DEFAULT_SUBROUTINES: Tuple[Subroutine, ...] = (
    Subroutine(name="Warp Drive Diagnostics", location="Engineering"),
    Subroutine(name="SIF Generator Calibriation", location="Engineering"),
    Subroutine(name="Shield Modulators", location="Bridge"),
    Subroutine(name="Terraformer", location="Holodeck Server"),
    Subroutine(name="Heartrate Analyzer", location="Medical"),
)
