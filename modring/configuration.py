"""
configuration.py

What the diagram shows: a natural number, a modulus and a mode.

Two separate structs on purpose:
- PendingConfiguration: the values the control panel is editing right now.
- ActiveConfiguration: what the session is actually drawing. Frozen, and
  only ever built through validation.
"""

from dataclasses import dataclass
from enum import Enum

from modring.config import U32_MAX
from modring.errors import InvalidConfiguration


class Mode(Enum):
    """The two readings of the same (natural, modulus) pair."""
    # REDUCTION: draw 0..natural on rings, arrow from natural to its residue.
    # CYCLE: draw the residues once, arrow i -> i + natural for every residue.
    REDUCTION = "reduction"
    CYCLE = "cycle"


def validate(natural, modulus, mode=Mode.REDUCTION):
    """Raise InvalidConfiguration unless (natural, modulus, mode) can be laid out."""
    for name, value in (("natural", natural), ("modulus", modulus)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if natural < 0 or natural > U32_MAX:
        raise InvalidConfiguration(f"natural must be in 0..{U32_MAX}, got {natural}")
    if modulus < 1 or modulus > U32_MAX:
        raise InvalidConfiguration(f"modulus must be in 1..{U32_MAX}, got {modulus}")
    if not isinstance(mode, Mode):
        raise InvalidConfiguration(f"unknown mode {mode!r}")


@dataclass(frozen=True)
class ActiveConfiguration:
    natural: int
    modulus: int
    mode: Mode = Mode.REDUCTION

    def __post_init__(self):
        validate(self.natural, self.modulus, self.mode)

    @property
    def residue(self):
        return self.natural % self.modulus

    def describe(self):
        """Human readable equation for the sidebar."""
        if self.mode is Mode.CYCLE:
            return f"i → i + {self.natural} (mod {self.modulus})"
        return f"{self.natural} mod {self.modulus} = {self.residue}"


@dataclass
class PendingConfiguration:
    """Staged values; the UI may change these freely, nothing draws from them."""
    natural: int = 7
    modulus: int = 3
    mode: Mode = Mode.REDUCTION

    @classmethod
    def from_active(cls, active: ActiveConfiguration):
        return cls(active.natural, active.modulus, active.mode)

    def freeze(self) -> ActiveConfiguration:
        """Validate and snapshot. Raises InvalidConfiguration."""
        return ActiveConfiguration(self.natural, self.modulus, self.mode)
