"""Weapons that units can carry into battle."""

from dataclasses import dataclass
from enum import Enum


class WeaponType(Enum):
    """The family a weapon belongs to."""

    SWORD = 0
    AXE = 1
    LANCE = 2


@dataclass(frozen=True)
class Weapon:
    """A weapon's combat statistics."""

    range: int
    damage: int
    hit: int
    critical: int
    type: WeaponType