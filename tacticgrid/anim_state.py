"""Animation states that pick a unit's sprite sheet and row."""

from typing import TYPE_CHECKING, ClassVar

import pygame

if TYPE_CHECKING:
    from tacticgrid.unit import Unit

_ALLY_DIR = "resources/Units/0/"
_ENEMY_DIR = "resources/Units/1/"

# Keyed by (is_enemy, class value): swordsman 0, warrior 1, soldier 2.
_SHEETS = {
    (False, 0): "SwordFighter/SwordFighter_LongHair_Blue1.png",
    (False, 1): "AxeFighter/AxeFighter_LongHair_Blue1.png",
    (False, 2): "SpearFighter/SpearFighter_LongHair_Blue1.png",
    (True, 0): "SwordFighter/SwordFighter_LongHair_Red1.png",
    (True, 1): "AxeFighter/AxeFighter_ShortHair_Red1.png",
    (True, 2): "SpearFighter/SpearFighter_LongHair_Red1.png",
}


def texture_path(is_enemy, unit_class):
    """Return the sprite-sheet path for a side and unit class."""
    key = (bool(is_enemy), int(unit_class))
    try:
        sheet = _SHEETS[key]
    except KeyError:
        raise ValueError(f"unknown unit class: {unit_class!r}") from None
    return (_ENEMY_DIR if is_enemy else _ALLY_DIR) + sheet


def _load_texture(path):
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


class AnimState:
    """Base animation state; loads the unit's sheet when created."""

    row: ClassVar[int]

    def __init__(self, unit: "Unit"):
        if not hasattr(type(self), "row"):
            raise TypeError("AnimState is abstract; use one of its subclasses")
        self.unit = unit
        unit.set_sprite(_load_texture(texture_path(unit.is_enemy, unit.unit_class)))

    def on_enter(self):
        """Switch the unit's sprite to this state's row."""
        self.unit.an_sprite.sprite_y = self.row
        self.unit.an_sprite.update()


class IdleState(AnimState):
    row = 0


class MoveState(AnimState):
    row = 1


class AttackState(AnimState):
    row = 2


class DeathState(AnimState):
    row = 3