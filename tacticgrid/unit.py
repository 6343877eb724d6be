"""Units, their combat statistics and the starting rosters."""

from enum import IntEnum

from tacticgrid.animated_sprite import AnimatedSprite
from tacticgrid.anim_state import IdleState
from tacticgrid.weapon import Weapon, WeaponType


class ClassType(IntEnum):
    """A unit's fighting class."""

    SWORDSMAN = 0
    WARRIOR = 1
    SOLDIER = 2


_DEFAULT_WEAPONS = {
    ClassType.SWORDSMAN: Weapon(1, 7, 80, 10, WeaponType.SWORD),
    ClassType.WARRIOR: Weapon(1, 8, 70, 8, WeaponType.AXE),
    ClassType.SOLDIER: Weapon(1, 6, 100, 5, WeaponType.LANCE),
}


def default_weapon(unit_class):
    """Return the weapon a unit of this class starts with."""
    return _DEFAULT_WEAPONS[ClassType(unit_class)]


class Unit:
    """A combatant on the map."""

    def __init__(self, name, is_enemy, unit_class, max_hp, strength, defense, speed, skill, luck):
        self.name = name
        self.is_enemy = bool(is_enemy)
        self.unit_class = ClassType(unit_class)
        self.max_hp = max_hp
        self.hp = max_hp
        self.strength = strength
        self.defense = defense
        self.speed = speed
        self.skill = skill
        self.luck = luck
        self.equipped_weapon = default_weapon(self.unit_class)
        self.an_sprite = AnimatedSprite()
        self.anim_state = None
        self.set_state(IdleState(self))

    def set_state(self, state):
        """Enter a new animation state."""
        self.anim_state = state
        state.on_enter()

    def set_sprite(self, texture):
        """Replace the sprite with a fresh one using the given sheet."""
        self.an_sprite = AnimatedSprite(texture)

    def set_sprite_pos(self, coord):
        self.an_sprite.set_pos(coord)

    def get_attack(self):
        if self.equipped_weapon is None:
            return self.strength
        return self.strength + self.equipped_weapon.damage

    def get_dodge(self):
        return self.speed + self.luck * 2

    def get_hit(self):
        if self.equipped_weapon is None:
            return self.skill
        return self.equipped_weapon.hit + self.skill * 2 + self.luck

    def get_crit(self):
        if self.equipped_weapon is None:
            return self.skill
        return self.equipped_weapon.critical + self.skill // 2

    def draw(self, surface):
        self.an_sprite.draw(surface)

    def update(self, now=None):
        self.an_sprite.update(now)


_ALLIES = (
    ("Ike", ClassType.SWORDSMAN, 20, 5, 5, 5, 5, 5),
    ("Mia", ClassType.SWORDSMAN, 18, 6, 4, 7, 6, 4),
    ("Oscar", ClassType.WARRIOR, 22, 7, 6, 5, 5, 3),
    ("Boyd", ClassType.WARRIOR, 25, 8, 5, 4, 4, 2),
    ("Rhys", ClassType.SOLDIER, 15, 3, 2, 3, 5, 6),
    ("Soren", ClassType.SOLDIER, 16, 4, 3, 4, 6, 5),
)

_ENEMIES = (
    ("Boss", ClassType.WARRIOR, 25, 9, 5, 5, 3, 3),
    ("soldier1", ClassType.SOLDIER, 16, 4, 1, 3, 3, 5),
    ("soldier2", ClassType.SOLDIER, 16, 4, 1, 3, 3, 5),
    ("soldier3", ClassType.SOLDIER, 16, 4, 1, 3, 3, 5),
    ("spadaccino1", ClassType.SWORDSMAN, 16, 5, 2, 5, 3, 4),
    ("spadaccino2", ClassType.SWORDSMAN, 16, 5, 2, 5, 3, 4),
    ("spadaccino3", ClassType.SWORDSMAN, 16, 5, 2, 5, 3, 4),
    ("warrior1", ClassType.WARRIOR, 18, 6, 3, 2, 3, 3),
    ("warrior2", ClassType.WARRIOR, 18, 6, 3, 2, 3, 3),
    ("warrior3", ClassType.WARRIOR, 18, 6, 3, 2, 3, 3),
)


def ally_roster():
    """Build the player's starting units."""
    return [Unit(name, False, cls, *stats) for name, cls, *stats in _ALLIES]


def enemy_roster():
    """Build the opposing units; the boss comes first."""
    return [Unit(name, True, cls, *stats) for name, cls, *stats in _ENEMIES]