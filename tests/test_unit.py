import time

import pytest

from tacticgrid.anim_state import IdleState
from tacticgrid.unit import ClassType, Unit, ally_roster, default_weapon, enemy_roster
from tacticgrid.weapon import Weapon, WeaponType


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def ike():
    return Unit("Ike", False, ClassType.SWORDSMAN, 20, 5, 5, 5, 5, 5)


def test_default_weapons():
    assert default_weapon(ClassType.SWORDSMAN) == Weapon(1, 7, 80, 10, WeaponType.SWORD)
    assert default_weapon(ClassType.WARRIOR) == Weapon(1, 8, 70, 8, WeaponType.AXE)
    assert default_weapon(ClassType.SOLDIER) == Weapon(1, 6, 100, 5, WeaponType.LANCE)


def test_default_weapon_rejects_unknown_class():
    with pytest.raises(ValueError):
        default_weapon(5)


def test_starts_at_full_health_and_idle(ike):
    assert ike.hp == ike.max_hp == 20
    assert isinstance(ike.anim_state, IdleState)
    assert ike.equipped_weapon == default_weapon(ClassType.SWORDSMAN)


def test_derived_stats_with_weapon(ike):
    assert ike.get_attack() == 12
    assert ike.get_hit() == 95
    assert ike.get_crit() == 12


def test_derived_stats_without_weapon(ike):
    ike.equipped_weapon = None
    assert ike.get_attack() == ike.strength
    assert ike.get_hit() == ike.skill
    assert ike.get_crit() == ike.skill


def test_dodge_equals_speed_without_luck():
    unit = Unit("Test", True, ClassType.SOLDIER, 10, 1, 1, 7, 1, 0)
    assert unit.get_dodge() == 7


def test_ally_roster_names():
    allies = ally_roster()
    assert [u.name for u in allies] == ["Ike", "Mia", "Oscar", "Boyd", "Rhys", "Soren"]
    assert not any(u.is_enemy for u in allies)


def test_enemy_roster_names():
    enemies = enemy_roster()
    assert [u.name for u in enemies] == [
        "Boss", "soldier1", "soldier2", "soldier3",
        "spadaccino1", "spadaccino2", "spadaccino3",
        "warrior1", "warrior2", "warrior3",
    ]
    assert all(u.is_enemy for u in enemies)


def test_rosters_are_fresh():
    first = ally_roster()
    first[0].hp = 1
    again = ally_roster()
    assert again[0].hp == again[0].max_hp


def test_set_sprite_pos_moves_sprite(ike):
    before = ike.an_sprite.position
    ike.set_sprite_pos((40, 120))
    assert ike.an_sprite.position == (before[0] + 40, before[1] + 120)


def test_update_advances_animation(ike):
    ike.update(time.monotonic() + 1.0)
    assert ike.an_sprite.frame == 1


def test_set_sprite_replaces_sprite(ike):
    ike.set_sprite_pos((40, 40))
    ike.set_sprite(None)
    assert ike.an_sprite.frame == 0
    assert ike.an_sprite.texture is None