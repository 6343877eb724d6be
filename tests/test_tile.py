import pytest

from tacticgrid.button import Button
from tacticgrid.tile import Tile


@pytest.fixture(autouse=True)
def _release_mouse():
    Button((0, 0), (1, 1)).update((-100, -100), False)
    yield
    Button((0, 0), (1, 1)).update((-100, -100), False)


def test_tile_keeps_terrain_and_occupant():
    occupant = object()
    tile = Tile("water", False, occupant, (40.0, 80.0), (40.0, 40.0))
    assert tile.tile_name == "water"
    assert tile.walkable is False
    assert tile.unit_on is occupant
    assert tile.position == (40.0, 80.0)


def test_path_fields_default():
    tile = Tile("grass", True, None, (0, 0), (40, 40))
    assert tile.g == 0
    assert tile.passable is True
    assert tile.parent is None
    assert tile.neighbours == []


def test_neighbour_lists_are_independent():
    a = Tile("grass", True, None, (0, 0), (40, 40))
    b = Tile("grass", True, None, (40, 0), (40, 40))
    a.neighbours.append(b)
    assert b.neighbours == []


def test_tile_reacts_like_button():
    clicked = []
    tile = Tile("mountain", False, None, (0, 0), (40, 40))
    tile.set_click_function(lambda: clicked.append(tile.tile_name))
    tile.update((5, 5), True)
    assert tile.is_pressed()
    assert clicked == ["mountain"]