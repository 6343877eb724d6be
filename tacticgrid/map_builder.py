"""Battlefield layout: building, drawing and updating the tile grid."""

import random

import pygame

from tacticgrid.tile import Tile

TILESET_PATH = "resources/Tiles/FullTileset.png"
TILE_SIZE = 40.0
TEXTURE_TILE_SIZE = (16, 16)
TILE_SCALE = (2.48, 2.48)

BOSS = -2
ENEMY = -1
ALLY = 0
GRASS = 1
WATER = 2
MOUNTAIN = 3

# Row of the tileset each terrain's variants are taken from.
_TERRAIN_ROWS = {"grass": 32, "water": 0, "mountain": 208}


def map_generator():
    """Return the battlefield layout as rows of cell codes."""
    return [
        [0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 0, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, -1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 2, 2, 2, 1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, -1, -2, 1, 1],
        [1, 0, 0, 1, 2, 2, 2, 1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 2, 2, 2, 1, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 2, 2, 1, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, -1, -1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 2, 1, -1, 1, 1, 1, 1, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, -1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, -1, 1, 1, 1, 1, 1, 1, -1, 2, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1],
        [1, 1, 0, 1, 1, 1, 1, 1, 1, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1],
        [1, 1, 0, 1, 1, 1, 1, 1, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, -1, 1],
        [1, 1, 1, 1, 1, 1, 1, 3, 3, 3, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    ]


def tile_texture_offset(tile_type, rng=None):
    """Pick a random variant of a terrain and return its tileset offset."""
    try:
        row = _TERRAIN_ROWS[tile_type]
    except KeyError:
        raise ValueError("tile name not valid") from None
    if rng is None:
        rng = random.Random()
    return (rng.randint(0, 3) * TEXTURE_TILE_SIZE[0], row)


class _TileSprite:
    """A scaled square cut from the tileset."""

    def __init__(self, texture, offset, position):
        self.texture = texture
        self.texture_rect = pygame.Rect(offset, TEXTURE_TILE_SIZE)
        self.scale = TILE_SCALE
        self.position = (position[0] + 0.5, position[1] + 0.5)

    def draw(self, surface):
        if self.texture is None:
            return
        area = self.texture_rect.clip(self.texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        sx, sy = self.scale
        size = (max(1, round(area.width * sx)), max(1, round(area.height * sy)))
        scaled = pygame.transform.scale(self.texture.subsurface(area), size)
        x, y = self.position
        surface.blit(scaled, (round(x), round(y)))


def _take(units, kind):
    unit = next(units, None)
    if unit is None:
        raise IndexError(f"not enough {kind} units for the map")
    return unit


def _click_reporter(i, j):
    def report():
        print(f"Tile clicked at ({i}, {j})")

    return report


def initialize_map(gs, rng=None):
    """Fill ``gs.map`` with tiles and place the units from the rosters."""
    if rng is None:
        rng = random.Random()
    allies = iter(gs.allies)
    enemies = iter(gs.enemies[1:])
    tileset = getattr(gs, "tileset", None)

    for i, codes in enumerate(map_generator()):
        y = i * TILE_SIZE
        row = []
        for j, code in enumerate(codes):
            x = j * TILE_SIZE
            unit = None
            walkable = True
            tile_name = "grass"

            if code == BOSS:
                if not gs.enemies:
                    raise IndexError("not enough enemy units for the map")
                unit = gs.enemies[0]
                unit.set_sprite_pos((int(x), int(y)))
                unit.an_sprite.scale = (3.0, 3.0)
                unit.an_sprite.move((-16, -21))
            elif code == ENEMY:
                unit = _take(enemies, "enemy")
                unit.set_sprite_pos((int(x), int(y)))
            elif code == ALLY:
                unit = _take(allies, "ally")
                unit.set_sprite_pos((int(x), int(y)))
            elif code == WATER:
                tile_name = "water"
                walkable = False
            elif code == MOUNTAIN:
                tile_name = "mountain"
                walkable = False

            sprite = _TileSprite(tileset, tile_texture_offset(tile_name, rng), (x, y))
            tile = Tile(tile_name, walkable, unit, (x, y), (TILE_SIZE, TILE_SIZE), sprite)
            tile.set_click_function(_click_reporter(i, j))
            row.append(tile)
        gs.map.append(row)


def draw_map(gs, surface):
    """Draw every tile, then the allies, then the enemies."""
    for row in gs.map:
        for tile in row:
            tile.draw(surface)
    for unit in gs.allies:
        unit.draw(surface)
    for unit in gs.enemies:
        unit.draw(surface)


def update_map(gs, mouse_pos, mouse_down, now=None):
    """Feed the mouse to every tile and advance unit animations."""
    for row in gs.map:
        for tile in row:
            tile.update(mouse_pos, mouse_down)
    for unit in gs.allies:
        unit.update(now)
    for unit in gs.enemies:
        unit.update(now)