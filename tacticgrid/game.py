"""Game state, side panels and the main loop."""

import time
from dataclasses import dataclass, field
from typing import Optional

import pygame

from tacticgrid.map_builder import TILESET_PATH, draw_map, initialize_map, update_map
from tacticgrid.tile import Tile
from tacticgrid.unit import ally_roster, enemy_roster

WINDOW_WIDTH = 1400
WINDOW_HEIGHT = 840
TITLE = "TacticSFML"
FONT_PATH = "resources/font/16x16_font.ttf"
UI_PATH = "resources/Ui/Ui_assets.png"
TEXT_SIZE = 15
FRAMERATE = 60


@dataclass
class GameState:
    """Everything the main loop works on."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    title: str = TITLE
    menubar_attack_window_x: int = WINDOW_WIDTH - 200
    menubar_attack_y: int = WINDOW_HEIGHT - 200
    map: list = field(default_factory=list)
    selected_tile: Optional[Tile] = None
    allies: list = field(default_factory=ally_roster)
    enemies: list = field(default_factory=enemy_roster)
    tileset: Optional[pygame.Surface] = None
    font: Optional[pygame.font.Font] = None


def resized_view_size(width, height):
    """Return the view size for a resized window, or None to restore the default size.

    Windows smaller than the default, or with an aspect ratio outside (1.2, 2.4),
    are rejected.
    """
    if width < WINDOW_WIDTH or height < WINDOW_HEIGHT:
        return None
    aspect = width / height
    if aspect <= 1.2 or aspect >= 2.4:
        return None
    return (float(width), float(height))


def unit_stats_text(unit):
    """Return the three text blocks of the unit panel: header, stats, derived stats."""
    header = f"{unit.name}\n\nHP: {unit.hp}/{unit.max_hp}"
    stats = (
        f"\n\n\n\nStr:{unit.strength}\n\n\n"
        f"Defense:{unit.defense}\n\n\n"
        f"Speed:{unit.speed}\n\n\n"
        f"Skill:{unit.skill}\n\n\n"
        f"Luck:{unit.luck}"
    )
    derived = (
        f"\n\n\nDodge: {unit.get_dodge()}\n\n\n"
        f"Hit: {unit.get_hit()}\n\n\n"
        f"Attack: {unit.get_attack()}\n\n\n"
        f"Crit: {unit.get_crit()}"
    )
    return header, stats, derived


def _load_image(path):
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


def _load_font(path, size):
    try:
        return pygame.font.Font(path, size)
    except (pygame.error, OSError):
        return pygame.font.Font(None, size)


def _blit_region(surface, texture, src, scale, pos):
    if texture is None:
        return
    area = pygame.Rect(src).clip(texture.get_rect())
    if area.width == 0 or area.height == 0:
        return
    sx, sy = scale
    size = (max(1, round(area.width * sx)), max(1, round(area.height * sy)))
    surface.blit(pygame.transform.scale(texture.subsurface(area), size), (round(pos[0]), round(pos[1])))


def _draw_text(surface, font, text, pos):
    x, y = pos
    step = font.get_linesize()
    for line in text.split("\n"):
        if line:
            surface.blit(font.render(line, True, (255, 255, 255)), (round(x), round(y)))
        y += step


def _draw_curr_stats(gs, surface):
    tile = gs.selected_tile
    if tile is None or tile.unit_on is None or gs.font is None:
        return
    x = gs.menubar_attack_window_x + 26
    header, stats, derived = unit_stats_text(tile.unit_on)
    _draw_text(surface, gs.font, header, (x, 50))
    _draw_text(surface, gs.font, stats, (x, 100))
    _draw_text(surface, gs.font, derived, (x, 380))


def _draw_attack_window(gs, surface, ui):
    y = gs.menubar_attack_y
    _blit_region(surface, ui, (54, 6, 7, 36), (5, 5.6), (0, y))
    _blit_region(surface, ui, (61, 6, 22, 36), (51.36, 5.6), (35, y))
    _blit_region(surface, ui, (81, 6, 8, 36), (5, 5.6), (gs.menubar_attack_window_x - 39, y))


def _draw_curr_unit_window(gs, surface, ui):
    x = gs.menubar_attack_window_x
    _blit_region(surface, ui, (54, 6, 37, 8), (5.6, 5), (x, 0))
    _blit_region(surface, ui, (54, 13, 37, 20), (5.6, 40), (x, 30))
    _blit_region(surface, ui, (54, 33, 37, 9), (5.6, 5), (x, 797))


def _draw_frame(gs, surface, ui):
    surface.fill((0, 0, 0))
    _draw_curr_unit_window(gs, surface, ui)
    _draw_curr_stats(gs, surface)
    _draw_attack_window(gs, surface, ui)
    draw_map(gs, surface)


def main(argv=None):
    """Open the game window and run until it is closed."""
    pygame.init()
    try:
        flags = pygame.RESIZABLE
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), flags)
        pygame.display.set_caption(TITLE)

        gs = GameState()
        gs.font = _load_font(FONT_PATH, TEXT_SIZE)
        gs.tileset = _load_image(TILESET_PATH)
        ui = _load_image(UI_PATH)
        initialize_map(gs)
        gs.selected_tile = gs.map[0][1]

        world = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        view = (float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    new_view = resized_view_size(event.w, event.h)
                    if new_view is None:
                        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), flags)
                    else:
                        view = new_view
            if not running:
                break

            # The view stays centred on the battlefield; only its size follows the window.
            left = WINDOW_WIDTH / 2 - view[0] / 2
            top = WINDOW_HEIGHT / 2 - view[1] / 2
            mx, my = pygame.mouse.get_pos()
            mouse_down = pygame.mouse.get_pressed()[0]
            update_map(gs, (mx + left, my + top), mouse_down, time.monotonic())

            _draw_frame(gs, world, ui)
            screen.fill((0, 0, 0))
            screen.blit(world, (round(-left), round(-top)))
            pygame.display.flip()
            clock.tick(FRAMERATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())