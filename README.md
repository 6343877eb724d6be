# tacticgrid

A small grid-based tactics battlefield built on pygame. A 30 × 16 map of
grass, water and mountain tiles is laid out on screen, with allied units
and enemies (a boss among them) placed on it. Units cycle through
animated sprite frames, and tiles show an outline that changes when the
mouse hovers over them or presses on them. Pressing on a tile prints
`Tile clicked at (row, column)` to standard output.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
tacticgrid
```

The game looks for a `resources` directory in the working directory
holding the tile set (`resources/Tiles/FullTileset.png`), the unit sprite
sheets (`resources/Units/0/...` for allies, `resources/Units/1/...` for
enemies), the interface artwork (`resources/Ui/Ui_assets.png`) and the
font (`resources/font/16x16_font.ttf`). Images that cannot be loaded are
simply not drawn; a missing font is replaced by pygame's default font.

The window opens at 1400 × 840. It can be enlarged, which widens the
view around the battlefield, but it snaps back to 1400 × 840 when made
smaller than that or when its aspect ratio is 1.2 or less, or 2.4 or
more. The loop runs at up to 60 frames per second until the window is
closed.

## Using the pieces

The game logic can be used without opening a window:

```python
from tacticgrid.unit import ally_roster

ike = ally_roster()[0]
print(ike.name, ike.get_attack(), ike.get_hit(), ike.get_dodge(), ike.get_crit())
```

- `tacticgrid.weapon`: `Weapon` (range, damage, hit, critical, type) and
  `WeaponType` (`SWORD`, `AXE`, `LANCE`).
- `tacticgrid.unit`: `Unit`, `ClassType` (`SWORDSMAN`, `WARRIOR`,
  `SOLDIER`), `default_weapon(unit_class)`, and the starting rosters from
  `ally_roster()` and `enemy_roster()` (the boss first). Derived values:
  attack is strength plus weapon damage; dodge is speed plus twice luck;
  hit is weapon hit plus twice skill plus luck; crit is weapon critical
  plus half skill, rounded down.
- `tacticgrid.animated_sprite`: `AnimatedSprite`, a four-frame sprite
  sheet animation that advances one frame every 0.3 seconds.
- `tacticgrid.anim_state`: `texture_path(is_enemy, unit_class)` and the
  animation states `IdleState`, `MoveState`, `AttackState`, `DeathState`,
  which select sprite-sheet rows 0 to 3.
- `tacticgrid.button` and `tacticgrid.tile`: `ButtonState`, `Button`
  (`update(mouse_pos, mouse_down)`, `is_hover()`, `is_pressed()`,
  `set_click_function(func)`, `draw(surface)`) and `Tile`, which adds the
  terrain name, whether it is walkable, and the unit standing on it.
- `tacticgrid.map_builder`: the fixed layout from `map_generator()`,
  `tile_texture_offset(tile_type, rng)`, `initialize_map(gs, rng)`,
  `update_map(gs, mouse_pos, mouse_down, now)` and `draw_map(gs, surface)`.
- `tacticgrid.game`: `GameState`, `resized_view_size(width, height)`,
  `unit_stats_text(unit)` and the `main` entry point.

## What it does not do

This is a battlefield display, not yet a playable game. There are no
turns, no unit movement, no attacks or combat resolution, and no win or
loss. Clicking a tile does not select it: the selected tile is fixed at
row 0, column 1, which holds no unit, so the unit panel stays empty while
playing. `unit_stats_text` can still be called on any unit to get the
panel's text. Nothing is saved between runs.