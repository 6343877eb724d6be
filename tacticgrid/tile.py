"""Map tiles: buttons that know their terrain and occupant."""

from tacticgrid.button import Button


class Tile(Button):
    """A square of terrain, possibly holding a unit."""

    def __init__(self, tile_name, walkable, unit_on, pos, size, sprite=None):
        super().__init__(pos, size, sprite)
        self.tile_name = tile_name
        self.walkable = walkable
        self.unit_on = unit_on
        # Path-finding bookkeeping.
        self.g = 0
        self.passable = True
        self.parent = None
        self.neighbours = []