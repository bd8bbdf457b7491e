from enum import Enum


class Direction(Enum):
    """Compass heading; the value is the (dx, dy) offset of one step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return _OPPOSITE[self]

    def step(self, cell):
        """Return the cell one step away from `cell` in this direction."""
        x, y = cell
        return (x + self.dx, y + self.dy)


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction):
    return direction.opposite
