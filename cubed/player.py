"""Player state, keyboard input and collision-aware movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .grid import Grid, Tile

TILE_SIZE = 64
PLAYER_SPEED = 9.0
TURN_SPEED = 6.0 / 100.0
SLIDE_DISTANCE = 0.1
PLANE_LENGTH = 0.75
_STEP = 0.02
_SLIDE = SLIDE_DISTANCE * TILE_SIZE

_SPAWN_ANGLES = {
    Tile.NORTH: math.pi / 2.0,
    Tile.SOUTH: 3.0 * (math.pi / 2.0),
    Tile.EAST: 0.0,
    Tile.WEST: math.pi,
}


class Key(IntEnum):
    """Keys the game reacts to, by X11 keysym."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    RIGHT = 0xFF53
    A = 0x61
    D = 0x64
    S = 0x73
    W = 0x77


@dataclass
class Player:
    """Position in map units, view angle in radians and held keys."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    fov: float = 60.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    pressed: set[Key] = field(default_factory=set)

    def update_plane_vector(self) -> None:
        """Recompute the camera plane, perpendicular to the view direction."""
        plane_angle = self.angle + math.pi / 2.0
        self.plane_x = math.cos(plane_angle) * PLANE_LENGTH
        self.plane_y = math.sin(plane_angle) * PLANE_LENGTH

    def update(self, grid: Grid) -> None:
        """Apply one tick of turning and movement for the held keys."""
        if Key.RIGHT in self.pressed:
            self.angle -= TURN_SPEED
        if Key.LEFT in self.pressed:
            self.angle += TURN_SPEED
        self.update_plane_vector()
        sin_a, cos_a = math.sin(self.angle), math.cos(self.angle)
        moves = (
            (Key.A, -sin_a, -cos_a),
            (Key.D, sin_a, cos_a),
            (Key.W, cos_a, -sin_a),
            (Key.S, -cos_a, sin_a),
        )
        for key, dx, dy in moves:
            if key in self.pressed:
                self.move(grid, PLAYER_SPEED * dx, PLAYER_SPEED * dy)

    def move(self, grid: Grid, x_add: float, y_add: float) -> None:
        """Move by small steps, stopping each axis short of walls."""
        x_sign = -1.0 if x_add < 0 else 1.0
        y_sign = -1.0 if y_add < 0 else 1.0
        x_left, y_left = abs(x_add), abs(y_add)
        while x_left > 0 or y_left > 0:
            if x_left > 0:
                self.x += self._max_x_move(grid, x_sign * min(_STEP, x_left))
            if y_left > 0:
                self.y += self._max_y_move(grid, y_sign * min(_STEP, y_left))
            x_left -= _STEP
            y_left -= _STEP

    def _max_x_move(self, grid: Grid, x_want: float) -> float:
        reach = x_want - _SLIDE if x_want < 0 else x_want + _SLIDE
        column = int(int(self.x + reach) / TILE_SIZE)
        centre = self.y / TILE_SIZE
        rows = (int(centre), int(centre + SLIDE_DISTANCE), int(centre - SLIDE_DISTANCE))
        if any(grid[column, row] == Tile.WALL for row in rows):
            return 0.0
        return x_want

    def _max_y_move(self, grid: Grid, y_want: float) -> float:
        reach = y_want - _SLIDE if y_want < 0 else y_want + _SLIDE
        row = int(int(self.y + reach) / TILE_SIZE)
        centre = self.x / TILE_SIZE
        columns = (int(centre), int(centre + SLIDE_DISTANCE), int(centre - SLIDE_DISTANCE))
        if any(grid[column, row] == Tile.WALL for column in columns):
            return 0.0
        return y_want

    def key_down(self, key: int) -> bool:
        """Record a pressed key; True when the key asks to quit."""
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESCAPE:
            return True
        self.pressed.add(key)
        return False

    def key_up(self, key: int) -> None:
        """Forget a released key."""
        try:
            self.pressed.discard(Key(key))
        except ValueError:
            pass


def spawn_player(grid: Grid) -> Player:
    """Place a player on the grid's starting point, turning it into floor."""
    player = None
    for y, row in enumerate(grid.cells):
        for x, tile in enumerate(row):
            if tile in _SPAWN_ANGLES:
                player = Player(
                    x=x * TILE_SIZE + TILE_SIZE / 2,
                    y=y * TILE_SIZE + TILE_SIZE / 2,
                    angle=_SPAWN_ANGLES[tile],
                )
                player.update_plane_vector()
                grid[x, y] = Tile.FLOOR
    if player is None:
        raise ValueError("grid has no starting point")
    return player