"""An in-memory picture the game draws into."""

from __future__ import annotations

import numpy as np

from .grid import Grid, Tile
from .player import TILE_SIZE, Player

WINDOW_WIDTH = 1400
WINDOW_HEIGHT = 900

MINIMAP_SCALE = 6
MINIMAP_FLOOR_COLOR = 0x444444
MINIMAP_WALL_COLOR = 0x8C8C8C
MINIMAP_PLAYER_COLOR = 0xFFC800

_COLOR_MASK = 0xFFFFFFFF
_MINIMAP_TILE_COLORS = {
    Tile.FLOOR: MINIMAP_FLOOR_COLOR,
    Tile.WALL: MINIMAP_WALL_COLOR,
}


class Frame:
    """Row-major 32-bit pixels, addressed linearly as ``x + y * width``."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)
        self._flat = self.pixels.reshape(-1)

    def _index(self, x: int, y: int) -> int:
        index = x + y * self.width
        if not 0 <= index < self._flat.size:
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return index

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels.fill(0)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write one pixel."""
        self._flat[self._index(x, y)] = color & _COLOR_MASK

    def pixel(self, x: int, y: int) -> int:
        """Read one pixel."""
        return int(self._flat[self._index(x, y)])

    def _fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        if x1 <= x0 or y1 <= y0:
            return
        if 0 <= x0 and x1 <= self.width and 0 <= y0 and y1 <= self.height:
            self.pixels[y0:y1, x0:x1] = color & _COLOR_MASK
            return
        for y in range(y0, y1):
            for x in range(x0, x1):
                self.put_pixel(x, y, color)

    def _line_right(self, start: tuple[int, int], end: tuple[int, int], color: int) -> None:
        (x, y), (x_end, y_end) = start, end
        step_y = 1 if y_end - y >= 0 else -1
        run = abs(x_end - x)
        increment = 2 * abs(y_end - y)
        fraction = increment - run
        self.put_pixel(x, y, color)
        while x < x_end:
            fraction += increment
            if fraction >= 0:
                y += step_y
                fraction -= 2 * run
            x += 1
            self.put_pixel(x, y, color)

    def _line_down(self, start: tuple[int, int], end: tuple[int, int], color: int) -> None:
        (x, y), (x_end, y_end) = start, end
        step_x = 1 if x_end - x >= 0 else -1
        run = abs(y_end - y)
        increment = 2 * abs(x_end - x)
        fraction = increment - run
        self.put_pixel(x, y, color)
        while y < y_end:
            fraction += increment
            if fraction >= 0:
                x += step_x
                fraction -= 2 * run
            y += 1
            self.put_pixel(x, y, color)

    def draw_line(self, p1: tuple[int, int], p2: tuple[int, int], color: int) -> None:
        """Draw a straight line between two points, both included."""
        dx = p2[0] - p1[0]
        dy = p2[1] - p1[1]
        if abs(dx) >= abs(dy):
            self._line_right(*((p1, p2) if dx >= 0 else (p2, p1)), color)
        else:
            self._line_down(*((p1, p2) if dy >= 0 else (p2, p1)), color)

    def draw_background(self, ceiling: int, floor: int) -> None:
        """Fill the upper half with the ceiling colour and the lower with the floor."""
        half = self.height // 2
        self.pixels[:half] = ceiling & _COLOR_MASK
        # The row at the horizon is left as it was.
        self.pixels[half + 1 :] = floor & _COLOR_MASK

    def draw_minimap(self, grid: Grid, player: Player) -> None:
        """Draw the map's floors and walls and the player in the top-left corner."""
        scale = MINIMAP_SCALE
        for y, row in enumerate(grid.cells):
            for x, tile in enumerate(row):
                color = _MINIMAP_TILE_COLORS.get(tile)
                if color is not None:
                    self._fill_rect(x * scale, y * scale, x * scale + scale, y * scale + scale, color)
        centre_x = player.x / TILE_SIZE * scale
        centre_y = player.y / TILE_SIZE * scale
        third = scale // 3
        self._fill_rect(
            int(centre_x - third),
            int(centre_y - third),
            int(centre_x + third),
            int(centre_y + third),
            MINIMAP_PLAYER_COLOR,
        )