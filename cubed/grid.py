"""Tile grid of a scene: reading, sizing and validating the map section."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from itertools import dropwhile, takewhile

from .errors import ParseError, ParseErrorCode


class Tile(IntEnum):
    """Contents of one map cell."""

    INVALID = -1
    VOID = 0
    FLOOR = 1
    WALL = 2
    NORTH = 3
    SOUTH = 4
    EAST = 5
    WEST = 6


_CHAR_TILES = {
    " ": Tile.VOID,
    "0": Tile.FLOOR,
    "1": Tile.WALL,
    "N": Tile.NORTH,
    "S": Tile.SOUTH,
    "E": Tile.EAST,
    "W": Tile.WEST,
}
_MAP_CHARS = frozenset("01NSEW")
_SPAWNS = frozenset({Tile.NORTH, Tile.SOUTH, Tile.EAST, Tile.WEST})


def is_map_line(line: str) -> bool:
    """True when the first non-space character of ``line`` is a wall."""
    return line.lstrip(" ").startswith("1")


def _map_lines(lines: Iterable[str]) -> list[str]:
    """The first contiguous run of map lines."""
    return list(takewhile(is_map_line, dropwhile(lambda line: not is_map_line(line), lines)))


def _line_width(line: str) -> int:
    """Index just past the last run of map characters in ``line``."""
    width = 0
    in_map = False
    for index, char in enumerate(f"{line}\n"):
        is_map = char in _MAP_CHARS
        if in_map and not is_map:
            width = index
        in_map = is_map
    return width


def map_size(lines: Iterable[str]) -> tuple[int, int]:
    """Width and height of the map section found in ``lines``."""
    rows = _map_lines(lines)
    return max((_line_width(row) for row in rows), default=0), len(rows)


def _parse_row(line: str, width: int) -> list[Tile]:
    content = line.split("\n", 1)[0][:width]
    tiles = [_CHAR_TILES.get(char, Tile.INVALID) for char in content]
    tiles.extend([Tile.VOID] * (width - len(tiles)))
    return tiles


def read_grid(lines: Iterable[str]) -> Grid:
    """Build a grid from the map section of a scene's lines."""
    rows = _map_lines(lines)
    width = max((_line_width(row) for row in rows), default=0)
    return Grid(width, len(rows), [_parse_row(row, width) for row in rows])


@dataclass
class Grid:
    """Rectangular map of tiles, addressed as ``grid[x, y]``."""

    width: int
    height: int
    cells: list[list[Tile]]

    def __post_init__(self) -> None:
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError(f"cells do not form a {self.width}x{self.height} grid")

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid")

    def __getitem__(self, pos: tuple[int, int]) -> Tile:
        x, y = pos
        self._check(x, y)
        return self.cells[y][x]

    def __setitem__(self, pos: tuple[int, int], value: Tile | int) -> None:
        x, y = pos
        self._check(x, y)
        self.cells[y][x] = Tile(value)

    def spawn_count(self) -> int:
        """Number of player starting points on the map."""
        return sum(tile in _SPAWNS for row in self.cells for tile in row)

    def _enclosed(self, x: int, y: int) -> bool:
        if x <= 0 or y <= 0 or x >= self.width - 1 or y >= self.height - 1:
            return False
        neighbours = (
            self.cells[y - 1][x],
            self.cells[y + 1][x],
            self.cells[y][x - 1],
            self.cells[y][x + 1],
        )
        return Tile.VOID not in neighbours

    def _has_holes(self) -> bool:
        return any(
            (tile == Tile.FLOOR or tile in _SPAWNS) and not self._enclosed(x, y)
            for y, row in enumerate(self.cells)
            for x, tile in enumerate(row)
        )

    def validate(self) -> None:
        """Raise ParseError unless the map is well formed and closed."""
        if any(Tile.INVALID in row for row in self.cells):
            raise ParseError(ParseErrorCode.INVALID_MAP_CHARS)
        count = self.spawn_count()
        if count == 0:
            raise ParseError(ParseErrorCode.NO_START)
        if count > 1:
            raise ParseError(ParseErrorCode.MULTIPLE_STARTS)
        if self._has_holes():
            raise ParseError(ParseErrorCode.MAP_NOT_ENCLOSED)

    def dump(self) -> str:
        """Text rendering with one digit per tile and one line per row."""
        return "".join(
            "".join(chr(ord("0") + tile) for tile in row) + "\n" for row in self.cells
        )