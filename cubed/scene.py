"""Reading a scene description: textures, colours and the map."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import ParseError, ParseErrorCode
from .grid import Grid, is_map_line, read_grid

_TEXTURE_FIELDS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_FIELDS = {"F": "floor", "C": "ceiling"}


@dataclass
class Scene:
    """Everything a scene file describes."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: int | None = None
    ceiling: int | None = None
    grid: Grid | None = None

    def missing_data(self) -> bool:
        """True while any texture path or colour is still unset."""
        return any(
            value is None
            for value in (self.north, self.south, self.west, self.east, self.ceiling, self.floor)
        )


def has_cub_extension(filename: str) -> bool:
    """True when ``filename`` ends in ``.cub``."""
    return filename.endswith(".cub")


def is_texture_line(line: str) -> bool:
    """True for lines introducing a wall texture path."""
    return line[:3] in ("NO ", "SO ", "WE ", "EA ")


def is_color_line(line: str) -> bool:
    """True for lines introducing a floor or ceiling colour."""
    return line[:2] in ("F ", "C ")


def _is_channel(part: str) -> bool:
    if not all("0" <= char <= "9" for char in part):
        return False
    return 0 <= (int(part) if part else 0) <= 255


def is_color_valid(parts: Sequence[str]) -> bool:
    """True when every part is a decimal number from 0 to 255."""
    return all(_is_channel(part) for part in parts)


def _trim(line: str) -> str:
    return line.strip(" \n")


def _is_blank(line: str) -> bool:
    return all(char in " \n" for char in line)


def _is_data_line_ok(line: str) -> bool:
    trimmed = _trim(line)
    return not trimmed or is_texture_line(trimmed) or is_color_line(line)


def check_format(lines: Iterable[str]) -> None:
    """Raise ParseError if lines appear where they do not belong."""
    map_started = False
    map_ended = False
    for line in lines:
        if not map_started:
            map_started = is_map_line(line)
        if not map_started and not _is_data_line_ok(line):
            raise ParseError(ParseErrorCode.INVALID_DATA_LINE)
        if map_started and not is_map_line(line):
            map_ended = True
        if map_ended and not _is_blank(line):
            raise ParseError(ParseErrorCode.TRAILING_MAP_DATA)


def _is_duplicate(scene: Scene, line: str) -> bool:
    texture = _TEXTURE_FIELDS.get(line[:3].rstrip(" ")) if line[2:3] == " " else None
    if texture is not None and getattr(scene, texture) is not None:
        return True
    color = _COLOR_FIELDS.get(line[:1]) if line[1:2] == " " else None
    return color is not None and getattr(scene, color) is not None


def _parse_color(text: str) -> int:
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3 or not is_color_valid(parts):
        raise ParseError(ParseErrorCode.WRONG_COLOR_FORMAT)
    red, green, blue = (int(part) for part in parts)
    return (red << 16) + (green << 8) + blue


def _fill_from_line(scene: Scene, line: str) -> None:
    if _is_duplicate(scene, line):
        raise ParseError(ParseErrorCode.DUPLICATE_DATA)
    words = [word for word in line.split(" ") if word]
    if len(words) < 2:
        return
    if is_texture_line(line):
        setattr(scene, _TEXTURE_FIELDS[line[:2]], words[1])
        if len(words) > 2:
            raise ParseError(ParseErrorCode.TRAILING_CHARACTERS)
    if is_color_line(line):
        setattr(scene, _COLOR_FIELDS[line[0]], _parse_color(words[1]))
        if len(words) > 2:
            raise ParseError(ParseErrorCode.TRAILING_CHARACTERS)


def read_scene_data(lines: Iterable[str]) -> Scene:
    """Collect texture paths and colours; the grid is left unset."""
    scene = Scene()
    for line in lines:
        _fill_from_line(scene, _trim(line))
    if scene.missing_data():
        raise ParseError(ParseErrorCode.MISSING_DATA)
    return scene


def parse_lines(lines: Iterable[str]) -> Scene:
    """Parse and validate a whole scene given as lines."""
    lines = list(lines)
    check_format(lines)
    scene = read_scene_data(lines)
    grid = read_grid(lines)
    grid.validate()
    scene.grid = grid
    return scene


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [f"{part}\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def parse_file(path: str | os.PathLike[str]) -> Scene:
    """Read, parse and validate the scene file at ``path``."""
    name = os.fspath(path)
    if not has_cub_extension(name):
        raise ParseError(ParseErrorCode.NOT_CUB_FILE)
    try:
        text = Path(name).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ParseError(ParseErrorCode.CANNOT_OPEN) from exc
    return parse_lines(_split_lines(text))