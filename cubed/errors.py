"""Errors raised while reading a scene description."""

from __future__ import annotations

from enum import IntEnum


class ParseErrorCode(IntEnum):
    """Reasons a scene file can be rejected."""

    CANNOT_OPEN = 1
    NOT_CUB_FILE = 2
    INVALID_DATA_LINE = 3
    MISSING_DATA = 4
    DUPLICATE_DATA = 5
    TRAILING_CHARACTERS = 6
    WRONG_COLOR_FORMAT = 7
    TRAILING_MAP_DATA = 8
    INVALID_MAP_CHARS = 9
    MAP_NOT_ENCLOSED = 10
    NO_START = 11
    MULTIPLE_STARTS = 12

    def message(self) -> str:
        """Human readable description of the error."""
        return _MESSAGES[self]


_MESSAGES = {
    ParseErrorCode.CANNOT_OPEN: "Can't open file.",
    ParseErrorCode.NOT_CUB_FILE: "File is not a .cub file. (usage: cubed <map>.cub)",
    ParseErrorCode.INVALID_DATA_LINE: "Invalid data line.",
    ParseErrorCode.MISSING_DATA: "Missing data line.",
    ParseErrorCode.DUPLICATE_DATA: "Duplicate data line.",
    ParseErrorCode.TRAILING_CHARACTERS: "Trailing characters after data line.",
    ParseErrorCode.WRONG_COLOR_FORMAT: "Wrong color format.",
    ParseErrorCode.TRAILING_MAP_DATA: "Trailing data after map end.",
    ParseErrorCode.INVALID_MAP_CHARS: "Invalid characters in map.",
    ParseErrorCode.MAP_NOT_ENCLOSED: "Map is not enclosed by walls.",
    ParseErrorCode.NO_START: "Map has no starting point.",
    ParseErrorCode.MULTIPLE_STARTS: "Map has more than one starting point.",
}


class ParseError(Exception):
    """A scene file could not be accepted; ``code`` tells why."""

    def __init__(self, code: ParseErrorCode | int) -> None:
        self.code = ParseErrorCode(code)
        super().__init__(self.code.message())