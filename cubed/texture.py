"""Wall textures loaded from image files."""

from __future__ import annotations

import os
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .scene import Scene


@dataclass(frozen=True, eq=False)
class Texture:
    """Row-major 0xRRGGBB pixels, addressed linearly as ``x + y * width``."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 2 or 0 in self.pixels.shape:
            raise ValueError("texture pixels must form a non-empty 2D array")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        """Colour stored at linear position ``x + y * width``."""
        flat = self.pixels.reshape(-1)
        index = x + y * self.width
        if not 0 <= index < flat.size:
            raise IndexError(f"pixel ({x}, {y}) is outside the texture")
        return int(flat[index])


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures of a scene."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file as a texture; raise OSError if it cannot be read."""
    try:
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except OSError as exc:
        raise OSError(f"cannot load texture {os.fspath(path)!r}") from exc
    pixels = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return Texture(np.ascontiguousarray(pixels, dtype=np.uint32))


def load_textures(scene: Scene) -> TextureSet:
    """Load the four wall textures named by ``scene``."""
    paths = {
        "north": scene.north,
        "south": scene.south,
        "west": scene.west,
        "east": scene.east,
    }
    loaded = {}
    for side, path in paths.items():
        if path is None:
            raise OSError(f"texture path for {side} wall is not set")
        loaded[side] = load_texture(path)
    return TextureSet(**loaded)