"""Drawing textured wall columns from cast rays."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .frame import Frame
from .player import TILE_SIZE, Player
from .raycast import Ray
from .texture import Texture, TextureSet


def ray_texture(textures: TextureSet, ray: Ray) -> Texture:
    """Texture of the wall face the ray hit."""
    if ray.hit_horizontal:
        return textures.south if ray.y_step > 0.0 else textures.north
    return textures.east if ray.x_step > 0.0 else textures.west


def _c_remainder(value: int, divisor: int) -> int:
    """Remainder carrying the sign of ``value``, as truncating division gives."""
    remainder = abs(value) % divisor
    return remainder if value >= 0 else -remainder


def ray_hit_position(ray: Ray, width: int) -> int:
    """Texture column for where the ray met the wall."""
    if ray.hit_horizontal:
        column = _c_remainder(int(ray.x / TILE_SIZE * width), width)
        return width - column - 1 if ray.y_step > 0.0 else column
    column = _c_remainder(int(ray.y / TILE_SIZE * width), width)
    return column if ray.x_step > 0.0 else width - column - 1


def draw_column(frame: Frame, textures: TextureSet, player: Player, ray: Ray, column: int) -> None:
    """Draw the wall slice seen by ``ray`` into screen column ``column``."""
    if not 0 <= column < frame.width:
        raise IndexError(f"column {column} is outside the frame")
    view_distance = math.cos(player.angle - ray.angle) * (
        math.cos(ray.angle) * (ray.x - player.x) - math.sin(ray.angle) * (ray.y - player.y)
    )
    if view_distance == 0:
        return
    height = frame.height
    ratio = TILE_SIZE * height / view_distance
    if not math.isfinite(ratio):
        return
    line_height = int(ratio)
    if line_height <= 0:
        return
    offset = 0
    if line_height > height:
        offset = (line_height - height) // 2
        line_height = height
    top = height - (height // 2 - line_height // 2) - line_height

    texture = ray_texture(textures, ray)
    texture_x = ray_hit_position(ray, texture.width)
    rows = np.arange(line_height, dtype=np.float64) + float(offset)
    texture_y = (rows / (line_height + 2.0 * float(offset)) * texture.height).astype(np.int64)
    flat = texture.pixels.reshape(-1)
    index = np.clip(texture_x + texture_y * texture.width, 0, flat.size - 1)
    frame.pixels[top : top + line_height, column] = flat[index]


def draw_rays(frame: Frame, textures: TextureSet, player: Player, rays: Sequence[Ray]) -> None:
    """Draw every ray, the last one in the leftmost column."""
    for column, ray in enumerate(reversed(rays)):
        draw_column(frame, textures, player, ray, column)