"""Casting rays from the player against the grid's walls."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .frame import WINDOW_WIDTH
from .grid import Grid, Tile
from .player import TILE_SIZE, Player

_EPSILON = 0.00001
_EDGE = 0.001


@dataclass
class Ray:
    """One ray: its angle, where it stopped and how it stepped."""

    angle: float
    x: float = 0.0
    y: float = 0.0
    x_step: float = 0.0
    y_step: float = 0.0
    map_x: int = 0
    map_y: int = 0
    hit_horizontal: bool = False


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(bx - ax, by - ay)


def ray_angle(player: Player, window_x: int) -> float:
    """Angle of the ray drawn at screen column ``window_x``."""
    camera_x = 2 * window_x / WINDOW_WIDTH - 1
    ray_x = math.cos(player.angle) + player.plane_x * camera_x
    ray_y = math.sin(player.angle) + player.plane_y * camera_x
    return math.atan2(ray_y, ray_x)


def _cell_origin(value: float) -> int:
    return int(value) // TILE_SIZE * TILE_SIZE


def _inside(grid: Grid, x: int, y: int) -> bool:
    return 0 < x < grid.width and 0 < y < grid.height


def _march(grid: Grid, ray: Ray) -> Ray:
    """Step the ray until it reaches a wall or leaves the map."""
    while True:
        ray.map_x = int(ray.x) // TILE_SIZE
        ray.map_y = int(ray.y) // TILE_SIZE
        if not _inside(grid, ray.map_x, ray.map_y) or grid[ray.map_x, ray.map_y] == Tile.WALL:
            return ray
        ray.x += ray.x_step
        ray.y += ray.y_step


def horizontal_hit(grid: Grid, player: Player, angle: float) -> Ray:
    """First wall met on a horizontal grid line along ``angle``."""
    tangent = math.tan(angle)
    inverse = 1.0 / tangent if tangent else math.inf
    ray = Ray(angle)
    sine = math.sin(angle)
    if sine > _EPSILON:
        ray.y = _cell_origin(player.y) - _EDGE
        ray.x = (player.y - ray.y) * inverse + player.x
        ray.y_step = -float(TILE_SIZE)
        ray.x_step = -ray.y_step * inverse
    elif sine < -_EPSILON:
        ray.y = float(_cell_origin(player.y) + TILE_SIZE)
        ray.x = (player.y - ray.y) * inverse + player.x
        ray.y_step = float(TILE_SIZE)
        ray.x_step = -ray.y_step * inverse
    else:
        ray.x, ray.y = player.x, player.y
        ray.x_step = -float(TILE_SIZE) if math.cos(angle) < _EPSILON else float(TILE_SIZE)
        ray.y_step = 0.0
    return _march(grid, ray)


def vertical_hit(grid: Grid, player: Player, angle: float) -> Ray:
    """First wall met on a vertical grid line along ``angle``."""
    tangent = math.tan(angle)
    ray = Ray(angle)
    if math.cos(angle) < _EPSILON:
        ray.x = _cell_origin(player.x) - _EDGE
        ray.x_step = -float(TILE_SIZE)
    else:
        ray.x = float(_cell_origin(player.x) + TILE_SIZE)
        ray.x_step = float(TILE_SIZE)
    ray.y = (player.x - ray.x) * tangent + player.y
    ray.y_step = -ray.x_step * tangent
    return _march(grid, ray)


def cast_ray(grid: Grid, player: Player, angle: float) -> Ray:
    """The nearer of the horizontal and vertical hits along ``angle``."""
    horizontal = horizontal_hit(grid, player, angle)
    vertical = vertical_hit(grid, player, angle)
    horizontal_distance = distance(player.x, player.y, horizontal.x, horizontal.y)
    vertical_distance = distance(player.x, player.y, vertical.x, vertical.y)
    if horizontal_distance > vertical_distance and horizontal_distance != 0:
        vertical.hit_horizontal = False
        return vertical
    horizontal.hit_horizontal = True
    return horizontal


def cast_rays(grid: Grid, player: Player) -> list[Ray]:
    """One ray per screen column, from left to right."""
    return [cast_ray(grid, player, ray_angle(player, column)) for column in range(WINDOW_WIDTH)]