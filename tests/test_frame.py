import pytest

from cubed.frame import (
    MINIMAP_FLOOR_COLOR,
    MINIMAP_PLAYER_COLOR,
    MINIMAP_SCALE,
    MINIMAP_WALL_COLOR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Frame,
)
from cubed.grid import Grid, Tile, read_grid
from cubed.player import TILE_SIZE, Player, spawn_player

ROOM = [
    "11111\n",
    "10001\n",
    "10N01\n",
    "10001\n",
    "11111\n",
]


def _lit(frame):
    ys, xs = frame.pixels.nonzero()
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


def test_default_size_is_window():
    frame = Frame()
    assert (frame.width, frame.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert frame.pixels.shape == (WINDOW_HEIGHT, WINDOW_WIDTH)
    assert not frame.pixels.any()


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Frame(0, 10)


def test_put_and_read_pixel():
    frame = Frame(10, 8)
    frame.put_pixel(3, 4, 0x123456)
    assert frame.pixel(3, 4) == 0x123456
    assert _lit(frame) == {(3, 4)}


def test_pixel_keeps_alpha_bits():
    frame = Frame(4, 4)
    frame.put_pixel(1, 1, 0xFF00FF00)
    assert frame.pixel(1, 1) == 0xFF00FF00


def test_linear_addressing_wraps_rows():
    frame = Frame(10, 8)
    frame.put_pixel(frame.width, 0, 0xABCDEF)
    assert frame.pixel(0, 1) == 0xABCDEF


def test_pixel_outside_buffer_raises():
    frame = Frame(10, 8)
    with pytest.raises(IndexError):
        frame.pixel(0, frame.height)
    with pytest.raises(IndexError):
        frame.put_pixel(-1, 0, 0xFFFFFF)


def test_clear():
    frame = Frame(6, 6)
    frame.put_pixel(2, 2, 0xFFFFFF)
    frame.clear()
    assert not frame.pixels.any()


def test_horizontal_line():
    frame = Frame(20, 20)
    frame.draw_line((0, 0), (5, 0), 0xFFFFFF)
    assert _lit(frame) == {(x, 0) for x in range(6)}


def test_line_direction_does_not_matter():
    forward = Frame(20, 20)
    backward = Frame(20, 20)
    forward.draw_line((2, 3), (15, 9), 0x00FF00)
    backward.draw_line((15, 9), (2, 3), 0x00FF00)
    assert _lit(forward) == _lit(backward)


def test_diagonal_line():
    frame = Frame(20, 20)
    frame.draw_line((0, 0), (4, 4), 0xFF0000)
    assert _lit(frame) == {(i, i) for i in range(5)}


@pytest.mark.parametrize(
    "p1, p2",
    [((0, 0), (2, 8)), ((10, 1), (3, 5)), ((4, 12), (9, 0)), ((1, 1), (1, 1))],
)
def test_line_has_one_pixel_per_major_step(p1, p2):
    frame = Frame(20, 20)
    frame.draw_line(p1, p2, 0x0000FF)
    lit = _lit(frame)
    major = max(abs(p2[0] - p1[0]), abs(p2[1] - p1[1]))
    assert len(lit) == major + 1
    assert p1 in lit and p2 in lit


def test_background_skips_horizon_row():
    frame = Frame(8, 6)
    frame.draw_background(0x87CEEB, 0x654321)
    half = frame.height // 2
    assert (frame.pixels[:half] == 0x87CEEB).all()
    assert not frame.pixels[half].any()
    assert (frame.pixels[half + 1 :] == 0x654321).all()


def test_minimap_draws_tiles_and_player():
    grid = read_grid(ROOM)
    player = spawn_player(grid)
    frame = Frame(40, 40)
    frame.draw_minimap(grid, player)
    assert frame.pixel(0, 0) == MINIMAP_WALL_COLOR
    assert frame.pixel(MINIMAP_SCALE - 1, MINIMAP_SCALE - 1) == MINIMAP_WALL_COLOR
    assert frame.pixel(MINIMAP_SCALE, MINIMAP_SCALE) == MINIMAP_FLOOR_COLOR
    centre_x = int(player.x / TILE_SIZE * MINIMAP_SCALE)
    centre_y = int(player.y / TILE_SIZE * MINIMAP_SCALE)
    assert frame.pixel(centre_x, centre_y) == MINIMAP_PLAYER_COLOR
    assert frame.pixel(grid.width * MINIMAP_SCALE, 0) == 0


def test_minimap_leaves_void_tiles_empty():
    grid = Grid(2, 1, [[Tile.VOID, Tile.WALL]])
    player = Player(x=TILE_SIZE * 3, y=TILE_SIZE * 3)
    frame = Frame(40, 40)
    frame.draw_minimap(grid, player)
    assert frame.pixel(0, 0) == 0
    assert frame.pixel(MINIMAP_SCALE, 0) == MINIMAP_WALL_COLOR