import numpy as np
import pytest

from cubed.draw3d import draw_column, draw_rays, ray_hit_position, ray_texture
from cubed.frame import Frame
from cubed.player import Player
from cubed.raycast import Ray
from cubed.texture import Texture, TextureSet

RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
WHITE = 0xFFFFFF


def _uniform(color, size=4):
    return Texture(np.full((size, size), color, dtype=np.uint32))


@pytest.fixture
def textures():
    return TextureSet(north=_uniform(RED), south=_uniform(GREEN), west=_uniform(BLUE), east=_uniform(WHITE))


@pytest.fixture
def player():
    return Player(x=96.0, y=96.0, angle=0.0)


def test_ray_texture_chooses_face(textures):
    assert ray_texture(textures, Ray(0.0, hit_horizontal=True, y_step=64.0)) is textures.south
    assert ray_texture(textures, Ray(0.0, hit_horizontal=True, y_step=-64.0)) is textures.north
    assert ray_texture(textures, Ray(0.0, hit_horizontal=False, x_step=64.0)) is textures.east
    assert ray_texture(textures, Ray(0.0, hit_horizontal=False, x_step=-64.0)) is textures.west


@pytest.mark.parametrize("coordinate", [0.0, 10.5, 63.9, 100.0, 200.25])
def test_hit_position_mirrors_between_opposite_faces(coordinate):
    width = 16
    up = ray_hit_position(Ray(0.0, x=coordinate, hit_horizontal=True, y_step=-64.0), width)
    down = ray_hit_position(Ray(0.0, x=coordinate, hit_horizontal=True, y_step=64.0), width)
    east = ray_hit_position(Ray(0.0, y=coordinate, x_step=64.0), width)
    west = ray_hit_position(Ray(0.0, y=coordinate, x_step=-64.0), width)
    assert up + down == width - 1
    assert east + west == width - 1
    assert 0 <= up < width and 0 <= east < width


def test_hit_position_keeps_sign_for_negative_coordinates():
    width = 64
    negative = ray_hit_position(Ray(0.0, x=-32.0, hit_horizontal=True, y_step=-64.0), width)
    positive = ray_hit_position(Ray(0.0, x=32.0, hit_horizontal=True, y_step=-64.0), width)
    assert negative == -positive


def test_full_height_column_uses_texture_rows(player):
    two_rows = Texture(np.array([[RED], [BLUE]], dtype=np.uint32))
    textures = TextureSet(north=two_rows, south=two_rows, west=two_rows, east=two_rows)
    frame = Frame(4, 9)
    ray = Ray(0.0, x=player.x + 64.0, y=player.y, x_step=64.0)
    draw_column(frame, textures, player, ray, 2)
    assert frame.pixel(2, 0) == RED
    assert frame.pixel(2, 8) == BLUE
    assert frame.pixel(1, 4) == 0


def test_far_walls_are_shorter(textures, player):
    near_frame = Frame(1, 9)
    far_frame = Frame(1, 9)
    draw_column(near_frame, textures, player, Ray(0.0, x=player.x + 64.0, y=player.y, x_step=64.0), 0)
    draw_column(far_frame, textures, player, Ray(0.0, x=player.x + 256.0, y=player.y, x_step=64.0), 0)
    near = int(np.count_nonzero(near_frame.pixels[:, 0] == WHITE))
    far = int(np.count_nonzero(far_frame.pixels[:, 0] == WHITE))
    assert near == near_frame.height
    assert 0 < far < near


def test_drawn_slice_is_contiguous(textures, player):
    frame = Frame(1, 21)
    draw_column(frame, textures, player, Ray(0.0, x=player.x + 128.0, y=player.y, x_step=64.0), 0)
    rows = np.flatnonzero(frame.pixels[:, 0] == WHITE)
    assert rows.size > 0
    assert list(rows) == list(range(rows[0], rows[-1] + 1))


def test_zero_distance_draws_nothing(textures, player):
    frame = Frame(2, 9)
    draw_column(frame, textures, player, Ray(0.0, x=player.x, y=player.y, x_step=64.0), 0)
    assert not frame.pixels.any()


def test_column_outside_frame(textures, player):
    frame = Frame(2, 9)
    with pytest.raises(IndexError):
        draw_column(frame, textures, player, Ray(0.0, x=player.x + 64.0, y=player.y, x_step=64.0), 2)


def test_draw_rays_reverses_order(textures, player):
    frame = Frame(2, 9)
    east_ray = Ray(0.0, x=player.x + 64.0, y=player.y, x_step=64.0)
    west_ray = Ray(0.0, x=player.x + 64.0, y=player.y, x_step=-64.0)
    draw_rays(frame, textures, player, [east_ray, west_ray])
    assert frame.pixel(0, 4) == BLUE
    assert frame.pixel(1, 4) == WHITE