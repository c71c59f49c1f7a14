"""The game: window, main loop and command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .draw3d import draw_rays  # noqa: E402
from .errors import ParseError  # noqa: E402
from .frame import Frame  # noqa: E402
from .player import Key, spawn_player  # noqa: E402
from .raycast import cast_rays  # noqa: E402
from .scene import Scene, parse_file  # noqa: E402
from .texture import TextureSet, load_textures  # noqa: E402

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_w: Key.W,
}


def _print_error(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


class Game:
    """A running scene: player, textures and the frame being drawn."""

    def __init__(self, scene: Scene, textures: TextureSet) -> None:
        if scene.grid is None:
            raise ValueError("scene has no map")
        self.scene = scene
        self.grid = scene.grid
        self.textures = textures
        self.player = spawn_player(self.grid)
        self.frame = Frame()
        self.exit = False

    def render_frame(self) -> None:
        """Draw one frame and advance the player by one tick."""
        self.frame.clear()
        self.frame.draw_background(self.scene.ceiling, self.scene.floor)
        rays = cast_rays(self.grid, self.player)
        draw_rays(self.frame, self.textures, self.player, rays)
        self.player.update(self.grid)
        self.frame.draw_minimap(self.grid, self.player)

    def handle_key_down(self, key: int) -> None:
        """React to a pressed key, given as an X11 keysym."""
        if self.player.key_down(key):
            self.exit = True

    def handle_key_up(self, key: int) -> None:
        """React to a released key, given as an X11 keysym."""
        self.player.key_up(key)

    def _rgb(self) -> np.ndarray:
        pixels = self.frame.pixels
        rgb = np.stack(((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1)
        return rgb.astype(np.uint8).transpose(1, 0, 2)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.exit = True
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _PYGAME_KEYS.get(event.key)
            if key is None:
                return
            if event.type == pygame.KEYDOWN:
                self.handle_key_down(key)
            else:
                self.handle_key_up(key)

    def run(self) -> None:
        """Open a window and play until asked to quit."""
        pygame.display.init()
        try:
            screen = pygame.display.set_mode((self.frame.width, self.frame.height))
            pygame.display.set_caption("cubed")
            while not self.exit:
                for event in pygame.event.get():
                    self._handle_event(event)
                self.render_frame()
                pygame.surfarray.blit_array(screen, self._rgb())
                pygame.display.flip()
        finally:
            pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the scene file named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else ""
    try:
        scene = parse_file(path)
    except ParseError as exc:
        _print_error(exc.code.message())
        return 2
    try:
        textures = load_textures(scene)
    except OSError:
        _print_error("Invalid textures.")
        return 3
    try:
        Game(scene, textures).run()
    except pygame.error:
        _print_error("Display error.")
        return 1
    return 0