"""The window: renders the glyph canvas and scales it up to the screen."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

import pygame

from .draw import draw_sprite
from .sprites import SPRITE_SIZE, Sitelen

TITLE = "kipisi"
DEFAULT_SHEET = Path("res/sitelenpona.png")
TARGET_FPS = 60
BACKGROUND = pygame.Color(0, 0, 0, 255)


@dataclass(frozen=True)
class Screen:
    """Size of the glyph grid and the factor it is scaled up by in the window."""

    columns: int = 32
    rows: int = 28
    scale: int = 4

    def logical_size(self) -> tuple[int, int]:
        """Canvas size in pixels before scaling."""
        return self.columns * SPRITE_SIZE, self.rows * SPRITE_SIZE

    def window_size(self) -> tuple[int, int]:
        """Window size in pixels."""
        width, height = self.logical_size()
        return width * self.scale, height * self.scale


def render_frame(canvas: pygame.Surface, sheet: pygame.Surface) -> None:
    """Draw one frame onto the logical canvas."""
    draw_sprite(canvas, sheet, Sitelen.SOWELI, 0, 0)
    canvas.fill(BACKGROUND)


def _should_close(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the render loop until it is closed."""
    parser = argparse.ArgumentParser(prog=TITLE)
    parser.add_argument("--sheet", type=Path, default=DEFAULT_SHEET, help="sprite sheet image")
    args = parser.parse_args(argv)

    print("toki ma!")
    if not args.sheet.is_file():
        raise FileNotFoundError(f"sprite sheet not found: {args.sheet}")

    screen = Screen()
    pygame.init()
    try:
        window = pygame.display.set_mode(screen.window_size())
        pygame.display.set_caption(TITLE)
        sheet = pygame.image.load(str(args.sheet)).convert_alpha()
        canvas = pygame.Surface(screen.logical_size())
        clock = pygame.time.Clock()

        running = True
        while running:
            if any(_should_close(event) for event in pygame.event.get()):
                running = False
            render_frame(canvas, sheet)
            pygame.transform.scale(canvas, window.get_size(), window)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0