"""Drawing single glyphs from the sprite sheet onto a grid."""

from __future__ import annotations

import pygame

from .sprites import SPRITE_SIZE, Rect, Sitelen


def destination(x: int, y: int) -> Rect:
    """The target rectangle of grid cell (x, y)."""
    return Rect(SPRITE_SIZE * x, SPRITE_SIZE * y, SPRITE_SIZE, SPRITE_SIZE)


def draw_sprite(
    target: pygame.Surface,
    sheet: pygame.Surface,
    sprite: Sitelen | Rect,
    x: int,
    y: int,
) -> pygame.Rect:
    """Copy one glyph from ``sheet`` into grid cell (x, y) of ``target``.

    Returns the area of ``target`` that was changed.
    """
    source = sprite.rect() if isinstance(sprite, Sitelen) else sprite
    dest = destination(x, y)
    area = pygame.Rect(source.x, source.y, source.width, source.height)
    return target.blit(sheet, (dest.x, dest.y), area)