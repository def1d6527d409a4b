# src/lightsout/render/board_view.py
# Board geometry inside the pixel framebuffer + pygame drawing of the lights.
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..config import DEFAULTS, GameConfig

Rect = Tuple[int, int, int, int]  # left, top, width, height


@dataclass(frozen=True)
class BoardLayout:
    """
    The board is a square of `frame_dimension` pixels flush with the right edge
    of the framebuffer; each light is `frame_dimension // size` pixels wide.
    """
    size: int
    frame_dimension: int = 360
    framebuffer_width: int = 640

    @classmethod
    def for_size(cls, size: int, config: GameConfig = DEFAULTS) -> "BoardLayout":
        return cls(size=size, frame_dimension=config.frame_dimension, framebuffer_width=config.framebuffer_size[0])

    @property
    def scale(self) -> int:
        return max(1, self.frame_dimension // self.size)

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.framebuffer_width - self.frame_dimension, 0)

    def cell_rect(self, x: int, y: int) -> Rect:
        ox, oy = self.origin
        return (ox + x * self.scale, oy + y * self.scale, self.scale, self.scale)

    def cells(self) -> Iterator[Tuple[int, int, Rect]]:
        for y in range(self.size):
            for x in range(self.size):
                yield x, y, self.cell_rect(x, y)

    def to_board(self, px: int, py: int) -> Tuple[int, int]:
        """
        Framebuffer pixel -> board coordinate. Floor division keeps pixels left
        of / above the board negative, so they land off-board.
        """
        ox, oy = self.origin
        return ((px - ox) // self.scale, (py - oy) // self.scale)


def draw_board(surface, session, config: GameConfig = DEFAULTS) -> None:
    """Fill one square per light (on/off colour) with a 1px outline."""
    import pygame  # local import to avoid hard dep when not used
    layout = BoardLayout.for_size(session.size, config)
    for x, y, rect in layout.cells():
        r = pygame.Rect(rect)
        color = config.light_on if session.board.get(x, y) else config.light_off
        pygame.draw.rect(surface, color, r)
        pygame.draw.rect(surface, config.cell_outline, r, 1)
