from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

@dataclass(frozen=True)
class GameConfig:
    # The S key toggles between these two sizes.
    board_size: int = 9
    alt_board_size: int = 5
    generation_strength: int = 5   # simulated clicks used to scramble a new board

    # Pixel framebuffer the board is drawn into (scaled up to the window).
    framebuffer_size: Tuple[int, int] = (640, 360)
    frame_dimension: int = 360     # board occupies a square of this side at the right edge

    window_title: str = "Turn the Lights Out"
    fps: int = 60

    light_on: RGB = (255, 255, 255)
    light_off: RGB = (64, 64, 64)
    cell_outline: RGB = (255, 0, 0)
    background: RGB = (0, 0, 255)
    text: RGB = (255, 255, 255)
    win_text: RGB = (0, 255, 0)

# Global defaults (runner swaps fields via dataclasses.replace)
DEFAULTS = GameConfig()
