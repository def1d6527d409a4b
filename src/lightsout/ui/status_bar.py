from typing import Optional

from ..config import DEFAULTS, GameConfig
from .hud import OPTIONS_HELP, hud_lines, win_banner

LINE_HEIGHT = 10
LEFT = 10

def render_hud(surface, session, *, fps: Optional[int] = None, config: GameConfig = DEFAULTS) -> None:
    """
    Draw the counters (top), the win banner (middle) and the key help (bottom)
    into the left strip of the framebuffer. Does not touch the session.
    """
    import pygame  # local import to avoid hard dep when not used
    font = pygame.font.SysFont(None, 14)
    _, fb_h = config.framebuffer_size

    def label(text, y, color=config.text, f=font):
        img = f.render(text, True, color)
        surface.blit(img, (LEFT, y))

    y = LEFT
    for line in hud_lines(session, fps=fps):
        label(line, y); y += LINE_HEIGHT

    banner = win_banner(session)
    if banner:
        big = pygame.font.SysFont(None, 48)
        label(banner, fb_h // 2 - 40, config.win_text, big)

    y = fb_h - LINE_HEIGHT * (len(OPTIONS_HELP) + 1)
    for line in OPTIONS_HELP:
        label(line, y); y += LINE_HEIGHT
