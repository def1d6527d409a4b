# src/lightsout/ui/hud.py
from typing import List, Optional

WIN_BANNER = "YOU WON!"

OPTIONS_HELP = (
    "Options:",
    "R - Reset current board.",
    "N - New board.",
    "S - Size of the board",
    "ESC - Quit",
    "F11 - Toggle full screen",
)

def hud_lines(session, fps: Optional[int] = None) -> List[str]:
    """
    Counter lines shown top-left, in draw order. Time is printed with six
    decimals.
    """
    lines = []
    if fps is not None:
        lines.append(f"FPS: {fps}")
    lines.append(f"Seed: {session.seed}")
    lines.append(f"Clicks: {session.clicks}")
    lines.append(f"Time: {session.elapsed_time:.6f}")
    lines.append(f"Attempts: {session.attempts}")
    return lines

def win_banner(session) -> Optional[str]:
    return WIN_BANNER if session.won else None
