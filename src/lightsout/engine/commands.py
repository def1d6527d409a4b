from enum import Enum
from typing import Optional, Tuple

from ..render.board_view import BoardLayout
from .state import GameSession


class Command(Enum):
    REPLAY = "replay"          # same seed, next attempt
    NEW_BOARD = "new"          # fresh seed
    TOGGLE_SIZE = "size"       # 9x9 <-> 5x5, fresh seed


def dispatch(session: GameSession, command: Command) -> None:
    if command is Command.REPLAY:
        session.reset_board(False)
    elif command is Command.NEW_BOARD:
        session.reset_board(True)
    elif command is Command.TOGGLE_SIZE:
        session.toggle_size()
    else:
        raise ValueError(f"unknown command: {command!r}")


def click_at(session: GameSession, pixel: Tuple[int, int], layout: Optional[BoardLayout] = None) -> bool:
    """Feed a framebuffer-space pointer position into the session as a board click."""
    layout = layout or BoardLayout.for_size(session.size, session.config)
    bx, by = layout.to_board(*pixel)
    return session.apply_click(bx, by)
