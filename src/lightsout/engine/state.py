# src/lightsout/engine/state.py
# GameSession: owns the board + seeded RNG, generates solvable boards, applies clicks.

from __future__ import annotations

import logging
from typing import List, Optional

from ..board import XY, Board
from ..config import DEFAULTS, GameConfig
from ..rng import SeededRandom

log = logging.getLogger(__name__)


class GameSession:
    """
    One Lights Out game.

    Boards are scrambled by simulating `generation_strength` random clicks on a
    dark board, so every generated board can be solved by clicking the same
    centers again. Replaying a seed re-arms the RNG and therefore reproduces the
    same centers and the same board.

    States: playing -> won (once every light is off). Won is terminal until the
    next reset_board()/resize().
    """

    def __init__(
        self,
        size: Optional[int] = None,
        *,
        generation_strength: Optional[int] = None,
        rng: Optional[SeededRandom] = None,
        config: GameConfig = DEFAULTS,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.board = Board.empty(size if size is not None else config.board_size)
        self.rng = rng or SeededRandom()
        self.generation_strength = (
            generation_strength if generation_strength is not None else config.generation_strength
        )

        # Per-seed / per-attempt counters
        self.seed = 0
        self.attempts = 1
        self.clicks = 0
        self.elapsed_time = 0.0
        self.won = False
        self.generation_moves: List[XY] = []

        # Startup board; a fixed seed is armed then replayed so attempts stays at 1
        if seed is not None:
            self.rng.set_seed(seed)
            self.attempts = 0
            self.reset_board(False)
        else:
            self.reset_board(True)

    # ---- Read-only views for render/HUD ----
    @property
    def size(self) -> int:
        return self.board.size

    @property
    def cells(self) -> List[bool]:
        return self.board.cells

    # ---- Lifecycle ----
    def reset_board(self, new_seed: bool) -> None:
        if new_seed:
            self.rng.new_seed()
            self.attempts = 1
        else:
            self.rng.set_seed(self.rng.get_seed())
            self.attempts += 1

        self.seed = self.rng.get_seed()

        self.clicks = 0
        self.elapsed_time = 0.0
        self.won = False

        self.board.clear()
        self.generation_moves = self._scramble()
        log.debug(
            "board %dx%d seed=%d attempt=%d moves=%s",
            self.size, self.size, self.seed, self.attempts, self.generation_moves,
        )

    def _scramble(self) -> List[XY]:
        hi = self.board.size - 1
        moves: List[XY] = []
        for _ in range(self.generation_strength):
            x = self.rng.rnd_range(0, hi)
            y = self.rng.rnd_range(0, hi)
            self.board.cross_toggle(x, y)
            moves.append((x, y))
        return moves

    def resize(self, new_size: int) -> None:
        """Changing the board size always starts a fresh puzzle."""
        self.board.resize(new_size)
        log.debug("resized board to %dx%d", new_size, new_size)
        self.reset_board(True)

    def toggle_size(self) -> None:
        cfg = self.config
        self.resize(cfg.alt_board_size if self.size == cfg.board_size else cfg.board_size)

    # ---- Per-frame input ----
    def apply_click(self, x: int, y: int) -> bool:
        """
        Click the light at board coordinate (x, y).
        Clicks off the board, or after the game is won, are ignored.
        Returns True if the click counted.
        """
        if self.won or not self.board.in_bounds(x, y):
            return False
        self.board.cross_toggle(x, y)
        self.clicks += 1
        self.won = self.board.is_dark()
        if self.won:
            log.info(
                "solved seed=%d in %d clicks, %.2fs (attempt %d)",
                self.seed, self.clicks, self.elapsed_time, self.attempts,
            )
        return True

    def tick(self, elapsed_seconds: float) -> None:
        if not self.won:
            self.elapsed_time += elapsed_seconds
