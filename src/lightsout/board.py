from dataclasses import dataclass
from typing import List, Tuple

XY = Tuple[int, int]

# Center first, then left, up, right, down.
CROSS: Tuple[XY, ...] = ((0, 0), (-1, 0), (0, -1), (1, 0), (0, 1))


@dataclass
class Board:
    size: int
    cells: List[bool]

    @classmethod
    def empty(cls, size: int) -> "Board":
        if size < 1:
            raise ValueError(f"board size must be >= 1, got {size}")
        return cls(size=size, cells=[False] * (size * size))

    def idx(self, x: int, y: int) -> int:
        return y * self.size + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> bool:
        return self.cells[self.idx(x, y)]

    def set(self, x: int, y: int, v: bool) -> None:
        self.cells[self.idx(x, y)] = v

    def toggle(self, x: int, y: int) -> bool:
        """Flip one light. Off-board coordinates are skipped; returns whether anything flipped."""
        if not self.in_bounds(x, y):
            return False
        i = self.idx(x, y)
        self.cells[i] = not self.cells[i]
        return True

    def cross_toggle(self, cx: int, cy: int) -> bool:
        """
        Flip the light at (cx, cy) and its four orthogonal neighbours.
        Neighbours past the edge are skipped (no wraparound).
        Returns True iff the center itself was on the board.
        """
        hit = False
        for dx, dy in CROSS:
            flipped = self.toggle(cx + dx, cy + dy)
            if (dx, dy) == (0, 0):
                hit = flipped
        return hit

    def clear(self) -> None:
        for i in range(len(self.cells)):
            self.cells[i] = False

    def resize(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"board size must be >= 1, got {size}")
        self.size = size
        self.cells = [False] * (size * size)

    def is_dark(self) -> bool:
        return not any(self.cells)

    def lit_count(self) -> int:
        return sum(1 for c in self.cells if c)

    def as_matrix(self) -> List[List[int]]:
        out = []
        for y in range(self.size):
            row = [int(self.get(x, y)) for x in range(self.size)]
            out.append(row)
        return out
