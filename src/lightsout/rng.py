import secrets
from dataclasses import dataclass, field
from typing import Callable

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SEED_MASK = 0xFFFFFFFF

def pm_next(state: int) -> int:
    return (state * A) % M

def state_from_seed(seed: int) -> int:
    # Park–Miller state must live in 1..M-1; fold the 32-bit seed into it.
    return (seed & SEED_MASK) % (M - 1) + 1

def entropy_seed() -> int:
    return secrets.randbits(32)

@dataclass
class PMRandom:
    state: int
    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

@dataclass
class SeededRandom:
    """
    Reproducible integer source keyed by a 32-bit seed.

    new_seed() picks a fresh seed from OS entropy, set_seed() re-arms the
    generator, so set_seed(get_seed()) followed by the same rnd_range calls
    replays the exact same numbers.
    """
    seed: int = 0
    entropy: Callable[[], int] = entropy_seed
    _gen: PMRandom = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.set_seed(self.seed)

    def new_seed(self) -> None:
        self.set_seed(self.entropy())

    def set_seed(self, seed: int) -> None:
        self.seed = seed & SEED_MASK
        self._gen = PMRandom(state_from_seed(self.seed))

    def get_seed(self) -> int:
        return self.seed

    def rnd_range(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + self._gen.next32() % (hi - lo + 1)
