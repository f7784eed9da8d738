from dataclasses import dataclass

# C runtime rand() constants (MSVC srand/rand)
A = 214013
C = 2531011
M = 0x100000000  # 2^32
RAND_MAX = 0x7FFF

def lcg_next(state: int) -> int:
    return (state * A + C) % M

def draw15(state: int) -> int:
    # rand() only exposes bits 16..30 of the state
    return (state >> 16) & RAND_MAX

@dataclass
class CrtRandom:
    state: int

    def __post_init__(self) -> None:
        self.state %= M

    def next15(self) -> int:
        self.state = lcg_next(self.state)
        return draw15(self.state)

    def below(self, bound: int) -> int:
        """Draw in [0, bound) the way `rand() % bound` does."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self.next15() % bound

def seed_for_level(level: int, seed_base: int) -> int:
    """
    Unsigned 32-bit sum of seed base and level index.
    Level -1 is the same seed as level 2**32 - 1, so every int has a level.
    """
    return (seed_base + level) % M

def rng_for_level(level: int, seed_base: int) -> CrtRandom:
    return CrtRandom(seed_for_level(level, seed_base))
