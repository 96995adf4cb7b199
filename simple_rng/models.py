from dataclasses import dataclass
from typing import Tuple

MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class GeneratorState:
    """MWC carry registers; both halves always fit in 32 bits."""

    w: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "w", self.w & MASK32)
        object.__setattr__(self, "z", self.z & MASK32)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.w, self.z)


DEFAULT_SEED = GeneratorState(w=521288629, z=362436069)


def seed_from_parts(w: int, z: int) -> GeneratorState:
    """Build a state from two 32-bit halves. No validation, (0, 0) included."""
    return GeneratorState(w=w, z=z)


def seed_from_combined(u: int) -> GeneratorState:
    """Split one wide seed into (u >> 16, u & 0xFFFFFFFF)."""
    return GeneratorState(w=(u >> 16) & MASK32, z=u & MASK32)
