# Marsaglia multiply-with-carry core (no external deps)
# Two 16-bit lag generators combined into one 32-bit output.
from typing import Tuple

from .models import MASK32, GeneratorState


def next_uint(state: GeneratorState) -> Tuple[GeneratorState, int]:
    """Advance the generator one step and return (new_state, uint32).

    Older docs call this a 64-bit draw; the final mask keeps it at 32 bits
    and existing outputs depend on that.
    """
    z = (36969 * (state.z & 0xFFFF) + (state.z >> 16)) & MASK32
    w = (18000 * (state.w & 0xFFFF) + (state.w >> 16)) & MASK32
    return GeneratorState(w=w, z=z), ((z << 16) + w) & MASK32


get_uint = next_uint
