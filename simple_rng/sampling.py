import math
from typing import Tuple

from .models import GeneratorState
from .mwc import next_uint

# 2**32 + 2 keeps (x + 1) / _UNIFORM_DENOM strictly inside (0, 1)
_UNIFORM_DENOM = 2.0 ** 32 + 2.0


def int_in_range(state: GeneratorState, minimum: int, maximum: int) -> Tuple[GeneratorState, int]:
    """Integer in [minimum, maximum); an empty range returns (state, minimum) untouched."""
    if maximum <= minimum:
        return state, minimum
    state, x = next_uint(state)
    # Plain modulo, bias for spans that do not divide 2**32 is kept as-is.
    return state, minimum + x % (maximum - minimum)


def uniform(state: GeneratorState) -> Tuple[GeneratorState, float]:
    """Uniform real in the open interval (0.0, 1.0)."""
    state, x = next_uint(state)
    return state, (x + 1.0) / _UNIFORM_DENOM


def normal(state: GeneratorState) -> Tuple[GeneratorState, float]:
    """Standard normal deviate via Box-Muller."""
    # u1 sets the radius, u2 the angle; draw order is part of the stream.
    state, u1 = uniform(state)
    state, u2 = uniform(state)
    radius = math.sqrt(-2.0 * math.log(u1))
    theta = 2.0 * math.pi * u2
    return state, radius * math.sin(theta)
