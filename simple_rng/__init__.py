"""Public package surface for the SimpleRNG multiply-with-carry generator."""

from .draws import DrawConfig, run_draws
from .models import DEFAULT_SEED, GeneratorState, seed_from_combined, seed_from_parts
from .mwc import get_uint, next_uint
from .sampling import int_in_range, normal, uniform
from .server import (
    RNGAlreadyStartedError,
    RNGError,
    RNGRegistry,
    RNGServer,
    RNGUnavailableError,
)
from .shuffle import shuffle

__all__ = [
    "DEFAULT_SEED",
    "DrawConfig",
    "GeneratorState",
    "RNGAlreadyStartedError",
    "RNGError",
    "RNGRegistry",
    "RNGServer",
    "RNGUnavailableError",
    "get_uint",
    "int_in_range",
    "next_uint",
    "normal",
    "run_draws",
    "seed_from_combined",
    "seed_from_parts",
    "shuffle",
    "uniform",
]
