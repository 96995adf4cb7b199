from typing import List, Sequence, Tuple, TypeVar

from .models import GeneratorState
from .sampling import int_in_range

T = TypeVar("T")


def shuffle(state: GeneratorState, sequence: Sequence[T]) -> Tuple[GeneratorState, List[T]]:
    """Backward Fisher-Yates (Knuth) shuffle into a new list.

    Consumes len(sequence) - 1 steps; empty and single-element inputs
    come back unchanged with the original state.
    """
    items = list(sequence)
    # a == 1 can only pick b == 0, so the loop stops at 2.
    for a in range(len(items), 1, -1):
        state, b = int_in_range(state, 0, a)
        items[a - 1], items[b] = items[b], items[a - 1]
    return state, items
