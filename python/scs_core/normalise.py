"""Input normalisation ahead of the supersequence search."""

from __future__ import annotations

import operator
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

Equality = Callable[[object, object], bool]


def sequences_equal(
    first: Sequence[T],
    second: Sequence[T],
    *,
    equals: Equality = operator.eq,
) -> bool:
    """Return True when both sequences hold pairwise equal elements."""

    if len(first) != len(second):
        return False
    return all(equals(a, b) for a, b in zip(first, second))


def normalise_sequences(
    sequences: Sequence[Sequence[T]],
    *,
    equals: Equality = operator.eq,
) -> List[List[T]]:
    """Drop empty sequences and collapse duplicates, keeping first-seen order.

    Duplicates add no embedding constraint but multiply the solver's state
    space. A result with zero or one sequence is already its own answer, so
    callers can short-circuit on ``len(result) < 2``.
    """

    non_empty = [list(seq) for seq in sequences if len(seq) > 0]
    if len(non_empty) < 2:
        return non_empty

    unique: List[List[T]] = []
    for seq in non_empty:
        if not any(sequences_equal(seq, kept, equals=equals) for kept in unique):
            unique.append(seq)
    return unique
