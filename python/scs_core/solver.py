"""Memoised common supersequence search over pointer tuples.

The search walks states ``(p_0, ..., p_n)`` where ``p_i`` is the read pointer
into sequence ``i``. From each state the next emitted element is either the
shared head of every active sequence (all pointers advance together) or the
head of exactly one sequence (one pointer advances). When heads agree only
for some of the active sequences, those sequences still advance one at a
time, so the shared element is emitted once per sequence. The result is the
shortest supersequence reachable under these moves, which can be longer than
the true optimum (``[[A, B, C], [B, C, A], [C, A, B]]`` gives six elements
where five suffice).

Every state is solved once and memoised under a packed integer key, so the
cost is bounded by the product of ``len_i + 1``. That product explodes
quickly, hence the ``max_states`` cap: once the memo would grow past it the
search stops and the plain concatenation of the inputs is returned instead.
"""

from __future__ import annotations

import logging
import operator
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .normalise import Equality

logger = logging.getLogger(__name__)

DEFAULT_MAX_STATES = 100_000

Positions = Tuple[int, ...]
Transition = Tuple[int, Positions]  # (emitting sequence index, next state)
MemoEntry = Tuple[int, Optional[Positions], int]  # (length, next state, emitting index)


class SolveOutcome(NamedTuple):
    supersequence: List
    exact: bool
    states: int


def pointer_strides(lengths: Sequence[int]) -> List[int]:
    """Mixed-radix strides that pack a pointer tuple into a single int.

    Pointer ``i`` ranges over ``0..=lengths[i]`` so its radix is
    ``lengths[i] + 1``. Python ints keep the packing exact however large the
    state space gets.
    """

    strides: List[int] = []
    stride = 1
    for length in lengths:
        strides.append(stride)
        stride *= length + 1
    return strides


def _concatenate(sequences: Sequence[Sequence]) -> List:
    return [element for seq in sequences for element in seq]


def solve_supersequence(
    sequences: Sequence[Sequence],
    *,
    equals: Equality = operator.eq,
    max_states: int = DEFAULT_MAX_STATES,
) -> SolveOutcome:
    """Return the shortest supersequence reachable by the pointer moves.

    Always a common supersequence of ``sequences``, but not necessarily a
    minimal one when heads agree for only some sequences.

    Parameters
    ----------
    sequences
        Input sequences, ideally already passed through
        :func:`scs_core.normalise.normalise_sequences`.
    equals
        Element equality predicate. Must be structural, not identity.
    max_states
        Upper bound on memoised states. Exceeding it returns the
        concatenation of ``sequences`` with ``exact=False``.

    Ties between equally short branches go to the lowest sequence index.
    """

    if max_states < 1:
        raise ValueError(f"max_states must be positive, got {max_states}")

    seqs = [list(seq) for seq in sequences]
    lengths = [len(seq) for seq in seqs]
    strides = pointer_strides(lengths)
    logger.debug("SCS input: %d sequences, lengths %s", len(seqs), lengths)

    def pack(positions: Positions) -> int:
        return sum(p * s for p, s in zip(positions, strides))

    def transitions(positions: Positions) -> List[Transition]:
        active = [i for i, p in enumerate(positions) if p < lengths[i]]
        if not active:
            return []

        lead = active[0]
        head = seqs[lead][positions[lead]]
        if all(equals(seqs[i][positions[i]], head) for i in active[1:]):
            advanced = list(positions)
            for i in active:
                advanced[i] += 1
            return [(lead, tuple(advanced))]

        branches: List[Transition] = []
        for i in active:
            advanced = list(positions)
            advanced[i] += 1
            branches.append((i, tuple(advanced)))
        return branches

    memo: Dict[int, MemoEntry] = {}
    start: Positions = (0,) * len(seqs)
    stack: List[Positions] = [start]

    while stack:
        positions = stack[-1]
        key = pack(positions)
        if key in memo:
            stack.pop()
            continue

        if len(memo) >= max_states:
            fallback = _concatenate(seqs)
            logger.warning(
                "SCS state cap of %d exceeded for %d sequences (lengths %s); "
                "falling back to concatenation of length %d",
                max_states,
                len(seqs),
                lengths,
                len(fallback),
            )
            return SolveOutcome(fallback, False, len(memo))

        options = transitions(positions)
        pending = [nxt for _, nxt in options if pack(nxt) not in memo]
        if pending:
            # Children are solved first; the state is revisited once they are.
            stack.extend(reversed(pending))
            continue

        stack.pop()
        if not options:
            memo[key] = (0, None, -1)
            continue

        best: Optional[MemoEntry] = None
        for index, nxt in options:
            length = memo[pack(nxt)][0] + 1
            if best is None or length < best[0]:
                best = (length, nxt, index)
        memo[key] = best

    supersequence: List = []
    positions = start
    while True:
        _, nxt, index = memo[pack(positions)]
        if nxt is None:
            break
        supersequence.append(seqs[index][positions[index]])
        positions = nxt

    logger.debug(
        "SCS result: length %d after %d states", len(supersequence), len(memo)
    )
    return SolveOutcome(supersequence, True, len(memo))
