"""Supersequence entry points and per-sequence alignment recovery."""

from __future__ import annotations

import logging
import operator
from typing import Any, List, NamedTuple, Sequence

from .normalise import Equality, normalise_sequences
from .solver import DEFAULT_MAX_STATES, solve_supersequence

logger = logging.getLogger(__name__)


class SequenceAlignment(NamedTuple):
    """Element ``input_position`` of sequence ``sequence_index`` sits at
    ``supersequence_position`` of the merged sequence."""

    sequence_index: int
    input_position: int
    supersequence_position: int
    element: Any


class SCSResult(NamedTuple):
    supersequence: List
    alignments: List[SequenceAlignment]
    exact: bool = True


class AlignmentError(ValueError):
    """Raised when a sequence does not embed into the given supersequence."""


def embed_positions(
    sequence: Sequence,
    supersequence: Sequence,
    *,
    equals: Equality = operator.eq,
) -> List[int]:
    """Leftmost-greedy positions of ``sequence`` inside ``supersequence``.

    Stops early if the supersequence runs out, so the result may be shorter
    than ``sequence``.
    """

    positions: List[int] = []
    cursor = 0
    for super_pos, candidate in enumerate(supersequence):
        if cursor == len(sequence):
            break
        if equals(sequence[cursor], candidate):
            positions.append(super_pos)
            cursor += 1
    return positions


def is_subsequence(
    sequence: Sequence,
    supersequence: Sequence,
    *,
    equals: Equality = operator.eq,
) -> bool:
    """Return True if ``sequence`` embeds in order into ``supersequence``."""

    return len(embed_positions(sequence, supersequence, equals=equals)) == len(sequence)


def align_sequences(
    sequences: Sequence[Sequence],
    supersequence: Sequence,
    *,
    equals: Equality = operator.eq,
) -> List[SequenceAlignment]:
    """Map every element of every sequence onto ``supersequence``.

    Each sequence is matched independently, so duplicates and empty
    sequences need no special handling. Leftmost-greedy matching always
    succeeds when the sequence is a subsequence at all, and gives strictly
    increasing supersequence positions.

    Raises :class:`AlignmentError` if some sequence does not embed.
    """

    alignments: List[SequenceAlignment] = []
    for seq_idx, sequence in enumerate(sequences):
        positions = embed_positions(sequence, supersequence, equals=equals)
        if len(positions) != len(sequence):
            raise AlignmentError(
                f"sequence {seq_idx} embeds only {len(positions)} of its "
                f"{len(sequence)} elements into a supersequence of length "
                f"{len(supersequence)}"
            )
        alignments.extend(
            SequenceAlignment(seq_idx, input_pos, super_pos, sequence[input_pos])
            for input_pos, super_pos in enumerate(positions)
        )
    return alignments


def _solve(
    sequences: Sequence[Sequence],
    equals: Equality,
    max_states: int,
) -> SCSResult:
    if max_states < 1:
        raise ValueError(f"max_states must be positive, got {max_states}")

    normalised = normalise_sequences(sequences, equals=equals)
    if len(normalised) < 2:
        supersequence = normalised[0] if normalised else []
        return SCSResult(supersequence, [], True)

    logger.debug(
        "Solving %d distinct sequences (from %d inputs)",
        len(normalised),
        len(sequences),
    )
    outcome = solve_supersequence(normalised, equals=equals, max_states=max_states)
    return SCSResult(outcome.supersequence, [], outcome.exact)


def shortest_common_supersequence(
    sequences: Sequence[Sequence],
    *,
    equals: Equality = operator.eq,
    max_states: int = DEFAULT_MAX_STATES,
) -> List:
    """Return a sequence containing every input as a subsequence.

    See :func:`scs_core.solver.solve_supersequence` for when the result can
    be longer than the true optimum.
    """

    return _solve(sequences, equals, max_states).supersequence


def shortest_common_supersequence_with_alignments(
    sequences: Sequence[Sequence],
    *,
    equals: Equality = operator.eq,
    max_states: int = DEFAULT_MAX_STATES,
) -> SCSResult:
    """Solve the supersequence and align every original input against it.

    Alignment indices refer to positions in ``sequences`` as given, including
    empty and duplicated entries.
    """

    solved = _solve(sequences, equals, max_states)
    alignments = align_sequences(sequences, solved.supersequence, equals=equals)
    return SCSResult(solved.supersequence, alignments, solved.exact)
