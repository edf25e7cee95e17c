"""Plain-text rendering of sequences aligned under their supersequence."""

from __future__ import annotations

import operator
from typing import List, Optional, Sequence

from .alignment import embed_positions
from .normalise import Equality

RULE = "─"


def _aligned_cells(
    sequence: Sequence,
    supersequence: Sequence,
    equals: Equality,
) -> List[Optional[str]]:
    cells: List[Optional[str]] = [None] * len(supersequence)
    positions = embed_positions(sequence, supersequence, equals=equals)
    for input_pos, super_pos in enumerate(positions):
        cells[super_pos] = str(sequence[input_pos])
    return cells


def visualise_alignment(
    sequences: Sequence[Sequence],
    supersequence: Sequence,
    *,
    equals: Equality = operator.eq,
) -> str:
    """Render one row for the supersequence and one per input sequence.

    Columns are padded to the widest rendered element. A sequence that does
    not fully embed is shown up to its last matched element.

    >>> print(visualise_alignment([["A", "B"], ["B"]], ["A", "B"]))
    Input sequences and their alignment with the supersequence:
    <BLANKLINE>
    SCS: A B
         ─ ─
    S1:  A B
    S2:    B
    """

    super_cells = [str(el) for el in supersequence]
    seq_cells = [_aligned_cells(seq, supersequence, equals) for seq in sequences]

    width = max(
        [len(s) for s in super_cells]
        + [len(str(el)) for seq in sequences for el in seq]
        + [1]
    )

    lines = ["Input sequences and their alignment with the supersequence:\n"]
    lines.append("SCS: " + " ".join(s.ljust(width) for s in super_cells))
    lines.append("     " + " ".join(RULE * width for _ in super_cells))
    for seq_idx, cells in enumerate(seq_cells):
        padded = [c.ljust(width) if c is not None else " " * width for c in cells]
        lines.append(f"S{seq_idx + 1}:  " + " ".join(padded))
    return "\n".join(lines)
