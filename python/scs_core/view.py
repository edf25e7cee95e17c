"""Read-only lookups over a computed :class:`SCSResult`."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Optional

import numpy as np
from scipy.sparse import coo_matrix

from .alignment import SCSResult, SequenceAlignment

PositionMap = Dict[int, int]


class AlignmentView:
    """Index the alignments of an :class:`SCSResult` by sequence.

    Forward and reverse maps are built once so every lookup is a dict hit.
    Sequence indices that never appear (empty inputs, out of range) behave
    like sequences with no aligned elements.
    """

    def __init__(self, result: SCSResult) -> None:
        self.result = result
        self._by_sequence: Dict[int, List[SequenceAlignment]] = defaultdict(list)
        self._forward: Dict[int, PositionMap] = defaultdict(dict)
        self._reverse: Dict[int, PositionMap] = defaultdict(dict)

        for entry in result.alignments:
            self._by_sequence[entry.sequence_index].append(entry)
            self._forward[entry.sequence_index][entry.input_position] = (
                entry.supersequence_position
            )
            self._reverse[entry.sequence_index][entry.supersequence_position] = (
                entry.input_position
            )

        for entries in self._by_sequence.values():
            entries.sort(key=lambda a: a.input_position)

    @property
    def supersequence(self) -> List:
        return self.result.supersequence

    @property
    def sequence_indices(self) -> List[int]:
        """Indices of sequences with at least one aligned element."""
        return sorted(self._by_sequence)

    @property
    def sequence_count(self) -> int:
        if not self._by_sequence:
            return 0
        return max(self._by_sequence) + 1

    def alignments_for(self, sequence_index: int) -> List[SequenceAlignment]:
        return list(self._by_sequence.get(sequence_index, []))

    def position_mapping(self, sequence_index: int) -> PositionMap:
        """Input position -> supersequence position for one sequence."""
        return dict(self._forward.get(sequence_index, {}))

    def reverse_mapping(self, sequence_index: int) -> PositionMap:
        """Supersequence position -> input position for one sequence."""
        return dict(self._reverse.get(sequence_index, {}))

    def has_element_at(self, sequence_index: int, supersequence_position: int) -> bool:
        return supersequence_position in self._reverse.get(sequence_index, {})

    def element_at(self, sequence_index: int, supersequence_position: int) -> Optional[Any]:
        input_pos = self._reverse.get(sequence_index, {}).get(supersequence_position)
        if input_pos is None:
            return None
        return self._by_sequence[sequence_index][input_pos].element

    def to_matrix(self, *, sequence_count: int | None = None, fill: int = -1) -> np.ndarray:
        """Dense ``(sequences, supersequence)`` grid of input positions.

        Cells without an aligned element hold ``fill``. Pass
        ``sequence_count`` to include trailing empty sequences as rows.
        """

        rows = self.sequence_count if sequence_count is None else sequence_count
        matrix = np.full((rows, len(self.supersequence)), fill, dtype=int)
        for seq_idx, reverse in self._reverse.items():
            if seq_idx >= rows:
                continue
            for super_pos, input_pos in reverse.items():
                matrix[seq_idx, super_pos] = input_pos
        return matrix

    def to_sparse(self, *, sequence_count: int | None = None) -> coo_matrix:
        """Sparse grid storing ``input_position + 1``; zero means no element."""

        n_rows = self.sequence_count if sequence_count is None else sequence_count
        rows: List[int] = []
        cols: List[int] = []
        data: List[int] = []

        for entry in self.result.alignments:
            if entry.sequence_index >= n_rows:
                continue
            rows.append(entry.sequence_index)
            cols.append(entry.supersequence_position)
            data.append(entry.input_position + 1)

        shape = (n_rows, len(self.supersequence))
        if not rows:
            return coo_matrix(shape, dtype=int)
        return coo_matrix((np.array(data), (np.array(rows), np.array(cols))), shape=shape)
