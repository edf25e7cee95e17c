"""Shortest common supersequence of several orderings, with alignments."""

from .normalise import (
    normalise_sequences,
    sequences_equal,
)
from .solver import (
    DEFAULT_MAX_STATES,
    SolveOutcome,
    pointer_strides,
    solve_supersequence,
)
from .alignment import (
    AlignmentError,
    SCSResult,
    SequenceAlignment,
    align_sequences,
    embed_positions,
    is_subsequence,
    shortest_common_supersequence,
    shortest_common_supersequence_with_alignments,
)
from .view import AlignmentView
from .visualise import visualise_alignment
from .conflicts import (
    find_order_conflicts,
    has_repeated_elements,
    precedence_graph,
    supersequence_lower_bound,
)

__all__ = [
    "normalise_sequences",
    "sequences_equal",
    "DEFAULT_MAX_STATES",
    "SolveOutcome",
    "pointer_strides",
    "solve_supersequence",
    "AlignmentError",
    "SCSResult",
    "SequenceAlignment",
    "align_sequences",
    "embed_positions",
    "is_subsequence",
    "shortest_common_supersequence",
    "shortest_common_supersequence_with_alignments",
    "AlignmentView",
    "visualise_alignment",
    "find_order_conflicts",
    "has_repeated_elements",
    "precedence_graph",
    "supersequence_lower_bound",
]
