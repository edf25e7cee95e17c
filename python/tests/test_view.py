"""Tests for the read-only alignment view."""

import numpy as np

from scs_core import AlignmentView, shortest_common_supersequence_with_alignments


def make_view():
    # Supersequence is A B C; trip 1 skips B, trip 2 is empty.
    sequences = [["A", "B", "C"], ["A", "C"], []]
    return AlignmentView(shortest_common_supersequence_with_alignments(sequences))


def test_supersequence_passthrough():
    view = make_view()
    assert view.supersequence == ["A", "B", "C"]


def test_alignments_for_sequence():
    view = make_view()

    assert [a.supersequence_position for a in view.alignments_for(1)] == [0, 2]
    assert view.alignments_for(2) == []
    assert view.alignments_for(99) == []


def test_forward_and_reverse_maps():
    view = make_view()

    assert view.position_mapping(0) == {0: 0, 1: 1, 2: 2}
    assert view.position_mapping(1) == {0: 0, 1: 2}
    assert view.reverse_mapping(1) == {0: 0, 2: 1}
    assert view.position_mapping(2) == {}


def test_maps_are_copies():
    view = make_view()
    view.position_mapping(1)[0] = 42

    assert view.position_mapping(1)[0] == 0


def test_presence_and_lookup():
    view = make_view()

    assert view.has_element_at(1, 0)
    assert not view.has_element_at(1, 1)
    assert view.element_at(1, 2) == "C"
    assert view.element_at(1, 1) is None
    assert view.element_at(2, 0) is None


def test_sequence_indices():
    view = make_view()

    assert view.sequence_indices == [0, 1]
    assert view.sequence_count == 2


def test_dense_matrix():
    view = make_view()
    matrix = view.to_matrix(sequence_count=3)

    expected = np.array([[0, 1, 2], [0, -1, 1], [-1, -1, -1]])
    assert matrix.shape == (3, 3)
    assert np.array_equal(matrix, expected)


def test_sparse_matrix_matches_dense():
    view = make_view()
    sparse = view.to_sparse()

    assert sparse.shape == (2, 3)
    assert np.array_equal(sparse.toarray(), np.array([[1, 2, 3], [1, 0, 2]]))
    assert np.array_equal(sparse.toarray() - 1, view.to_matrix())


def test_empty_result():
    view = AlignmentView(shortest_common_supersequence_with_alignments([]))

    assert view.sequence_count == 0
    assert view.to_matrix().shape == (0, 0)
    assert view.to_sparse().shape == (0, 0)


if __name__ == "__main__":
    test_supersequence_passthrough()
    test_alignments_for_sequence()
    test_forward_and_reverse_maps()
    test_maps_are_copies()
    test_presence_and_lookup()
    test_sequence_indices()
    test_dense_matrix()
    test_sparse_matrix_matches_dense()
    test_empty_result()
    print("All tests passed!")
