"""Tests for the text alignment grid."""

from scs_core import shortest_common_supersequence, visualise_alignment


def test_grid_layout():
    text = visualise_alignment([["A", "B"], ["B"]], ["A", "B"])

    assert text.splitlines() == [
        "Input sequences and their alignment with the supersequence:",
        "",
        "SCS: A B",
        "     ─ ─",
        "S1:  A B",
        "S2:    B",
    ]


def test_columns_pad_to_widest_element():
    lines = visualise_alignment([[1, 10], [10]], [1, 10]).splitlines()

    assert lines[2] == "SCS: 1  10"
    assert lines[3] == "     ── ──"
    assert lines[4] == "S1:  1  10"
    assert lines[5] == "S2:     10"


def test_unmatched_elements_are_left_blank():
    lines = visualise_alignment([["C"]], ["A"]).splitlines()

    assert lines[-1] == "S1:   "


def test_renders_solved_alignment():
    sequences = [["X", "A", "B"], ["Y", "A", "B"]]
    supersequence = shortest_common_supersequence(sequences)
    lines = visualise_alignment(sequences, supersequence).splitlines()

    assert len(lines) == 2 + 2 + len(sequences)
    assert lines[2] == "SCS: X Y A B"
    assert lines[4] == "S1:  X   A B"
    assert lines[5] == "S2:    Y A B"


if __name__ == "__main__":
    test_grid_layout()
    test_columns_pad_to_widest_element()
    test_unmatched_elements_are_left_blank()
    test_renders_solved_alignment()
    print("All tests passed!")
