#!/usr/bin/env python3
"""Merge the stop orders of several trips into one timetable layout.

Each trip visits a slightly different set of stops. The supersequence gives
the timetable's rows and the alignment view says which row each departure
belongs in. Trips are displayed sorted by first departure, but alignments
are looked up by each trip's position in the original input list.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from scs_core import (
    AlignmentView,
    find_order_conflicts,
    shortest_common_supersequence_with_alignments,
    visualise_alignment,
)

Trip = Tuple[str, List[Tuple[str, str]]]  # (trip id, [(stop id, departure)])

TRIPS: List[Trip] = [
    ("T3", [("DEP", "08:30"), ("MKT", "08:41"), ("HBR", "08:55")]),
    ("T1", [("DEP", "07:00"), ("MKT", "07:11"), ("UNI", "07:18"), ("HBR", "07:30")]),
    ("T2", [("AIR", "07:35"), ("DEP", "07:50"), ("UNI", "08:04"), ("HBR", "08:15")]),
    ("T4", [("DEP", "09:00"), ("HBR", "09:20")]),
]


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    stop_orders = [[stop for stop, _ in stops] for _, stops in TRIPS]
    result = shortest_common_supersequence_with_alignments(stop_orders)
    view = AlignmentView(result)

    print(visualise_alignment(stop_orders, result.supersequence))
    print()

    conflicts = find_order_conflicts(stop_orders)
    if conflicts:
        print("Stops visited in contradicting orders:", conflicts)

    ordered = sorted(range(len(TRIPS)), key=lambda idx: TRIPS[idx][1][0][1])
    header = ["stop"] + [TRIPS[idx][0] for idx in ordered]
    print("  ".join(f"{cell:<5}" for cell in header))
    for row, stop_id in enumerate(result.supersequence):
        cells = [stop_id]
        for idx in ordered:
            input_pos = view.reverse_mapping(idx).get(row)
            cells.append("" if input_pos is None else TRIPS[idx][1][input_pos][1])
        print("  ".join(f"{cell:<5}" for cell in cells))

    if not result.exact:
        print("\nWarning: state cap reached, layout is not minimal")


if __name__ == "__main__":
    main()
