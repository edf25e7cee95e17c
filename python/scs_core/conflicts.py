"""Precedence graph diagnostics for supersequence lower bounds.

Every strongly connected component of size > 1 in the precedence graph is a
group of elements whose relative order differs between inputs. Any common
supersequence must repeat at least one element of each such group, so the
number of distinct elements plus one per conflict bounds the optimum from
below. These are bounds on the optimum only: the pointer search in
:mod:`scs_core.solver` advances one sequence at a time when heads only
partly agree, and may return a longer result even for conflict-free inputs.

Elements must be hashable here, unlike the solver which only needs an
equality predicate.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Sequence

import networkx as nx


def precedence_graph(sequences: Iterable[Sequence[Hashable]]) -> nx.DiGraph:
    """Build a directed graph with an edge per adjacent pair of elements.

    Edge ``weight`` counts how many times the pair occurs across inputs.
    """

    graph = nx.DiGraph()
    for sequence in sequences:
        graph.add_nodes_from(sequence)
        for prev, nxt in zip(sequence, sequence[1:]):
            if graph.has_edge(prev, nxt):
                graph[prev][nxt]["weight"] += 1
            else:
                graph.add_edge(prev, nxt, weight=1)
    return graph


def find_order_conflicts(sequences: Sequence[Sequence[Hashable]]) -> List[List[Hashable]]:
    """Return groups of elements whose relative order is contradicted.

    Groups and their members are ordered by first appearance in the inputs.
    Repeats of a single element (self loops) are not conflicts.
    """

    first_seen: Dict[Hashable, int] = {}
    for sequence in sequences:
        for element in sequence:
            first_seen.setdefault(element, len(first_seen))

    graph = precedence_graph(sequences)
    conflicts = [
        sorted(component, key=first_seen.__getitem__)
        for component in nx.strongly_connected_components(graph)
        if len(component) > 1
    ]
    conflicts.sort(key=lambda group: first_seen[group[0]])
    return conflicts


def has_repeated_elements(sequences: Iterable[Sequence[Hashable]]) -> bool:
    """True if any single input visits the same element more than once."""

    return any(len(set(sequence)) != len(sequence) for sequence in sequences)


def supersequence_lower_bound(sequences: Sequence[Sequence[Hashable]]) -> int:
    """Minimum length any common supersequence of ``sequences`` can have.

    Each distinct element appears at least once and each order conflict
    forces one more element, with conflicts sharing no elements. The bound
    is also never below the longest input.
    """

    distinct = {element for sequence in sequences for element in sequence}
    longest = max((len(sequence) for sequence in sequences), default=0)
    return max(longest, len(distinct) + len(find_order_conflicts(sequences)))
