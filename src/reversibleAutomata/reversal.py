"""Cycle reversal search ("reversed isomorphisms").

Reversing a subset of the transition graph's cycles, while keeping every
other arc, gives a candidate graph. The subset is a reversed isomorphism
when the candidate is realizable by per-cell rules on the same geometry.
Subsets are bitmasks over cycle indices, so the search is exponential in
the number of cycles; automata of the supported sizes have few.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from .extraction import extract_rules
from .results import ReversalReport, ReversedIsomorphism
from .utils import to_binary_str

if TYPE_CHECKING:
    from .automaton import Automaton

TRIVIAL_CYCLE_SIZE = 2


def reversed_graph(graph: np.ndarray, cycles: Sequence[Sequence[int]], mask: int) -> np.ndarray:
    """Copy of ``graph`` with the arcs of every cycle selected by ``mask`` reversed."""
    candidate = np.array(graph, dtype=np.int64, copy=True)
    for idx, cycle in enumerate(cycles):
        if (mask >> idx) & 1:
            nodes = np.fromiter(cycle, dtype=np.int64, count=len(cycle))
            candidate[graph[nodes]] = nodes
    return candidate


def is_non_trivial(cycles: Sequence[Sequence[int]], mask: int) -> bool:
    """Whether ``mask`` selects a cycle longer than two nodes."""
    return any(
        (mask >> idx) & 1 and len(cycle) > TRIVIAL_CYCLE_SIZE for idx, cycle in enumerate(cycles)
    )


def explore_reversed_isomorphisms(ca: "Automaton", *, skip_trivial: bool = False) -> ReversalReport:
    """Test every non-empty subset of cycles for a realizable reversal.

    Args:
        ca: Automaton whose graph is explored.
        skip_trivial: Drop cycles of size <= 2 before enumerating; reversing
            them never changes the graph.

    Returns:
        ReversalReport with one entry per tested subset, in mask order.
    """
    cycles = ca.cycles()
    if skip_trivial:
        cycles = [c for c in cycles if len(c) > TRIVIAL_CYCLE_SIZE]

    report = ReversalReport(cycles=cycles)
    width = max(len(cycles), 1)
    for mask in range(1, 1 << len(cycles)):
        candidate = reversed_graph(ca.graph, cycles, mask)
        rules = extract_rules(candidate, ca.neighborhoods, ca.num_neighbors)
        report.candidates.append(
            ReversedIsomorphism(
                mask=mask,
                pattern=to_binary_str(mask, width),
                non_trivial=is_non_trivial(cycles, mask),
                rules=None if rules is None else tuple(rules),
            )
        )
    return report


def has_non_trivial_reversed_isomorphisms(ca: "Automaton") -> tuple[bool, bool, bool]:
    """Summarize reversals over the cycles longer than two nodes.

    Returns:
        (has_any, has_trivial_partition, has_non_trivial_partitions) where
        the trivial partition reverses every remaining cycle at once and the
        non-trivial partitions are the proper non-empty subsets.
    """
    report = explore_reversed_isomorphisms(ca, skip_trivial=True)
    if not report.cycles:
        return False, False, False

    full_mask = (1 << len(report.cycles)) - 1
    trivial = False
    non_trivial = False
    for candidate in report.valid():
        if candidate.mask == full_mask:
            trivial = True
        else:
            non_trivial = True
    return trivial or non_trivial, trivial, non_trivial


__all__ = [
    "explore_reversed_isomorphisms",
    "has_non_trivial_reversed_isomorphisms",
    "is_non_trivial",
    "reversed_graph",
]
