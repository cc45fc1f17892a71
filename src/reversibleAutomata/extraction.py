"""Recover per-cell rules from a candidate transition graph."""

from __future__ import annotations

import numpy as np


def extract_rules(
    graph: np.ndarray,
    neighborhoods: np.ndarray,
    num_neighbors: int,
) -> list[int] | None:
    """Synthesize a rule vector realizing ``graph``, if one exists.

    For each cell ``i`` and configuration ``j``, the bit of cell ``i`` in
    ``graph[j]`` must be the rule output on cell ``i``'s neighborhood in
    ``j``. Two configurations sharing a neighborhood but demanding different
    outputs make the graph unrealizable.

    Args:
        graph: Candidate successor array of length ``2**num_cells``.
        neighborhoods: ``NeighborhoodResolver.table()`` of the automaton
            geometry, shape (num_cells, 2**num_cells).
        num_neighbors: Neighborhood size.

    Returns:
        The rule numbers, or ``None`` when any cell is inconsistent.
        Neighborhoods that never occur (null boundary edges) read as 0.
    """
    graph = np.asarray(graph, dtype=np.int64)
    num_cells = neighborhoods.shape[0]
    n_patterns = 1 << num_neighbors
    weights = np.int64(1) << np.arange(n_patterns, dtype=np.int64)

    rules = []
    for i in range(num_cells):
        nbhd = neighborhoods[i]
        out = (graph >> (num_cells - 1 - i)) & 1
        seen = np.bincount(nbhd, minlength=n_patterns)
        ones = np.bincount(nbhd, weights=out, minlength=n_patterns).astype(np.int64)
        if np.any((ones != 0) & (ones != seen)):
            return None
        rules.append(int(np.sum(weights[ones > 0])))
    return rules

