"""Transition graph utilities.

Every configuration of a cellular automaton has exactly one successor, so a
transition graph is stored as a 1D array: ``graph[i] = j`` is the edge
``i -> j``.
"""

from __future__ import annotations

import itertools
from typing import Sequence

import numpy as np

from .cell import Cell
from .neighborhood import NeighborhoodResolver


def build_graph(cells: Sequence[Cell], resolver: NeighborhoodResolver) -> np.ndarray:
    """Compute the successor of every configuration.

    Returns:
        np.ndarray: Read-only int64 array of length ``2**num_cells``.
    """
    n = resolver.num_cells
    table = resolver.table()
    graph = np.zeros(table.shape[1], dtype=np.int64)
    for i, cell in enumerate(cells):
        graph |= cell.evaluate(table[i]).astype(np.int64) << (n - 1 - i)
    graph.setflags(write=False)
    return graph


def find_cycles(graph: np.ndarray) -> list[tuple[int, ...]]:
    """Decompose a functional graph into its cycles.

    Each cycle is returned in traversal order starting from the first of its
    nodes reached. Walks stop at nodes already visited by an earlier walk,
    so every node is visited once and no node is claimed by two cycles.
    """
    succ = np.asarray(graph).tolist()
    size = len(succ)
    # 0 = unvisited, k + 1 = visited during the walk started at k
    walk_of = [0] * size
    cycles: list[tuple[int, ...]] = []

    for start in range(size):
        if walk_of[start]:
            continue
        path: list[int] = []
        node = start
        while not walk_of[node]:
            walk_of[node] = start + 1
            path.append(node)
            node = succ[node]
        if walk_of[node] == start + 1:
            cycles.append(tuple(path[path.index(node):]))
    return cycles


def cycle_sizes(graph: np.ndarray) -> list[int]:
    return sorted(len(c) for c in find_cycles(graph))


def permute_graph(graph: np.ndarray, perm: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """Relabel ``graph`` by ``perm``: ``out[perm[j]] = perm[graph[j]]``."""
    if out is None:
        out = np.empty_like(perm)
    out[perm] = perm[graph]
    return out


def are_isomorphic(G: np.ndarray, H: np.ndarray) -> bool:
    """Single-threaded brute force over every permutation of the nodes."""
    G = np.asarray(G, dtype=np.int64)
    H = np.asarray(H, dtype=np.int64)
    if G.shape != H.shape:
        return False
    if cycle_sizes(G) != cycle_sizes(H):
        return False

    buf = np.empty_like(G)
    for p in itertools.permutations(range(G.size)):
        perm = np.fromiter(p, dtype=np.int64, count=G.size)
        if np.array_equal(permute_graph(G, perm, buf), H):
            return True
    return False


def render_graph(graph: np.ndarray) -> str:
    """Text rendering: every cycle first, then the remaining tree components."""
    succ = np.asarray(graph).tolist()
    lines = []
    seen: set[int] = set()

    for cycle in find_cycles(graph):
        lines.append(" --> ".join(str(c) for c in cycle + (cycle[0],)))
        seen.update(cycle)

    for start in range(len(succ)):
        if start in seen:
            continue
        parts = [str(start)]
        node = start
        while node not in seen:
            seen.add(node)
            node = succ[node]
            parts.append(str(node))
        lines.append(" --> ".join(parts))
    return "\n".join(lines)
