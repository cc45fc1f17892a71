"""Brute-force isomorphism search over configuration permutations.

Two automata are isomorphic iff some permutation ``p`` of the configuration
space satisfies ``p[graph1[c]] == graph2[p[c]]`` for every ``c``. The search
space is split on the outer index ``k`` (the configuration placed first);
for each ``k`` the remaining ``2**n - 1`` configurations are enumerated in
lexicographic order. Outer indices can be handed to a thread pool: each
worker owns its permutation and graph buffers, and only the found flag and
the result sink are shared.
"""

from __future__ import annotations

import itertools
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Callable

import numpy as np

from .extraction import extract_rules
from .graph import permute_graph
from .results import IsomorphismMatch
from .utils import make_progress_iterator

if TYPE_CHECKING:
    from .automaton import Automaton


def _rotations(k: int, size: int):
    """Yield every permutation starting with ``k``, tail in lexicographic order."""
    perm = np.empty(size, dtype=np.int64)
    perm[0] = k
    rest = [x for x in range(size) if x != k]
    for tail in itertools.permutations(rest):
        perm[1:] = tail
        yield perm


def _run_outer(
    total: int,
    task: Callable[[int], None],
    *,
    workers: int,
    stop: threading.Event | None,
    progress: bool,
    progress_mode: str,
    progress_desc: str,
) -> None:
    if workers < 1:
        raise ValueError("workers must be >= 1")

    iterator, progress_bar, use_print_progress = make_progress_iterator(
        total, progress=progress, progress_mode=progress_mode, progress_desc=progress_desc
    )
    print_every = max(1, total // 10)

    def _report(done: int) -> None:
        if use_print_progress and (done % print_every == 0 or done == total):
            print(f"[{progress_desc}] {done}/{total}")

    try:
        if workers == 1:
            for done, k in enumerate(iterator, start=1):
                if stop is not None and stop.is_set():
                    break
                task(k)
                _report(done)
            return

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(task, k) for k in range(total)]
            for done, future in enumerate(as_completed(futures), start=1):
                future.result()
                if progress_bar is not None:
                    progress_bar.update(1)
                _report(done)
    finally:
        if progress_bar is not None:
            progress_bar.close()


def exists_isomorphism(
    ca: "Automaton",
    other: "Automaton",
    *,
    workers: int = 1,
    progress: bool = False,
    progress_mode: str = "auto",
) -> bool:
    """Whether ``ca`` and ``other`` have isomorphic transition graphs.

    Workers poll the shared flag between permutation checks, so once a match
    is found no new check starts; checks already in flight still finish.
    """
    if ca.num_configs != other.num_configs:
        raise ValueError("Automata must have the same number of cells")

    size = ca.num_configs
    this_graph = ca.graph
    other_graph = other.graph
    found = threading.Event()

    def task(k: int) -> None:
        if found.is_set():
            return
        local_graph = np.empty(size, dtype=np.int64)
        for perm in _rotations(k, size):
            if found.is_set():
                return
            permute_graph(this_graph, perm, local_graph)
            if np.array_equal(local_graph, other_graph):
                found.set()
                return

    _run_outer(
        size,
        task,
        workers=workers,
        stop=found,
        progress=progress,
        progress_mode=progress_mode,
        progress_desc="Isomorphism",
    )
    return found.is_set()


def enumerate_isomorphic_rule_vectors(
    ca: "Automaton",
    *,
    workers: int = 1,
    on_match: Callable[[IsomorphismMatch], None] | None = None,
    progress: bool = False,
    progress_mode: str = "auto",
) -> list[IsomorphismMatch]:
    """Every permutation whose relabeled graph is realizable by per-cell rules.

    ``on_match`` is called under the output lock as each match is found. With
    several workers the order of matches is unspecified.
    """
    size = ca.num_configs
    this_graph = ca.graph
    neighborhoods = ca.neighborhoods
    num_neighbors = ca.num_neighbors
    matches: list[IsomorphismMatch] = []
    lock = threading.Lock()

    def task(k: int) -> None:
        local_graph = np.empty(size, dtype=np.int64)
        for perm in _rotations(k, size):
            permute_graph(this_graph, perm, local_graph)
            rules = extract_rules(local_graph, neighborhoods, num_neighbors)
            if rules is None:
                continue
            match = IsomorphismMatch(permutation=tuple(perm.tolist()), rules=tuple(rules))
            with lock:
                matches.append(match)
                if on_match is not None:
                    on_match(match)

    _run_outer(
        size,
        task,
        workers=workers,
        stop=None,
        progress=progress,
        progress_mode=progress_mode,
        progress_desc="Isomorphisms",
    )
    return matches


__all__ = ["exists_isomorphism", "enumerate_isomorphic_rule_vectors"]
