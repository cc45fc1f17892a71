"""Random reversible ECAs drawn from chained rule-group tables.

Each cell's rule is drawn from a group selected by the group index that the
previous cell's rule belonged to. The tables are taken as given; no check
of their reversibility claims is made here.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .automaton import Automaton
from .config import MAX_SIZE, NULL, PERIODIC, normalize_boundary

RuleGroup = tuple[tuple[int, ...], int]

FIRST_CELL_RULE_GROUPS: dict[str, list[RuleGroup]] = {
    NULL: [
        ((3, 12), 0),
        ((5, 10), 1),
        ((6, 9), 2),
    ],
    PERIODIC: [
        ((51, 204), 3),
        ((85, 170), 4),
        ((102, 153), 5),
        ((23, 53, 83, 113, 142, 172, 202, 232), 6),
        ((27, 57, 78, 108, 147, 177, 198, 228), 7),
        ((89, 106, 149, 166), 8),
        ((86, 101, 154, 169), 9),
        ((43, 58, 77, 92, 163, 178, 197, 212), 10),
        ((39, 54, 99, 114, 141, 156, 201, 216), 11),
    ],
}

REGULAR_CELL_RULE_GROUPS: dict[str, list[list[RuleGroup]]] = {
    NULL: [
        [
            ((51, 60, 195, 204), 0),
            ((85, 90, 165, 170), 1),
            ((102, 105, 150, 153), 2),
            ((53, 58, 83, 92, 163, 172, 197, 202), 3),
            ((54, 57, 99, 108, 147, 156, 198, 201), 4),
            ((86, 89, 101, 106, 149, 154, 166, 169), 5),
        ],
        [
            ((15, 30, 45, 60, 75, 90, 105, 120, 135, 150, 165, 180, 195, 210, 225, 240), 0),
        ],
        [
            ((15, 51, 204, 240), 0),
            ((85, 105, 150, 170), 1),
            ((90, 102, 153, 165), 2),
            ((23, 43, 77, 113, 142, 178, 212, 232), 3),
            ((27, 39, 78, 114, 141, 177, 216, 228), 4),
            ((86, 89, 101, 106, 149, 154, 166, 169), 5),
        ],
        [
            ((60, 195), 0),
            ((90, 165), 3),
            ((105, 150), 4),
        ],
        [
            ((51, 204), 0),
            ((85, 170), 1),
            ((102, 153), 2),
            ((86, 89, 90, 101, 105, 106, 149, 150, 154, 165, 166, 169), 5),
        ],
        [
            ((15, 240), 0),
            ((105, 150), 3),
            ((90, 165), 4),
        ],
    ],
    PERIODIC: [
        [
            ((53, 54, 57, 58, 85, 86, 89, 90, 101, 102, 105, 106, 149, 150, 153, 154, 165, 166, 169, 170, 197, 198, 201, 202), 2),
        ],
        [
            ((83, 85, 86, 89, 90, 92, 99, 101, 102, 105, 106, 108, 147, 149, 150, 153, 154, 156, 163, 165, 166, 169, 170, 172), 2),
        ],
        [
            ((85, 86, 89, 90, 101, 102, 105, 106, 149, 150, 153, 154, 165, 166, 169, 170), 2),
        ],
        [
            ((51, 60, 195, 204), 3),
            ((85, 90, 165, 170), 4),
            ((102, 105, 150, 153), 5),
            ((53, 58, 83, 92, 163, 172, 197, 202), 12),
            ((54, 57, 99, 108, 147, 156, 198, 201), 13),
            ((86, 89, 101, 106, 149, 154, 166, 169), 14),
        ],
        [
            ((29, 46, 89, 106, 149, 166, 209, 226), 0),
            ((71, 86, 101, 116, 139, 154, 169, 184), 1),
            ((85, 102, 153, 170), 2),
            ((15, 30, 45, 60, 75, 90, 105, 120, 135, 150, 165, 180, 195, 210, 225, 240), 3),
        ],
        [
            ((15, 51, 204, 240), 3),
            ((85, 105, 150, 170), 4),
            ((90, 102, 153, 165), 5),
            ((23, 43, 77, 113, 142, 178, 212, 232), 12),
            ((27, 39, 78, 114, 141, 177, 216, 228), 13),
            ((86, 89, 101, 106, 149, 154, 166, 169), 14),
        ],
        [
            ((77, 78, 85, 86, 89, 101, 102, 106, 113, 114, 141, 142, 149, 153, 154, 166, 169, 170, 177, 178), 2),
            ((60, 195), 3),
            ((90, 165), 12),
            ((105, 150), 13),
        ],
        [
            ((85, 170), 4),
            ((102, 153), 5),
            ((29, 30, 45, 46, 51, 89, 90, 105, 106, 149, 150, 165, 166, 204, 209, 210, 225, 226), 8),
            ((86, 101, 154, 169), 14),
        ],
        [
            ((53, 54, 57, 58, 85, 86, 89, 101, 102, 106, 149, 153, 154, 166, 169, 170, 197, 198, 201, 202), 2),
            ((15, 240), 3),
            ((105, 150), 12),
            ((90, 165), 13),
        ],
        [
            ((83, 85, 89, 92, 99, 101, 102, 106, 108, 147, 149, 153, 154, 156, 163, 166, 170, 172), 2),
            ((15, 240), 3),
            ((105, 150), 12),
            ((86, 90, 165, 169), 13),
        ],
        [
            ((23, 27, 39, 43, 85, 86, 89, 101, 102, 106, 149, 153, 154, 166, 169, 170, 212, 216, 228, 232), 2),
            ((60, 195), 3),
            ((90, 165), 12),
            ((105, 150), 13),
        ],
        [
            ((51, 204), 3),
            ((85, 170), 4),
            ((102, 153), 5),
            ((71, 75, 86, 90, 101, 105, 116, 120, 135, 139, 150, 154, 165, 169, 180, 184), 9),
            ((89, 106, 149, 166), 14),
        ],
        [
            ((85, 86, 89, 101, 102, 106, 149, 153, 154, 166, 169, 170), 2),
            ((60, 195), 3),
            ((90, 165), 12),
            ((105, 150), 13),
        ],
        [
            ((51, 204), 3),
            ((85, 170), 4),
            ((102, 153), 5),
            ((86, 89, 90, 101, 105, 106, 149, 150, 154, 165, 166, 169), 14),
        ],
        [
            ((85, 86, 89, 101, 102, 106, 149, 153, 154, 166, 169, 170), 2),
            ((15, 240), 3),
            ((105, 150), 12),
            ((90, 165), 13),
        ],
    ],
}

LAST_CELL_RULE_GROUPS: dict[str, list[tuple[int, ...]]] = {
    NULL: [
        (17, 20, 65, 68),
        (5, 20, 65, 80),
        (5, 17, 68, 80),
        (20, 65),
        (17, 68),
        (5, 80),
    ],
}


def _pick(rng: np.random.Generator, items):
    return items[int(rng.integers(0, len(items)))]


def random_reversible_rules(size: int, boundary: str, rng: np.random.Generator) -> list[int]:
    """Draw an ECA rule vector by walking the rule-group chain."""
    boundary = normalize_boundary(boundary)
    if size < 3:
        raise ValueError("minimum size of ECA should be 3")
    if size > MAX_SIZE:
        raise ValueError(f"Unsupported cellular automata size: max is {MAX_SIZE}")

    rules, group = _pick(rng, FIRST_CELL_RULE_GROUPS[boundary])
    out = [_pick(rng, rules)]

    for _ in range(1, size - 1):
        rules, group = _pick(rng, REGULAR_CELL_RULE_GROUPS[boundary][group])
        out.append(_pick(rng, rules))

    if boundary == PERIODIC:
        rules, group = _pick(rng, REGULAR_CELL_RULE_GROUPS[boundary][group])
        out.append(_pick(rng, rules))
    else:
        out.append(_pick(rng, LAST_CELL_RULE_GROUPS[boundary][group]))
    return [int(r) for r in out]


def random_reversible_eca(size: int, boundary: str, rng: np.random.Generator) -> Automaton:
    return Automaton(size, 1, 1, boundary, random_reversible_rules(size, boundary, rng))


def is_single_cycle(ca: Automaton) -> bool:
    cycles = ca.cycles()
    return len(cycles) == 1 and len(cycles[0]) == ca.num_configs


def has_reversed_isomorphisms(ca: Automaton) -> bool:
    return ca.has_non_trivial_reversed_isomorphisms()[0]


def sample_reversible_ecas(
    count: int,
    size: int,
    boundary: str,
    rng: np.random.Generator,
    predicate: Callable[[Automaton], bool] | None = None,
    *,
    max_attempts: int = 10_000,
) -> list[Automaton]:
    """Draw random reversible ECAs until ``count`` satisfy ``predicate``.

    Returns fewer than ``count`` automata if ``max_attempts`` draws are
    exhausted first.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    out: list[Automaton] = []
    for _ in range(max_attempts):
        if len(out) >= count:
            break
        ca = random_reversible_eca(size, boundary, rng)
        if predicate is None or predicate(ca):
            out.append(ca)
    return out


__all__ = [
    "has_reversed_isomorphisms",
    "is_single_cycle",
    "random_reversible_eca",
    "random_reversible_rules",
    "sample_reversible_ecas",
]
