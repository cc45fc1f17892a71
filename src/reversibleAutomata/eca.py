"""Elementary cellular automata rule tables."""

from __future__ import annotations

# Left neighbor is -1, the cell itself 0, the right neighbor 1.
ADDITIVE_RULE_DEPS: dict[int, frozenset[int]] = {
    60: frozenset({-1, 0}),
    90: frozenset({-1, 1}),
    102: frozenset({0, 1}),
    150: frozenset({-1, 0, 1}),
    170: frozenset({1}),
    204: frozenset({0}),
    240: frozenset({-1}),
    # complemented counterparts share the dependency set
    195: frozenset({-1, 0}),
    165: frozenset({-1, 1}),
    153: frozenset({0, 1}),
    105: frozenset({-1, 0, 1}),
    85: frozenset({1}),
    51: frozenset({0}),
    15: frozenset({-1}),
}

LINEAR_RULES: tuple[int, ...] = (60, 90, 102, 150, 170, 204, 240)

# RMT pairs differing only in the left neighbor bit.
EQUIVALENT_RMTS: tuple[tuple[int, int], ...] = ((0, 4), (1, 5), (2, 6), (3, 7))


def is_additive_rule(rule_number: int) -> bool:
    return int(rule_number) in ADDITIVE_RULE_DEPS


def complement_rule(rule_number: int) -> int:
    return 255 - int(rule_number)


def complement_rmts(rule_number: int, rmts) -> int:
    """Flip the output bits of the given rule min terms."""
    out = int(rule_number)
    for rmt in rmts:
        out ^= 1 << int(rmt)
    return out
