"""State-to-neighborhood maps of each cell."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from .automaton import Automaton


def build_sn_maps(ca: "Automaton") -> list[dict[str, set[str]]]:
    """Per cell: state in a configuration -> neighborhoods in its successor.

    Entry ``maps[i]['0']`` collects the neighborhood strings of cell ``i`` in
    ``graph[c]`` over every configuration ``c`` where cell ``i`` is 0.
    """
    maps: list[dict[str, set[str]]] = [{"0": set(), "1": set()} for _ in range(ca.num_cells)]
    for config in range(ca.num_configs):
        state_bits = format(config, f"0{ca.num_cells}b")
        next_config = int(ca.graph[config])
        for i in range(ca.num_cells):
            maps[i][state_bits[i]].add(ca.get_neighborhood(i, next_config))
    return maps


def is_1_1_or_1_n(sn_map: Mapping[str, set[str]]) -> bool:
    """True when no neighborhood is reached from both states."""
    keys = list(sn_map)
    for a in keys:
        for b in keys:
            if a != b and sn_map[a] & sn_map[b]:
                return False
    return True
