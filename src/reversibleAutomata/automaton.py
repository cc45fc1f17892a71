"""Binary one-dimensional cellular automaton with per-cell rules."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from .cell import Cell
from .config import AutomatonConfig
from .errors import DomainError
from .extraction import extract_rules
from .graph import build_graph, cycle_sizes, find_cycles
from .isomorphism import enumerate_isomorphic_rule_vectors, exists_isomorphism
from .neighborhood import NeighborhoodResolver
from .results import IsomorphismMatch, ReversalReport
from .reversal import explore_reversed_isomorphisms, has_non_trivial_reversed_isomorphisms
from .rule_vector import RuleVector
from .sn_map import build_sn_maps, is_1_1_or_1_n
from .utils import bits_to_int, int_to_bits


class Automaton:
    """Binary 1D automaton whose cells may each run a different rule.

    The transition graph over all ``2**num_cells`` configurations is built
    eagerly at construction. Rules and boundary never change afterwards; a
    modified automaton is always a new instance.

    Notes:
    - Configuration ``c`` is read as an MSB-first bit string: cell 0 is the
      most significant bit.
    - Construction raises ``ValueError`` for out-of-range sizes, radii or
      rules.
    """

    def __init__(
        self,
        num_cells: int,
        l_radius: int,
        r_radius: int,
        boundary: str,
        rules: Sequence[int],
    ):
        self.config = AutomatonConfig(
            num_cells=num_cells,
            l_radius=l_radius,
            r_radius=r_radius,
            boundary=boundary,
            rules=tuple(rules),
        )
        self.rule_vector = RuleVector(self.config.rules)
        self.resolver = NeighborhoodResolver(
            self.num_cells, self.l_radius, self.r_radius, self.boundary
        )
        self.cells = [
            Cell(i, rule, self.num_neighbors) for i, rule in enumerate(self.config.rules)
        ]
        self.graph = build_graph(self.cells, self.resolver)
        self._cycles: list[tuple[int, ...]] | None = None

    @classmethod
    def from_config(cls, config: AutomatonConfig) -> "Automaton":
        return cls(config.num_cells, config.l_radius, config.r_radius, config.boundary, config.rules)

    # Geometry

    @property
    def num_cells(self) -> int:
        return self.config.num_cells

    @property
    def l_radius(self) -> int:
        return self.config.l_radius

    @property
    def r_radius(self) -> int:
        return self.config.r_radius

    @property
    def boundary(self) -> str:
        return self.config.boundary

    @property
    def num_neighbors(self) -> int:
        return self.config.num_neighbors

    @property
    def num_configs(self) -> int:
        return self.config.num_configs

    @property
    def rules(self) -> tuple[int, ...]:
        return self.rule_vector.rules

    @property
    def neighborhoods(self) -> np.ndarray:
        return self.resolver.table()

    def is_elementary(self) -> bool:
        return self.l_radius == 1 and self.r_radius == 1

    def get_neighborhood(self, cell_index: int, config: int) -> str:
        return self.resolver.neighborhood(cell_index, config)

    def get_next_config(self, config: int) -> int:
        return int(self.graph[config])

    def details(self) -> dict:
        return self.config.to_dict()

    def __repr__(self) -> str:
        return (
            f"Automaton(num_cells={self.num_cells}, l_radius={self.l_radius}, "
            f"r_radius={self.r_radius}, boundary={self.boundary!r}, rules={list(self.rules)})"
        )

    # Cell states

    @property
    def current_config(self) -> int:
        return bits_to_int(int(c.get_state()) for c in self.cells)

    def set_config(self, config: int) -> None:
        if not (0 <= config < self.num_configs):
            raise ValueError(f"config must be in [0, {self.num_configs})")
        for cell, bit in zip(self.cells, int_to_bits(config, self.num_cells).tolist()):
            cell.set_state(bool(bit))

    def randomize_config(self, rng: np.random.Generator) -> None:
        self.set_config(int(rng.integers(0, self.num_configs)))

    def update_config(self) -> None:
        """Advance every cell synchronously by one step."""
        current = self.current_config
        nbhds = [self.get_neighborhood(i, current) for i in range(self.num_cells)]
        for cell, nbhd in zip(self.cells, nbhds):
            cell.update_state(nbhd)

    def run(self, steps: int, x0: int | None = None) -> np.ndarray:
        """Simulate ``steps`` updates.

        Returns:
            np.ndarray: State history of shape (steps + 1, num_cells), int8.
        """
        if steps < 0:
            raise ValueError("steps must be >= 0")
        if x0 is not None:
            self.set_config(x0)
        states = np.zeros((steps + 1, self.num_cells), dtype=np.int8)
        states[0] = int_to_bits(self.current_config, self.num_cells)
        for t in range(1, steps + 1):
            self.update_config()
            states[t] = int_to_bits(self.current_config, self.num_cells)
        return states

    # Graph structure

    def cycles(self) -> list[tuple[int, ...]]:
        if self._cycles is None:
            self._cycles = find_cycles(self.graph)
        return list(self._cycles)

    def is_reversible(self) -> bool:
        return sum(len(c) for c in self.cycles()) == self.num_configs

    def has_cycle_structure_as(self, other: "Automaton") -> bool:
        return cycle_sizes(self.graph) == cycle_sizes(other.graph)

    def affected_configs(self, other: "Automaton") -> tuple[set[int], int]:
        """Configurations whose successor differs in ``other``.

        Returns:
            (affected configurations, number of this automaton's cycles
            containing at least one of them)
        """
        if other.num_configs != self.num_configs:
            raise ValueError("Automata must have the same number of cells")
        affected = set(np.flatnonzero(self.graph != other.graph).tolist())
        num_cycles = sum(1 for cycle in self.cycles() if affected.intersection(cycle))
        return affected, num_cycles

    def extract_rules(self, graph: np.ndarray) -> list[int] | None:
        """Rules realizing ``graph`` on this geometry, or ``None``."""
        return extract_rules(graph, self.neighborhoods, self.num_neighbors)

    def sn_maps(self) -> list[dict[str, set[str]]]:
        return build_sn_maps(self)

    def has_1_1_or_1_n_sn_maps(self) -> bool:
        return all(is_1_1_or_1_n(m) for m in self.sn_maps())

    # Isomorphism and cycle reversal

    def is_isomorphic(
        self,
        other: "Automaton",
        *,
        workers: int = 1,
        progress: bool = False,
        progress_mode: str = "auto",
    ) -> bool:
        return exists_isomorphism(
            self, other, workers=workers, progress=progress, progress_mode=progress_mode
        )

    def isomorphisms(
        self,
        *,
        workers: int = 1,
        on_match: Callable[[IsomorphismMatch], None] | None = None,
        progress: bool = False,
        progress_mode: str = "auto",
    ) -> list[IsomorphismMatch]:
        return enumerate_isomorphic_rule_vectors(
            self,
            workers=workers,
            on_match=on_match,
            progress=progress,
            progress_mode=progress_mode,
        )

    def reversed_isomorphisms(self, *, skip_trivial: bool = False) -> ReversalReport:
        return explore_reversed_isomorphisms(self, skip_trivial=skip_trivial)

    def has_non_trivial_reversed_isomorphisms(self) -> tuple[bool, bool, bool]:
        return has_non_trivial_reversed_isomorphisms(self)

    # GF(2) analysis (elementary, additive automata)

    def _require_elementary(self, what: str) -> None:
        if not self.is_elementary():
            raise DomainError(f"{what} is only supported for ECAs")

    def characteristic_matrix(self) -> np.ndarray:
        self._require_elementary("Characteristic matrix")
        return self.rule_vector.characteristic_matrix(self.boundary)

    def characteristic_polynomial(self) -> np.ndarray:
        self._require_elementary("Characteristic polynomial")
        return self.rule_vector.characteristic_polynomial(self.boundary)

    def has_complemented_isomorphisms(self) -> bool:
        self._require_elementary("Complemented isomorphisms")
        return self.rule_vector.is_complementable(self.boundary)

    def complemented_isomorphisms(self) -> list[RuleVector]:
        """Every subset-complemented rule vector, or ``[]`` if not complementable."""
        if not self.has_complemented_isomorphisms():
            return []
        return [self.rule_vector.complemented(mask) for mask in range(1 << self.num_cells)]
