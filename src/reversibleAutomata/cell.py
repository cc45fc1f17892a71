"""Single-cell lookup-table rules."""

from __future__ import annotations

import numpy as np

from .utils import bits_to_int


def rule_lkt(rule_number: int, num_neighbors: int) -> np.ndarray:
    """Generate a rule lookup table.

    Entry ``v`` is the next state for the neighborhood whose MSB-first bit
    string encodes ``v`` (Wolfram convention: bit ``v`` of the rule number).

    Args:
        rule_number: Integer in [0, 2**(2**num_neighbors)).
        num_neighbors: Neighborhood size.

    Returns:
        np.ndarray: Lookup table of shape (2**num_neighbors,) with dtype int8.
    """
    size = 1 << num_neighbors
    if not (0 <= rule_number < (1 << size)):
        raise ValueError(f"rule_number must be between 0 and {(1 << size) - 1}")
    bits = [(int(rule_number) >> i) & 1 for i in range(size)]
    return np.array(bits, dtype=np.int8)


class Cell:
    """One cell of a binary automaton: its rule table and current state."""

    def __init__(self, index: int, rule: int, num_neighbors: int, state: bool = False):
        self.index = int(index)
        self.num_neighbors = int(num_neighbors)
        self.state = bool(state)
        self.set_rule(rule)

    def get_rule(self) -> int:
        return self._rule

    def set_rule(self, rule: int) -> None:
        self._lkt = rule_lkt(int(rule), self.num_neighbors)
        self._rule = int(rule)

    def get_state(self) -> bool:
        return self.state

    def set_state(self, state: bool) -> None:
        self.state = bool(state)

    def next_state(self, neighborhood: str | int) -> bool:
        """Evaluate the rule on a neighborhood bit string (or its integer value)."""
        if isinstance(neighborhood, str):
            neighborhood = bits_to_int(neighborhood)
        return bool(self._lkt[int(neighborhood)])

    def evaluate(self, neighborhoods: np.ndarray) -> np.ndarray:
        """Vectorised ``next_state`` over an array of neighborhood values."""
        return self._lkt[neighborhoods]

    def update_state(self, neighborhood: str | int) -> None:
        self.state = self.next_state(neighborhood)

    def __repr__(self) -> str:
        return f"Cell(index={self.index}, rule={self._rule}, state={int(self.state)})"
