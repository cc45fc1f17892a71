"""Rule vectors and their GF(2) characteristic matrix / polynomial."""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence

import numpy as np

from .config import MAX_SIZE, NULL, normalize_boundary
from .eca import ADDITIVE_RULE_DEPS, LINEAR_RULES, complement_rule, is_additive_rule
from .errors import DomainError
from .linalg import characteristic_polynomial, evaluate_at_one_mod2, reduce_mod2
from .utils import rules_to_string


class RuleVector:
    """Ordered, immutable per-cell rule numbers."""

    def __init__(self, rules: Sequence[int]):
        self._rules = tuple(int(r) for r in rules)

    @property
    def rules(self) -> tuple[int, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> int:
        return self._rules[index]

    def __iter__(self):
        return iter(self._rules)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RuleVector):
            return self._rules == other._rules
        if isinstance(other, (list, tuple)):
            return self._rules == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleVector({list(self._rules)})"

    def __str__(self) -> str:
        return rules_to_string(self._rules)

    def replace(self, index: int, rule: int) -> "RuleVector":
        """Copy with the rule of cell ``index`` replaced."""
        rules = list(self._rules)
        rules[index] = int(rule)
        return RuleVector(rules)

    def complemented(self, mask: int) -> "RuleVector":
        """Copy with ``255 - r`` for every cell ``j`` whose bit ``j`` is set in ``mask``."""
        return RuleVector(
            complement_rule(r) if (mask >> j) & 1 else r for j, r in enumerate(self._rules)
        )

    def is_additive(self) -> bool:
        return all(is_additive_rule(r) for r in self._rules)

    def characteristic_matrix(self, boundary: str) -> np.ndarray:
        """0/1 matrix whose row ``i`` marks the cells cell ``i`` depends on.

        Under null boundary the wrap-around dependencies of the first and
        last cells are dropped instead of wrapped.

        Raises:
            DomainError: If any rule is not additive.
        """
        if not self.is_additive():
            raise DomainError("Cannot represent non-additive rule vector as characteristic matrix")

        is_null = normalize_boundary(boundary) == NULL
        n = len(self._rules)
        M = np.zeros((n, n), dtype=np.int64)
        for i, rule in enumerate(self._rules):
            deps = ADDITIVE_RULE_DEPS[rule]
            if -1 in deps and (i != 0 or not is_null):
                M[i, (i - 1) % n] = 1
            if 0 in deps:
                M[i, i] = 1
            if 1 in deps and (i != n - 1 or not is_null):
                M[i, (i + 1) % n] = 1
        return M

    def characteristic_polynomial(self, boundary: str) -> np.ndarray:
        """GF(2) coefficients, lowest power first.

        The recurrence runs over the integers and only the final coefficients
        are reduced to their parity.
        """
        M = self.characteristic_matrix(boundary)
        return reduce_mod2(characteristic_polynomial(M))

    def is_complementable(self, boundary: str) -> bool:
        """True iff ``(x + 1)`` does not divide the characteristic polynomial."""
        return is_complementable_polynomial(self.characteristic_polynomial(boundary))

    @staticmethod
    def complementable_rule_vectors(
        size: int, boundary: str
    ) -> Iterator[tuple["RuleVector", np.ndarray]]:
        """Iterate every complementable vector over the linear rules, with its polynomial.

        Arguments are checked on call, before iteration starts.
        """
        if size < 1:
            raise ValueError("size must be >= 1")
        if size > MAX_SIZE:
            raise ValueError(f"Unsupported cellular automata size: max is {MAX_SIZE}")
        return _complementable_vectors(size, normalize_boundary(boundary))


def _complementable_vectors(size: int, boundary: str) -> Iterator[tuple[RuleVector, np.ndarray]]:
    for combo in itertools.product(LINEAR_RULES, repeat=size):
        rv = RuleVector(combo)
        coeffs = rv.characteristic_polynomial(boundary)
        if is_complementable_polynomial(coeffs):
            yield rv, coeffs


def is_complementable_polynomial(coeffs: np.ndarray) -> bool:
    """P(1) over GF(2) is 1, i.e. ``(x + 1)`` is not a factor."""
    return evaluate_at_one_mod2(coeffs) == 1


__all__ = ["RuleVector", "is_complementable_polynomial"]
