"""Configuration dataclass and parsing for binary 1D cellular automata."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

MAX_SIZE = 10
MAX_L_RADIUS = 2
MAX_R_RADIUS = 2

NULL = "null"
PERIODIC = "periodic"

_BOUNDARY_ALIASES = {
    "n": NULL,
    "null": NULL,
    "p": PERIODIC,
    "periodic": PERIODIC,
}


def normalize_boundary(value: str) -> str:
    """Map a boundary symbol (``n``/``p`` or full name) to ``"null"``/``"periodic"``."""
    key = str(value).strip().lower()
    if key not in _BOUNDARY_ALIASES:
        raise ValueError(f"Unknown boundary condition: {value!r}")
    return _BOUNDARY_ALIASES[key]


def _as_int(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def max_rule(num_neighbors: int) -> int:
    """Largest rule number for a neighborhood of ``num_neighbors`` cells."""
    return (1 << (1 << num_neighbors)) - 1


@dataclass(frozen=True)
class AutomatonConfig:
    """Validated construction parameters of a binary 1D automaton."""

    num_cells: int
    l_radius: int
    r_radius: int
    boundary: str
    rules: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "boundary", normalize_boundary(self.boundary))
        for name in ("num_cells", "l_radius", "r_radius"):
            object.__setattr__(self, name, _as_int(getattr(self, name), name))
        object.__setattr__(self, "rules", tuple(_as_int(r, "rule") for r in self.rules))

        if self.l_radius < 0 or self.l_radius > MAX_L_RADIUS:
            raise ValueError(f"Unsupported left radius: must be in [0, {MAX_L_RADIUS}]")
        if self.r_radius < 0 or self.r_radius > MAX_R_RADIUS:
            raise ValueError(f"Unsupported right radius: must be in [0, {MAX_R_RADIUS}]")
        if self.num_cells < self.l_radius + self.r_radius + 1:
            raise ValueError("Neighborhood size can't be greater than CA size")
        if self.num_cells > MAX_SIZE:
            raise ValueError(f"Unsupported cellular automata size: max is {MAX_SIZE}")
        if len(self.rules) != self.num_cells:
            raise ValueError("Number of rules must be equal to number of cells")

        limit = max_rule(self.num_neighbors)
        for rule in self.rules:
            if rule < 0 or rule > limit:
                raise ValueError(f"Invalid rule - {rule}")

    @property
    def num_neighbors(self) -> int:
        return self.l_radius + self.r_radius + 1

    @property
    def num_configs(self) -> int:
        return 1 << self.num_cells

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_cells": self.num_cells,
            "l_radius": self.l_radius,
            "r_radius": self.r_radius,
            "boundary": self.boundary,
            "rules": list(self.rules),
        }


def load_config(config: Mapping[str, Any] | None) -> AutomatonConfig:
    """Parse a plain mapping (e.g. loaded from JSON) into an ``AutomatonConfig``.

    Missing radii default to 1 (elementary automata) and the boundary to
    ``"periodic"``. ``num_cells`` defaults to the number of rules.
    """
    cfg = dict(config or {})
    if "rules" not in cfg:
        raise ValueError("Automaton config requires 'rules'")
    raw_rules = cfg["rules"]
    if isinstance(raw_rules, (str, bytes)) or not isinstance(raw_rules, Sequence):
        raise ValueError("'rules' must be a list of rule numbers")
    rules = tuple(raw_rules)

    return AutomatonConfig(
        num_cells=cfg.get("num_cells", len(rules)),
        l_radius=cfg.get("l_radius", 1),
        r_radius=cfg.get("r_radius", 1),
        boundary=str(cfg.get("boundary", PERIODIC)),
        rules=rules,
    )


__all__ = [
    "MAX_SIZE",
    "MAX_L_RADIUS",
    "MAX_R_RADIUS",
    "NULL",
    "PERIODIC",
    "AutomatonConfig",
    "load_config",
    "max_rule",
    "normalize_boundary",
]
