"""Result dataclasses returned by the analysis operations."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serialisable dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class IsomorphismMatch(_Record):
    """A relabeling of the configuration space and the rules it induces."""

    permutation: tuple[int, ...]
    rules: tuple[int, ...]


@dataclass(frozen=True)
class ReversedIsomorphism(_Record):
    """Outcome of reversing one subset of cycles."""

    mask: int
    pattern: str
    non_trivial: bool
    rules: Optional[tuple[int, ...]]

    @property
    def is_valid(self) -> bool:
        return self.rules is not None


@dataclass
class ReversalReport(_Record):
    """Every subset tested by the cycle reversal search."""

    cycles: List[tuple[int, ...]]
    candidates: List[ReversedIsomorphism] = field(default_factory=list)

    @property
    def candidates_tested(self) -> int:
        return len(self.candidates)

    def valid(self, non_trivial_only: bool = False) -> List[ReversedIsomorphism]:
        return [
            c for c in self.candidates if c.is_valid and (c.non_trivial or not non_trivial_only)
        ]

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["candidates_tested"] = self.candidates_tested
        return out


@dataclass(frozen=True)
class RuleTweak(_Record):
    """One-bit perturbation of a single cell's rule."""

    cell: int
    rmt: int
    rules: tuple[int, ...]
    same_cycle_structure: bool
    configs_affected: int
    cycles_affected: int


@dataclass(frozen=True)
class RmtComplement(_Record):
    """Complementation of one RMT from each equivalent pair in a cell's rule."""

    cell: int
    rmts: tuple[int, ...]
    rules: tuple[int, ...]
    same_cycle_structure: bool


@dataclass
class AnalysisTable:
    """Headings and rows for a presentation layer, or a single status message."""

    headings: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)
    message: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the table to a JSON-serialisable dictionary."""
        return asdict(self)

    def save_json(self, path: str | Path) -> None:
        """Save the table to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


__all__ = [
    "AnalysisTable",
    "IsomorphismMatch",
    "ReversalReport",
    "ReversedIsomorphism",
    "RmtComplement",
    "RuleTweak",
]
