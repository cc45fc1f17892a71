"""Build tabular results for each analysis operation."""

from __future__ import annotations

import numpy as np

from .automaton import Automaton
from .graph import render_graph
from .perturbation import rmt_complemented_rules, tweak_rules
from .results import AnalysisTable
from .rule_vector import RuleVector
from .sn_map import is_1_1_or_1_n
from .utils import matrix_to_string, polynomial_to_string, rules_to_string


def details_table(ca: Automaton) -> AnalysisTable:
    return AnalysisTable(
        headings=["Num Cells", "L Radius", "R Radius", "Boundary", "Rules"],
        rows=[[ca.num_cells, ca.l_radius, ca.r_radius, ca.boundary.capitalize(), rules_to_string(ca.rules)]],
    )


def graph_table(ca: Automaton) -> AnalysisTable:
    return AnalysisTable(message=render_graph(ca.graph))


def cycles_table(ca: Automaton) -> AnalysisTable:
    cycles = ca.cycles()
    if not cycles:
        return AnalysisTable(message="No cycles")
    return AnalysisTable(
        headings=["S. No", "Size", "Configs"],
        rows=[[k + 1, len(c), " ".join(str(x) for x in c)] for k, c in enumerate(cycles)],
        message=f"Reversible: {ca.is_reversible()}",
    )


def isomorphisms_table(ca: Automaton, *, workers: int = 1, progress: bool = False) -> AnalysisTable:
    matches = ca.isomorphisms(workers=workers, progress=progress)
    return AnalysisTable(
        headings=["S. No", "Permutation", "Rules"],
        rows=[
            [k + 1, " ".join(str(p) for p in m.permutation), rules_to_string(m.rules)]
            for k, m in enumerate(matches)
        ],
    )


def check_isomorphism_table(
    ca: Automaton, other: Automaton, *, workers: int = 1, progress: bool = False
) -> AnalysisTable:
    iso = ca.is_isomorphic(other, workers=workers, progress=progress)
    return AnalysisTable(message="isomorphic" if iso else "not isomorphic")


def complemented_table(ca: Automaton) -> AnalysisTable:
    vectors = ca.complemented_isomorphisms()
    if not vectors:
        return AnalysisTable(message="No complemented isomorphisms")
    return AnalysisTable(
        headings=["S. No", "Rules"],
        rows=[[k + 1, str(rv)] for k, rv in enumerate(vectors)],
    )


def reversed_table(ca: Automaton) -> AnalysisTable:
    report = ca.reversed_isomorphisms()
    if not report.cycles:
        return AnalysisTable(message="No cycles to reverse")
    valid = report.valid(non_trivial_only=True)
    if not valid:
        return AnalysisTable(message="No non-trivial reversed isomorphisms")
    return AnalysisTable(
        headings=["Pattern", "Rules"],
        rows=[[c.pattern, rules_to_string(c.rules)] for c in valid],
    )


def matrix_table(ca: Automaton) -> AnalysisTable:
    return AnalysisTable(message=matrix_to_string(ca.characteristic_matrix()))


def polynomial_table(ca: Automaton) -> AnalysisTable:
    coeffs = ca.characteristic_polynomial()
    return AnalysisTable(
        headings=["Polynomial", "Complementable"],
        rows=[[polynomial_to_string(coeffs), ca.has_complemented_isomorphisms()]],
    )


def tweak_table(ca: Automaton) -> AnalysisTable:
    return AnalysisTable(
        headings=["S. No", "Rules", "Isomorphic", "Configs Affected", "Cycles Affected"],
        rows=[
            [k + 1, rules_to_string(t.rules), t.same_cycle_structure, t.configs_affected, t.cycles_affected]
            for k, t in enumerate(tweak_rules(ca))
        ],
    )


def rmt_table(ca: Automaton) -> AnalysisTable:
    return AnalysisTable(
        headings=["S. No", "Cell", "Complemented RMTs", "Rules", "Isomorphic"],
        rows=[
            [k + 1, r.cell + 1, rules_to_string(r.rmts), rules_to_string(r.rules), r.same_cycle_structure]
            for k, r in enumerate(rmt_complemented_rules(ca))
        ],
    )


def sn_maps_table(ca: Automaton) -> AnalysisTable:
    rows = []
    for i, m in enumerate(ca.sn_maps()):
        rows.append(
            [
                f"Cell-{i + 1}",
                " ".join(sorted(m["0"])),
                " ".join(sorted(m["1"])),
                is_1_1_or_1_n(m),
            ]
        )
    return AnalysisTable(headings=["Cell", "0", "1", "Is 1-1 or 1-N"], rows=rows)


def complementable_table(size: int, boundary: str) -> AnalysisTable:
    rows = [
        [k + 1, str(rv), polynomial_to_string(coeffs)]
        for k, (rv, coeffs) in enumerate(RuleVector.complementable_rule_vectors(size, boundary))
    ]
    if not rows:
        return AnalysisTable(message="No complementable rule vectors")
    return AnalysisTable(headings=["S. No", "Rules", "Polynomial"], rows=rows)


def automata_table(automata: list[Automaton]) -> AnalysisTable:
    if not automata:
        return AnalysisTable(message="No automata found")
    return AnalysisTable(
        headings=["S. No", "Rules", "Cycle Sizes"],
        rows=[
            [k + 1, rules_to_string(ca.rules), " ".join(str(len(c)) for c in ca.cycles())]
            for k, ca in enumerate(automata)
        ],
    )


def format_table(table: AnalysisTable) -> str:
    """Plain-text rendering with left-aligned, padded columns."""
    lines = []
    if table.headings:
        cells = [[str(h) for h in table.headings]] + [[_fmt(v) for v in row] for row in table.rows]
        widths = np.max([[len(c) for c in row] for row in cells], axis=0)
        for k, row in enumerate(cells):
            lines.append("  ".join(c.ljust(int(w)) for c, w in zip(row, widths)).rstrip())
            if k == 0:
                lines.append("  ".join("-" * int(w) for w in widths))
    if table.message:
        lines.append(table.message)
    return "\n".join(lines)


def _fmt(value) -> str:
    if isinstance(value, (bool, np.bool_)):
        return "True" if value else "False"
    return str(value)
