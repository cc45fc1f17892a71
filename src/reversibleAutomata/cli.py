"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import numpy as np

from . import report
from .automaton import Automaton
from .config import MAX_SIZE, load_config
from .generator import has_reversed_isomorphisms, is_single_cycle, sample_reversible_ecas

_PREDICATES = {
    "any": None,
    "single-cycle": is_single_cycle,
    "reversed-isomorphic": has_reversed_isomorphisms,
}


def _add_automaton_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", type=Path, help="JSON file with num_cells, l_radius, r_radius, boundary, rules")
    p.add_argument("--cells", type=int, help=f"number of cells (max: {MAX_SIZE})")
    p.add_argument("--left", type=int, default=1, help="left radius")
    p.add_argument("--right", type=int, default=1, help="right radius")
    p.add_argument("--boundary", default="p", help="(n)ull or (p)eriodic")
    p.add_argument("--rules", type=int, nargs="+", help="one rule number per cell")


def _add_search_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--workers", type=int, default=1)
    p.add_argument("--progress", action="store_true")


def _automaton_from_args(args: argparse.Namespace, rules=None) -> Automaton:
    if args.config is not None:
        with args.config.open("r", encoding="utf-8") as f:
            cfg = load_config(json.load(f))
        if rules is not None:
            cfg = load_config({**cfg.to_dict(), "rules": rules})
        return Automaton.from_config(cfg)

    rules = rules if rules is not None else args.rules
    if not rules:
        raise ValueError("--rules (or --config) is required")
    num_cells = args.cells if args.cells is not None else len(rules)
    return Automaton(num_cells, args.left, args.right, args.boundary, rules)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reversible-automata",
        description="Transition graph analysis of binary 1D cellular automata",
    )
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("details", "graph", "cycles", "complemented", "reversed", "matrix", "polynomial", "tweak", "rmt", "sn-maps"):
        _add_automaton_args(sub.add_parser(name))

    p = sub.add_parser("isomorphisms")
    _add_automaton_args(p)
    _add_search_args(p)

    p = sub.add_parser("check-isomorphism")
    _add_automaton_args(p)
    _add_search_args(p)
    p.add_argument("--other-rules", type=int, nargs="+", required=True)

    p = sub.add_parser("complementable")
    p.add_argument("--cells", type=int, required=True)
    p.add_argument("--boundary", default="p")

    p = sub.add_parser("random-reversible")
    p.add_argument("--cells", type=int, required=True)
    p.add_argument("--boundary", default="p")
    p.add_argument("--count", type=int, default=5)
    p.add_argument("--filter", choices=sorted(_PREDICATES), default="any")
    p.add_argument("--seed", type=int, default=None)
    return parser


def run(args: argparse.Namespace):
    cmd = args.command
    if cmd == "complementable":
        return report.complementable_table(args.cells, args.boundary)
    if cmd == "random-reversible":
        rng = np.random.default_rng(args.seed)
        automata = sample_reversible_ecas(
            args.count, args.cells, args.boundary, rng, _PREDICATES[args.filter]
        )
        return report.automata_table(automata)

    ca = _automaton_from_args(args)
    if cmd == "isomorphisms":
        return report.isomorphisms_table(ca, workers=args.workers, progress=args.progress)
    if cmd == "check-isomorphism":
        other = _automaton_from_args(args, rules=args.other_rules)
        return report.check_isomorphism_table(ca, other, workers=args.workers, progress=args.progress)

    builders = {
        "details": report.details_table,
        "graph": report.graph_table,
        "cycles": report.cycles_table,
        "complemented": report.complemented_table,
        "reversed": report.reversed_table,
        "matrix": report.matrix_table,
        "polynomial": report.polynomial_table,
        "tweak": report.tweak_table,
        "rmt": report.rmt_table,
        "sn-maps": report.sn_maps_table,
    }
    return builders[cmd](ca)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        table = run(args)
    except (OSError, ValueError) as err:
        print(f"err: {err}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(table.to_dict(), indent=2))
    else:
        print(report.format_table(table))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
