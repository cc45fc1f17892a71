"""Single-cell rule perturbations of reversible ECAs."""

from __future__ import annotations

from .automaton import Automaton
from .eca import EQUIVALENT_RMTS, complement_rmts
from .errors import DomainError
from .results import RmtComplement, RuleTweak


def _variant(ca: Automaton, rules) -> Automaton:
    return Automaton(ca.num_cells, ca.l_radius, ca.r_radius, ca.boundary, rules)


def tweak_rules(ca: Automaton) -> list[RuleTweak]:
    """Flip each RMT of each cell's rule, one at a time.

    RMTs are visited from the highest to the lowest, i.e. left to right in
    the rule's binary string.

    Raises:
        DomainError: Unless ``ca`` is a reversible ECA.
    """
    if not ca.is_elementary() or not ca.is_reversible():
        raise DomainError("Rule tweaking is only supported for reversible ECAs")

    n_rmts = 1 << ca.num_neighbors
    out = []
    for i in range(ca.num_cells):
        for rmt in range(n_rmts - 1, -1, -1):
            rules = ca.rule_vector.replace(i, complement_rmts(ca.rules[i], [rmt])).rules
            other = _variant(ca, rules)
            affected, num_cycles = ca.affected_configs(other)
            out.append(
                RuleTweak(
                    cell=i,
                    rmt=rmt,
                    rules=rules,
                    same_cycle_structure=ca.has_cycle_structure_as(other),
                    configs_affected=len(affected),
                    cycles_affected=num_cycles,
                )
            )
    return out


def rmt_complemented_rules(ca: Automaton) -> list[RmtComplement]:
    """Complement one RMT of every equivalent pair, for each cell and each choice.

    Choice ``j`` takes the first RMT of pair ``g`` when bit ``g`` of ``j`` is
    set, the second otherwise.

    Raises:
        DomainError: Unless ``ca`` is a reversible ECA.
    """
    if not ca.is_elementary():
        raise DomainError("RMTs complemented rules are only supported for ECAs")
    if not ca.is_reversible():
        raise DomainError("RMTs complemented rules are only supported for reversible ECAs")

    out = []
    for i in range(ca.num_cells):
        for j in range(1 << len(EQUIVALENT_RMTS)):
            rmts = tuple(pair[0] if (j >> g) & 1 else pair[1] for g, pair in enumerate(EQUIVALENT_RMTS))
            rules = ca.rule_vector.replace(i, complement_rmts(ca.rules[i], rmts)).rules
            out.append(
                RmtComplement(
                    cell=i,
                    rmts=rmts,
                    rules=rules,
                    same_cycle_structure=ca.has_cycle_structure_as(_variant(ca, rules)),
                )
            )
    return out


__all__ = ["rmt_complemented_rules", "tweak_rules"]
