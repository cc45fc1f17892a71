import pytest

from reversibleAutomata.automaton import Automaton
from reversibleAutomata.errors import DomainError
from reversibleAutomata.perturbation import rmt_complemented_rules, tweak_rules


def _ca(rules, boundary="p"):
    return Automaton(len(rules), 1, 1, boundary, rules)


def test_tweak_rules_flips_one_rmt() -> None:
    ca = _ca([170, 240, 57])
    tweaks = tweak_rules(ca)
    assert len(tweaks) == 3 * 8
    assert (tweaks[0].cell, tweaks[0].rmt, tweaks[0].rules) == (0, 7, (42, 240, 57))
    assert [t.rmt for t in tweaks[:8]] == list(range(7, -1, -1))

    for t in tweaks:
        diff = t.rules[t.cell] ^ ca.rules[t.cell]
        assert diff == 1 << t.rmt
        # each neighborhood occurs once per cell on three periodic cells
        assert t.configs_affected == 1
        assert t.cycles_affected == 1
        # redirecting one arc of a permutation breaks bijectivity
        assert not t.same_cycle_structure


def test_rmt_complemented_rules() -> None:
    ca = _ca([170, 240, 57])
    rows = rmt_complemented_rules(ca)
    assert len(rows) == 3 * 16
    assert rows[0].cell == 0
    assert rows[0].rmts == (4, 5, 6, 7)
    assert rows[0].rules == (90, 240, 57)
    assert rows[15].rmts == (0, 1, 2, 3)
    assert rows[16].cell == 1


@pytest.mark.parametrize("fn", [tweak_rules, rmt_complemented_rules])
def test_perturbations_require_reversible_eca(fn) -> None:
    with pytest.raises(DomainError):
        fn(_ca([0, 0, 0]))
    with pytest.raises(DomainError):
        fn(Automaton(3, 0, 1, "p", [12, 12, 12]))


def test_rows_to_dict() -> None:
    ca = _ca([170, 240, 57])
    assert tweak_rules(ca)[0].to_dict() == {
        "cell": 0,
        "rmt": 7,
        "rules": (42, 240, 57),
        "same_cycle_structure": False,
        "configs_affected": 1,
        "cycles_affected": 1,
    }
    row = rmt_complemented_rules(ca)[0].to_dict()
    assert row["rmts"] == (4, 5, 6, 7)
    assert row["rules"] == (90, 240, 57)
