import pytest

from reversibleAutomata.automaton import Automaton
from reversibleAutomata.isomorphism import (
    enumerate_isomorphic_rule_vectors,
    exists_isomorphism,
)


def _ca(rules, boundary="p", l_radius=1, r_radius=1):
    return Automaton(len(rules), l_radius, r_radius, boundary, rules)


def _pair(rules):
    # two cells, each reading itself and its right neighbor
    return Automaton(2, 0, 1, "p", rules)


def test_isomorphism_is_reflexive() -> None:
    ca = _pair([12, 12])
    assert ca.is_isomorphic(ca)
    assert _pair([10, 12]).is_isomorphic(_pair([10, 12]))


def test_cycle_reversed_automata_are_isomorphic_both_ways() -> None:
    a = _ca([170, 240, 57])
    b = _ca([170, 240, 99])
    assert exists_isomorphism(a, b)
    assert exists_isomorphism(b, a)


def test_bijective_and_non_bijective_are_not_isomorphic() -> None:
    identity = _pair([12, 12])
    collapse = _pair([10, 12])
    assert not identity.is_isomorphic(collapse)
    assert not collapse.is_isomorphic(identity)


@pytest.mark.parametrize("workers", [2, 4])
def test_parallel_search_agrees_with_sequential(workers) -> None:
    a = _ca([170, 240, 57])
    b = _ca([170, 240, 99])
    assert a.is_isomorphic(b, workers=workers)
    assert not _pair([12, 12]).is_isomorphic(_pair([10, 12]), workers=workers)


def test_size_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        exists_isomorphism(_pair([12, 12]), _ca([204, 204, 204]))


def test_invalid_worker_count() -> None:
    with pytest.raises(ValueError):
        _pair([12, 12]).is_isomorphic(_pair([12, 12]), workers=0)


def test_enumerate_identity_relabelings() -> None:
    ca = _pair([12, 12])
    matches = ca.isomorphisms()
    assert len(matches) == 24
    assert len({m.permutation for m in matches}) == 24
    assert all(m.rules == (12, 12) for m in matches)
    # outer index first, tail in lexicographic order
    assert matches[0].permutation == (0, 1, 2, 3)
    assert matches[1].permutation == (0, 1, 3, 2)


def test_enumerate_with_workers_and_callback() -> None:
    ca = _pair([10, 12])
    seen = []
    matches = enumerate_isomorphic_rule_vectors(ca, workers=3, on_match=seen.append)
    sequential = enumerate_isomorphic_rule_vectors(ca)
    assert len(seen) == len(matches)
    assert {m.permutation for m in matches} == {m.permutation for m in sequential}
    assert ca.rules in {m.rules for m in matches}


def test_enumerate_print_progress(capsys) -> None:
    _pair([12, 12]).isomorphisms(progress=True, progress_mode="print")
    out = capsys.readouterr().out
    assert "[Isomorphisms] 4/4" in out


def test_match_to_dict() -> None:
    match = _pair([12, 12]).isomorphisms()[0]
    assert match.to_dict() == {"permutation": (0, 1, 2, 3), "rules": (12, 12)}
