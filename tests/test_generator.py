import numpy as np
import pytest

from reversibleAutomata.automaton import Automaton
from reversibleAutomata.generator import (
    is_single_cycle,
    random_reversible_eca,
    random_reversible_rules,
    sample_reversible_ecas,
)


@pytest.mark.parametrize("boundary", ["n", "p"])
@pytest.mark.parametrize("size", [3, 5, 8])
def test_random_rules_shape(boundary, size) -> None:
    rng = np.random.default_rng(size)
    rules = random_reversible_rules(size, boundary, rng)
    assert len(rules) == size
    assert all(0 <= r <= 255 for r in rules)


@pytest.mark.parametrize("seed", range(5))
def test_null_boundary_draws_are_reversible(seed) -> None:
    rng = np.random.default_rng(seed)
    for size in (3, 4, 5):
        ca = random_reversible_eca(size, "n", rng)
        assert ca.is_elementary()
        assert ca.is_reversible()


def test_size_limits() -> None:
    rng = np.random.default_rng(0)
    with pytest.raises(ValueError, match="minimum size"):
        random_reversible_rules(2, "n", rng)
    with pytest.raises(ValueError):
        random_reversible_rules(11, "p", rng)


def test_sample_with_predicate() -> None:
    rng = np.random.default_rng(1)
    assert len(sample_reversible_ecas(3, 4, "n", rng)) == 3
    assert sample_reversible_ecas(3, 4, "n", rng, lambda ca: False, max_attempts=20) == []
    picked = sample_reversible_ecas(2, 4, "n", rng, lambda ca: ca.num_cells == 4)
    assert [ca.num_cells for ca in picked] == [4, 4]


def test_is_single_cycle() -> None:
    assert not is_single_cycle(Automaton(3, 1, 1, "p", [170, 240, 57]))
    # one bit flips every step, the other flips when the first was set
    counter = Automaton(2, 0, 1, "p", [6, 3])
    assert is_single_cycle(counter)
