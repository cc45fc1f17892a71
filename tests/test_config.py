import numpy as np
import pytest

from reversibleAutomata.automaton import Automaton
from reversibleAutomata.config import (
    MAX_SIZE,
    AutomatonConfig,
    load_config,
    max_rule,
    normalize_boundary,
)


def test_normalize_boundary_symbols() -> None:
    assert normalize_boundary("n") == "null"
    assert normalize_boundary("P") == "periodic"
    assert normalize_boundary("Periodic") == "periodic"
    with pytest.raises(ValueError):
        normalize_boundary("x")


def test_max_rule_by_neighborhood() -> None:
    assert max_rule(3) == 255
    assert max_rule(1) == 3
    assert max_rule(5) == 2**32 - 1


@pytest.mark.parametrize(
    "kwargs, message",
    [
        (dict(num_cells=MAX_SIZE + 1, l_radius=1, r_radius=1, rules=[0] * (MAX_SIZE + 1)), "Unsupported cellular automata size"),
        (dict(num_cells=4, l_radius=3, r_radius=0, rules=[0] * 4), "Unsupported left radius"),
        (dict(num_cells=4, l_radius=0, r_radius=3, rules=[0] * 4), "Unsupported right radius"),
        (dict(num_cells=2, l_radius=1, r_radius=1, rules=[0] * 2), "Neighborhood size"),
        (dict(num_cells=3, l_radius=1, r_radius=1, rules=[0] * 2), "Number of rules"),
        (dict(num_cells=3, l_radius=1, r_radius=1, rules=[0, 256, 0]), "Invalid rule - 256"),
        (dict(num_cells=3, l_radius=1, r_radius=1, rules=[204.9, 204, 204]), "rule must be an integer"),
        (dict(num_cells=3.7, l_radius=1, r_radius=1, rules=[204] * 3), "num_cells must be an integer"),
        (dict(num_cells=3, l_radius=1.0, r_radius=1, rules=[204] * 3), "l_radius must be an integer"),
        (dict(num_cells=3, l_radius=1, r_radius="1", rules=[204] * 3), "r_radius must be an integer"),
    ],
)
def test_construction_rejects_out_of_range(kwargs, message) -> None:
    with pytest.raises(ValueError, match=message):
        Automaton(boundary="p", **kwargs)


def test_wide_neighborhood_accepts_full_rule_range() -> None:
    ca = Automaton(5, 2, 2, "p", [2**32 - 1] * 5)
    assert ca.num_neighbors == 5
    assert (ca.graph == ca.num_configs - 1).all()


def test_config_is_normalized() -> None:
    cfg = AutomatonConfig(num_cells=3, l_radius=1, r_radius=1, boundary="N", rules=[204, 51, 204])
    assert cfg.boundary == "null"
    assert cfg.rules == (204, 51, 204)
    assert cfg.num_configs == 8
    assert cfg.to_dict()["rules"] == [204, 51, 204]


def test_load_config_defaults() -> None:
    cfg = load_config({"rules": [170, 240, 57]})
    assert (cfg.num_cells, cfg.l_radius, cfg.r_radius, cfg.boundary) == (3, 1, 1, "periodic")

    ca = Automaton.from_config(cfg)
    assert ca.rules == (170, 240, 57)


def test_load_config_requires_rules() -> None:
    with pytest.raises(ValueError):
        load_config({})
    with pytest.raises(ValueError):
        load_config({"rules": "170"})


def test_numpy_integers_are_accepted() -> None:
    ca = Automaton(np.int64(3), 1, 1, "p", np.array([170, 240, 57]))
    assert ca.rules == (170, 240, 57)
    assert type(ca.num_cells) is int


def test_load_config_rejects_fractional_values() -> None:
    with pytest.raises(ValueError, match="rule must be an integer"):
        load_config({"rules": [204, 51.5, 204]})
    with pytest.raises(ValueError, match="num_cells must be an integer"):
        load_config({"rules": [204, 51, 204], "num_cells": 3.0})
