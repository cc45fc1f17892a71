import numpy as np
import pytest

from reversibleAutomata.cell import Cell, rule_lkt
from reversibleAutomata.eca import complement_rmts
from reversibleAutomata.neighborhood import NeighborhoodResolver, config_bits


def test_config_bits_msb_first() -> None:
    bits = config_bits(3)
    assert bits.shape == (8, 3)
    assert bits[1].tolist() == [0, 0, 1]
    assert bits[4].tolist() == [1, 0, 0]


def test_null_boundary_reads_zero_outside() -> None:
    r = NeighborhoodResolver(3, 1, 1, "null")
    assert r.neighborhood(0, 0b001) == "000"
    assert r.neighborhood(2, 0b001) == "010"
    assert r.neighborhood(1, 0b101) == "101"
    assert r.neighbor_indices(0) == [-1, 0, 1]


def test_periodic_boundary_wraps() -> None:
    r = NeighborhoodResolver(3, 1, 1, "periodic")
    assert r.neighborhood(0, 0b001) == "100"
    assert r.neighborhood(2, 0b100) == "001"
    assert r.neighbor_indices(2) == [1, 2, 0]


def test_asymmetric_radius() -> None:
    r = NeighborhoodResolver(5, 2, 0, "p")
    assert r.neighborhood(0, "10001") == "011"
    assert r.neighborhood(4, "10001") == "001"


def test_table_matches_string_neighborhoods() -> None:
    for boundary in ("null", "periodic"):
        r = NeighborhoodResolver(4, 1, 2, boundary)
        table = r.table()
        assert table.shape == (4, 16)
        for i in range(4):
            for c in range(16):
                assert table[i, c] == int(r.neighborhood(i, c), 2)


def test_rule_lkt_little_endian() -> None:
    np.testing.assert_array_equal(rule_lkt(1, 3), [1, 0, 0, 0, 0, 0, 0, 0])
    np.testing.assert_array_equal(rule_lkt(204, 3), [0, 0, 1, 1, 0, 0, 1, 1])
    with pytest.raises(ValueError):
        rule_lkt(16, 2)


def test_cell_next_state() -> None:
    cell = Cell(0, 30, 3)
    # rule 30 = 00011110
    assert [cell.next_state(format(v, "03b")) for v in range(8)] == [
        False, True, True, True, True, False, False, False,
    ]
    cell.update_state("001")
    assert cell.get_state() is True
    cell.set_rule(0)
    assert cell.get_rule() == 0
    assert cell.next_state(1) is False
    assert repr(cell) == "Cell(index=0, rule=0, state=1)"


def test_complement_rmts() -> None:
    assert complement_rmts(170, [4, 5, 6, 7]) == 90
    assert complement_rmts(0, [0]) == 1
