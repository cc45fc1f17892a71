import json

import pytest

from reversibleAutomata.cli import main
from reversibleAutomata.report import format_table
from reversibleAutomata.results import AnalysisTable


def _json(capsys, argv):
    assert main(["--json", *argv]) == 0
    return json.loads(capsys.readouterr().out)


def test_details(capsys) -> None:
    assert main(["details", "--rules", "170", "240", "57"]) == 0
    out = capsys.readouterr().out
    assert "Periodic" in out
    assert "[ 170 240 57 ]" in out


def test_polynomial_json(capsys) -> None:
    table = _json(capsys, ["polynomial", "--rules", "60", "90", "150"])
    assert table["headings"] == ["Polynomial", "Complementable"]
    assert table["rows"] == [["x³ + x", False]]


def test_reversed_rows(capsys) -> None:
    table = _json(capsys, ["reversed", "--rules", "170", "240", "57"])
    assert [row[0] for row in table["rows"]] == ["010", "011", "110", "111"]
    assert {row[1] for row in table["rows"]} == {"[ 170 240 99 ]"}


def test_reversed_without_long_cycles(capsys) -> None:
    table = _json(capsys, ["reversed", "--boundary", "n", "--rules", "204", "204", "204"])
    assert table["message"] == "No non-trivial reversed isomorphisms"


def test_cycles_and_graph(capsys) -> None:
    table = _json(capsys, ["cycles", "--rules", "170", "240", "57"])
    assert table["rows"][1] == [2, 4, "2 5 3 4"]
    assert table["message"] == "Reversible: True"

    table = _json(capsys, ["graph", "--rules", "170", "240", "57"])
    assert table["message"].splitlines()[0] == "0 --> 1 --> 0"


def test_check_isomorphism(capsys) -> None:
    table = _json(
        capsys,
        ["check-isomorphism", "--rules", "170", "240", "57", "--other-rules", "170", "240", "99", "--workers", "2"],
    )
    assert table["message"] == "isomorphic"


def test_isomorphisms_on_small_geometry(capsys) -> None:
    table = _json(capsys, ["isomorphisms", "--left", "0", "--rules", "12", "12"])
    assert len(table["rows"]) == 24


def test_complemented_and_complementable(capsys) -> None:
    table = _json(capsys, ["complemented", "--boundary", "n", "--rules", "170", "170", "170"])
    assert len(table["rows"]) == 8

    table = _json(capsys, ["complementable", "--cells", "1", "--boundary", "n"])
    assert [row[1] for row in table["rows"]] == ["[ 90 ]", "[ 170 ]", "[ 240 ]"]


def test_config_file(tmp_path, capsys) -> None:
    path = tmp_path / "ca.json"
    path.write_text(json.dumps({"rules": [204, 51, 204], "boundary": "null"}))
    table = _json(capsys, ["details", "--config", str(path)])
    assert table["rows"] == [[3, 1, 1, "Null", "[ 204 51 204 ]"]]


def test_random_reversible(capsys) -> None:
    table = _json(capsys, ["random-reversible", "--cells", "4", "--boundary", "n", "--count", "2", "--seed", "3"])
    assert len(table["rows"]) == 2


def test_invalid_rule_reports_error(capsys) -> None:
    assert main(["details", "--rules", "300", "1", "1"]) == 1
    assert "err: Invalid rule - 300" in capsys.readouterr().err


def test_domain_error_reports_error(capsys) -> None:
    assert main(["matrix", "--rules", "30", "90", "150"]) == 1
    assert capsys.readouterr().err.startswith("err: ")


def test_unknown_command() -> None:
    with pytest.raises(SystemExit):
        main(["nope"])


def test_format_table() -> None:
    text = format_table(AnalysisTable(headings=["A", "Long"], rows=[[1, True]], message="done"))
    assert text.splitlines() == ["A  Long", "-  ----", "1  True", "done"]


def test_table_save_json(tmp_path) -> None:
    path = tmp_path / "out" / "table.json"
    AnalysisTable(headings=["Rules"], rows=[["[ 12 ]"]]).save_json(path)
    assert json.loads(path.read_text()) == {"headings": ["Rules"], "rows": [["[ 12 ]"]], "message": None}


def test_complementable_rejects_oversized(capsys) -> None:
    assert main(["complementable", "--cells", "11"]) == 1
    assert "Unsupported cellular automata size" in capsys.readouterr().err


def test_missing_config_file_reports_error(tmp_path, capsys) -> None:
    assert main(["details", "--config", str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("err: ")
