from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from reception_hierarchy import cli


def _write_csv(path: Path) -> Path:
    pd.DataFrame(
        {
            "positionNumber": [2, 1],
            "workGroup": ["Repair", "Repair"],
            "itemName": ["Gasket_ID_1", "Gasket_ID_2"],
            "transactionType": ["Доходы", "Расходы"],
            "quantity": [2, 1],
            "price": [500, 300],
            "receptionNumber": ["R-1", "R-1"],
        }
    ).to_csv(path, index=False)
    return path


def test_cli_outline_to_stdout(tmp_path, capsys):
    src = _write_csv(tmp_path / "reception.csv")

    assert cli.main([str(src)]) == 0

    out = capsys.readouterr().out
    assert "Двигатели (2)" in out
    assert out.index("[1]") < out.index("[2]")


def test_cli_json_to_file(tmp_path):
    src = _write_csv(tmp_path / "reception.csv")
    dest = tmp_path / "out" / "tree.json"

    cli.main([str(src), "--emit", "json", "--output", str(dest)])

    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data["header"]["receptionNumber"] == "R-1"
    assert [p["key"] for p in data["positions"]] == [1, 2]
    assert data["totals"] == {"income": "1000", "expense": "-300", "net": "700"}


def test_cli_empty_sheet_reports_no_data(tmp_path, capsys):
    src = tmp_path / "empty.csv"
    src.write_text(
        "positionNumber,workGroup,itemName,transactionType,quantity,price\n",
        encoding="utf-8",
    )

    cli.main([str(src), "--emit", "json"])

    assert json.loads(capsys.readouterr().out) == {"data": None}


def test_cli_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit) as ei:
        cli.main([str(tmp_path / "nope.xlsx")])
    assert "not found" in str(ei.value)


def test_cli_collapse_items(tmp_path, capsys):
    src = _write_csv(tmp_path / "reception.csv")

    cli.main([str(src), "--collapse-items"])

    out = capsys.readouterr().out
    assert "Доходы" in out
    assert "Gasket_ID_1" not in out
