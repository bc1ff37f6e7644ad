import json
import sys

import pytest

from marketboard import cli


def test_run_validate_accepts_good_catalog(monkeypatch, tmp_path, capsys):
    cards = [
        {"id": f"{c}-{lvl}", "category": c, "level": lvl, "cost": {"coin": lvl}}
        for c in ("green", "blue", "yellow", "purple")
        for lvl in (1, 2, 3)
    ]
    path = tmp_path / "cards.json"
    path.write_text(json.dumps({"cards": cards}), encoding="utf-8")
    monkeypatch.delenv("MARKETBOARD_CATALOG_PATH", raising=False)
    monkeypatch.setattr(sys, "argv", ["marketboard-validate", "--catalog", str(path)])

    cli.run_validate()
    assert "valid" in capsys.readouterr().out


def test_run_validate_rejects_bad_catalog(monkeypatch, tmp_path, capsys):
    path = tmp_path / "cards.json"
    path.write_text(json.dumps({"cards": [{"id": "x", "category": "red", "level": 1, "cost": {}}]}))
    monkeypatch.setattr(sys, "argv", ["marketboard-validate", "--catalog", str(path)])

    with pytest.raises(SystemExit):
        cli.run_validate()
    assert "invalid category" in capsys.readouterr().out


def test_run_show_prints_tables(monkeypatch, capsys):
    monkeypatch.delenv("MARKETBOARD_CATALOG_PATH", raising=False)
    monkeypatch.setattr(sys, "argv", ["marketboard-show", "--seed", "1"])
    cli.run_show()
    out = capsys.readouterr().out
    assert "Resources" in out
    assert "Development cards" in out


def test_run_simulate_reports_totals(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["marketboard-simulate", "--harvests", "20", "--seed", "3"])
    cli.run_simulate()
    assert "Simulated 20 harvests" in capsys.readouterr().out
