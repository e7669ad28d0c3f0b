"""
Tests for the JSON log export and the spreadsheet ledger.
"""

import json

import pytest
from openpyxl import load_workbook

from zoo_sim.config import ZooConfig
from zoo_sim.core.simulation import ZooSimulation
from zoo_sim.reporting import build_workbook, export_workbook, LEDGER_COLUMNS


def played_sim(days: int = 3, **overrides) -> ZooSimulation:
    overrides.setdefault("seed", 5)
    sim = ZooSimulation("Ledger Zoo", "Dana", config=ZooConfig(**overrides))
    sim.buy_food(20)
    for _ in range(days):
        sim.advance_day()
    return sim


class TestWorkbook:
    """Tests for the .xlsx ledger."""

    def test_sheets_and_headers(self):
        wb = build_workbook(played_sim())
        assert wb.sheetnames == ["Ledger", "Events"]

        ledger = wb["Ledger"]
        assert ledger["A1"].value == "Ledger Zoo - Day Ledger"
        assert ledger["A2"].value == "Outcome: IN PROGRESS"
        headers = [ledger.cell(row=4, column=c).value for c in range(1, len(LEDGER_COLUMNS) + 1)]
        assert headers == [h for h, _ in LEDGER_COLUMNS]

    def test_one_row_per_day(self):
        wb = build_workbook(played_sim(days=4))
        ledger = wb["Ledger"]
        assert [ledger.cell(row=r, column=1).value for r in range(5, 9)] == [0, 1, 2, 3]
        assert ledger.cell(row=9, column=1).value is None

    def test_events_sheet(self):
        sim = played_sim(days=1)
        ws = build_workbook(sim)["Events"]
        assert ws["A1"].value == "Day"
        assert ws["B2"].value == sim.events.history[0].event_type.name
        assert ws.max_row == len(sim.events.history) + 1

    def test_outcome_recorded(self):
        sim = played_sim(days=3, max_days=2)
        ledger = build_workbook(sim)["Ledger"]
        assert ledger["A2"].value == "Outcome: WON"
        assert ledger["B2"].value == sim.state.end_reason

    def test_export_roundtrip(self, tmp_path):
        path = tmp_path / "ledger.xlsx"
        export_workbook(played_sim(), str(path))

        wb = load_workbook(str(path))
        assert wb["Ledger"]["A4"].value == "Day"
        assert wb["Ledger"]["B5"].value == pytest.approx(10000.0 - 20.0 - 500.0)


class TestJsonLog:
    """Tests for export_log()."""

    def test_export_log(self, tmp_path):
        sim = played_sim(days=2)
        path = tmp_path / "log.json"

        sim.export_log(str(path))

        with open(path) as f:
            data = json.load(f)
        assert data["summary"]["name"] == "Ledger Zoo"
        assert data["summary"]["days_played"] == 2
        assert len(data["day_summaries"]) == 2
        assert data["event_history"][0]["event_type"] == "FOOD_PURCHASED"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
