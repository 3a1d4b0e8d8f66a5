"""
Unit tests for the JSON and Excel views of a built roster.
"""

import io

import pandas as pd
import pytest

from duty_board.logics.duty_keys import CELL_DUTY_LABEL
from duty_board.logics.roster_builder import build_roster
from duty_board.logics.roster_export import (
    EXPORT_COLUMNS,
    day_to_dict,
    roster_to_dataframe,
    roster_to_dict,
    roster_to_excel_bytes
)


@pytest.fixture
def result():
    grid = [
        [None, None, 13, 12],
        [None, None, "Tue", "Mon"],
        [None, "Kim", "c", "2"],
        [None, "Lee", "OV", "1"],
        [None, "Park", "w", "xray"],
        [None, "Choi", None, "1"],
    ]
    return build_roster(grid, lambda row, col: (row, col) == (5, 3))


class TestDayToDict:
    """Test the per-day JSON view."""

    def test_duties_in_display_order(self, result):
        day = day_to_dict(result[12])

        assert day["day"] == 12
        assert day["weekday"] == "Mon"
        assert [d["key"] for d in day["duties"]] == ["1", "2", "XRAY"]
        assert [d["label"] for d in day["duties"]] == ["1R", "2R", "XRAY"]

    def test_last_numeric_marker(self, result):
        day = day_to_dict(result[12])

        assert day["numeric_count"] == 2
        assert [d["is_last_numeric"] for d in day["duties"]] == [False, True, False]

    def test_no_numeric_duties(self, result):
        day = day_to_dict(result[13])

        assert day["numeric_count"] == 0
        assert not any(d["is_last_numeric"] for d in day["duties"])

    def test_entries_and_original_keys(self, result):
        duties = {d["key"]: d for d in day_to_dict(result[12])["duties"]}

        assert duties["1"]["entries"] == [
            {"name": "Lee", "highlighted": False},
            {"name": "Choi", "highlighted": True},
        ]
        off = {d["key"]: d for d in day_to_dict(result[13])["duties"]}["OFF"]
        assert off["original_keys"] == ["OV", "w"]


class TestRosterToDict:
    """Test the whole-roster JSON view."""

    def test_days_ascending(self, result):
        view = roster_to_dict(result)

        assert [day["day"] for day in view["days"]] == [12, 13]

    def test_empty_roster(self):
        assert roster_to_dict({}) == {"days": []}


class TestRosterExport:
    """Test the flat table and Excel download."""

    def test_dataframe_rows(self, result):
        df = roster_to_dataframe(result)

        assert list(df.columns) == EXPORT_COLUMNS
        assert len(df) == 7
        first = df.iloc[0]
        assert first["Day"] == 12
        assert first["Duty"] == "1"
        assert first["Name"] == "Lee"
        cell_row = df[df["Duty"] == "C"].iloc[0]
        assert cell_row["Label"] == CELL_DUTY_LABEL
        assert df[df["Duty"] == "OFF"]["OriginalKeys"].tolist() == ["OV, w", "OV, w"]

    def test_empty_dataframe_keeps_columns(self):
        df = roster_to_dataframe({})

        assert df.empty
        assert list(df.columns) == EXPORT_COLUMNS

    def test_excel_bytes(self, result):
        content = roster_to_excel_bytes(result)
        df = pd.read_excel(io.BytesIO(content), sheet_name="Roster", engine="openpyxl")

        assert list(df.columns) == EXPORT_COLUMNS
        assert len(df) == 7
        assert df["Highlighted"].sum() == 1
