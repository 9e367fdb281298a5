"""Tests for request_table module."""

from datetime import date

from src.transform.request_table import (
    TABLE_COLUMNS,
    build_request_table,
    date_only,
    elapsed_days,
    format_days,
)

TODAY = date(2024, 3, 10)


class TestElapsedDays:
    def test_between_two_dates(self):
        assert elapsed_days("01/01/2024", "03/01/2024") == 2

    def test_end_before_start_clamps_to_zero(self):
        assert elapsed_days("03/01/2024", "01/01/2024") == 0

    def test_unparseable_start(self):
        assert elapsed_days("", "01/01/2024") == 0
        assert elapsed_days("pronto", "01/01/2024") == 0

    def test_unparseable_end(self):
        assert elapsed_days("01/01/2024", "pronto") == 0

    def test_open_runs_to_today(self):
        assert elapsed_days("01/03/2024", None, today=TODAY) == 9
        assert elapsed_days("01/03/2024", "", today=TODAY) == 9

    def test_open_defaults_to_current_date(self):
        expected = (date.today() - date(2024, 1, 1)).days
        assert elapsed_days("01/01/2024") == expected

    def test_time_of_day_ignored(self):
        assert elapsed_days("2024-01-01T23:59:00", "2024-01-02T00:01:00") == 1

    def test_mixed_formats(self):
        assert elapsed_days("01/01/2024", "2024-01-31") == 30


def test_date_only():
    assert date_only("2024-01-05 10:00") == "2024-01-05"
    assert date_only("2024-01-05T10:00:00") == "2024-01-05"
    assert date_only(" 05/01/2024 ") == "05/01/2024"
    assert date_only("") == ""
    assert date_only(None) == ""


def test_format_days():
    assert format_days(1) == "1 día"
    assert format_days(0) == "0 días"
    assert format_days(5) == "5 días"


class TestBuildRequestTable:
    def test_columns_and_values(self):
        rows = [{
            "peticion": "Revisar nota",
            "asignado": "Ana García",
            "fecha": "2024-03-01 09:00",
            "respondida": "si",
            "fecharespuesta": "2024-03-02T12:00:00",
        }]
        table = build_request_table(rows, today=TODAY)
        assert table.columns == TABLE_COLUMNS
        record = table.row(0, named=True)
        assert record["Petición"] == "Revisar nota"
        assert record["Fecha"] == "2024-03-01"
        assert record["Fecha Respuesta"] == "2024-03-02"
        assert record["Respondida"] == "✅"
        assert record["Días Transcurridos"] == "1 día"

    def test_pending_ignores_answer_date(self):
        rows = [{"fecha": "01/03/2024", "respondida": "no", "fecharespuesta": "02/03/2024"}]
        record = build_request_table(rows, today=TODAY).row(0, named=True)
        assert record["Respondida"] == "❌"
        assert record["Días Transcurridos"] == "9 días"

    def test_answered_without_answer_date_runs_to_today(self):
        rows = [{"fecha": "08/03/2024", "respondida": "Sí", "fecharespuesta": ""}]
        record = build_request_table(rows, today=TODAY).row(0, named=True)
        assert record["Días Transcurridos"] == "2 días"

    def test_missing_columns_render_empty(self):
        record = build_request_table([{"otra": "x"}], today=TODAY).row(0, named=True)
        assert record["Petición"] == ""
        assert record["Fecha"] == ""
        assert record["Días Transcurridos"] == "0 días"

    def test_empty(self):
        table = build_request_table([])
        assert table.height == 0
        assert table.columns == TABLE_COLUMNS
