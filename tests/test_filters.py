"""Tests for filters module."""

from src.transform.filters import FilterCriteria, StatusFilter, filter_rows

ROWS = [
    {"peticion": "Revisar nota", "asignado": "Ana García", "respondida": "Sí"},
    {"peticion": "Cambio de grupo", "asignado": "Luis Pérez", "respondida": "No"},
    {"peticion": "Convalidación", "asignado": "Marta Ruiz", "respondida": "yes"},
    {"peticion": "Certificado", "asignado": "Ana Torres", "respondida": ""},
]


def _texts(rows):
    return [r["peticion"] for r in rows]


def test_no_criteria_is_identity():
    result = filter_rows(ROWS, FilterCriteria())
    assert result == ROWS
    assert result is not ROWS


def test_query_matches_any_column_case_insensitive():
    assert _texts(filter_rows(ROWS, FilterCriteria(query="ANA"))) == ["Revisar nota", "Certificado"]
    assert _texts(filter_rows(ROWS, FilterCriteria(query="grupo"))) == ["Cambio de grupo"]


def test_query_whitespace_is_literal():
    rows = [{"asignado": "García López"}, {"asignado": "GarcíaLópez"}]
    assert filter_rows(rows, FilterCriteria(query="garcía ")) == [rows[0]]
    assert filter_rows(ROWS, FilterCriteria(query="   ")) == []


def test_query_does_not_fold_accents():
    assert filter_rows(ROWS, FilterCriteria(query="garcia")) == []
    assert _texts(filter_rows(ROWS, FilterCriteria(query="garcía"))) == ["Revisar nota"]


def test_answered():
    result = filter_rows(ROWS, FilterCriteria(status=StatusFilter.ANSWERED))
    assert _texts(result) == ["Revisar nota", "Convalidación"]


def test_pending_includes_missing_flag():
    result = filter_rows(ROWS, FilterCriteria(status=StatusFilter.PENDING))
    assert _texts(result) == ["Cambio de grupo", "Certificado"]


def test_query_and_status_combine():
    result = filter_rows(ROWS, FilterCriteria(query="ana", status=StatusFilter.PENDING))
    assert _texts(result) == ["Certificado"]


def test_answered_and_pending_partition_query_result():
    for query in ["", "ana", "o", "zzz"]:
        base = filter_rows(ROWS, FilterCriteria(query=query))
        answered = filter_rows(ROWS, FilterCriteria(query=query, status=StatusFilter.ANSWERED))
        pending = filter_rows(ROWS, FilterCriteria(query=query, status=StatusFilter.PENDING))
        answered_ids = {id(r) for r in answered}
        pending_ids = {id(r) for r in pending}
        assert not answered_ids & pending_ids
        assert answered_ids | pending_ids == {id(r) for r in base}


def test_row_without_status_column():
    rows = [{"peticion": "Sin estado"}]
    assert filter_rows(rows, FilterCriteria(status=StatusFilter.ANSWERED)) == []
    assert filter_rows(rows, FilterCriteria(status=StatusFilter.PENDING)) == rows


def test_empty_rows():
    assert filter_rows([], FilterCriteria(query="x", status=StatusFilter.PENDING)) == []
