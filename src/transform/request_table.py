"""Elapsed-days metric and the display table for the request list."""

from datetime import date

import polars as pl

from src.ingest.column_mapper import ColumnMapping
from src.ingest.date_parser import parse_date
from src.ingest.normalizer import is_affirmative

# Display headers, in column order
TABLE_COLUMNS = [
    "Petición",
    "Asignado",
    "Fecha",
    "Respondida",
    "Fecha Respuesta",
    "Días Transcurridos",
]

ANSWERED_GLYPH = "✅"
PENDING_GLYPH = "❌"


def elapsed_days(start: str, end: str = None, today: date = None) -> int:
    """Whole days from start to end, or to today when end is empty.

    Unparseable dates and end-before-start both give 0.
    """
    start_date = parse_date(start)
    if start_date is None:
        return 0

    if end:
        end_date = parse_date(end)
    else:
        end_date = today if today is not None else date.today()
    if end_date is None:
        return 0

    return max((end_date - start_date).days, 0)


def date_only(value: str) -> str:
    """Trim a date/time cell to its date part: '2024-01-05T10:00' → '2024-01-05'."""
    s = "" if value is None else str(value).strip()
    if not s:
        return ""
    return s.split(" ")[0].split("T")[0]


def format_days(n: int) -> str:
    return f"{n} día" if n == 1 else f"{n} días"


def row_elapsed_days(row: dict, mapping: ColumnMapping, today: date = None) -> int:
    """Elapsed days for one request: to the answer date if answered, else to today."""
    fecha = mapping.get(row, "fecha")
    if is_affirmative(mapping.get(row, "respondida")):
        return elapsed_days(fecha, mapping.get(row, "fecha_respuesta"), today=today)
    return elapsed_days(fecha, None, today=today)


def build_request_table(
    rows: list[dict],
    mapping: ColumnMapping = None,
    today: date = None,
) -> pl.DataFrame:
    """Build the six-column display table for the given rows."""
    if mapping is None:
        mapping = ColumnMapping()

    records = []
    for row in rows:
        fields = mapping.map_row(row)
        answered = is_affirmative(fields["respondida"])
        records.append({
            "Petición": fields["peticion"],
            "Asignado": fields["asignado"],
            "Fecha": date_only(fields["fecha"]),
            "Respondida": ANSWERED_GLYPH if answered else PENDING_GLYPH,
            "Fecha Respuesta": date_only(fields["fecha_respuesta"]),
            "Días Transcurridos": format_days(row_elapsed_days(row, mapping, today)),
        })

    if not records:
        return pl.DataFrame(schema={col: pl.String for col in TABLE_COLUMNS})

    return pl.DataFrame(records).select(TABLE_COLUMNS)
