"""CSV tokenizing for the request sheet.

The sheet is a plain published-to-web CSV export, so tokenizing is left to
polars. Every cell is read as a string; typing happens later, per row, when
the table is rendered.
"""

import io

import polars as pl

from src.ingest.errors import ParseError


def read_csv_frame(text: str) -> pl.DataFrame:
    """Tokenize CSV text into an all-string DataFrame.

    The first line is the header and empty lines are skipped. Lines made only
    of separators (",,,") are kept as rows of empty strings. Short lines are
    padded with empty strings; cells beyond the header width are dropped, so
    they are neither shown nor searchable.
    """
    if not text or not text.strip():
        return pl.DataFrame()

    try:
        df = pl.read_csv(
            io.BytesIO(text.encode("utf-8")),
            has_header=True,
            infer_schema_length=0,
            truncate_ragged_lines=True,
        )
    except pl.exceptions.PolarsError as e:
        raise ParseError(f"Invalid CSV: {e}") from e

    if df.width == 0 or df.height == 0:
        return df

    return df.with_columns(pl.all().fill_null(""))


def parse_csv_text(text: str) -> list[dict]:
    """Parse CSV text and return one dict per data row, keyed by raw header."""
    df = read_csv_frame(text)
    if df.height == 0:
        return []
    return df.rows(named=True)
