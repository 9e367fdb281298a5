"""Text search and answered/pending filtering over normalized rows."""

from dataclasses import dataclass
from enum import Enum

from src.ingest.column_mapper import ColumnMapping
from src.ingest.normalizer import is_affirmative


class StatusFilter(Enum):
    ALL = "all"
    ANSWERED = "answered"
    PENDING = "pending"


@dataclass(frozen=True)
class FilterCriteria:
    """What the user typed and picked in the filter controls."""
    query: str = ""
    status: StatusFilter = StatusFilter.ALL


def matches_query(row: dict, query: str) -> bool:
    """Case-insensitive substring match against every cell of the row.

    The query is taken literally, spaces included; only an empty query
    matches every row. Accents are not folded: "garcia" does not find "García".
    """
    if not query:
        return True
    needle = query.lower()
    return any(needle in str(value).lower() for value in row.values())


def matches_status(row: dict, status: StatusFilter, mapping: ColumnMapping) -> bool:
    if status is StatusFilter.ALL:
        return True
    answered = is_affirmative(mapping.get(row, "respondida"))
    return answered if status is StatusFilter.ANSWERED else not answered


def filter_rows(
    rows: list[dict],
    criteria: FilterCriteria,
    mapping: ColumnMapping = None,
) -> list[dict]:
    """Return the rows passing both the text query and the status filter, in order."""
    if mapping is None:
        mapping = ColumnMapping()
    return [
        row for row in rows
        if matches_query(row, criteria.query)
        and matches_status(row, criteria.status, mapping)
    ]
