"""Dataset session and Streamlit session state management."""

from dataclasses import replace
from datetime import date
from typing import Callable

import polars as pl
import streamlit as st

from src.config import AppConfig
from src.ingest.errors import LoadError
from src.ingest.pipeline import run_ingestion
from src.transform.filters import FilterCriteria, StatusFilter, filter_rows
from src.transform.request_table import build_request_table


class DatasetSession:
    """Owns the currently loaded rows and the active filter criteria.

    `rows` is only ever replaced as a whole list, so readers never see a
    half-loaded dataset. Reloads are not serialized: when two overlap, the
    one that finishes last wins.
    """

    def __init__(self, config: AppConfig, loader: Callable[[AppConfig], list[dict]] = run_ingestion):
        self.config = config
        self.loader = loader
        self.rows: list[dict] = []
        self.error: str = ""
        self.loading: bool = False
        self.loaded: bool = False
        self.criteria = FilterCriteria()

    def reload(self) -> bool:
        """Fetch the sheet again. Returns True on success.

        On failure the table is emptied and `error` holds the message.
        """
        self.loading = True
        self.error = ""
        try:
            rows = self.loader(self.config)
        except LoadError as e:
            self.rows = []
            self.error = str(e) or "Error cargando datos"
            return False
        finally:
            self.loading = False
            self.loaded = True
        self.rows = rows
        return True

    def set_query(self, query: str) -> None:
        self.criteria = replace(self.criteria, query=query or "")

    def set_status(self, status: StatusFilter) -> None:
        self.criteria = replace(self.criteria, status=status)

    def visible_rows(self) -> list[dict]:
        return filter_rows(self.rows, self.criteria, self.config.columns)

    def table(self, today: date = None) -> pl.DataFrame:
        return build_request_table(self.visible_rows(), self.config.columns, today=today)


def get_config() -> AppConfig:
    """Get or create the AppConfig singleton."""
    if "config" not in st.session_state:
        st.session_state.config = AppConfig()
    return st.session_state.config


def get_session() -> DatasetSession:
    """Get or create the DatasetSession, loading the sheet on first access."""
    if "dataset_session" not in st.session_state:
        st.session_state.dataset_session = DatasetSession(get_config())
    session = st.session_state.dataset_session
    if not session.loaded:
        with st.spinner("Cargando peticiones..."):
            session.reload()
    return session


# ---------------------------------------------------------------------------
# Filter controls
# ---------------------------------------------------------------------------

STATUS_LABELS = {
    StatusFilter.ALL: "Mostrar Todas",
    StatusFilter.ANSWERED: "Respondidas (Sí)",
    StatusFilter.PENDING: "Pendientes (No)",
}


def render_filters(session: DatasetSession) -> FilterCriteria:
    """Render the search box and status selector. Returns the active criteria.

    Widget values persist across reruns via their session_state keys.
    """
    col_query, col_status = st.columns([2, 1])
    with col_query:
        query = st.text_input(
            "Buscar",
            placeholder="Texto en cualquier columna",
            key="query",
        )
    with col_status:
        status = st.selectbox(
            "Filtrar por Respondida",
            options=list(STATUS_LABELS),
            format_func=STATUS_LABELS.get,
            key="status_filter",
        )
    session.set_query(query)
    session.set_status(status)
    return session.criteria
