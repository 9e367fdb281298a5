"""Streamlit entry point for the Academic Request Tracker."""

import streamlit as st

st.set_page_config(
    page_title="Peticiones Académicas",
    page_icon="📋",
    layout="wide",
    initial_sidebar_state="expanded",
)

from src.state import get_config, get_session, render_filters

st.title("Gestión de Peticiones Académicas")

config = get_config()
session = get_session()

# Sidebar info
with st.sidebar:
    st.header("Origen de datos")
    if config.has_source:
        st.write(f"**CSV:** `{config.csv_url}`")
    else:
        st.write(f"Define `{config.url_env_var}` para cargar la hoja.")
    if st.button("Recargar datos", type="primary"):
        with st.spinner("Cargando peticiones..."):
            session.reload()

    n_rows = len(session.rows)
    st.write(f"**{n_rows:,} {'petición cargada' if n_rows == 1 else 'peticiones cargadas'}**")

if session.error:
    st.error(session.error)

render_filters(session)
visible = session.visible_rows()

st.metric("Total visible", f"{len(visible):,}")

if visible:
    st.dataframe(
        session.table(),
        width="stretch",
        hide_index=True,
        column_config={
            "Petición": st.column_config.TextColumn(width="large"),
        },
    )
else:
    st.info("No hay registros para mostrar.")
