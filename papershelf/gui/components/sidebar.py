"""
Sidebar component for PaperShelf.

Shows the database health line, library statistics, and the button that
imports a new paper.
"""

import streamlit as st

from ...app import AppState, add_paper, db_health_check, run_command
from ...database import get_statistics
from ..picker import TkFilePicker
from ..runtime import BackgroundLoop
from ..state import get_state, set_state, invalidate_papers


def render_sidebar(app_state: AppState, loop: BackgroundLoop) -> None:
    """
    Render the sidebar with health, statistics and the import action.

    Args:
        app_state: Shared application state.
        loop: Background loop the commands run on.
    """
    with st.sidebar:
        st.title("Library")

        _render_import(app_state, loop)

        st.divider()

        st.subheader("Statistics")
        _render_statistics(app_state, loop)

        st.divider()

        _render_health(app_state, loop)


def _render_import(app_state: AppState, loop: BackgroundLoop) -> None:
    """Import button and the outcome of the last import."""
    if st.button("Add paper", type="primary", use_container_width=True):
        picker = TkFilePicker(app_state.config.ingestion.allowed_extensions)

        with st.spinner("Waiting for file selection..."):
            response = loop.run(run_command(add_paper, app_state, picker))

        if response.ok:
            set_state("last_message", response.value)
            set_state("last_error", None)
            invalidate_papers()
        else:
            set_state("last_message", None)
            set_state("last_error", response.error)

    message = get_state("last_message")
    error = get_state("last_error")

    if message:
        st.success(message)
    if error:
        st.error(error)


def _render_statistics(app_state: AppState, loop: BackgroundLoop) -> None:
    """Display database statistics."""
    try:
        stats = loop.run(get_statistics(app_state.pool))
    except Exception as e:
        st.warning(f"Unable to load statistics: {e}")
        return

    st.metric("Papers", f"{stats['total_papers']:,}")

    if stats["newest_paper"]:
        st.caption(f"Last added: {stats['newest_paper'][:16]}")


def _render_health(app_state: AppState, loop: BackgroundLoop) -> None:
    """One-line database status."""
    response = loop.run(run_command(db_health_check, app_state))

    if response.ok:
        st.caption(response.value)
    else:
        st.caption(f"Database unavailable: {response.error}")
