"""
Library component listing stored papers, newest first.
"""

from pathlib import Path
from typing import List

import streamlit as st

from ...app import AppState, get_papers, run_command
from ...utils import get_file_size_mb
from ..runtime import BackgroundLoop
from ..state import get_state, set_state, select_paper


def render_library(app_state: AppState, loop: BackgroundLoop) -> None:
    """
    Render the list of stored papers.

    The list is cached in session state until an import invalidates it.
    """
    papers = get_state("papers")

    if papers is None:
        response = loop.run(run_command(get_papers, app_state))
        if not response.ok:
            st.error(response.error)
            return
        papers = response.value
        set_state("papers", papers)

    if not papers:
        _render_empty()
        return

    st.subheader(f"{len(papers)} paper(s)")

    for paper in papers:
        _render_paper_row(paper)


def _render_paper_row(paper: dict) -> None:
    """Render one paper with its open action."""
    col1, col2 = st.columns([5, 1])

    with col1:
        st.markdown(f"**{paper['title']}**")
        st.caption(_describe(paper))

    with col2:
        if st.button("Open", key=f"open_{paper['id']}"):
            select_paper(paper["pdf_path"], paper["title"])
            st.rerun()


def _describe(paper: dict) -> str:
    parts: List[str] = []

    if paper.get("created_at"):
        parts.append(f"Added {paper['created_at'][:16]}")

    path = Path(paper["pdf_path"])
    if path.exists():
        parts.append(f"{get_file_size_mb(path)} MB")
    else:
        parts.append("file missing")

    return " | ".join(parts)


def _render_empty() -> None:
    st.markdown("""
    ### Your library is empty

    Use **Add paper** in the sidebar to import a PDF. The file is copied into
    the application's storage, so the original can be moved or deleted.
    """)
