"""
PDF viewer component for embedded PDF display.

The bytes come from the read_pdf_file command and are embedded inline,
with a download button for the stored copy.
"""

import base64
from pathlib import Path

import streamlit as st

from ...app import read_pdf_file, run_command
from ..runtime import BackgroundLoop
from ..state import clear_selection, get_state


def render_pdf_viewer(loop: BackgroundLoop, height: int = 800) -> None:
    """
    Render the viewer for the paper selected in session state.

    Args:
        loop: Background loop the read command runs on.
        height: Viewer height in pixels.
    """
    pdf_path = get_state("selected_paper_path")
    if not pdf_path:
        return

    title = get_state("selected_paper_title") or Path(pdf_path).stem

    st.divider()

    col1, col2 = st.columns([3, 1])

    with col1:
        st.subheader(title)

    with col2:
        if st.button("Close", key="close_pdf"):
            clear_selection()
            st.rerun()

    response = loop.run(run_command(read_pdf_file, pdf_path))

    if not response.ok:
        st.error(response.error)
        return

    pdf_data = response.value
    base64_pdf = base64.b64encode(pdf_data).decode("utf-8")

    pdf_display = f"""
        <iframe
            src="data:application/pdf;base64,{base64_pdf}"
            width="100%"
            height="{height}px"
            type="application/pdf"
            style="border: 1px solid #ccc; border-radius: 4px;"
        ></iframe>
    """

    st.markdown(pdf_display, unsafe_allow_html=True)

    st.download_button(
        label="Download PDF",
        data=pdf_data,
        file_name=Path(pdf_path).name,
        mime="application/pdf",
        key=f"download_{Path(pdf_path).name}"
    )
