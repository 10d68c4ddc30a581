"""
Reusable UI components for the Streamlit application.

Contains modular components for the sidebar, the paper list,
and the PDF viewer.
"""

from .sidebar import render_sidebar
from .library import render_library
from .pdf_viewer import render_pdf_viewer

__all__ = [
    "render_sidebar",
    "render_library",
    "render_pdf_viewer"
]
