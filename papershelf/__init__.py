"""
PaperShelf Package.

A local PDF library: imports PDF documents into application-managed storage,
records them in SQLite, and serves them back to a Streamlit viewer.
"""

__version__ = "1.0.0"
