"""
Streamlit session state management.

Provides helpers for initializing, reading, and updating
session state values used across the application.
"""

import streamlit as st
from typing import Any


DEFAULT_STATE = {
    "papers": None,
    "selected_paper_path": None,
    "selected_paper_title": None,
    "last_message": None,
    "last_error": None,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving
    state across reruns.
    """
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """
    Get a value from session state.

    Args:
        key: State key to retrieve.
        default: Default value if key doesn't exist.

    Returns:
        The stored value or default.
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """
    Set a value in session state.

    Args:
        key: State key to set.
        value: Value to store.
    """
    st.session_state[key] = value


def select_paper(pdf_path: str, title: str) -> None:
    """Open a paper in the viewer."""
    set_state("selected_paper_path", pdf_path)
    set_state("selected_paper_title", title)


def clear_selection() -> None:
    """Close the viewer."""
    set_state("selected_paper_path", None)
    set_state("selected_paper_title", None)


def invalidate_papers() -> None:
    """Force the paper list to be fetched again on the next run."""
    set_state("papers", None)
