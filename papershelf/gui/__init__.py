"""
GUI module providing the Streamlit web interface.

Contains the main application, session state management, the background
event loop that runs commands, the native file picker, and reusable UI
components for the library view.
"""

from .state import init_state, get_state, set_state
from .runtime import BackgroundLoop

__all__ = [
    "init_state",
    "get_state",
    "set_state",
    "BackgroundLoop"
]
