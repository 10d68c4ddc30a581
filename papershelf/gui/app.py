"""
Main Streamlit application for PaperShelf.

Entry point that assembles the sidebar, the paper list and the viewer.
The background loop and the application state are created once per
process and shared by every session.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import atexit
import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from papershelf.app import AppState, greet  # noqa: E402
from papershelf.core import get_config, get_logger  # noqa: E402
from papershelf.gui.runtime import BackgroundLoop  # noqa: E402
from papershelf.gui.state import init_state  # noqa: E402
from papershelf.gui.components import (  # noqa: E402
    render_sidebar,
    render_library,
    render_pdf_viewer,
)

logger = get_logger(__name__)


@st.cache_resource
def _start_application():
    """
    Start the background loop and open the store, once per process.

    A StorageInitError here is fatal: Streamlit shows it and nothing else
    renders.
    """
    loop = BackgroundLoop()
    app_state = loop.run(AppState.start(get_config()))
    atexit.register(_shutdown_application, loop, app_state)
    logger.info(greet("PaperShelf"))
    return loop, app_state


def _shutdown_application(loop: BackgroundLoop, app_state: AppState) -> None:
    """Close the store and stop the loop at interpreter exit."""
    loop.run(app_state.shutdown())
    loop.stop()


def main():
    """Main application entry point."""
    config = get_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        page_icon="📄",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_state()

    loop, app_state = _start_application()

    render_sidebar(app_state, loop)

    st.title(config.gui.page_title)

    render_library(app_state, loop)

    render_pdf_viewer(loop, height=config.gui.viewer_height)


if __name__ == "__main__":
    main()
