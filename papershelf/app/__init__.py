"""
Application module wiring storage and ingestion together.

Holds the shared application state and the commands presentation layers
call.
"""

from .state import AppState, resolve_app_data_dir, resolve_database_path
from .commands import (
    add_paper,
    get_papers,
    read_pdf_file,
    db_health_check,
    greet,
    run_command,
    CommandResponse
)

__all__ = [
    "AppState",
    "resolve_app_data_dir",
    "resolve_database_path",
    "add_paper",
    "get_papers",
    "read_pdf_file",
    "db_health_check",
    "greet",
    "run_command",
    "CommandResponse"
]
