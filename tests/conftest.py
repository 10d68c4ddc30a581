"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample PDFs, temporary configurations and
open application state so tests never touch real library data.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="papershelf_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def app_data_dir(temp_dir: Path) -> Path:
    """Application data directory inside the temp dir (not created)."""
    return temp_dir / "appdata"


@pytest.fixture
def temp_config(temp_dir: Path, app_data_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.
        app_data_dir: Application data directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "app_data_directory": str(app_data_dir),
            "database_path": "",
            "logs_directory": str(logs_dir)
        },
        "storage": {
            "database_name": "test.db",
            "max_connections": 5
        },
        "ingestion": {
            "papers_subdirectory": "papers",
            "default_title": "Untitled",
            "allowed_extensions": [".pdf"]
        },
        "gui": {
            "page_title": "Test Library",
            "viewer_height": 600
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def sample_pdf_content() -> bytes:
    """
    Create minimal valid PDF content for testing.

    Returns:
        Bytes representing a minimal PDF with text.
    """
    # Minimal PDF with "Hello World" text
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]
   /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>
endobj
4 0 obj
<< /Length 44 >>
stream
BT /F1 12 Tf 100 700 Td (Hello World) Tj ET
endstream
endobj
5 0 obj
<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>
endobj
xref
0 6
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
0000000266 00000 n
0000000359 00000 n
trailer
<< /Size 6 /Root 1 0 R >>
startxref
434
%%EOF"""
    return pdf_content


@pytest.fixture
def sample_pdf(temp_dir: Path, sample_pdf_content: bytes) -> Path:
    """
    Create a sample PDF file outside managed storage.

    Returns:
        Path to the created PDF file.
    """
    source_dir = temp_dir / "downloads"
    source_dir.mkdir(exist_ok=True)
    pdf_path = source_dir / "paper.pdf"
    pdf_path.write_bytes(sample_pdf_content)
    return pdf_path


@pytest.fixture
def temp_database(temp_dir: Path) -> Path:
    """
    Create path for a temporary database.

    Returns:
        Path where test database should be created.
    """
    return temp_dir / "test.db"


@pytest.fixture
async def pool(temp_database: Path):
    """Open pool with the papers schema in a temp database."""
    from papershelf.database import initialize

    pool = await initialize(temp_database)
    yield pool
    await pool.close()


@pytest.fixture
async def repository(pool):
    """Repository over the temp pool."""
    from papershelf.database import PaperRepository

    return PaperRepository(pool)


@pytest.fixture
async def app_state(temp_config: Path):
    """Started application state using the temp config."""
    from papershelf.app import AppState
    from papershelf.core.config_loader import Config

    state = await AppState.start(Config.from_file(temp_config))
    yield state
    await state.shutdown()


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from papershelf.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from papershelf.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
