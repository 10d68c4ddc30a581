"""
End-to-end tests: start the application, import papers, read them back.

SAFETY NOTE: the application data directory and database live in a
tempfile.mkdtemp() directory configured through temp_config.
"""

import asyncio
from pathlib import Path

import pytest

from papershelf.app import (
    AppState,
    add_paper,
    db_health_check,
    get_papers,
    read_pdf_file,
)
from papershelf.core.config_loader import Config
from papershelf.ingestion import PickResult, StaticPicker


@pytest.mark.asyncio
async def test_import_then_read_back(app_state: AppState, sample_pdf: Path, sample_pdf_content: bytes):
    """Round trip: the stored copy reads back byte for byte."""
    assert await db_health_check(app_state) == "Database connected. Papers stored: 0"

    await add_paper(app_state, StaticPicker(PickResult.local(sample_pdf)))

    papers = await get_papers(app_state)
    assert len(papers) == 1

    data = await read_pdf_file(papers[0]["pdf_path"])
    assert data == sample_pdf_content
    assert await db_health_check(app_state) == "Database connected. Papers stored: 1"


@pytest.mark.asyncio
async def test_library_survives_restart(temp_config: Path, sample_pdf: Path):
    """Test that papers persist across application restarts."""
    config = Config.from_file(temp_config)

    async with await AppState.start(config) as state:
        await add_paper(state, StaticPicker(PickResult.local(sample_pdf)))

    async with await AppState.start(config) as state:
        papers = await get_papers(state)

        assert len(papers) == 1
        assert Path(papers[0]["pdf_path"]).exists()


@pytest.mark.asyncio
async def test_mixed_concurrent_commands(app_state: AppState, temp_dir: Path, sample_pdf_content: bytes):
    """Test imports, listings and health checks running together."""
    sources = []
    for i in range(8):
        folder = temp_dir / f"incoming{i}"
        folder.mkdir()
        source = folder / "paper.pdf"
        source.write_bytes(sample_pdf_content + str(i).encode())
        sources.append(source)

    pickers = [StaticPicker(PickResult.local(s)) for s in sources]

    await asyncio.gather(
        *(add_paper(app_state, p) for p in pickers),
        *(get_papers(app_state) for _ in range(4)),
        *(db_health_check(app_state) for _ in range(4)),
    )

    papers = await get_papers(app_state)
    assert len(papers) == 8
    assert len({p["pdf_path"] for p in papers}) == 8

    stored = {(await read_pdf_file(p["pdf_path"])) for p in papers}
    assert stored == {s.read_bytes() for s in sources}
