"""Unit tests for log session setup."""

from pathlib import Path

import pytest
from loguru import logger

from resumely.contexts.rendering.logger import log_render_result, setup_rendering_logger


@pytest.fixture
def session_dir(tmp_path):
    yield tmp_path / "render_20240605_120000"
    logger.remove()


@pytest.mark.unit
def test_rendering_log_header_records_settings(session_dir):
    log_file = setup_rendering_logger(
        session_dir, record_path=Path("exports/jane.yaml"), layout="two_column"
    )

    assert log_file == session_dir / "render.log"
    content = log_file.read_text(encoding="utf-8")
    assert "resumely" in content
    assert "exports/jane.yaml" in content
    assert "two_column" in content
    assert "Placeholders" in content
    assert "Helvetica" in content


@pytest.mark.unit
def test_rendering_log_header_without_layout(session_dir):
    log_file = setup_rendering_logger(session_dir)

    content = log_file.read_text(encoding="utf-8")
    assert "from template" in content
    assert "Record" in content


@pytest.mark.unit
def test_overflow_logged_as_warning(session_dir):
    log_file = setup_rendering_logger(session_dir)

    log_render_result("Ada Lovelace", 1024, final_y=-40, elapsed_time=0.1)

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert any("WARNING" in line and "[render]" in line and "40pt" in line for line in lines)
