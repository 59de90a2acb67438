"""Unit tests for the render CLI's option handling."""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "render_pdf.py"
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """render_pdf module with output paths in tmp_path and generate_pdf recorded."""
    spec = importlib.util.spec_from_file_location("render_pdf", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    calls = []

    def fake_generate_pdf(record, **kwargs):
        calls.append(kwargs)
        return b"%PDF-1.4 fake"

    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(module, "RESULTS_PATH", tmp_path / "results")
    monkeypatch.setattr(module, "generate_pdf", fake_generate_pdf)
    module.calls = calls

    yield module
    logger.remove()


@pytest.mark.unit
def test_render_defers_placeholders_to_environment(cli, tmp_path):
    output = tmp_path / "jane.pdf"

    result = CliRunner().invoke(
        cli.app, ["render", str(FIXTURES_PATH / "extended_resume.yaml"), "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "placeholders" not in cli.calls[0]
    assert output.read_bytes() == b"%PDF-1.4 fake"


@pytest.mark.unit
def test_render_no_placeholders_flag(cli, tmp_path):
    result = CliRunner().invoke(
        cli.app,
        ["render", str(FIXTURES_PATH / "legacy_resume.json"), "--no-placeholders", "-l", "two_column"],
    )

    assert result.exit_code == 0, result.output
    assert cli.calls[0] == {"layout": "two_column", "placeholders": None}
    assert list((tmp_path / "results").glob("*/John_Smith.pdf"))


@pytest.mark.unit
def test_render_missing_record_exits_with_error(cli, tmp_path):
    result = CliRunner().invoke(cli.app, ["render", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert cli.calls == []
