# File: tests/test_cli.py
"""CLI tests (`html_inliner.cli`) using click.testing.CliRunner.
Cover `inline`, `config`, `--version` and error handling.
"""
import json

import pytest
from click.testing import CliRunner

from html_inliner.cli import cli
from html_inliner.logger import init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI rebinds the log handler to the runner's stderr; put it back afterwards."""
    yield
    init_logging()


@pytest.fixture()
def page(site):
    path = site / "index.html"
    path.write_text('<html><body><img src="img/dot.png"></body></html>', encoding="utf-8")
    return path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "html_inliner" in result.output


def test_show_config(tmp_path, monkeypatch):
    cfg_file = tmp_path / "inliner.yaml"
    cfg_file.write_text("inline_fonts: false\nmax_inline_size: 123\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["inline_fonts"] is False
    assert data["max_inline_size"] == 123
    assert data["inline_remote"] is True


def test_inline_to_stdout(page, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page)])
    assert result.exit_code == 0
    assert 'src="data:image/png;base64,' in result.output


def test_inline_to_file(page, tmp_path):
    out = tmp_path / "dist" / "standalone.html"
    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page), "--output", str(out)])
    assert result.exit_code == 0
    assert 'src="data:image/png;base64,' in out.read_text(encoding="utf-8")


def test_inline_with_explicit_root(site, tmp_path):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    page = elsewhere / "page.html"
    page.write_text('<img src="img/dot.png">', encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page), "--root", str(site)])
    assert result.exit_code == 0
    assert 'src="data:image/png;base64,' in result.output


def test_max_size_override(page):
    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page), "--max-size", "1"])
    assert result.exit_code == 0
    assert 'src="img/dot.png"' in result.output


def test_no_remote_flag(site):
    page = site / "remote.html"
    page.write_text('<img src="https://example.invalid/a.png">', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page), "--no-remote"])
    assert result.exit_code == 0
    assert 'src="https://example.invalid/a.png"' in result.output


def test_strict_failure_exits_nonzero(site):
    page = site / "broken.html"
    page.write_text('<img src="img/nope.png">', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["inline", str(page), "--strict"])
    assert result.exit_code == 1
    assert "Inlining failed" in result.output


def test_bad_config_exits_nonzero(tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("no_such_option: true\n", encoding="utf-8")
    page = tmp_path / "p.html"
    page.write_text("<p></p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "inline", str(page)])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output
