"""
Tests for the bookshelf CLI
"""

from unittest.mock import patch

from click.testing import CliRunner

from bookshelf import __version__
from bookshelf.cli import cli
from bookshelf.config import settings


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0, result.output
    assert "type Query" in result.output
    assert "addBook" in result.output


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_serve_passes_options_to_uvicorn(monkeypatch, seed_file):
    monkeypatch.setattr(settings, "seed_data_path", None)

    with patch("bookshelf.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(
            cli, ["serve", "--port", "9001", "--host", "127.0.0.1", "--seed", str(seed_file)]
        )

    assert result.exit_code == 0, result.output
    args, kwargs = mock_run.call_args
    assert args == ("bookshelf.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9001
    assert kwargs["host"] == "127.0.0.1"
    assert settings.seed_data_path == str(seed_file)


def test_serve_exits_on_startup_failure():
    with patch("bookshelf.cli.uvicorn.run", side_effect=RuntimeError("boom")):
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
