"""Unit tests for cli.py — `docviewer new` and `docviewer serve`."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from docviewer.cli import EXAMPLE_CONTENT, app

runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    # serve writes its options into os.environ; monkeypatch restores them
    for var in ("HOST", "PORT", "DOCS_DIR"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


class TestNewCommand:
    def test_creates_example(self, tmp_path):
        result = runner.invoke(app, ["new", "--dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "Success: example.md has been created." in result.output
        assert (tmp_path / "example.md").read_text(encoding="utf-8") == EXAMPLE_CONTENT

    def test_example_content(self):
        assert EXAMPLE_CONTENT == "# Example\n\nThis is an example markdown file.\n"

    def test_custom_name_and_nested_dir(self, tmp_path):
        result = runner.invoke(app, ["new", "intro.md", "--dir", str(tmp_path / "guides")])
        assert result.exit_code == 0
        assert (tmp_path / "guides" / "intro.md").exists()

    def test_refuses_to_overwrite(self, tmp_path):
        (tmp_path / "example.md").write_text("keep me")
        result = runner.invoke(app, ["new", "--dir", str(tmp_path)])
        assert result.exit_code == 1
        assert (tmp_path / "example.md").read_text() == "keep me"

    def test_force_overwrites(self, tmp_path):
        (tmp_path / "example.md").write_text("old")
        result = runner.invoke(app, ["new", "--dir", str(tmp_path), "--force"])
        assert result.exit_code == 0
        assert (tmp_path / "example.md").read_text(encoding="utf-8") == EXAMPLE_CONTENT


class TestServeCommand:
    def test_runs_uvicorn_with_options(self, tmp_path, clean_env):

        with patch("docviewer.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, [
                "serve", "--host", "0.0.0.0", "--port", "8123", "--docs-dir", str(tmp_path),
            ])

        assert result.exit_code == 0, result.output
        args, kwargs = mock_run.call_args
        assert args[0] == "docviewer.main:app"
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8123
        assert kwargs["reload"] is False
        assert os.environ["DOCS_DIR"] == str(tmp_path.absolute())

    def test_defaults_from_environment(self, clean_env):
        clean_env.setenv("PORT", "4000")

        with patch("docviewer.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0, result.output
        _, kwargs = mock_run.call_args
        assert kwargs["port"] == 4000
        assert kwargs["host"] == "127.0.0.1"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
