"""Unit tests for config.py — settings from environment variables."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from pathlib import Path

import pytest

from docviewer.config import DEFAULT_PORT, Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        s = Settings.from_env({})
        assert s.port == DEFAULT_PORT == 3000
        assert s.host == "127.0.0.1"
        assert s.docs_dir == Path("docs").absolute()
        assert s.watch_enabled is True
        assert s.cors_origins == []

    def test_overrides(self, tmp_path):
        s = Settings.from_env({
            "PORT": "8080",
            "HOST": "0.0.0.0",
            "DOCS_DIR": str(tmp_path),
            "LOG_LEVEL": "debug",
            "CORS_ORIGINS": "http://localhost:5173, http://127.0.0.1:5173,",
        })
        assert s.port == 8080
        assert s.host == "0.0.0.0"
        assert s.docs_dir == tmp_path
        assert s.log_level == "DEBUG"
        assert s.cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]

    def test_invalid_port(self):
        with pytest.raises(ValueError, match="PORT"):
            Settings.from_env({"PORT": "abc"})

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Settings.from_env({"LOG_LEVEL": "chatty"})

    def test_log_level_case_insensitive(self):
        assert Settings.from_env({"LOG_LEVEL": "warning"}).log_level == "WARNING"

    def test_production_disables_watcher(self):
        assert Settings.from_env({"DOCVIEWER_ENV": "production"}).watch_enabled is False
        assert Settings.from_env({"DOCVIEWER_ENV": "Production"}).watch_enabled is False
        assert Settings.from_env({"DOCVIEWER_ENV": "staging"}).watch_enabled is True


class TestSettings:
    def test_relative_docs_dir_made_absolute(self):
        assert Settings(docs_dir=Path("some/dir")).docs_dir.is_absolute()

    def test_base_url_uses_localhost_for_loopback(self, tmp_path):
        assert Settings(docs_dir=tmp_path, port=3000).base_url == "http://localhost:3000"
        assert Settings(docs_dir=tmp_path, host="0.0.0.0", port=80).base_url == "http://localhost:80"

    def test_base_url_named_host(self, tmp_path):
        assert Settings(docs_dir=tmp_path, host="docs.internal").base_url == "http://docs.internal:3000"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
