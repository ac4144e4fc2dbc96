"""
Tests for gallery_api/app/core/config.py
"""

from pathlib import Path

from gallery_api.app.core.config import Settings


class TestFromEnv:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "DATA_FILE", "CACHE_DOCUMENT", "STATIC_DIR", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.cache_document is False
        assert settings.static_dir is None
        assert settings.log_file is None

    def test_port_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings.from_env().port == 8080

    def test_cache_flag(self, monkeypatch):
        monkeypatch.setenv("CACHE_DOCUMENT", "Yes")
        assert Settings.from_env().cache_document is True
        monkeypatch.setenv("CACHE_DOCUMENT", "0")
        assert Settings.from_env().cache_document is False


class TestDataPath:
    def test_relative_path_resolves_inside_package(self):
        path = Settings().data_path
        assert path.is_absolute()
        assert path.parts[-3:] == ("gallery_api", "data", "paintings-nested.json")

    def test_bundled_document_exists(self):
        assert Settings().data_path.is_file()

    def test_absolute_path_is_kept(self, tmp_path):
        target = tmp_path / "p.json"
        assert Settings(data_file=str(target)).data_path == Path(target)
