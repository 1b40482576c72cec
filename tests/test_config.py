"""Tests for config loading."""

from tarot_timer.config import (
    DEFAULT_CONFIG,
    create_template_config,
    get_config_path,
    get_db_path,
    load_config,
)


class TestLoadConfig:
    """Test reading config.toml over the defaults."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.toml") == DEFAULT_CONFIG

    def test_partial_file_is_merged(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[display]\nlanguage = "en"\n', encoding="utf-8")

        config = load_config(path)

        assert config["display"]["language"] == "en"
        assert config["display"]["format_24h"] is False
        assert config["clock"]["timezone"] == "Asia/Seoul"

    def test_broken_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[display\nlanguage = ", encoding="utf-8")

        assert load_config(path) == DEFAULT_CONFIG

    def test_template_round_trip(self, tmp_path):
        path = create_template_config(tmp_path / "nested" / "config.toml")
        assert load_config(path) == DEFAULT_CONFIG


class TestPaths:
    """Test the config directory and database location."""

    def test_home_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TAROT_TIMER_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "config.toml"
        assert get_db_path(load_config()) == tmp_path / "tarot.db"

    def test_explicit_db_path(self, tmp_path):
        config = {"storage": {"db_path": str(tmp_path / "other.db")}}
        assert get_db_path(config) == tmp_path / "other.db"
