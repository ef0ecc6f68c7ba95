"""Tests for settings.json handling and rate table resolution.

Uses isolated directories via tmp_path and BRUTNET_CONFIG_PATH
to avoid touching the user's real configuration.
"""

import json

import pytest
import yaml

from brutnet.sdk import (
    RateTableNotFoundError,
    clear_setting,
    get_config_dir,
    get_configured_rate_table,
    get_setting,
    get_settings_path,
    load_rate_table,
    load_settings,
    save_settings,
    set_setting,
)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("BRUTNET_CONFIG_PATH", str(config_dir))
    return config_dir


@pytest.fixture
def custom_table(tmp_path):
    """A valid custom rate table on disk."""
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.safe_dump({
        "year": "custom",
        "employee_contribution_rates": {"non-cadre": 0.10, "cadre": 0.15},
        "employer_contribution_rates": {"non-cadre": 0.30, "cadre": 0.35},
        "tax_brackets": [{"over": 0, "rate": 0.05}],
    }))
    return path


class TestConfigDir:
    """Config directory resolution."""

    def test_env_var(self, isolated_config):
        assert get_config_dir() == isolated_config
        assert get_settings_path() == isolated_config / "settings.json"

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BRUTNET_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert get_config_dir() == tmp_path / "xdg" / "brutnet"


class TestSettings:
    """Reading and writing settings.json."""

    def test_missing_file_is_empty(self, isolated_config):
        assert load_settings() == {}
        assert get_setting("year", "default") == "default"

    def test_save_creates_directory(self, isolated_config):
        path = save_settings({"default_status": "cadre"})

        assert path.exists()
        assert json.loads(path.read_text()) == {"default_status": "cadre"}

    def test_set_and_get(self, isolated_config):
        set_setting("default_output_format", "json")
        set_setting("year", "2025")

        assert get_setting("default_output_format") == "json"
        assert load_settings() == {"default_output_format": "json", "year": "2025"}

    def test_clear(self, isolated_config):
        set_setting("year", "2025")

        assert clear_setting("year") is True
        assert clear_setting("year") is False
        assert load_settings() == {}


class TestConfiguredRateTable:
    """Argument, then settings, then packaged default."""

    def test_default(self, isolated_config):
        assert get_configured_rate_table() == load_rate_table("2025")

    def test_explicit_path(self, isolated_config, custom_table):
        assert get_configured_rate_table(path=str(custom_table)).year == "custom"

    def test_explicit_year(self, isolated_config):
        assert get_configured_rate_table(year="2025").year == "2025"

    def test_setting_rate_table(self, isolated_config, custom_table):
        set_setting("rate_table", str(custom_table))
        assert get_configured_rate_table().year == "custom"

    def test_explicit_year_beats_setting(self, isolated_config, custom_table):
        set_setting("rate_table", str(custom_table))
        assert get_configured_rate_table(year="2025").year == "2025"

    def test_setting_year(self, isolated_config):
        set_setting("year", "1999")
        with pytest.raises(RateTableNotFoundError):
            get_configured_rate_table()

    def test_setting_points_to_missing_file(self, isolated_config, tmp_path):
        set_setting("rate_table", str(tmp_path / "gone.yaml"))
        with pytest.raises(RateTableNotFoundError):
            get_configured_rate_table()
