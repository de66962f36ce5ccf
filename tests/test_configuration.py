"""Configuration precedence and validation."""

from pathlib import Path

import pytest
import yaml

from dugout.shared.core.configuration import (
    DEFAULTS_PATH,
    ConfigManager,
    SearchScope,
    SystemConfig,
    ValidationLevel,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FLET_WEB_MODE", "FLET_PORT", "BANNER_DISMISS_SECONDS", "SEARCH_SCOPE"):
        monkeypatch.delenv(key, raising=False)


def write_user(config_dir: Path, data) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "user.yaml").write_text(yaml.safe_dump(data), encoding="utf-8")


def test_bundled_defaults(tmp_path):
    assert DEFAULTS_PATH.exists()
    config = ConfigManager(tmp_path).get_config()
    assert config == SystemConfig()
    assert config.banner.dismiss_seconds == 3.0
    assert config.search.scope is SearchScope.CATALOG


def test_user_file_overrides_defaults(tmp_path):
    write_user(tmp_path, {"banner": {"dismiss_seconds": 1.5}, "search": {"scope": "favorites"}})
    config = ConfigManager(tmp_path).get_config()
    assert config.banner.dismiss_seconds == 1.5
    assert config.banner.added_message == "Se agregó a favoritos"
    assert config.search.scope is SearchScope.FAVORITES


def test_environment_overrides_user_file(tmp_path, monkeypatch):
    write_user(tmp_path, {"ui": {"flet_port": 9000}})
    monkeypatch.setenv("FLET_PORT", "9100")
    monkeypatch.setenv("FLET_WEB_MODE", "yes")
    monkeypatch.setenv("SEARCH_SCOPE", "FAVORITES")
    config = ConfigManager(tmp_path).get_config()
    assert config.ui.flet_port == 9100
    assert config.ui.flet_web_mode is True
    assert config.search.scope is SearchScope.FAVORITES


def test_unconvertible_env_value_is_skipped(tmp_path, monkeypatch):
    monkeypatch.setenv("BANNER_DISMISS_SECONDS", "soon")
    config = ConfigManager(tmp_path).get_config()
    assert config.banner.dismiss_seconds == 3.0


def test_strict_rejects_invalid_values(tmp_path):
    write_user(tmp_path, {"banner": {"dismiss_seconds": 0}})
    with pytest.raises(ValueError, match="Configuration validation failed"):
        ConfigManager(tmp_path).get_config(ValidationLevel.STRICT)


def test_strict_rejects_unknown_keys(tmp_path):
    write_user(tmp_path, {"ui": {"colour": "red"}})
    with pytest.raises(ValueError):
        ConfigManager(tmp_path).get_config()


def test_lenient_falls_back_to_defaults(tmp_path):
    write_user(tmp_path, {"ui": {"flet_port": 80}})
    config = ConfigManager(tmp_path).get_config(ValidationLevel.LENIENT)
    assert config == SystemConfig()


def test_malformed_user_file_is_ignored(tmp_path):
    tmp_path.mkdir(exist_ok=True)
    (tmp_path / "user.yaml").write_text("banner: [unclosed\n", encoding="utf-8")
    assert ConfigManager(tmp_path).get_config() == SystemConfig()


def test_non_mapping_user_file_is_ignored(tmp_path):
    (tmp_path / "user.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert ConfigManager(tmp_path).get_config() == SystemConfig()


def test_user_file_is_read_once_per_manager(tmp_path):
    manager = ConfigManager(tmp_path)
    assert manager.get_config().ui.flet_port == 8550
    write_user(tmp_path, {"ui": {"flet_port": 8600}})
    assert manager.get_config().ui.flet_port == 8550
    assert ConfigManager(tmp_path).get_config().ui.flet_port == 8600
