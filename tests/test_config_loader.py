"""Tests for configuration loading."""

import pytest

from advocate_directory.config.loader import get_cache_max_age, load_config
from advocate_directory.errors import ConfigError


def test_defaults_when_no_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_config(environ={})

    assert config["database"] == {"url": None, "echo": False}
    assert config["listing"]["cache_max_age_seconds"] == 60
    assert config["logging"]["level"] == "INFO"


def test_default_file_in_working_directory_is_read(tmp_path, monkeypatch):
    (tmp_path / "advocate_directory.config.yaml").write_text(
        "database:\n  url: sqlite:///local.db\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    config = load_config(environ={})

    assert config["database"]["url"] == "sqlite:///local.db"
    assert config["database"]["echo"] is False


def test_file_values_merge_over_defaults(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "database:\n  echo: true\nlisting:\n  cache_max_age_seconds: 120\n",
        encoding="utf-8",
    )

    config = load_config(cfg, environ={})

    assert config["database"] == {"url": None, "echo": True}
    assert get_cache_max_age(config) == 120
    assert config["logging"]["level"] == "INFO"


def test_environment_overrides_file(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("database:\n  url: sqlite:///file.db\n", encoding="utf-8")

    config = load_config(
        cfg,
        environ={
            "DATABASE_URL": "postgresql://db/advocates",
            "ADVOCATE_DIRECTORY_LOG_LEVEL": "DEBUG",
        },
    )

    assert config["database"]["url"] == "postgresql://db/advocates"
    assert config["logging"]["level"] == "DEBUG"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml", environ={})


def test_invalid_yaml_raises(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("database: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(cfg, environ={})


def test_non_mapping_root_raises(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(cfg, environ={})


def test_non_mapping_section_raises(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("database: postgres\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="database"):
        load_config(cfg, environ={})


def test_bad_cache_max_age_raises():
    with pytest.raises(ConfigError):
        get_cache_max_age({"listing": {"cache_max_age_seconds": "soon"}})
