"""Tests for the CLI entrypoint."""

import json

import pytest

from advocate_directory import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


@pytest.fixture
def config_for(tmp_path):
    def _write(database_url):
        cfg = tmp_path / "advocate_directory.config.yaml"
        cfg.write_text(f"database:\n  url: {database_url}\n", encoding="utf-8")
        return str(cfg)
    return _write


def test_list_against_unreachable_store_uses_fallback(config_for, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = config_for(f"sqlite:///{tmp_path / 'missing' / 'advocates.db'}")

    exit_code = cli.main(["--config", cfg, "list", "--limit", "2", "--sort-by", "lastName"])

    assert exit_code == 0
    body = json.loads(capsys.readouterr().out)
    assert [item["lastName"] for item in body["data"]] == ["Brown", "Clark"]
    assert body["pagination"]["total"] == 15


def test_seed_then_list_reads_store(config_for, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = config_for(f"sqlite:///{tmp_path / 'advocates.db'}")

    assert cli.main(["--config", cfg, "seed"]) == 0
    seeded = json.loads(capsys.readouterr().out)
    assert len(seeded["advocates"]) == 15
    assert all("id" in item for item in seeded["advocates"])

    assert cli.main(["--config", cfg, "list", "--search", "diabetes"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert [item["firstName"] for item in body["data"]] == ["Megan", "Michael"]
    assert all("id" in item for item in body["data"])


def test_seed_failure_prints_generic_error(config_for, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = config_for(f"sqlite:///{tmp_path / 'missing' / 'advocates.db'}")

    assert cli.main(["--config", cfg, "seed"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Failed to seed database"}


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "advocate-directory" in capsys.readouterr().out
