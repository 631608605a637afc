import json

import pytest

from cardstash import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("CARDSTASH_TRADE_THRESHOLD", "CARDSTASH_LOG_LEVEL", "CARDSTASH_SEED_PATH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def no_terminal(monkeypatch):
    started = []
    monkeypatch.setattr(cli, "run_terminal", started.append)
    return started


def _argv(monkeypatch, *args):
    monkeypatch.setattr("sys.argv", ["cardstash", *args])


def test_run_app_rejects_unknown_log_level(monkeypatch, no_terminal, capsys):
    _argv(monkeypatch, "--log-level", "chatty")
    with pytest.raises(SystemExit) as exc:
        cli.run_app()
    assert exc.value.code == 2
    assert "Unknown log level" in capsys.readouterr().err
    assert no_terminal == []


def test_run_app_reports_bad_seed(tmp_path, monkeypatch, no_terminal, capsys):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"binders": [{"name": "B", "cards": ["Ghost"]}]}), encoding="utf-8")
    _argv(monkeypatch, "--seed", str(seed))
    with pytest.raises(SystemExit) as exc:
        cli.run_app()
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Seed errors:" in out
    assert "Ghost" in out
    assert no_terminal == []


def test_run_app_starts_terminal_with_seed(tmp_path, monkeypatch, no_terminal):
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps({"cards": [{"name": "Goblin", "rarity": "common", "value": "1.00"}]}),
        encoding="utf-8",
    )
    _argv(monkeypatch, "--seed", str(seed), "--log-level", "info")
    cli.run_app()
    [app] = no_terminal
    assert app.config.log_level == "INFO"
    assert app.inventory.collection.quantity("goblin") == 1


def test_run_validate_reports_malformed_json(tmp_path, monkeypatch, capsys):
    seed = tmp_path / "seed.json"
    seed.write_text("{not json", encoding="utf-8")
    _argv(monkeypatch, "--seed", str(seed))
    with pytest.raises(SystemExit) as exc:
        cli.run_validate()
    assert exc.value.code == 1
    assert "Seed errors:" in capsys.readouterr().out


def test_run_validate_reports_missing_file(tmp_path, monkeypatch, capsys):
    _argv(monkeypatch, "--seed", str(tmp_path / "missing.json"))
    with pytest.raises(SystemExit) as exc:
        cli.run_validate()
    assert exc.value.code == 1
    assert "Seed errors:" in capsys.readouterr().out
