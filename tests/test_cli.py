import json

import pytest

from passwordanalyzer.cli import main


def test_check_text(capsys):
    main(["check", "Tr0ub4dor&3xtra"])
    out = capsys.readouterr().out
    assert "Strength: Strong" in out
    assert "score=100/100" in out


def test_check_json(capsys):
    main(["check", "password", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 1
    assert "password" not in data


def test_check_json_show_password(capsys):
    main(["check", "Passw0rd!", "--json", "--show-password"])
    data = json.loads(capsys.readouterr().out)
    assert data["password"] == "Passw0rd!"


def test_check_empty(capsys):
    main(["check"])
    out = capsys.readouterr().out
    assert "score=0/100" in out


def _capture_uvicorn_run(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


def test_serve_passes_import_string_for_reload(monkeypatch):
    calls = _capture_uvicorn_run(monkeypatch)
    main(["serve", "--host", "127.0.0.1", "--port", "59999", "--reload"])
    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == ("passwordanalyzer.api:create_app",)
    assert kwargs == {"factory": True, "host": "127.0.0.1", "port": 59999, "reload": True}


def test_serve_defaults(monkeypatch):
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    calls = _capture_uvicorn_run(monkeypatch)
    main(["serve"])
    _, kwargs = calls[0]
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 5005
    assert kwargs["reload"] is False


def test_log_level_is_case_insensitive(capsys):
    main(["--log-level", "debug", "check", "Passw0rd!"])
    assert "Strength: Medium" in capsys.readouterr().out


def test_unknown_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "FOO", "check", "x"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
