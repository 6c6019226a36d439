"""Startup behavior of the `gemini-relay` entrypoint."""

from __future__ import annotations

import logging

import pytest

from gemini_relay.api import main as main_module


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    """Replace uvicorn and logging setup; collect every `uvicorn.run` call."""
    calls: list[dict] = []

    def fake_run(app, **kwargs):
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    monkeypatch.setattr(main_module, "configure_logging", lambda debug=False: None)
    return calls


def test_missing_key_exits_before_serving(served: list[dict], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="gemini_relay.api.main"):
        with pytest.raises(SystemExit) as exc_info:
            main_module.main([])

    assert exc_info.value.code == 1
    assert served == []
    assert "Is API key set: No" in caplog.text
    assert "API key is missing" in caplog.text


def test_invalid_port_exits(served: list[dict], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    monkeypatch.setenv("RELAY_PORT", "not-a-port")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main([])

    assert exc_info.value.code == 1
    assert served == []


def test_serves_on_default_port(
    served: list[dict], monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret-key-123")

    with caplog.at_level(logging.INFO, logger="gemini_relay.api.main"):
        main_module.main([])

    assert len(served) == 1
    assert served[0]["host"] == "0.0.0.0"
    assert served[0]["port"] == 3000
    assert served[0]["app"].state.config.api_key == "secret-key-123"
    assert "Is API key set: Yes" in caplog.text
    assert "Server running at http://localhost:3000" in caplog.text
    assert "secret-key-123" not in caplog.text


def test_cli_overrides(served: list[dict], tmp_path) -> None:
    env_file = tmp_path / "other.env"
    env_file.write_text("GEMINI_API_KEY=from-cli-file\n", encoding="utf-8")

    main_module.main(["--env-file", str(env_file), "--host", "127.0.0.1", "--port", "8088"])

    assert served[0]["host"] == "127.0.0.1"
    assert served[0]["port"] == 8088
    assert served[0]["app"].state.config.api_key == "from-cli-file"
