from __future__ import annotations

import pytest

from gemini_relay.llm.provider_config import RelayConfig

RELAY_ENV_VARS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "RELAY_HOST",
    "RELAY_PORT",
    "RELAY_DEBUG",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear relay variables and run each test from an empty directory.

    Variables are set before deletion so that anything `load_dotenv` writes is
    rolled back on teardown.
    """
    for name in RELAY_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(api_key="test-key")
