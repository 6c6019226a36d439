"""Provider/runtime configuration for the relay.

Architectural role:
    Centralizes endpoint selection and credential lookup for `gemini_relay.llm.client`
    and the process entrypoint in `gemini_relay.api.main`.

Resolution order:
    1. Explicit overrides passed to `load_config` (CLI flags).
    2. Process environment.
    3. Values from the dotenv file (`gemini.env` by default). Existing environment
       variables are never overwritten by the file.
    4. Built-in defaults.

Determinism:
    Deterministic for a fixed process environment and dotenv file. The resulting
    `RelayConfig` is frozen and built once at startup.

Failure behavior:
    A missing credential raises `MissingCredentialError`; the entrypoint treats it
    as fatal. Malformed numeric values raise `ConfigError`.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_ENV_FILE = "gemini.env"
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

API_KEY_ENV = "GEMINI_API_KEY"

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)


class ConfigError(ValueError):
    """Raised when process configuration cannot be resolved."""


class MissingCredentialError(ConfigError):
    """Raised when `GEMINI_API_KEY` is absent or blank."""


@dataclass(frozen=True)
class RelayConfig:
    """Immutable process-wide relay configuration.

    Attributes:
        api_key: Gemini API credential, sent as the `key` query parameter.
        model: Gemini model identifier used to build `api_url`.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        env_file: Dotenv file the values were loaded from.
        debug: Enables DEBUG-level logging.
    """

    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    env_file: str = DEFAULT_ENV_FILE
    debug: bool = False

    @property
    def api_url(self) -> str:
        """Full `generateContent` endpoint for the configured model."""
        return GEMINI_URL_TEMPLATE.format(model=self.model)


def _parse_port(raw) -> int:
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid port: {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port


def load_config(env_file=None, host=None, port=None) -> RelayConfig:
    """Build the relay configuration from dotenv file, environment and overrides.

    Args:
        env_file: Dotenv path. Defaults to `gemini.env` in the working directory.
            A missing file is not an error; the environment may already hold the key.
        host: Optional bind-host override.
        port: Optional port override.

    Returns:
        Frozen `RelayConfig`.

    Raises:
        MissingCredentialError: If `GEMINI_API_KEY` is unset or blank.
        ConfigError: If the port is not a valid TCP port.

    Edge cases:
        - `RELAY_DEBUG` accepts `true`/`1`/`yes` (case-insensitive).
        - `GEMINI_MODEL` set to an empty string falls back to the default model.
    """
    env_file = env_file or DEFAULT_ENV_FILE
    load_dotenv(env_file, override=False)

    api_key = (os.getenv(API_KEY_ENV) or "").strip()
    if not api_key:
        raise MissingCredentialError(
            f"{API_KEY_ENV} is missing. Check your {env_file} file."
        )

    if port is None:
        port = os.getenv("RELAY_PORT", DEFAULT_PORT)

    return RelayConfig(
        api_key=api_key,
        model=(os.getenv("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL,
        host=host or os.getenv("RELAY_HOST") or DEFAULT_HOST,
        port=_parse_port(port),
        env_file=env_file,
        debug=os.getenv("RELAY_DEBUG", "").strip().lower() in ("true", "1", "yes"),
    )
