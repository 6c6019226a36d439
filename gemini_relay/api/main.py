"""
Process entrypoint for the Gemini relay.

Architectural role:
- Configure logging for the whole process.
- Resolve `RelayConfig` once and refuse to start without a credential.
- Build the FastAPI app and serve it with uvicorn.

Startup sequence:
1. Parse CLI overrides (`--env-file`, `--host`, `--port`).
2. Install the log handler.
3. Load configuration; log whether the API key is set.
4. Missing key or invalid config -> log diagnostic, exit with status 1.
5. Log the listening address and hand control to uvicorn.

Side effects:
- Reads the dotenv file (default `gemini.env`) into the process environment.
- Binds a TCP socket only after configuration succeeded.
"""

import argparse
import logging
import sys

import uvicorn

from gemini_relay.api.http_api import create_app
from gemini_relay.llm.provider_config import (
    DEFAULT_ENV_FILE,
    ConfigError,
    MissingCredentialError,
    load_config,
)


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(debug: bool = False) -> None:
    """Install one stdout handler on the root logger."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Relay JSON messages to the Gemini API")
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"dotenv file holding GEMINI_API_KEY (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument("--host", default=None, help="bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="listen port (default: 3000)")
    return parser


def main(argv=None) -> None:
    """Start the relay server; exit with status 1 on configuration failure."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        config = load_config(env_file=args.env_file, host=args.host, port=args.port)
    except MissingCredentialError as err:
        logger.info("Is API key set: No")
        logger.error("API key is missing! %s", err)
        sys.exit(1)
    except ConfigError as err:
        logger.error("Invalid configuration: %s", err)
        sys.exit(1)

    logger.info("Is API key set: Yes")
    if config.debug:
        configure_logging(debug=True)
    logger.info("API key loaded.")

    app = create_app(config)

    logger.info("Server running at http://localhost:%d", config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
