"""
HTTP API adapter for the Gemini relay.

Architectural role:
- Expose `POST /gemini` to browser and script clients.
- Permit cross-origin requests from any origin.
- Delegate validation and the outbound call to `gemini_relay.core.engine.handle_request`.
- Render the resulting `RelayReply` as `{"response": ...}`.

API request lifecycle (`POST /gemini`):
1. Parse request JSON (`message`).
2. Hand the decoded body to the engine together with the app's client.
3. Return the reply with the status code chosen by the engine.

Input validation behavior:
- Missing or empty `message` -> HTTP 400.
- Body that is not valid JSON -> HTTP 400 (treated as a missing message).

Error handling strategy:
- Upstream failures are logged by the engine and returned as a fixed HTTP 500 body.
- No upstream error detail is ever rendered into a response.

Side effects:
- One outbound Gemini call per accepted request.
- Emits one DEBUG log line per request (visible when `RELAY_DEBUG` is enabled).
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gemini_relay.core.engine import TextGenerator, handle_request
from gemini_relay.llm.client import GeminiClient
from gemini_relay.llm.provider_config import RelayConfig


logger = logging.getLogger(__name__)


# ============================================================
# Request / Response Schema
# ============================================================

class RelayResponse(BaseModel):
    """
    Response body for every `/gemini` outcome.

    Note:
    - The request body is parsed directly from `Request` rather than through a
      model, so that a missing message yields the relay's own 400 body
      instead of FastAPI's 422.
    """
    response: str


# ============================================================
# App Factory
# ============================================================

def create_app(config: RelayConfig, client: TextGenerator | None = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: Immutable relay configuration.
        client: Outbound generator. Defaults to a `GeminiClient` bound to `config`.

    Returns:
        Configured `FastAPI` instance with CORS and the `/gemini` route.
    """
    app = FastAPI(title="Gemini Relay")
    app.state.config = config
    app.state.client = client or GeminiClient(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/gemini", response_model=RelayResponse)
    async def gemini(request: Request):
        """
        Relay one message to Gemini.

        Returns `{"response": <text>}` with 200, or the fixed 400/500 bodies.
        """
        raw = await request.body()
        try:
            body = json.loads(raw) if raw else None
        except ValueError:
            logger.debug("Rejecting request with undecodable JSON body")
            body = None

        reply = await handle_request(body, request.app.state.client)

        logger.debug("POST /gemini -> %d", reply.status_code)

        return JSONResponse(
            status_code=reply.status_code,
            content=RelayResponse(response=reply.response).model_dump(),
        )

    return app
