"""Relay handler: validate, forward to Gemini, shape the reply.

Architectural role:
    Provides the request pipeline used by the HTTP adapter to turn one inbound
    message into one outbound Gemini call and a `RelayReply`.

Control-flow model:
    1. Extract `message` from the decoded request body.
    2. Reject falsy messages with `ClientInputError` (no outbound call).
    3. Run the blocking `GeminiClient.generate` in a worker thread.
    4. Convert any failure into `UpstreamOrInternalError` after logging detail.
    5. Map the result or error kind to a `RelayReply`.

Concurrency:
    Each request suspends on its own worker-thread call. No state is shared
    between requests; the client and config are immutable.

Error handling strategy:
    Upstream detail (Gemini error body, exception text) is logged here and never
    copied into the reply.
"""

import asyncio
import logging
from typing import Any, Protocol

from gemini_relay.core.relay_types import (
    ClientInputError,
    RelayReply,
    UpstreamOrInternalError,
)
from gemini_relay.llm.client import GeminiRequestError


logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Minimal blocking interface required from the outbound client."""

    def generate(self, message: Any) -> str:
        """Return generated text for one user message."""
        ...


async def process_message(message: Any, client: TextGenerator) -> str:
    """Forward one message to the generator and return its text.

    Args:
        message: Inbound `message` value. Any falsy value is rejected.
        client: Object implementing `generate`.

    Returns:
        Generated text (already defaulted to the fallback by the client).

    Raises:
        ClientInputError: If `message` is missing or empty.
        UpstreamOrInternalError: If the outbound call fails for any reason.
    """
    if not message:
        raise ClientInputError("message is missing or empty")

    try:
        return await asyncio.to_thread(client.generate, message)
    except GeminiRequestError as err:
        logger.error(
            "Gemini API Error (status=%s): %s", err.status_code or "n/a", err.detail
        )
        raise UpstreamOrInternalError(err.detail) from err
    except Exception as err:
        logger.exception("Gemini relay failed")
        raise UpstreamOrInternalError(str(err)) from err


async def handle_request(body: Any, client: TextGenerator) -> RelayReply:
    """Run the full relay pipeline for one decoded request body.

    Args:
        body: Decoded JSON body. Anything other than an object is treated as a
            body without `message`.
        client: Outbound text generator.

    Returns:
        `RelayReply` with status 200, 400 or 500.
    """
    message = body.get("message") if isinstance(body, dict) else None

    try:
        text = await process_message(message, client)
    except (ClientInputError, UpstreamOrInternalError) as err:
        return RelayReply.from_error(err)

    return RelayReply(status_code=200, response=text)
