"""Gemini transport client for relay requests.

Architectural role:
    Executes the single outbound `generateContent` call and extracts the answer
    text from Gemini's nested response structure.

Model invocation flow:
    `engine.process_message` -> `GeminiClient.generate(message)` ->
    `build_payload` -> HTTP POST -> `extract_text` -> text or fallback.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the transport's
    default timeout.

Failure handling model:
    Transport errors, non-2xx responses and undecodable bodies are raised as
    `GeminiRequestError`. The error carries upstream detail for server-side logs;
    callers decide what reaches the client.
"""

import requests

from gemini_relay.llm.provider_config import RelayConfig

NO_RESPONSE_FALLBACK = "No response from Gemini."


class GeminiRequestError(Exception):
    """Outbound Gemini call failed.

    Attributes:
        status_code: Upstream HTTP status, or `None` for transport failures.
        detail: Upstream error body or exception message. Never contains the key.
    """

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def build_payload(message) -> dict:
    """Wrap one user message into a single-turn `generateContent` payload."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": str(message)}]},
        ],
    }


def extract_text(data) -> str | None:
    """Return `candidates[0].content.parts[0].text` or `None`.

    Any missing level, empty list or unexpected type along the path yields `None`.
    """
    node = data
    for step in ("candidates", 0, "content", "parts", 0, "text"):
        if isinstance(step, int):
            if not isinstance(node, list) or len(node) <= step:
                return None
        elif not isinstance(node, dict) or step not in node:
            return None
        node = node[step]
    return node if isinstance(node, str) else None


def _error_detail(err: requests.exceptions.RequestException) -> tuple[str, int | None]:
    """Pick the most useful diagnostic from a request exception.

    Prefers the upstream response body (Gemini returns a JSON error object) over
    the exception text, which may embed the request URL and therefore the key.
    """
    response = getattr(err, "response", None)
    if response is not None:
        body = response.text or ""
        return body.strip() or f"HTTP {response.status_code}", response.status_code
    return err.__class__.__name__ + ": " + str(err), None


class GeminiClient:
    """Blocking Gemini client bound to one `RelayConfig`.

    Args:
        config: Relay configuration (endpoint and credential).
        session: Optional object exposing `post(url, params=, json=, headers=)`.
            Defaults to the `requests` module itself.
    """

    def __init__(self, config: RelayConfig, session=None) -> None:
        self.config = config
        self._http = session or requests

    def generate(self, message) -> str:
        """Send `message` to Gemini and return the answer text.

        Returns:
            Extracted text, or `NO_RESPONSE_FALLBACK` when the text field is
            missing, null or empty.

        Raises:
            GeminiRequestError: On network failure, non-2xx status or a body that
                is not JSON.
        """
        try:
            response = self._http.post(
                self.config.api_url,
                params={"key": self.config.api_key},
                json=build_payload(message),
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as err:
            detail, status_code = _error_detail(err)
            raise GeminiRequestError(
                self._redact(detail), status_code=status_code
            ) from None
        except ValueError as err:
            raise GeminiRequestError(f"Malformed response body: {err}") from None

        return extract_text(data) or NO_RESPONSE_FALLBACK

    def _redact(self, text: str) -> str:
        return text.replace(self.config.api_key, "***")
