"""Test doubles for the outbound HTTP session and the engine generator."""

from __future__ import annotations

from typing import Any

import requests


class FakeResponse:
    """Stand-in for `requests.Response` with a fixed status and body."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else repr(payload))
        self.request = None

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Records every `post` call and replays a scripted response or error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse(payload={})
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


class FakeGenerator:
    """Engine-level fake for `GeminiClient.generate`."""

    def __init__(self, reply: str = "Hello", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.messages: list[Any] = []

    def generate(self, message: Any) -> str:
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


def gemini_body(text: Any) -> dict[str, Any]:
    """Build a minimal `generateContent` response carrying `text`."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}
