"""Gemini relay: a single-endpoint HTTP bridge to the Gemini generative-language API.

Package layout:
    - `api`: HTTP surface and process entrypoint.
    - `core`: relay pipeline and its reply/error contracts.
    - `llm`: configuration and the outbound Gemini client.
"""

__version__ = "0.1.0"
