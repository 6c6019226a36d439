"""LLM access package.

Module split:
    - `provider_config`: environment-driven endpoint and credential configuration.
    - `client`: Gemini payload construction, HTTP transport and response parsing.
"""
