"""Gemini relay API adapter package.

Architectural role:
- Defines the external interaction boundary (HTTP) and the process entrypoint.
- Performs transport-level parsing and response rendering.
- Delegates validation and the outbound call to the core layer.
"""
