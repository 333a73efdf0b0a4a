"""Test package for Relay Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP tests against the FastAPI app

The upstream completion API is always faked; no API key is needed.
"""
