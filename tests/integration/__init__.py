"""Integration tests for the relay API running as an ASGI app.

Coverage:
    - Chunked streaming of upstream deltas
    - Request validation and upstream failure responses
    - CORS and health endpoints
"""
