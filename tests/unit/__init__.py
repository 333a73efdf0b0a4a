"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Relay configuration and upstream request construction
    - ui/: Streaming chat client and conversation state
"""
