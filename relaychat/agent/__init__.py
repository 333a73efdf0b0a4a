"""Upstream LLM access for the chat relay.

Responsibilities:
    - Upstream client initialization from environment configuration
    - Translation of UI messages into a Chat Completions request
    - Streaming of text deltas from the completion API

Maintains clean separation from the HTTP layer.
"""

from relaychat.agent.config import RelayConfig, get_relay_config
from relaychat.agent.relay import ChatRelayService, get_relay_service

__all__ = ["ChatRelayService", "RelayConfig", "get_relay_config", "get_relay_service"]
