"""Relay Chat - a minimal streaming chat client for an LLM completion API.

Combines FastAPI for HTTP streaming, the OpenAI SDK for completions,
NiceGUI for the browser UI, and Pydantic for data validation.

Components:
    - api: HTTP relay endpoint and chunked streaming responses
    - agent: Upstream completion client and configuration
    - ui: Chat page, conversation state, and streaming client
    - models: Message schemas
"""

__version__ = "0.1.0"
