"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Conversation state keyed by message id
    - Streaming client for the relay endpoint
    - Chat page rendering replies as they arrive

Contains no model logic. Delegates completions to the relay API.
"""
