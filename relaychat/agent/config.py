"""Relay configuration with environment variable loading.

Pydantic-based configuration for the upstream completion client.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class RelayConfig(BaseModel):
    """Configuration for the chat relay's upstream client.

    Attributes:
        api_key: API key for model access.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        system_prompt: Instruction sent ahead of every conversation.
        max_duration: Upper bound in seconds for one upstream request.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""),
        description="API key for the completion provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4-turbo"),
        description="Model to use",
    )
    system_prompt: str = Field(
        default_factory=lambda: os.getenv("LLM_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
        description="System instruction prepended to the conversation",
    )
    max_duration: float = Field(
        default_factory=lambda: float(os.getenv("LLM_MAX_DURATION", "30")),
        gt=0,
        description="Maximum duration of an upstream request in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("OPENAI_API_KEY is required. Set it in the environment or .env")
        return v.strip()


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return RelayConfig()
