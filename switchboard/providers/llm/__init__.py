"""Completion service access for the LLM intent engine."""

from switchboard.providers.llm.base import (
    AuthenticationError,
    ContentFilterError,
    LLMMessage,
    LLMResponse,
    ModelError,
    ProviderError,
    RateLimitError,
)
from switchboard.providers.llm.executor import LLMExecutor, create_executor_from_config

__all__ = [
    "LLMMessage",
    "LLMResponse",
    "ProviderError",
    "AuthenticationError",
    "RateLimitError",
    "ModelError",
    "ContentFilterError",
    "LLMExecutor",
    "create_executor_from_config",
]
