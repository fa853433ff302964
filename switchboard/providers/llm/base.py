"""Completion service data models and error types."""

from typing import Any

from pydantic import BaseModel, Field


class LLMMessage(BaseModel):
    """A message sent to the completion service."""

    role: str = Field(..., description="Role: system, user, or assistant")
    content: str = Field(..., description="Message content")


class LLMResponse(BaseModel):
    """Response from a completion call."""

    content: str = Field(..., description="Generated text")
    model: str = Field(..., description="Model used")
    finish_reason: str | None = Field(default=None, description="Why generation stopped")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Execution metadata")


class ProviderError(Exception):
    """Base exception for completion service failures."""


class AuthenticationError(ProviderError):
    """Invalid or missing API key."""


class RateLimitError(ProviderError):
    """Rate limit exceeded."""


class ModelError(ProviderError):
    """Model not found or unavailable."""


class ContentFilterError(ProviderError):
    """Content blocked by safety filter."""
