"""External completion service configuration."""

from pydantic import BaseModel, Field


class LLMClassifierProviderConfig(BaseModel):
    """Model routing for the LLM intent classifier.

    Model strings use the executor prefix format, for example
    ``openai/gpt-4o-mini`` or ``openrouter/anthropic/claude-3-haiku``.
    A ``mock/`` prefix never leaves the process.
    """

    enabled: bool = Field(default=True, description="Register the LLM engine")
    model: str = Field(
        default="openai/gpt-4o-mini",
        description="Primary model string",
    )
    fallback_models: list[str] = Field(
        default_factory=list,
        description="Models tried in order when the primary fails",
    )
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=500, gt=0)
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )


class ProvidersConfig(BaseModel):
    """Provider configuration."""

    llm: LLMClassifierProviderConfig = Field(
        default_factory=LLMClassifierProviderConfig,
        description="Completion service used by the LLM engine",
    )
