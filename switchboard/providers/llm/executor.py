"""LLM Executor - the external completion service behind the LLM engine.

Routes a model string to an Agno model class and walks a fallback
chain when a model fails:

    openrouter/{provider}/{model} -> OpenRouter
    anthropic/{model}             -> Claude
    openai/{model}                -> OpenAIChat
    groq/{model}                  -> Groq
    mock/{name}                   -> canned reply, no network
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from switchboard.observability.logging import get_logger
from switchboard.providers.llm.base import (
    AuthenticationError,
    ContentFilterError,
    LLMMessage,
    LLMResponse,
    ModelError,
    ProviderError,
    RateLimitError,
)

if TYPE_CHECKING:
    from agno.agent import Agent

    from switchboard.config.models.providers import LLMClassifierProviderConfig

logger = get_logger(__name__)


class LLMExecutor:
    """Execute completion calls with a fallback chain.

    Example:
        executor = LLMExecutor(
            model="openai/gpt-4o-mini",
            fallback_models=["anthropic/claude-3-haiku-20240307"],
        )
        response = await executor.generate(
            messages=[LLMMessage(role="user", content="Oi")],
        )
    """

    def __init__(
        self,
        model: str,
        fallback_models: list[str] | None = None,
        timeout: float = 30.0,
        step_name: str | None = None,
    ) -> None:
        self._model = model
        self._fallback_models = fallback_models or []
        self._timeout = timeout
        self._step_name = step_name

        # One Agno agent per (model, temperature, max_tokens)
        self._agents: dict[tuple[str, float, int], Agent] = {}

    @property
    def model(self) -> str:
        return self._model

    @property
    def step_name(self) -> str | None:
        return self._step_name

    async def generate(
        self,
        messages: list[LLMMessage],
        *,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> LLMResponse:
        """Generate text, trying fallback models in order.

        Raises:
            ProviderError: When every model in the chain failed
        """
        models_to_try = [self._model] + self._fallback_models
        last_error: Exception | None = None

        for model in models_to_try:
            try:
                return await self._generate_with_model(
                    model=model,
                    messages=messages,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    **kwargs,
                )
            except RateLimitError as e:
                logger.warning(
                    "executor_rate_limited",
                    model=model,
                    step=self._step_name,
                    error=str(e),
                )
                last_error = e
            except ProviderError as e:
                logger.warning(
                    "executor_provider_error",
                    model=model,
                    step=self._step_name,
                    error=str(e),
                )
                last_error = e

        raise ProviderError(
            f"All models failed for step {self._step_name}. "
            f"Tried: {models_to_try}. Last error: {last_error}"
        )

    async def _generate_with_model(
        self,
        model: str,
        messages: list[LLMMessage],
        max_tokens: int,
        temperature: float,
        **kwargs: Any,  # noqa: ARG002
    ) -> LLMResponse:
        """Run one model through Agno.

        max_tokens and temperature are fixed when the Agno model is built,
        so each combination gets its own agent.
        """
        provider_type, _ = self._parse_model(model)
        if provider_type == "mock":
            return self._mock_response(model)

        agent = self._get_or_create_agent(model, temperature=temperature, max_tokens=max_tokens)
        input_text = "\n\n".join(m.content for m in messages if m.role != "system")
        system_prompt = next((m.content for m in messages if m.role == "system"), None)
        if system_prompt:
            agent.instructions = [system_prompt]

        start_time = time.perf_counter()
        try:
            run_response = await agent.arun(input_text)
        except Exception as e:
            raise self._translate_error(e) from e

        latency_ms = (time.perf_counter() - start_time) * 1000
        content = run_response.content or ""

        logger.debug(
            "executor_generate_complete",
            model=model,
            step=self._step_name,
            latency_ms=round(latency_ms, 2),
            content_length=len(content),
        )

        return LLMResponse(
            content=str(content),
            model=model,
            finish_reason="stop",
            metadata={"latency_ms": latency_ms, "provider": provider_type},
        )

    def _translate_error(self, error: Exception) -> ProviderError:
        """Map a backend exception onto the ProviderError hierarchy."""
        error_msg = str(error).lower()
        if "rate" in error_msg and "limit" in error_msg:
            return RateLimitError(f"Rate limited: {error}")
        if "api key" in error_msg or "unauthorized" in error_msg:
            return AuthenticationError(f"Authentication failed: {error}")
        if "content" in error_msg and ("filter" in error_msg or "policy" in error_msg):
            return ContentFilterError(f"Content filtered: {error}")
        if "model" in error_msg and ("not found" in error_msg or "does not exist" in error_msg):
            return ModelError(f"Model unavailable: {error}")
        return ProviderError(f"Agno execution failed: {error}")

    def _get_or_create_agent(
        self,
        model: str,
        *,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> Agent:
        key = (model, temperature, max_tokens)
        if key not in self._agents:
            from agno.agent import Agent

            self._agents[key] = Agent(
                model=self._create_agno_model(
                    model, temperature=temperature, max_tokens=max_tokens
                ),
                num_history_messages=0,
                markdown=False,
            )
        return self._agents[key]

    def _create_agno_model(
        self,
        model: str,
        *,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> Any:
        provider_type, api_model = self._parse_model(model)

        if provider_type == "openrouter":
            from agno.models.openrouter import OpenRouter

            return OpenRouter(
                id=api_model,
                timeout=self._timeout,
                temperature=temperature,
                max_tokens=max_tokens,
            )

        if provider_type == "anthropic":
            from agno.models.anthropic import Claude

            return Claude(
                id=api_model,
                timeout=self._timeout,
                temperature=temperature,
                max_tokens=max_tokens,
            )

        if provider_type == "openai":
            from agno.models.openai import OpenAIChat

            return OpenAIChat(
                id=api_model,
                timeout=self._timeout,
                temperature=temperature,
                max_tokens=max_tokens,
            )

        if provider_type == "groq":
            from agno.models.groq import Groq

            return Groq(
                id=api_model,
                timeout=self._timeout,
                temperature=temperature,
                max_tokens=max_tokens,
            )

        from agno.models.openrouter import OpenRouter

        logger.warning(
            "unknown_provider_defaulting_to_openrouter",
            model=model,
            provider_type=provider_type,
        )
        return OpenRouter(
            id=model,
            timeout=self._timeout,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def _mock_response(self, model: str) -> LLMResponse:
        return LLMResponse(
            content=f"Mock response for {model}",
            model=model,
            finish_reason="stop",
        )

    def _parse_model(self, model: str) -> tuple[str, str]:
        """Split a model string into (provider_type, api_model).

        "openrouter/anthropic/claude-3-haiku" -> ("openrouter", "anthropic/claude-3-haiku")
        "openai/gpt-4o-mini" -> ("openai", "gpt-4o-mini")
        "mock/test" -> ("mock", "test")
        """
        parts = model.split("/")
        if len(parts) >= 3 and parts[0] == "openrouter":
            return "openrouter", "/".join(parts[1:])
        if len(parts) >= 2:
            return parts[0], "/".join(parts[1:])
        return "mock", model


def create_executor_from_config(config: LLMClassifierProviderConfig) -> LLMExecutor:
    """Build the executor used by the LLM intent classifier."""
    return LLMExecutor(
        model=config.model,
        fallback_models=config.fallback_models,
        timeout=config.timeout,
        step_name="intent_classification",
    )
