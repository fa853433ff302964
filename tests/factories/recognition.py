"""Test factories for recognition domain models."""

import asyncio
import json
from typing import Any

from switchboard.providers.llm import LLMExecutor, LLMMessage, LLMResponse, ProviderError
from switchboard.recognition.classifiers import Classifier
from switchboard.recognition.enums import BusinessDomain, IntentType
from switchboard.recognition.models import (
    ConversationContext,
    ConversationTurn,
    Entity,
    Intent,
    IntentContext,
    TenantConfig,
)


class ContextFactory:
    """Factory for creating ConversationContext instances for testing."""

    @staticmethod
    def create(
        *,
        session_id: str = "session-1",
        user_id: str = "user-1",
        tenant_id: str = "tenant-1",
        domain: BusinessDomain | None = None,
        escalation_triggers: list[str] | None = None,
        history: list[str] | None = None,
        turns: int = 0,
        current_intent: Intent | None = None,
    ) -> ConversationContext:
        """Create a ConversationContext with sensible defaults.

        Args:
            session_id: Session identifier
            user_id: User identifier
            tenant_id: Tenant identifier
            domain: Tenant business domain; no tenant config when None
                and no escalation triggers are given
            escalation_triggers: Tenant supervisor trigger words
            history: User messages, oldest first
            turns: Number of filler turns when ``history`` is not given
            current_intent: Last intent of the conversation
        """
        messages = history if history is not None else [f"mensagem {i}" for i in range(turns)]
        tenant_config = None
        if domain is not None or escalation_triggers:
            tenant_config = TenantConfig(
                tenant_id=tenant_id,
                domain=domain,
                escalation_triggers=escalation_triggers or [],
            )
        return ConversationContext(
            session_id=session_id,
            user_id=user_id,
            tenant_id=tenant_id,
            conversation_history=[ConversationTurn(role="user", content=m) for m in messages],
            tenant_config=tenant_config,
            current_intent=current_intent,
        )


class IntentFactory:
    """Factory for creating Intent instances for testing."""

    @staticmethod
    def create(
        intent_type: IntentType = IntentType.OTHER,
        confidence: float = 0.5,
        *,
        entities: list[Entity] | None = None,
        engine_consensus: int = 0,
    ) -> Intent:
        return Intent(
            type=intent_type,
            confidence=confidence,
            entities=entities or [],
            context=IntentContext(engine_consensus=engine_consensus),
        )


class ScriptedClassifier(Classifier):
    """Classifier returning a fixed intent, optionally after a delay or by failing."""

    def __init__(
        self,
        intent: Intent | None = None,
        delay: float = 0.0,
        error: Exception | None = None,
    ) -> None:
        self._intent = intent or IntentFactory.create()
        self._delay = delay
        self._error = error
        self.calls = 0

    async def classify(self, message: str, context: ConversationContext) -> Intent:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._intent


class ScriptedLLMExecutor(LLMExecutor):
    """LLM executor answering with a fixed JSON verdict."""

    def __init__(
        self,
        verdict: dict[str, Any] | None = None,
        content: str | None = None,
        raise_error: bool = False,
    ) -> None:
        super().__init__(model="mock/test", step_name="test")
        self._verdict = verdict or {"intent": "other", "confidence": 0.5}
        self._content = content
        self._raise_error = raise_error
        self.generate_calls: list[list[LLMMessage]] = []

    async def generate(
        self,
        messages: list[LLMMessage],
        **kwargs: Any,
    ) -> LLMResponse:
        self.generate_calls.append(messages)

        if self._raise_error:
            raise ProviderError("All models failed for step test")

        content = self._content if self._content is not None else json.dumps(self._verdict)
        return LLMResponse(content=content, model="mock-model")


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
