"""Intent classification delegated to an external completion service."""

import json
import re
from pathlib import Path
from typing import Any

from switchboard.observability.logging import get_logger
from switchboard.providers.llm import LLMExecutor, LLMMessage, ProviderError
from switchboard.recognition.classifiers.base import Classifier
from switchboard.recognition.enums import EntityType, IntentType
from switchboard.recognition.models import (
    ConversationContext,
    Entity,
    Intent,
    IntentContext,
    LLMMetadata,
)

logger = get_logger(__name__)

_PROMPT_TEMPLATE_PATH = Path(__file__).parent / "prompts" / "classify_intent.txt"
_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")

UNPARSEABLE_CONFIDENCE = 0.5


class LLMIntentClassifier(Classifier):
    """Prompts the completion service and parses its JSON verdict.

    A reply without JSON or with malformed JSON becomes a low-confidence
    ``other`` intent. An unavailable service raises ``ProviderError``.
    """

    def __init__(
        self,
        llm_executor: LLMExecutor | None,
        prompt_template: str | None = None,
        temperature: float = 0.1,
        max_tokens: int = 500,
    ) -> None:
        self._llm_executor = llm_executor
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._prompt_template = prompt_template or _PROMPT_TEMPLATE_PATH.read_text()

    async def classify(self, message: str, context: ConversationContext) -> Intent:
        if self._llm_executor is None:
            raise ProviderError("LLM executor not configured")

        response = await self._llm_executor.generate(
            messages=[LLMMessage(role="user", content=self.build_prompt(message, context))],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        if not response.content.strip():
            raise ProviderError("Empty reply from completion service")

        parsed = self.parse_response(response.content)
        return Intent(
            type=parsed["intent"],
            confidence=parsed["confidence"],
            entities=parsed["entities"],
            context=IntentContext(
                business_domain=context.tenant_domain,
                conversation_turn=context.turn_count,
                reasoning=parsed["reasoning"],
            ),
            metadata=LLMMetadata(model=response.model),
        )

    def build_prompt(self, message: str, context: ConversationContext) -> str:
        domain = context.tenant_domain
        previous = context.current_intent
        return self._prompt_template.format(
            message=message.replace('"', "'"),
            domain=domain.value if domain else "general",
            history_length=context.turn_count,
            previous_intent=previous.type.value if previous else "none",
            tenant_id=context.tenant_id,
            intents=", ".join(intent.value for intent in IntentType),
            entity_types=", ".join(entity.value for entity in EntityType),
        )

    def parse_response(self, content: str) -> dict[str, Any]:
        """Extract ``{intent, confidence, entities, reasoning}`` from free text."""
        match = _JSON_BLOCK.search(content)
        if match is None:
            return self._unparseable("Could not parse response")

        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            logger.warning("llm_response_parse_failed", error=str(e), preview=content[:200])
            return self._unparseable("Parse error")

        if not isinstance(data, dict):
            return self._unparseable("Parse error")

        try:
            intent = IntentType(data.get("intent"))
        except ValueError:
            logger.info("llm_unknown_intent", intent=data.get("intent"))
            intent = IntentType.OTHER

        return {
            "intent": intent,
            "confidence": _clamp(data.get("confidence"), UNPARSEABLE_CONFIDENCE),
            "entities": self._parse_entities(data.get("entities")),
            "reasoning": str(data.get("reasoning") or ""),
        }

    def _parse_entities(self, raw: Any) -> list[Entity]:
        if not isinstance(raw, list):
            return []

        entities = []
        for item in raw:
            if not isinstance(item, dict) or not item.get("value"):
                continue
            try:
                entity_type = EntityType(item.get("type"))
            except ValueError:
                continue
            entities.append(
                Entity(
                    type=entity_type,
                    value=str(item["value"]),
                    confidence=_clamp(item.get("confidence"), UNPARSEABLE_CONFIDENCE),
                )
            )
        return entities

    @staticmethod
    def _unparseable(reasoning: str) -> dict[str, Any]:
        return {
            "intent": IntentType.OTHER,
            "confidence": UNPARSEABLE_CONFIDENCE,
            "entities": [],
            "reasoning": reasoning,
        }


def _clamp(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number:  # NaN
        return default
    return min(max(number, 0.0), 1.0)
