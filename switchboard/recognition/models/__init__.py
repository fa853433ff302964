"""Recognition domain models."""

from switchboard.recognition.models.context import (
    AIPersonality,
    ConversationContext,
    ConversationTurn,
    TenantConfig,
)
from switchboard.recognition.models.intent import (
    EngineRun,
    EngineVote,
    EnsembleMetadata,
    Entity,
    FallbackMetadata,
    Intent,
    IntentContext,
    IntentMatch,
    IntentMetadata,
    LLMMetadata,
    PatternMetadata,
    StatisticalMetadata,
)

ConversationContext.model_rebuild(_types_namespace={"Intent": Intent})

__all__ = [
    "AIPersonality",
    "ConversationContext",
    "ConversationTurn",
    "EngineRun",
    "EngineVote",
    "EnsembleMetadata",
    "Entity",
    "FallbackMetadata",
    "Intent",
    "IntentContext",
    "IntentMatch",
    "IntentMetadata",
    "LLMMetadata",
    "PatternMetadata",
    "StatisticalMetadata",
    "TenantConfig",
]
