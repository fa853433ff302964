"""Intent, entity and engine vote models."""

from dataclasses import dataclass
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from switchboard.recognition.enums import (
    BusinessDomain,
    EntityType,
    IntentType,
    Sentiment,
    UrgencyLevel,
)


class Entity(BaseModel):
    """A typed span; offsets refer to the normalized message."""

    model_config = ConfigDict(frozen=True)

    type: EntityType
    value: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    start: int | None = Field(default=None, ge=0)
    end: int | None = Field(default=None, ge=0)


class IntentMatch(BaseModel):
    """A candidate intent scored by the pattern classifier."""

    type: IntentType
    confidence: float = Field(..., ge=0.0, le=1.0)


class IntentContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    business_domain: BusinessDomain | None = None
    conversation_turn: int = Field(default=0, ge=0)
    alternative_intents: list[IntentType] = Field(default_factory=list)
    engine_consensus: int = Field(default=0, ge=0)
    previous_intent: IntentType | None = None
    urgency_level: UrgencyLevel | None = None
    sentiment: Sentiment | None = None
    reasoning: str | None = None


class EngineRun(BaseModel):
    """Audit record of one engine's participation in an ensemble run."""

    model_config = ConfigDict(frozen=True)

    name: str
    succeeded: bool
    latency_ms: float = Field(..., ge=0)


class PatternMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["pattern_based"] = "pattern_based"
    enhanced: bool = Field(
        default=False,
        description="True when the result replaced a failed ensemble run",
    )


class StatisticalMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["statistical"] = "statistical"
    learning_samples: int = Field(default=0, ge=0)


class LLMMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["llm"] = "llm"
    model: str | None = None


class EnsembleMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["ensemble"] = "ensemble"
    ensemble_method: Literal["weighted_voting"] = "weighted_voting"
    engines: list[EngineRun] = Field(default_factory=list)
    total_processing_time_ms: float = Field(default=0.0, ge=0)


class FallbackMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["fallback"] = "fallback"
    failed_engine: str | None = None


IntentMetadata = Annotated[
    PatternMetadata | StatisticalMetadata | LLMMetadata | EnsembleMetadata | FallbackMetadata,
    Field(discriminator="engine"),
]


class Intent(BaseModel):
    """The classified purpose of a user message.

    Created fresh for every call and never mutated after being returned;
    derive variants with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    type: IntentType
    confidence: float = Field(..., ge=0.0, le=1.0)
    entities: list[Entity] = Field(default_factory=list)
    context: IntentContext = Field(default_factory=IntentContext)
    metadata: IntentMetadata = Field(default_factory=FallbackMetadata)


@dataclass(frozen=True)
class EngineVote:
    """One engine's opinion during a single ensemble run. Never persisted."""

    engine_name: str
    weight: float
    intent: Intent
    latency_ms: float
    succeeded: bool
