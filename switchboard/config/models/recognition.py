"""Intent recognition configuration models."""

from pydantic import BaseModel, Field


class EngineWeightsConfig(BaseModel):
    """Per-engine voting weights.

    Weights are relative: they must be positive and need not sum to 1.
    """

    pattern_based: float = Field(default=0.3, gt=0.0, le=1.0)
    llm: float = Field(default=0.4, gt=0.0, le=1.0)
    statistical: float = Field(default=0.3, gt=0.0, le=1.0)


class CacheConfig(BaseModel):
    """Result cache configuration."""

    enabled: bool = Field(default=True, description="Memoize ensemble results")
    ttl_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Default lifetime of a cached intent",
    )
    max_entries: int = Field(
        default=100,
        gt=0,
        description="High-water mark before excess entries are evicted",
    )


class LearningConfig(BaseModel):
    """Online learning store limits."""

    max_entries_per_message: int = Field(default=10, gt=0)
    max_messages: int = Field(
        default=1000,
        gt=0,
        description="Distinct normalized messages kept before the oldest is evicted",
    )


class RecognitionConfig(BaseModel):
    """Ensemble intent recognition configuration."""

    weights: EngineWeightsConfig = Field(default_factory=EngineWeightsConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    learning: LearningConfig = Field(default_factory=LearningConfig)
    engine_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-engine deadline; a timeout counts as an engine failure",
    )
    acceptance_threshold: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Pattern scores at or below this value are discarded",
    )
    similarity_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Minimum Jaccard similarity for a learned message to vote",
    )
    healthcare_booking_boost: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Confidence bump for healthcare booking requests",
    )
