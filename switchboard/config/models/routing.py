"""Routing decision configuration models."""

from pydantic import BaseModel, Field, model_validator


class RoutingConfig(BaseModel):
    """Thresholds used by the routing decision engine."""

    business_hours_start: int = Field(
        default=8,
        ge=0,
        le=23,
        description="Hours strictly before this are after-hours",
    )
    business_hours_end: int = Field(
        default=18,
        ge=0,
        le=23,
        description="Hours strictly after this are after-hours",
    )
    high_load_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    low_confidence_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    low_confidence_min_turns: int = Field(
        default=6,
        ge=0,
        description="History length that must be exceeded before human review",
    )
    healthcare_review_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    legal_entity_keywords: list[str] = Field(
        default_factory=lambda: ["advogado", "advogada"],
        description="Entity substrings that suggest the legal domain",
    )

    @model_validator(mode="after")
    def check_window(self) -> "RoutingConfig":
        if self.business_hours_start > self.business_hours_end:
            raise ValueError("business_hours_start must not be after business_hours_end")
        return self
