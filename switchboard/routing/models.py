"""Routing decision models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from switchboard.recognition.enums import BusinessDomain


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class EscalationType(str, Enum):
    """Terminal states of the escalation decision."""

    NONE = "none"
    IMMEDIATE = "immediate"
    HUMAN_REVIEW = "human_review"
    HUMAN_AGENT = "human_agent"
    MEDICAL_REVIEW = "medical_review"
    SUPERVISOR = "supervisor"


class ActionRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: str
    priority: Priority
    description: str


class EscalationDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool
    type: EscalationType
    reason: str = ""


class RoutingMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    rules_applied: list[str] = Field(default_factory=list)
    confidence_factors: dict[str, float] = Field(default_factory=dict)
    escalation_reason: str = ""
    processing_time_ms: float = Field(default=0.0, ge=0)


class RoutingDecision(BaseModel):
    """Where a conversation goes next and how urgently."""

    model_config = ConfigDict(frozen=True)

    primary_domain: BusinessDomain
    alternative_domains: list[BusinessDomain] = Field(default_factory=list)
    escalation_required: bool = False
    escalation_type: EscalationType = EscalationType.NONE
    confidence: float = Field(..., ge=0.0, le=1.0)
    priority: Priority = Priority.MEDIUM
    suggested_actions: list[ActionRecommendation] = Field(default_factory=list)
    metadata: RoutingMetadata = Field(default_factory=RoutingMetadata)
