"""Caller-owned conversation state read by the recognition core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from switchboard.recognition.enums import BusinessDomain

if TYPE_CHECKING:
    from switchboard.recognition.models.intent import Intent


class ConversationTurn(BaseModel):
    """One message of the conversation history."""

    role: Literal["user", "assistant", "system"] = Field(..., description="Author of the turn")
    content: str = Field(..., description="Message text")


class AIPersonality(BaseModel):
    tone: Literal["professional", "friendly", "casual", "formal"] = "friendly"
    energy: Literal["low", "medium", "high"] = "medium"
    empathy: Literal["low", "medium", "high"] = "medium"


class TenantConfig(BaseModel):
    """Read-only tenant configuration supplied by the host application."""

    tenant_id: str | None = Field(default=None, description="Tenant identifier")
    domain: BusinessDomain | None = Field(default=None, description="Business vertical")
    escalation_triggers: list[str] = Field(
        default_factory=list,
        description="Words that send a conversation to a supervisor",
    )
    domain_keywords: list[str] = Field(default_factory=list)
    personality: AIPersonality = Field(default_factory=AIPersonality)


class ConversationContext(BaseModel):
    """Per-conversation state passed in by the caller.

    The recognition core only reads it.
    """

    model_config = ConfigDict(extra="ignore")

    session_id: str = Field(..., description="Conversation session identifier")
    user_id: str = Field(..., description="End-user identifier")
    tenant_id: str = Field(..., description="Owning tenant identifier")
    conversation_history: list[ConversationTurn] = Field(default_factory=list)
    tenant_config: TenantConfig | None = None
    current_intent: Intent | None = Field(
        default=None,
        description="Last intent recognized in this conversation",
    )

    @property
    def tenant_domain(self) -> BusinessDomain | None:
        return self.tenant_config.domain if self.tenant_config else None

    @property
    def turn_count(self) -> int:
        return len(self.conversation_history)

    def last_user_message(self) -> str | None:
        for turn in reversed(self.conversation_history):
            if turn.role == "user":
                return turn.content
        return None
