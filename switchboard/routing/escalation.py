"""Escalation and priority decision tables.

Both are ordered lists of (predicate, outcome) pairs: the first
predicate that holds decides, so precedence is data.
"""

from collections.abc import Callable
from dataclasses import dataclass

from switchboard.config.models.routing import RoutingConfig
from switchboard.recognition.enums import BusinessDomain, IntentType
from switchboard.recognition.models import ConversationContext, Intent
from switchboard.recognition.normalization import contains_term, normalize_message
from switchboard.routing.models import EscalationDecision, EscalationType, Priority


@dataclass(frozen=True)
class EscalationInput:
    intent: Intent
    context: ConversationContext
    domain: BusinessDomain
    config: RoutingConfig


@dataclass(frozen=True)
class EscalationRule:
    name: str
    applies: Callable[[EscalationInput], bool]
    outcome: EscalationType
    reason: str


def _is_emergency(e: EscalationInput) -> bool:
    return e.intent.type is IntentType.EMERGENCY


def _low_confidence_long_conversation(e: EscalationInput) -> bool:
    return (
        e.intent.confidence < e.config.low_confidence_threshold
        and e.context.turn_count > e.config.low_confidence_min_turns
    )


def _asked_for_human(e: EscalationInput) -> bool:
    return e.intent.type is IntentType.ESCALATION_REQUEST


def _uncertain_healthcare(e: EscalationInput) -> bool:
    return (
        e.domain is BusinessDomain.HEALTHCARE
        and e.intent.confidence < e.config.healthcare_review_threshold
    )


def _tenant_trigger(e: EscalationInput) -> bool:
    tenant = e.context.tenant_config
    if tenant is None or not tenant.escalation_triggers:
        return False

    texts = [normalize_message(entity.value) for entity in e.intent.entities]
    last_message = e.context.last_user_message()
    if last_message:
        texts.append(normalize_message(last_message))

    triggers = [normalize_message(t) for t in tenant.escalation_triggers if t.strip()]
    return any(contains_term(text, trigger) for text in texts for trigger in triggers)


ESCALATION_TABLE: tuple[EscalationRule, ...] = (
    EscalationRule("emergency", _is_emergency, EscalationType.IMMEDIATE, "Emergency detected"),
    EscalationRule(
        "low_confidence",
        _low_confidence_long_conversation,
        EscalationType.HUMAN_REVIEW,
        "Low confidence after multiple turns",
    ),
    EscalationRule(
        "explicit_request",
        _asked_for_human,
        EscalationType.HUMAN_AGENT,
        "User requested human agent",
    ),
    EscalationRule(
        "healthcare_confidence",
        _uncertain_healthcare,
        EscalationType.MEDICAL_REVIEW,
        "Healthcare domain requires high confidence",
    ),
    EscalationRule(
        "tenant_trigger",
        _tenant_trigger,
        EscalationType.SUPERVISOR,
        "Tenant escalation trigger matched",
    ),
)


def decide_escalation(
    intent: Intent,
    context: ConversationContext,
    domain: BusinessDomain,
    config: RoutingConfig,
    table: tuple[EscalationRule, ...] = ESCALATION_TABLE,
) -> EscalationDecision:
    signals = EscalationInput(intent=intent, context=context, domain=domain, config=config)
    for rule in table:
        if rule.applies(signals):
            return EscalationDecision(required=True, type=rule.outcome, reason=rule.reason)
    return EscalationDecision(required=False, type=EscalationType.NONE, reason="No escalation needed")


PRIORITY_TABLE: tuple[tuple[Callable[[Intent], bool], Priority], ...] = (
    (lambda i: i.type is IntentType.EMERGENCY, Priority.CRITICAL),
    (lambda i: i.type is IntentType.ESCALATION_REQUEST, Priority.HIGH),
    (lambda i: i.confidence > 0.8, Priority.HIGH),
    (lambda i: i.confidence > 0.6, Priority.MEDIUM),
)


def decide_priority(intent: Intent) -> Priority:
    for applies, priority in PRIORITY_TABLE:
        if applies(intent):
            return priority
    return Priority.LOW
