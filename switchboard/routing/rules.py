"""Alternative-domain routing rules.

Every rule is evaluated independently; each that fires is named in the
audit list and may contribute fallback domains.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from switchboard.config.models.routing import RoutingConfig
from switchboard.recognition.enums import BusinessDomain, IntentType
from switchboard.recognition.models import ConversationContext, Intent


@dataclass(frozen=True)
class RoutingSignals:
    """Everything a rule may look at, gathered once per decision."""

    intent: Intent
    context: ConversationContext
    local_hour: int
    system_load: float


@dataclass(frozen=True)
class RuleOutcome:
    domains: tuple[BusinessDomain, ...] = ()


@dataclass
class AlternativeRoutes:
    alternatives: list[BusinessDomain] = field(default_factory=list)
    rules_applied: list[str] = field(default_factory=list)


AlternativeRule = Callable[[RoutingSignals, RoutingConfig], RuleOutcome | None]


def after_hours_rule(signals: RoutingSignals, config: RoutingConfig) -> RuleOutcome | None:
    hour = signals.local_hour
    if config.business_hours_start <= hour <= config.business_hours_end:
        return None
    if signals.intent.type is IntentType.EMERGENCY:
        return RuleOutcome(domains=(BusinessDomain.HEALTHCARE,))
    return RuleOutcome()


def high_load_rule(signals: RoutingSignals, config: RoutingConfig) -> RuleOutcome | None:
    if signals.system_load > config.high_load_threshold:
        return RuleOutcome(domains=(BusinessDomain.OTHER,))
    return None


def emergency_priority_rule(signals: RoutingSignals, config: RoutingConfig) -> RuleOutcome | None:  # noqa: ARG001
    if signals.intent.type is IntentType.EMERGENCY:
        return RuleOutcome(domains=(BusinessDomain.HEALTHCARE,))
    return None


def legal_entity_rule(signals: RoutingSignals, config: RoutingConfig) -> RuleOutcome | None:
    keywords = [k.lower() for k in config.legal_entity_keywords]
    for entity in signals.intent.entities:
        value = entity.value.lower()
        if any(keyword in value for keyword in keywords):
            return RuleOutcome(domains=(BusinessDomain.LEGAL,))
    return None


ALTERNATIVE_RULES: tuple[tuple[str, AlternativeRule], ...] = (
    ("after_hours", after_hours_rule),
    ("high_load", high_load_rule),
    ("emergency_priority", emergency_priority_rule),
    ("legal_entity_detected", legal_entity_rule),
)


def apply_alternative_rules(
    signals: RoutingSignals,
    config: RoutingConfig,
    rules: tuple[tuple[str, AlternativeRule], ...] = ALTERNATIVE_RULES,
) -> AlternativeRoutes:
    routes = AlternativeRoutes()
    for name, rule in rules:
        outcome = rule(signals, config)
        if outcome is None:
            continue
        routes.rules_applied.append(name)
        routes.alternatives.extend(outcome.domains)
    return routes
