"""Routing decision engine.

Turns a classified intent into a routing decision: target domain,
fallback domains, escalation, priority and suggested actions. Routing
never raises; any internal failure yields a conservative default.
"""

import time
from collections.abc import Callable
from datetime import datetime

from switchboard.config.models.routing import RoutingConfig
from switchboard.observability import metrics as prom
from switchboard.observability.logging import get_logger
from switchboard.recognition.classifiers import PatternClassifier
from switchboard.recognition.enums import BusinessDomain
from switchboard.recognition.models import ConversationContext, Intent
from switchboard.routing.actions import suggest_actions
from switchboard.routing.escalation import decide_escalation, decide_priority
from switchboard.routing.load import StaticLoadProbe, SystemLoadProbe
from switchboard.routing.models import (
    EscalationType,
    Priority,
    RoutingDecision,
    RoutingMetadata,
)
from switchboard.routing.rules import RoutingSignals, apply_alternative_rules

logger = get_logger(__name__)

SAFE_DEFAULT_CONFIDENCE = 0.5


class RoutingEngine:
    """Decides where a classified conversation goes next."""

    def __init__(
        self,
        pattern_classifier: PatternClassifier,
        config: RoutingConfig | None = None,
        load_probe: SystemLoadProbe | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._pattern_classifier = pattern_classifier
        self._config = config or RoutingConfig()
        self._load_probe = load_probe or StaticLoadProbe()
        self._clock = clock or datetime.now

    async def route(self, intent: Intent, context: ConversationContext) -> RoutingDecision:
        start = time.perf_counter()
        try:
            decision = await self._decide(intent, context, start)
        except Exception as e:
            logger.error(
                "routing_failed",
                session_id=context.session_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            if prom.metrics_enabled():
                prom.ROUTING_FAILURES.inc()
            return self.safe_default(context, _elapsed_ms(start))

        logger.info(
            "routing_decision_made",
            session_id=context.session_id,
            domain=decision.primary_domain.value,
            confidence=decision.confidence,
            escalation=decision.escalation_type.value,
            priority=decision.priority.value,
            rules_applied=decision.metadata.rules_applied,
        )
        if prom.metrics_enabled():
            prom.ROUTING_DECISIONS.labels(
                escalation_type=decision.escalation_type.value,
                priority=decision.priority.value,
            ).inc()
        return decision

    async def _decide(
        self,
        intent: Intent,
        context: ConversationContext,
        start: float,
    ) -> RoutingDecision:
        primary = self._pattern_classifier.route_to_domain(intent, context)

        signals = RoutingSignals(
            intent=intent,
            context=context,
            local_hour=self._clock().hour,
            system_load=await self._load_probe.current_load(),
        )
        routes = apply_alternative_rules(signals, self._config)
        escalation = decide_escalation(intent, context, primary, self._config)

        return RoutingDecision(
            primary_domain=primary,
            alternative_domains=routes.alternatives,
            escalation_required=escalation.required,
            escalation_type=escalation.type,
            confidence=intent.confidence,
            priority=decide_priority(intent),
            suggested_actions=suggest_actions(intent, context),
            metadata=RoutingMetadata(
                rules_applied=routes.rules_applied,
                confidence_factors=confidence_factors(intent),
                escalation_reason=escalation.reason,
                processing_time_ms=_elapsed_ms(start),
            ),
        )

    @staticmethod
    def safe_default(context: ConversationContext, processing_time_ms: float = 0.0) -> RoutingDecision:
        return RoutingDecision(
            primary_domain=context.tenant_domain or BusinessDomain.OTHER,
            alternative_domains=[],
            escalation_required=False,
            escalation_type=EscalationType.NONE,
            confidence=SAFE_DEFAULT_CONFIDENCE,
            priority=Priority.MEDIUM,
            suggested_actions=[],
            metadata=RoutingMetadata(processing_time_ms=processing_time_ms),
        )


def confidence_factors(intent: Intent) -> dict[str, float]:
    return {
        "base_confidence": intent.confidence,
        "entity_count": float(len(intent.entities)),
        "engine_consensus": float(intent.context.engine_consensus),
    }


def _elapsed_ms(start: float) -> float:
    return max(0.0, (time.perf_counter() - start) * 1000)
