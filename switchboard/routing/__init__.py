"""Routing: from a classified intent to a handling decision."""

from switchboard.routing.engine import RoutingEngine
from switchboard.routing.load import StaticLoadProbe, SystemLoadProbe
from switchboard.routing.models import (
    ActionRecommendation,
    EscalationDecision,
    EscalationType,
    Priority,
    RoutingDecision,
    RoutingMetadata,
)

__all__ = [
    "ActionRecommendation",
    "EscalationDecision",
    "EscalationType",
    "Priority",
    "RoutingDecision",
    "RoutingEngine",
    "RoutingMetadata",
    "StaticLoadProbe",
    "SystemLoadProbe",
]
