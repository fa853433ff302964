"""Suggested next actions per intent type."""

from switchboard.recognition.enums import IntentType
from switchboard.recognition.models import ConversationContext, Intent
from switchboard.routing.models import ActionRecommendation, Priority

INTENT_ACTIONS: dict[IntentType, tuple[ActionRecommendation, ...]] = {
    IntentType.BOOKING_REQUEST: (
        ActionRecommendation(
            action="check_availability",
            priority=Priority.HIGH,
            description="Verify service availability",
        ),
    ),
    IntentType.EMERGENCY: (
        ActionRecommendation(
            action="escalate_immediately",
            priority=Priority.CRITICAL,
            description="Immediate human intervention required",
        ),
    ),
    IntentType.PRICE_INQUIRY: (
        ActionRecommendation(
            action="provide_pricing",
            priority=Priority.MEDIUM,
            description="Display service pricing information",
        ),
    ),
    IntentType.SERVICE_INQUIRY: (
        ActionRecommendation(
            action="list_services",
            priority=Priority.MEDIUM,
            description="Show the tenant's service catalog",
        ),
    ),
    IntentType.AVAILABILITY_CHECK: (
        ActionRecommendation(
            action="suggest_time_slots",
            priority=Priority.MEDIUM,
            description="Look up the calendar and offer open slots",
        ),
    ),
}

GREETING_ACTION = ActionRecommendation(
    action="send_greeting",
    priority=Priority.LOW,
    description="Welcome new conversation",
)


def suggest_actions(intent: Intent, context: ConversationContext) -> list[ActionRecommendation]:
    actions = list(INTENT_ACTIONS.get(intent.type, ()))
    if context.turn_count == 0:
        actions.append(GREETING_ACTION)
    return actions
