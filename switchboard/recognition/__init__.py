"""Multi-engine intent recognition.

The orchestrating service lives in ``switchboard.recognition.engine``.
"""

from switchboard.recognition.enums import BusinessDomain, EntityType, IntentType
from switchboard.recognition.models import ConversationContext, Entity, Intent, TenantConfig

__all__ = [
    "BusinessDomain",
    "ConversationContext",
    "Entity",
    "EntityType",
    "Intent",
    "IntentType",
    "TenantConfig",
]
