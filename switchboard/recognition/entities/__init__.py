"""Entity extraction."""

from switchboard.recognition.entities.extractor import (
    DEFAULT_RULES,
    STATISTICAL_RULES,
    EntityExtractor,
    EntityRule,
)

__all__ = ["DEFAULT_RULES", "STATISTICAL_RULES", "EntityExtractor", "EntityRule"]
