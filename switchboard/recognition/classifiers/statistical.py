"""Similarity classifier over previously recognized messages."""

from collections import defaultdict

from switchboard.recognition.classifiers.base import Classifier
from switchboard.recognition.entities import STATISTICAL_RULES, EntityExtractor
from switchboard.recognition.enums import INTENT_ORDER, IntentType
from switchboard.recognition.models import (
    ConversationContext,
    Intent,
    IntentContext,
    StatisticalMetadata,
)
from switchboard.recognition.normalization import normalize_message, tokenize
from switchboard.recognition.store import LearningStore


def jaccard_similarity(first: str, second: str) -> float:
    a, b = tokenize(first), tokenize(second)
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


class StatisticalClassifier(Classifier):
    """Votes for the intents past similar messages were recognized as.

    Every stored message whose token-set Jaccard similarity exceeds the
    threshold adds ``similarity * entry.confidence`` to each of its
    entries' intent types.
    """

    def __init__(
        self,
        learning_store: LearningStore,
        similarity_threshold: float = 0.3,
        entity_extractor: EntityExtractor | None = None,
    ) -> None:
        self._learning_store = learning_store
        self._similarity_threshold = similarity_threshold
        self._entity_extractor = entity_extractor or EntityExtractor(
            rules=STATISTICAL_RULES,
            base_confidence=0.7,
            confidence_decay=0.0,
        )

    async def classify(self, message: str, context: ConversationContext) -> Intent:
        normalized = normalize_message(message)
        scores: dict[IntentType, float] = defaultdict(float)

        for past_message, entries in self._learning_store.items():
            similarity = jaccard_similarity(normalized, past_message)
            if similarity <= self._similarity_threshold:
                continue
            for entry in entries:
                scores[entry.intent_type] += similarity * entry.confidence

        best_type, best_score = IntentType.OTHER, 0.0
        for intent_type in sorted(scores, key=INTENT_ORDER.__getitem__):
            if scores[intent_type] > best_score:
                best_type, best_score = intent_type, scores[intent_type]

        return Intent(
            type=best_type,
            confidence=min(best_score, 1.0),
            entities=self._entity_extractor.extract(normalized),
            context=IntentContext(
                business_domain=context.tenant_domain,
                conversation_turn=context.turn_count,
            ),
            metadata=StatisticalMetadata(learning_samples=len(self._learning_store)),
        )
