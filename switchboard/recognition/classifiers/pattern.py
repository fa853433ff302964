"""Keyword and phrase based intent classifier.

Scores every intent of the catalog against its patterns, adds
contextual bonuses (conversation flow, first-turn greeting, tenant
domain affinity) and picks the best candidate.
"""

from switchboard.recognition.classifiers.base import Classifier
from switchboard.recognition.classifiers.catalog import (
    DOMAIN_AFFINITY_BONUS,
    DOMAIN_KEYWORDS,
    FIRST_TURN_GREETING_BONUS,
    INTENT_FLOW_BONUS,
    INTENT_PATTERNS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    IntentPattern,
)
from switchboard.recognition.entities import EntityExtractor
from switchboard.recognition.enums import (
    INTENT_ORDER,
    BusinessDomain,
    EntityType,
    IntentType,
    Sentiment,
    UrgencyLevel,
)
from switchboard.recognition.models import (
    ConversationContext,
    Entity,
    Intent,
    IntentContext,
    IntentMatch,
    PatternMetadata,
)
from switchboard.recognition.normalization import contains_term, normalize_message, strip_accents

KEYWORD_SHARE = 0.6
PHRASE_SHARE = 0.4
NO_MATCH_CONFIDENCE = 0.5


class PatternClassifier(Classifier):
    """Deterministic pattern matcher over the normalized message."""

    def __init__(
        self,
        entity_extractor: EntityExtractor | None = None,
        acceptance_threshold: float = 0.1,
        patterns: dict[IntentType, tuple[IntentPattern, ...]] | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            entity_extractor: Extractor run on every message
            acceptance_threshold: Candidates scoring at or below this are dropped
            patterns: Intent catalog, in tie-break order
        """
        self._entity_extractor = entity_extractor or EntityExtractor()
        self._acceptance_threshold = acceptance_threshold
        self._patterns = patterns or INTENT_PATTERNS

    async def classify(self, message: str, context: ConversationContext) -> Intent:
        return self.analyze(message, context)

    def analyze(self, message: str, context: ConversationContext) -> Intent:
        """Synchronous classification, also used as the ensemble fallback."""
        normalized = normalize_message(message)
        entities = self._entity_extractor.extract(normalized)
        best = self.select_best(self.match_intents(normalized, context))

        return Intent(
            type=best.type,
            confidence=best.confidence,
            entities=entities,
            context=IntentContext(
                business_domain=context.tenant_domain,
                conversation_turn=context.turn_count,
                previous_intent=context.current_intent.type if context.current_intent else None,
                urgency_level=determine_urgency(normalized, entities),
                sentiment=analyze_sentiment(normalized),
            ),
            metadata=PatternMetadata(),
        )

    def match_intents(
        self,
        normalized_text: str,
        context: ConversationContext,
    ) -> list[IntentMatch]:
        """Score the catalog, keep candidates above threshold, apply boosts."""
        matches: list[IntentMatch] = []

        for intent_type, patterns in self._patterns.items():
            score = max(self._score_pattern(normalized_text, p) for p in patterns)
            if score <= self._acceptance_threshold:
                continue
            boosted = score + self._contextual_boost(intent_type, context)
            matches.append(IntentMatch(type=intent_type, confidence=min(1.0, boosted)))

        return matches

    @staticmethod
    def select_best(matches: list[IntentMatch]) -> IntentMatch:
        """Highest confidence wins; ties go to the intent declared first."""
        if not matches:
            return IntentMatch(type=IntentType.OTHER, confidence=NO_MATCH_CONFIDENCE)
        return min(matches, key=lambda m: (-m.confidence, INTENT_ORDER[m.type]))

    def route_to_domain(self, intent: Intent, context: ConversationContext) -> BusinessDomain:
        """Tenant domain if configured, else inferred from entity values."""
        if context.tenant_domain is not None:
            return context.tenant_domain

        values = [strip_accents(entity.value.lower()) for entity in intent.entities]
        for domain, keywords in DOMAIN_KEYWORDS.items():
            if any(keyword in value for value in values for keyword in keywords):
                return domain

        return BusinessDomain.OTHER

    def _score_pattern(self, text: str, pattern: IntentPattern) -> float:
        score = 0.0
        if pattern.keywords:
            hits = sum(1 for keyword in pattern.keywords if contains_term(text, keyword))
            score += KEYWORD_SHARE * hits / len(pattern.keywords)
        if pattern.phrases:
            hits = sum(1 for phrase in pattern.phrases if contains_term(text, phrase))
            score += PHRASE_SHARE * hits / len(pattern.phrases)
        return score * pattern.weight

    def _contextual_boost(self, intent_type: IntentType, context: ConversationContext) -> float:
        boost = 0.0

        if context.current_intent is not None:
            boost += INTENT_FLOW_BONUS.get((context.current_intent.type, intent_type), 0.0)

        if context.turn_count == 0 and intent_type is IntentType.GENERAL_GREETING:
            boost += FIRST_TURN_GREETING_BONUS

        domain = context.tenant_domain
        if domain is not None:
            boost += DOMAIN_AFFINITY_BONUS.get(domain, {}).get(intent_type, 0.0)

        return boost


def determine_urgency(normalized_text: str, entities: list[Entity]) -> UrgencyLevel:
    for entity in entities:
        if entity.type is EntityType.URGENCY_LEVEL:
            return UrgencyLevel(entity.value)

    if contains_term(normalized_text, "urgente") or contains_term(normalized_text, "emergencia"):
        return UrgencyLevel.HIGH
    if contains_term(normalized_text, "rapido") or contains_term(normalized_text, "logo"):
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


def analyze_sentiment(normalized_text: str) -> Sentiment:
    positive = sum(1 for word in POSITIVE_WORDS if contains_term(normalized_text, word))
    negative = sum(1 for word in NEGATIVE_WORDS if contains_term(normalized_text, word))

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
