"""Unit tests for PatternClassifier."""

import pytest

from switchboard.recognition.classifiers import PatternClassifier
from switchboard.recognition.classifiers.pattern import analyze_sentiment, determine_urgency
from switchboard.recognition.enums import (
    BusinessDomain,
    EntityType,
    IntentType,
    Sentiment,
    UrgencyLevel,
)
from switchboard.recognition.models import Entity, IntentMatch, PatternMetadata
from tests.factories import ContextFactory, IntentFactory


@pytest.fixture
def classifier() -> PatternClassifier:
    return PatternClassifier()


class TestAnalyze:
    """Tests for single-message classification."""

    def test_emergency(self, classifier: PatternClassifier) -> None:
        intent = classifier.analyze("Socorro! É uma emergência!", ContextFactory.create())

        assert intent.type is IntentType.EMERGENCY
        assert intent.confidence == pytest.approx(0.6 * 2 / 6 + 0.4 / 3)
        assert intent.context.urgency_level is UrgencyLevel.HIGH
        assert isinstance(intent.metadata, PatternMetadata)

    def test_booking_with_domain_affinity(self, classifier: PatternClassifier) -> None:
        context = ContextFactory.create(domain=BusinessDomain.BEAUTY)
        intent = classifier.analyze("Quero agendar uma manicure para amanhã às 14h", context)

        assert intent.type is IntentType.BOOKING_REQUEST
        # 0.1 keywords + 0.1 phrases + 0.2 beauty affinity
        assert intent.confidence == pytest.approx(0.4)
        assert intent.context.business_domain is BusinessDomain.BEAUTY
        assert {e.type for e in intent.entities} >= {EntityType.DATE, EntityType.TIME}

    def test_no_match_is_other(self, classifier: PatternClassifier) -> None:
        intent = classifier.analyze("xyz", ContextFactory.create())

        assert intent.type is IntentType.OTHER
        assert intent.confidence == 0.5

    def test_first_turn_greeting_bonus(self, classifier: PatternClassifier) -> None:
        first = classifier.analyze("Oi, bom dia!", ContextFactory.create())
        later = classifier.analyze("Oi, bom dia!", ContextFactory.create(turns=2))

        assert first.type is IntentType.GENERAL_GREETING
        assert first.confidence == pytest.approx(later.confidence + 0.3)

    def test_conversation_flow_bonus(self, classifier: PatternClassifier) -> None:
        previous = IntentFactory.create(IntentType.PRICE_INQUIRY, 0.8)
        plain = classifier.analyze("quero marcar", ContextFactory.create(turns=2))
        after_price = classifier.analyze(
            "quero marcar",
            ContextFactory.create(turns=2, current_intent=previous),
        )

        assert after_price.type is IntentType.BOOKING_REQUEST
        assert after_price.confidence == pytest.approx(plain.confidence + 0.4)
        assert after_price.context.previous_intent is IntentType.PRICE_INQUIRY

    def test_confidence_clamped_to_one(self) -> None:
        classifier = PatternClassifier(acceptance_threshold=0.0)
        previous = IntentFactory.create(IntentType.AVAILABILITY_CHECK, 0.9)
        context = ContextFactory.create(domain=BusinessDomain.HEALTHCARE, current_intent=previous)
        intent = classifier.analyze(
            "gostaria de agendar quero agendar quero marcar preciso de um horario "
            "agendar marcar reservar consulta horario vaga",
            context,
        )

        assert intent.type is IntentType.BOOKING_REQUEST
        assert intent.confidence == 1.0

    @pytest.mark.asyncio
    async def test_classify_matches_analyze(self, classifier: PatternClassifier) -> None:
        context = ContextFactory.create()
        assert await classifier.classify("quanto custa?", context) == classifier.analyze(
            "quanto custa?", context
        )


class TestMatchIntents:
    """Tests for candidate scoring."""

    def test_threshold_is_configurable(self) -> None:
        strict = PatternClassifier(acceptance_threshold=0.5)
        assert strict.match_intents("socorro e uma emergencia", ContextFactory.create()) == []

    def test_keeps_only_candidates_above_threshold(self, classifier: PatternClassifier) -> None:
        matches = classifier.match_intents("quanto custa", ContextFactory.create(turns=1))
        assert [m.type for m in matches] == [IntentType.PRICE_INQUIRY]


class TestSelectBest:
    """Tests for tie-breaking."""

    def test_highest_confidence_wins(self) -> None:
        best = PatternClassifier.select_best([
            IntentMatch(type=IntentType.COMPLAINT, confidence=0.3),
            IntentMatch(type=IntentType.EMERGENCY, confidence=0.6),
        ])
        assert best.type is IntentType.EMERGENCY

    def test_tie_goes_to_catalog_order(self) -> None:
        best = PatternClassifier.select_best([
            IntentMatch(type=IntentType.PRICE_INQUIRY, confidence=0.4),
            IntentMatch(type=IntentType.BOOKING_REQUEST, confidence=0.4),
        ])
        assert best.type is IntentType.BOOKING_REQUEST

    def test_empty_is_other(self) -> None:
        best = PatternClassifier.select_best([])
        assert best == IntentMatch(type=IntentType.OTHER, confidence=0.5)


class TestRouteToDomain:
    """Tests for domain inference."""

    def test_tenant_domain_wins(self, classifier: PatternClassifier) -> None:
        intent = IntentFactory.create(
            entities=[Entity(type=EntityType.SERVICE_NAME, value="advogado", confidence=0.8)]
        )
        context = ContextFactory.create(domain=BusinessDomain.SPORTS)

        assert classifier.route_to_domain(intent, context) is BusinessDomain.SPORTS

    def test_inferred_from_entities(self, classifier: PatternClassifier) -> None:
        intent = IntentFactory.create(
            entities=[Entity(type=EntityType.SERVICE_NAME, value="Manicure", confidence=0.8)]
        )
        assert classifier.route_to_domain(intent, ContextFactory.create()) is BusinessDomain.BEAUTY

    def test_defaults_to_other(self, classifier: PatternClassifier) -> None:
        intent = IntentFactory.create()
        assert classifier.route_to_domain(intent, ContextFactory.create()) is BusinessDomain.OTHER


class TestSignals:
    """Tests for urgency and sentiment heuristics."""

    def test_urgency_from_entity(self) -> None:
        entity = Entity(type=EntityType.URGENCY_LEVEL, value="media", confidence=0.8)
        assert determine_urgency("preciso rapido", [entity]) is UrgencyLevel.MEDIUM

    def test_urgency_defaults_low(self) -> None:
        assert determine_urgency("ola", []) is UrgencyLevel.LOW

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("foi otimo obrigado", Sentiment.POSITIVE),
            ("foi pessimo um problema", Sentiment.NEGATIVE),
            ("quero marcar", Sentiment.NEUTRAL),
        ],
    )
    def test_sentiment(self, text: str, expected: Sentiment) -> None:
        assert analyze_sentiment(text) is expected
