"""Weighted voting across engine results.

Aggregation is order-independent: votes are summed per intent type and
ties are broken by catalog declaration order, never by completion order.
"""

from dataclasses import dataclass

from switchboard.recognition.enums import INTENT_ORDER, BusinessDomain, IntentType
from switchboard.recognition.models import (
    ConversationContext,
    EngineRun,
    EngineVote,
    EnsembleMetadata,
    Entity,
    Intent,
    IntentContext,
)

MAX_ALTERNATIVES = 3


@dataclass
class VoteTally:
    score: float = 0.0
    confidence_sum: float = 0.0
    count: int = 0

    @property
    def average_confidence(self) -> float:
        return self.confidence_sum / self.count if self.count else 0.0

    @property
    def adjusted_score(self) -> float:
        return self.score * self.average_confidence


def tally_votes(votes: list[EngineVote]) -> dict[IntentType, VoteTally]:
    """Accumulate successful votes per intent type."""
    tallies: dict[IntentType, VoteTally] = {}
    for vote in votes:
        if not vote.succeeded:
            continue
        confidence = vote.intent.confidence
        tally = tallies.setdefault(vote.intent.type, VoteTally())
        tally.score += vote.weight * confidence
        tally.confidence_sum += confidence
        tally.count += 1
    return tallies


def select_winner(tallies: dict[IntentType, VoteTally]) -> tuple[IntentType, VoteTally]:
    """Highest ``score * average_confidence``; ``other`` when nothing scores.

    An intent backed by few very confident votes can beat one backed by
    more moderately confident votes.
    """
    best_type, best = IntentType.OTHER, VoteTally()
    best_score = 0.0
    for intent_type in sorted(tallies, key=INTENT_ORDER.__getitem__):
        tally = tallies[intent_type]
        if tally.adjusted_score > best_score:
            best_type, best, best_score = intent_type, tally, tally.adjusted_score
    return best_type, best


def alternative_intents(
    tallies: dict[IntentType, VoteTally],
    winner: IntentType,
) -> list[IntentType]:
    """Up to three runners-up by raw score, descending."""
    runners = [t for t in tallies if t is not winner]
    runners.sort(key=lambda t: (-tallies[t].score, INTENT_ORDER[t]))
    return runners[:MAX_ALTERNATIVES]


def merge_entities(votes: list[EngineVote]) -> list[Entity]:
    """Union of successful engines' entities, deduplicated on
    ``(type, lower-cased value)`` keeping the most confident copy.
    """
    merged: dict[tuple[str, str], Entity] = {}
    for vote in votes:
        if not vote.succeeded:
            continue
        for entity in vote.intent.entities:
            key = (entity.type.value, entity.value.lower())
            current = merged.get(key)
            if current is None or entity.confidence > current.confidence:
                merged[key] = entity
    return list(merged.values())


def combine_votes(
    votes: list[EngineVote],
    context: ConversationContext,
    total_processing_time_ms: float = 0.0,
) -> Intent:
    """Merge engine votes into a single Intent."""
    tallies = tally_votes(votes)
    winner, tally = select_winner(tallies)

    return Intent(
        type=winner,
        confidence=min(tally.average_confidence, 1.0),
        entities=merge_entities(votes),
        context=IntentContext(
            business_domain=context.tenant_domain,
            conversation_turn=context.turn_count,
            engine_consensus=tally.count,
            alternative_intents=alternative_intents(tallies, winner),
            previous_intent=context.current_intent.type if context.current_intent else None,
            **_pattern_signals(votes),
        ),
        metadata=EnsembleMetadata(
            engines=[
                EngineRun(name=v.engine_name, succeeded=v.succeeded, latency_ms=v.latency_ms)
                for v in votes
            ],
            total_processing_time_ms=total_processing_time_ms,
        ),
    )


def post_process(
    intent: Intent,
    context: ConversationContext,
    boosts: dict[tuple[BusinessDomain, IntentType], float],
) -> Intent:
    """Apply deterministic domain-specific confidence adjustments.

    ``boosts`` maps (tenant domain, intent) to the bump added after voting.
    """
    domain = context.tenant_domain
    if domain is None:
        return intent
    boost = boosts.get((domain, intent.type))
    if not boost:
        return intent
    return intent.model_copy(update={"confidence": min(intent.confidence + boost, 1.0)})


def _pattern_signals(votes: list[EngineVote]) -> dict[str, object]:
    """Carry urgency, sentiment and reasoning over from whichever engine knew them."""
    signals: dict[str, object] = {}
    for vote in votes:
        if not vote.succeeded:
            continue
        ctx = vote.intent.context
        for field in ("urgency_level", "sentiment", "reasoning"):
            value = getattr(ctx, field)
            if value is not None and field not in signals:
                signals[field] = value
    return signals
