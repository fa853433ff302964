"""Intent Recognition Service - ensemble orchestrator.

Coordinates one recognition call:
1. Normalize the message and check the result cache
2. Run every registered engine concurrently
3. Merge their votes with per-engine weights
4. Apply domain post-processing
5. Record learning data, cache the result and update metrics

A failing engine only loses its vote. Any other failure falls back to
the pattern classifier alone, so callers always get an Intent.
"""

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass

from switchboard.config.models.recognition import RecognitionConfig
from switchboard.observability import metrics as prom
from switchboard.observability.logging import bind_conversation, get_logger
from switchboard.recognition.classifiers import PatternClassifier, RegisteredEngine
from switchboard.recognition.ensemble import combine_votes, post_process
from switchboard.recognition.enums import BusinessDomain, IntentType
from switchboard.recognition.metrics import MetricsCollector, RecognitionMetrics
from switchboard.recognition.models import (
    ConversationContext,
    EngineVote,
    FallbackMetadata,
    Intent,
    IntentContext,
    PatternMetadata,
)
from switchboard.recognition.normalization import normalize_message
from switchboard.recognition.store import IntentCache, LearningEntry, LearningStore, build_cache_key
from switchboard.routing.engine import RoutingEngine
from switchboard.routing.models import RoutingDecision

logger = get_logger(__name__)

FAILED_ENGINE_CONFIDENCE = 0.3


@dataclass(frozen=True)
class RecognitionOptions:
    """Per-call overrides for ``recognize_intent``.

    ``cache_ttl`` is in seconds; ``engines`` replaces the registered engines.
    """

    force_refresh: bool = False
    cache_ttl: float | None = None
    engines: Sequence[RegisteredEngine] | None = None

    def __post_init__(self) -> None:
        if self.cache_ttl is not None and self.cache_ttl <= 0:
            raise ValueError("cache_ttl must be positive")


class IntentRecognitionService:
    """Multi-engine intent recognition and routing entry point."""

    def __init__(
        self,
        engines: Sequence[RegisteredEngine],
        pattern_classifier: PatternClassifier,
        cache: IntentCache,
        learning_store: LearningStore,
        routing_engine: RoutingEngine,
        config: RecognitionConfig | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            engines: Weighted classifiers taking part in every vote
            pattern_classifier: Classifier used alone when the ensemble fails
            cache: Result cache
            learning_store: History fed by every recognition
            routing_engine: Turns intents into routing decisions
            config: Recognition configuration
            metrics: Collector for ``get_metrics()``
        """
        if not engines:
            raise ValueError("at least one engine must be registered")
        self._engines = list(engines)
        self._pattern_classifier = pattern_classifier
        self._cache = cache
        self._learning_store = learning_store
        self._routing_engine = routing_engine
        self._config = config or RecognitionConfig()
        self._metrics = metrics or MetricsCollector()
        self._post_process_boosts = {
            (BusinessDomain.HEALTHCARE, IntentType.BOOKING_REQUEST): (
                self._config.healthcare_booking_boost
            ),
        }

    @property
    def engines(self) -> list[RegisteredEngine]:
        return list(self._engines)

    async def recognize_intent(
        self,
        message: str,
        context: ConversationContext,
        options: RecognitionOptions | None = None,
    ) -> Intent:
        """Classify a customer message.

        Args:
            message: Raw message text as received from the channel
            context: Caller-owned conversation state
            options: Cache and engine overrides

        Returns:
            A well-formed Intent, even when every engine failed
        """
        options = options or RecognitionOptions()
        start_time = time.perf_counter()
        bind_conversation(context.session_id, context.tenant_id, context.user_id)

        try:
            normalized = normalize_message(message)
            cache_key = build_cache_key(normalized, context.session_id, context.tenant_id)

            if self._config.cache.enabled and not options.force_refresh:
                cached = self._cache.get(cache_key)
                if cached is not None:
                    self._metrics.record("cache_hit", _elapsed_ms(start_time))
                    logger.debug("intent_cache_hit", intent_type=cached.type.value)
                    return cached

            votes = await self._run_engines(message, context, options.engines or self._engines)
            intent = combine_votes(votes, context, sum(v.latency_ms for v in votes))
            intent = post_process(intent, context, self._post_process_boosts)

            self._learning_store.record(
                normalized,
                LearningEntry(
                    intent_type=intent.type,
                    confidence=intent.confidence,
                    domain=context.tenant_domain or BusinessDomain.OTHER,
                ),
            )
            if self._config.cache.enabled:
                self._cache.set(
                    cache_key,
                    intent,
                    options.cache_ttl or self._config.cache.ttl_seconds,
                )

            elapsed_ms = _elapsed_ms(start_time)
            self._metrics.record("success", elapsed_ms, intent=intent, votes=votes)
            logger.info(
                "intent_recognized",
                intent_type=intent.type.value,
                confidence=round(intent.confidence, 3),
                engine_consensus=intent.context.engine_consensus,
                elapsed_ms=round(elapsed_ms, 2),
            )
            return intent

        except Exception as e:
            self._metrics.record("error", _elapsed_ms(start_time))
            logger.error(
                "recognition_fallback",
                error=str(e),
                error_type=type(e).__name__,
            )
            return self._fallback(message, context)

    async def route_with_advanced_logic(
        self,
        intent: Intent,
        context: ConversationContext,
    ) -> RoutingDecision:
        """Turn a recognized intent into a routing decision. Never raises."""
        return await self._routing_engine.route(intent, context)

    def get_metrics(self) -> RecognitionMetrics:
        return self._metrics.snapshot()

    def reset_metrics(self) -> None:
        self._metrics.reset()

    def clear_cache(self) -> None:
        self._cache.clear()

    async def _run_engines(
        self,
        message: str,
        context: ConversationContext,
        engines: Sequence[RegisteredEngine],
    ) -> list[EngineVote]:
        return list(
            await asyncio.gather(*(self._run_engine(e, message, context) for e in engines))
        )

    async def _run_engine(
        self,
        engine: RegisteredEngine,
        message: str,
        context: ConversationContext,
    ) -> EngineVote:
        start_time = time.perf_counter()
        try:
            intent = await asyncio.wait_for(
                engine.classifier.classify(message, context),
                timeout=self._config.engine_timeout_seconds,
            )
        except Exception as e:
            reason = "timeout" if isinstance(e, TimeoutError) else type(e).__name__
            logger.warning("engine_failed", engine=engine.name, reason=reason, error=str(e))
            if prom.metrics_enabled():
                prom.ENGINE_FAILURES.labels(engine=engine.name, reason=reason).inc()
            return EngineVote(
                engine_name=engine.name,
                weight=engine.weight,
                intent=self._neutral_intent(context, failed_engine=engine.name),
                latency_ms=_elapsed_ms(start_time),
                succeeded=False,
            )

        return EngineVote(
            engine_name=engine.name,
            weight=engine.weight,
            intent=intent,
            latency_ms=_elapsed_ms(start_time),
            succeeded=True,
        )

    def _fallback(self, message: str, context: ConversationContext) -> Intent:
        try:
            intent = self._pattern_classifier.analyze(message, context)
        except Exception as e:
            logger.error("pattern_fallback_failed", error=str(e), error_type=type(e).__name__)
            return self._neutral_intent(context)
        return intent.model_copy(update={"metadata": PatternMetadata(enhanced=True)})

    @staticmethod
    def _neutral_intent(context: ConversationContext, failed_engine: str | None = None) -> Intent:
        return Intent(
            type=IntentType.OTHER,
            confidence=FAILED_ENGINE_CONFIDENCE,
            context=IntentContext(
                business_domain=context.tenant_domain,
                conversation_turn=context.turn_count,
            ),
            metadata=FallbackMetadata(failed_engine=failed_engine),
        )


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000
