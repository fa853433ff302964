"""Running recognition statistics exposed through ``get_metrics()``."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from switchboard.observability import metrics as prom
from switchboard.recognition.models import EngineVote, Intent

Outcome = Literal["success", "error", "cache_hit"]


class RecognitionMetrics(BaseModel):
    """Point-in-time copy of the collector's counters."""

    total_recognitions: int = 0
    successful_recognitions: int = 0
    cache_hits: int = 0
    average_processing_time_ms: float = 0.0
    intent_accuracy: dict[str, float] = Field(
        default_factory=dict,
        description="Running mean confidence per winning intent type",
    )
    engine_performance: dict[str, float] = Field(
        default_factory=dict,
        description="Running mean latency in ms per engine",
    )
    last_reset: datetime = Field(default_factory=lambda: datetime.now(UTC))


class MetricsCollector:
    """Accumulates counters for one recognition service.

    Mirrors updates into the process-wide Prometheus instruments.
    """

    def __init__(self) -> None:
        self._metrics = RecognitionMetrics()
        self._intent_counts: dict[str, int] = {}
        self._engine_counts: dict[str, int] = {}

    def record(
        self,
        outcome: Outcome,
        processing_time_ms: float,
        intent: Intent | None = None,
        votes: list[EngineVote] | None = None,
    ) -> None:
        m = self._metrics
        m.total_recognitions += 1
        if outcome == "success":
            m.successful_recognitions += 1
        elif outcome == "cache_hit":
            m.cache_hits += 1

        previous_total = m.average_processing_time_ms * (m.total_recognitions - 1)
        m.average_processing_time_ms = (previous_total + processing_time_ms) / m.total_recognitions

        if intent is not None and outcome == "success":
            self._record_intent(intent)
        for vote in votes or ():
            self._record_engine(vote)

        if prom.metrics_enabled():
            prom.RECOGNITIONS.labels(outcome=outcome).inc()
            prom.RECOGNITION_LATENCY.observe(processing_time_ms / 1000)
            if outcome == "cache_hit":
                prom.CACHE_HITS.inc()
            if intent is not None and outcome == "success":
                prom.INTENTS_RECOGNIZED.labels(intent_type=intent.type.value).inc()

    def snapshot(self) -> RecognitionMetrics:
        return self._metrics.model_copy(deep=True)

    def reset(self) -> None:
        self._metrics = RecognitionMetrics()
        self._intent_counts.clear()
        self._engine_counts.clear()

    def _record_intent(self, intent: Intent) -> None:
        key = intent.type.value
        count = self._intent_counts.get(key, 0) + 1
        self._intent_counts[key] = count
        previous = self._metrics.intent_accuracy.get(key, 0.0)
        self._metrics.intent_accuracy[key] = previous + (intent.confidence - previous) / count

    def _record_engine(self, vote: EngineVote) -> None:
        count = self._engine_counts.get(vote.engine_name, 0) + 1
        self._engine_counts[vote.engine_name] = count
        previous = self._metrics.engine_performance.get(vote.engine_name, 0.0)
        self._metrics.engine_performance[vote.engine_name] = (
            previous + (vote.latency_ms - previous) / count
        )
        if prom.metrics_enabled():
            prom.ENGINE_LATENCY.labels(engine=vote.engine_name).observe(vote.latency_ms / 1000)
