"""Prometheus metrics for Switchboard.

Process-wide instruments for recognition outcomes, engine latency and
routing decisions. The per-service running averages returned by
``get_metrics()`` live in ``switchboard.recognition.metrics``.
"""

from prometheus_client import Counter, Histogram

RECOGNITIONS = Counter(
    "switchboard_recognitions_total",
    "Intent recognitions by outcome",
    labelnames=["outcome"],
)

RECOGNITION_LATENCY = Histogram(
    "switchboard_recognition_latency_seconds",
    "End-to-end recognition latency in seconds",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

INTENTS_RECOGNIZED = Counter(
    "switchboard_intents_recognized_total",
    "Winning intent types",
    labelnames=["intent_type"],
)

ENGINE_LATENCY = Histogram(
    "switchboard_engine_latency_seconds",
    "Latency of individual classification engines",
    labelnames=["engine"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0),
)

ENGINE_FAILURES = Counter(
    "switchboard_engine_failures_total",
    "Engine runs replaced by a neutral vote",
    labelnames=["engine", "reason"],
)

CACHE_HITS = Counter(
    "switchboard_intent_cache_hits_total",
    "Recognitions served from the result cache",
)

ROUTING_DECISIONS = Counter(
    "switchboard_routing_decisions_total",
    "Routing decisions by escalation type and priority",
    labelnames=["escalation_type", "priority"],
)

ROUTING_FAILURES = Counter(
    "switchboard_routing_failures_total",
    "Routing calls answered with the safe default decision",
)

_enabled = True


def setup_metrics(enabled: bool = True) -> None:
    """Turn Prometheus export on or off for this process.

    Instruments stay registered either way; disabling only stops updates.
    """
    global _enabled
    _enabled = enabled


def metrics_enabled() -> bool:
    return _enabled
