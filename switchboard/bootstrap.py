"""Bootstrap module for assembling the recognition stack from config.

Handles:
- Configuring logging and metrics from the observability settings
- Creating the in-memory cache and learning store
- Registering the weighted classification engines
- Creating the routing engine

Example usage:

    from switchboard.bootstrap import create_recognition_service

    service = create_recognition_service()

    intent = await service.recognize_intent(message, context)
    decision = await service.route_with_advanced_logic(intent, context)
"""

from switchboard.config import get_settings
from switchboard.config.settings import Settings
from switchboard.observability.logging import get_logger, setup_logging
from switchboard.observability.metrics import setup_metrics
from switchboard.providers.llm import LLMExecutor, create_executor_from_config
from switchboard.recognition.classifiers import (
    LLMIntentClassifier,
    PatternClassifier,
    RegisteredEngine,
    StatisticalClassifier,
)
from switchboard.recognition.engine import IntentRecognitionService
from switchboard.recognition.stores import InMemoryIntentCache, InMemoryLearningStore
from switchboard.routing.engine import RoutingEngine
from switchboard.routing.load import SystemLoadProbe

logger = get_logger(__name__)


def create_recognition_service(
    settings: Settings | None = None,
    *,
    llm_executor: LLMExecutor | None = None,
    load_probe: SystemLoadProbe | None = None,
) -> IntentRecognitionService:
    """Create a fully wired IntentRecognitionService.

    Args:
        settings: Application settings (default: get_settings())
        llm_executor: Executor for the LLM engine; built from
            ``providers.llm`` when omitted
        load_probe: System load probe for routing (default: constant 0.5)

    Returns:
        Service with pattern, statistical and (when enabled) LLM engines
    """
    settings = settings or get_settings()
    observability = settings.observability
    setup_logging(
        level=observability.logging.level,
        format=observability.logging.format,
        redact_pii=observability.logging.redact_pii,
    )
    setup_metrics(enabled=observability.metrics.enabled)

    recognition = settings.recognition
    weights = recognition.weights

    cache = InMemoryIntentCache(max_entries=recognition.cache.max_entries)
    learning_store = InMemoryLearningStore(
        max_entries_per_message=recognition.learning.max_entries_per_message,
        max_messages=recognition.learning.max_messages,
    )
    pattern_classifier = PatternClassifier(
        acceptance_threshold=recognition.acceptance_threshold,
    )

    engines = [
        RegisteredEngine(
            name="pattern_based",
            weight=weights.pattern_based,
            classifier=pattern_classifier,
        ),
    ]

    llm_config = settings.providers.llm
    if llm_executor is not None or llm_config.enabled:
        executor = llm_executor or create_executor_from_config(llm_config)
        engines.append(
            RegisteredEngine(
                name="llm",
                weight=weights.llm,
                classifier=LLMIntentClassifier(
                    executor,
                    temperature=llm_config.temperature,
                    max_tokens=llm_config.max_tokens,
                ),
            )
        )
    else:
        logger.warning("llm_engine_skipped", reason="providers.llm.enabled is false")

    engines.append(
        RegisteredEngine(
            name="statistical",
            weight=weights.statistical,
            classifier=StatisticalClassifier(
                learning_store,
                similarity_threshold=recognition.similarity_threshold,
            ),
        )
    )

    routing_engine = RoutingEngine(
        pattern_classifier,
        config=settings.routing,
        load_probe=load_probe,
    )

    logger.info(
        "recognition_service_created",
        engines=[engine.name for engine in engines],
        cache_enabled=recognition.cache.enabled,
    )

    return IntentRecognitionService(
        engines=engines,
        pattern_classifier=pattern_classifier,
        cache=cache,
        learning_store=learning_store,
        routing_engine=routing_engine,
        config=recognition,
    )
