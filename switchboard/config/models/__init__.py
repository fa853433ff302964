"""Configuration model exports.

    from switchboard.config.models import RecognitionConfig, RoutingConfig
"""

from switchboard.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from switchboard.config.models.providers import (
    LLMClassifierProviderConfig,
    ProvidersConfig,
)
from switchboard.config.models.recognition import (
    CacheConfig,
    EngineWeightsConfig,
    LearningConfig,
    RecognitionConfig,
)
from switchboard.config.models.routing import RoutingConfig

__all__ = [
    "CacheConfig",
    "EngineWeightsConfig",
    "LLMClassifierProviderConfig",
    "LearningConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "ProvidersConfig",
    "RecognitionConfig",
    "RoutingConfig",
]
