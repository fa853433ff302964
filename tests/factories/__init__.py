"""Test factories for creating test data."""

from tests.factories.recognition import (
    ContextFactory,
    FakeClock,
    IntentFactory,
    ScriptedClassifier,
    ScriptedLLMExecutor,
)

__all__ = [
    "ContextFactory",
    "FakeClock",
    "IntentFactory",
    "ScriptedClassifier",
    "ScriptedLLMExecutor",
]
