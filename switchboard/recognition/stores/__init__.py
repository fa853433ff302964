"""Recognition store implementations."""

from switchboard.recognition.stores.inmemory import InMemoryIntentCache, InMemoryLearningStore

__all__ = ["InMemoryIntentCache", "InMemoryLearningStore"]
