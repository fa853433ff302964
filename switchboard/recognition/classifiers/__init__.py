"""Intent classification engines."""

from switchboard.recognition.classifiers.base import Classifier, RegisteredEngine
from switchboard.recognition.classifiers.llm import LLMIntentClassifier
from switchboard.recognition.classifiers.pattern import PatternClassifier
from switchboard.recognition.classifiers.statistical import StatisticalClassifier

__all__ = [
    "Classifier",
    "LLMIntentClassifier",
    "PatternClassifier",
    "RegisteredEngine",
    "StatisticalClassifier",
]
