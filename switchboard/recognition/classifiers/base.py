"""Classifier capability shared by every recognition engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from switchboard.recognition.models import ConversationContext, Intent


class Classifier(ABC):
    """An engine that turns a raw message into an Intent.

    Implementations normalize the message themselves and may raise; the
    ensemble turns any failure into a neutral vote.
    """

    @abstractmethod
    async def classify(self, message: str, context: ConversationContext) -> Intent:
        """Classify a raw customer message."""


@dataclass(frozen=True)
class RegisteredEngine:
    """A classifier entered in the ensemble with its voting weight."""

    name: str
    weight: float
    classifier: Classifier

    def __post_init__(self) -> None:
        if not 0.0 < self.weight <= 1.0:
            raise ValueError(f"engine weight must be in (0, 1], got {self.weight} for {self.name}")
