"""Store interfaces for the recognition core's process-local state."""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from switchboard.recognition.enums import BusinessDomain, IntentType
from switchboard.recognition.models import Intent


def utc_now() -> datetime:
    return datetime.now(UTC)


def build_cache_key(normalized_message: str, session_id: str, tenant_id: str) -> str:
    """Short deterministic key for a (message, session, tenant) triple."""
    raw = "\x1f".join((normalized_message, session_id, tenant_id))
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


class CacheEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    intent: Intent
    expires_at: float = Field(..., description="Clock reading after which the entry is dead")


class LearningEntry(BaseModel):
    """One past recognition of a normalized message."""

    model_config = ConfigDict(frozen=True)

    intent_type: IntentType
    confidence: float = Field(..., ge=0.0, le=1.0)
    domain: BusinessDomain = BusinessDomain.OTHER
    timestamp: datetime = Field(default_factory=utc_now)


class IntentCache(ABC):
    """Memoizes ensemble results with a per-entry TTL.

    An expired entry is never returned.
    """

    @abstractmethod
    def get(self, key: str) -> Intent | None:
        """Return a live entry, evicting it first if it has expired."""

    @abstractmethod
    def set(self, key: str, intent: Intent, ttl_seconds: float) -> None:
        """Store an intent for ``ttl_seconds``."""

    @abstractmethod
    def evict_expired(self) -> int:
        """Drop every expired entry, returning how many were removed."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""

    @abstractmethod
    def __len__(self) -> int: ...


class LearningStore(ABC):
    """Bounded history of (normalized message -> recognized intents)."""

    @abstractmethod
    def record(self, normalized_message: str, entry: LearningEntry) -> None:
        """Append an entry, evicting the oldest beyond the per-message cap."""

    @abstractmethod
    def get(self, normalized_message: str) -> list[LearningEntry]:
        """Entries for a message, oldest first."""

    @abstractmethod
    def items(self) -> Iterator[tuple[str, list[LearningEntry]]]:
        """Iterate over a snapshot of every stored message."""

    @abstractmethod
    def reset(self) -> None:
        """Forget everything."""

    @abstractmethod
    def __len__(self) -> int: ...
