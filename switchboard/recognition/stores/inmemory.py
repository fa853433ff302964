"""In-memory implementations of the recognition stores.

Both are plain dicts mutated synchronously, so they are safe under a
single asyncio event loop but not across threads.
"""

import time
from collections import deque
from collections.abc import Callable, Iterator

from switchboard.observability.logging import get_logger
from switchboard.recognition.models import Intent
from switchboard.recognition.store import CacheEntry, IntentCache, LearningEntry, LearningStore

logger = get_logger(__name__)


class InMemoryIntentCache(IntentCache):
    """TTL cache with lazy expiry and a size high-water mark.

    Once more than ``max_entries`` are held, expired entries are purged
    and then the oldest insertions are dropped.
    """

    def __init__(
        self,
        max_entries: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._max_entries = max_entries
        self._clock = clock

    def get(self, key: str) -> Intent | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() > entry.expires_at:
            del self._entries[key]
            return None
        return entry.intent

    def set(self, key: str, intent: Intent, ttl_seconds: float) -> None:
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(
            key=key,
            intent=intent,
            expires_at=self._clock() + ttl_seconds,
        )
        if len(self._entries) > self._max_entries:
            self._shrink()

    def evict_expired(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if now > entry.expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _shrink(self) -> None:
        removed = self.evict_expired()
        while len(self._entries) > self._max_entries:
            del self._entries[next(iter(self._entries))]
            removed += 1
        logger.debug("intent_cache_shrunk", removed=removed, size=len(self._entries))


class InMemoryLearningStore(LearningStore):
    """Per-message ring buffers, with the oldest message evicted first."""

    def __init__(self, max_entries_per_message: int = 10, max_messages: int = 1000) -> None:
        self._data: dict[str, deque[LearningEntry]] = {}
        self._max_entries_per_message = max_entries_per_message
        self._max_messages = max_messages

    def record(self, normalized_message: str, entry: LearningEntry) -> None:
        entries = self._data.get(normalized_message)
        if entries is None:
            entries = deque(maxlen=self._max_entries_per_message)
            self._data[normalized_message] = entries
            while len(self._data) > self._max_messages:
                del self._data[next(iter(self._data))]
        entries.append(entry)

    def get(self, normalized_message: str) -> list[LearningEntry]:
        return list(self._data.get(normalized_message, ()))

    def items(self) -> Iterator[tuple[str, list[LearningEntry]]]:
        for message, entries in list(self._data.items()):
            yield message, list(entries)

    def reset(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
