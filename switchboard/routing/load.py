"""System load probes consulted by the high-load routing rule."""

from abc import ABC, abstractmethod


class SystemLoadProbe(ABC):
    @abstractmethod
    async def current_load(self) -> float:
        """Current load as a scalar in [0, 1]."""


class StaticLoadProbe(SystemLoadProbe):
    """Reports a fixed load; the default when the host supplies no probe."""

    def __init__(self, load: float = 0.5) -> None:
        if not 0.0 <= load <= 1.0:
            raise ValueError(f"load must be within [0, 1], got {load}")
        self._load = load

    async def current_load(self) -> float:
        return self._load
