from __future__ import annotations

from typing import Optional, Protocol

from .model import PendingClockIn


class PendingClockInStore(Protocol):
    """Single slot holding at most one open clock-in."""

    def peek(self) -> Optional[PendingClockIn]:
        raise NotImplementedError

    def set(self, pending: PendingClockIn) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
