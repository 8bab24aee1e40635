from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .model import MonthLedger, ParseResult


class LedgerRepository(Protocol):
    def path_for(self, month: str) -> Path:
        raise NotImplementedError

    def exists(self, month: str) -> bool:
        raise NotImplementedError

    def load(self, month: str) -> ParseResult:
        """Return the stored ledger for a month, or an empty one if none exists."""

        raise NotImplementedError

    def save(self, ledger: MonthLedger) -> Path:
        """Replace the stored document for the ledger's month."""

        raise NotImplementedError
