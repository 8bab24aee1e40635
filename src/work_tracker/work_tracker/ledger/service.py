from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from ..common.datetime_utils import TimeOfDay, month_of
from ..worktime.model import WorktimeResult
from .model import DayRecord, LedgerTotals
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthSummary:
    month: str
    path: Path
    exists: bool
    records: list[DayRecord]
    totals: LedgerTotals
    skipped_lines: int = 0


class LedgerService:
    """Merges computed days into the month ledger and reads it back for reports."""

    def __init__(self, ledgers: LedgerRepository):
        self._ledgers = ledgers

    def upsert(
        self,
        work_date: date,
        clock_in: TimeOfDay,
        clock_out: TimeOfDay,
        result: WorktimeResult,
    ) -> Path:
        month = month_of(work_date)
        ledger = self._ledgers.load(month).ledger

        if ledger.get(work_date) is not None:
            logger.info("Replacing existing record for %s", work_date.isoformat())
        ledger.upsert(DayRecord.from_result(work_date, clock_in, clock_out, result))

        return self._ledgers.save(ledger)

    def summarize(self, month: str) -> MonthSummary:
        parsed = self._ledgers.load(month)
        return MonthSummary(
            month=month,
            path=self._ledgers.path_for(month),
            exists=self._ledgers.exists(month),
            records=parsed.ledger.records(),
            totals=parsed.ledger.totals(),
            skipped_lines=parsed.skipped_lines,
        )
