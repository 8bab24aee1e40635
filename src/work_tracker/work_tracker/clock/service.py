from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import TimeOfDay, format_minutes, month_of, now_local, parse_iso_date, parse_month
from ..common.validators import require_clock_order, require_time
from ..core.enums import StatusPhase
from ..core.exceptions import (
    ClockInAlreadyPendingError,
    CorruptPendingStateError,
    NoPendingClockInError,
    StalePendingClockInError,
    ValidationError,
)
from ..ledger.model import DayRecord
from ..ledger.service import LedgerService, MonthSummary
from ..worktime.calculator.base import WorktimeCalculator
from .model import BatchFailure, BatchReport, ClockInReceipt, DayOutcome, PendingClockIn, StatusReport
from .repository import PendingClockInStore

logger = logging.getLogger(__name__)


class ClockService:
    """Clock-in / clock-out / status / fix / summary operations."""

    def __init__(
        self,
        calculator: WorktimeCalculator,
        ledger: LedgerService,
        pending: PendingClockInStore,
    ):
        self._calculator = calculator
        self._ledger = ledger
        self._pending = pending

    def _time_or_now(self, value: Optional[str], now: datetime, field_name: str) -> TimeOfDay:
        if value is None:
            return TimeOfDay.from_datetime(now)
        return require_time(value, field_name)

    def _record_day(self, work_date: date, clock_in: TimeOfDay, clock_out: TimeOfDay) -> DayOutcome:
        result = self._calculator.calculate(clock_in, clock_out)
        path = self._ledger.upsert(work_date, clock_in, clock_out, result)
        record = DayRecord.from_result(work_date, clock_in, clock_out, result)
        return DayOutcome(record=record, result=result, path=path)

    def clock_in(self, time: Optional[str] = None, *, force: bool = False, now: datetime | None = None) -> ClockInReceipt:
        now = now or now_local()
        clock_in = self._time_or_now(time, now, "clock-in time")

        try:
            existing = self._pending.peek()
        except CorruptPendingStateError:
            if not force:
                raise
            existing = None

        if existing and not force:
            raise ClockInAlreadyPendingError(
                f"Already clocked in at {existing.time} on {existing.work_date.isoformat()}; "
                "clock out first or use --force to overwrite"
            )
        if existing:
            logger.warning(
                "Overwriting pending clock-in %s %s", existing.work_date.isoformat(), existing.time
            )

        warnings: list[str] = []
        rules = self._calculator.rules
        if clock_in.minutes > rules.suspicious_clock_in:
            msg = f"Clock-in {clock_in} is after {format_minutes(rules.suspicious_clock_in)}; is this really a clock-in?"
            logger.warning(msg)
            warnings.append(msg)

        pending = PendingClockIn(time=clock_in, work_date=now.date())
        self._pending.set(pending)

        return ClockInReceipt(
            pending=pending,
            schedule=self._calculator.plan(clock_in),
            warnings=tuple(warnings),
            replaced=existing,
        )

    def clock_out(self, time: Optional[str] = None, *, now: datetime | None = None) -> DayOutcome:
        now = now or now_local()

        pending = self._pending.peek()
        if not pending:
            raise NoPendingClockInError("No clock-in found; run `work in` first")
        if pending.work_date != now.date():
            raise StalePendingClockInError(
                f"Open clock-in is from {pending.work_date.isoformat()}, not today; "
                f"record that day with `work fix {pending.work_date.isoformat()} {pending.time} HH:MM`"
            )

        clock_out = self._time_or_now(time, now, "clock-out time")
        require_clock_order(pending.time, clock_out)

        outcome = self._record_day(pending.work_date, pending.time, clock_out)
        self._pending.clear()
        return outcome

    def status(self, *, now: datetime | None = None) -> StatusReport:
        now = now or now_local()

        pending = self._pending.peek()
        if not pending:
            return StatusReport(now=now, phase=StatusPhase.NOT_CLOCKED_IN)

        schedule = self._calculator.plan(pending.time)
        is_stale = pending.work_date != now.date()
        current = now.hour * 60 + now.minute

        if is_stale or current < schedule.effective_start:
            return StatusReport(
                now=now,
                phase=StatusPhase.NOT_STARTED,
                pending=pending,
                schedule=schedule,
                is_stale=is_stale,
            )

        progress = self._calculator.calculate(pending.time, TimeOfDay.from_datetime(now))
        if current >= schedule.overtime_threshold:
            phase, remaining = StatusPhase.OVERTIME, None
        elif current > schedule.required_end:
            phase, remaining = StatusPhase.GAP, schedule.overtime_threshold - current
        else:
            phase, remaining = StatusPhase.REGULAR, schedule.required_end - current

        return StatusReport(
            now=now,
            phase=phase,
            pending=pending,
            schedule=schedule,
            progress=progress,
            minutes_remaining=remaining,
        )

    def fix(self, work_date: str, clock_in: str, clock_out: str) -> DayOutcome:
        day = parse_iso_date(work_date)
        start = require_time(clock_in, "clock-in time")
        end = require_time(clock_out, "clock-out time")
        require_clock_order(start, end)
        return self._record_day(day, start, end)

    def fix_many(self, lines: Iterable[str]) -> BatchReport:
        """Apply ``YYYY-MM-DD HH:MM HH:MM`` lines; blank and ``#`` lines are skipped."""

        report = BatchReport()
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            if len(parts) != 3:
                report.failures.append(BatchFailure(line=line, error="expected: YYYY-MM-DD HH:MM HH:MM"))
                continue
            try:
                report.outcomes.append(self.fix(*parts))
            except ValidationError as exc:
                report.failures.append(BatchFailure(line=line, error=str(exc)))

        logger.info("Batch fix: %d ok, %d failed", len(report.outcomes), len(report.failures))
        return report

    def summary(self, month: Optional[str] = None, *, now: datetime | None = None) -> MonthSummary:
        if month is None:
            month = month_of((now or now_local()).date())
        return self._ledger.summarize(parse_month(month))
