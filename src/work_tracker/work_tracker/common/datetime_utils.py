from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import InvalidDateError, InvalidMonthError, InvalidTimeError

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Minute offset into a 1440-minute day."""

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise InvalidTimeError(f"Time out of range: {self.minutes} minutes")

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse an "HH:MM" literal."""
        match = _TIME_RE.match(str(value or "").strip())
        if not match:
            raise InvalidTimeError(f'Invalid time "{value}", expected HH:MM')
        hours, minutes = int(match.group(1)), int(match.group(2))
        if minutes >= 60:
            raise InvalidTimeError(f'Invalid time "{value}", expected HH:MM')
        return cls(hours * 60 + minutes)

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeOfDay":
        return cls(value.hour * 60 + value.minute)

    def __str__(self) -> str:
        return format_minutes(self.minutes)


def format_minutes(minutes: int) -> str:
    """Render a minute offset as HH:MM (offsets past midnight keep counting hours)."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not value or not _DATE_RE.match(value.strip()):
        raise InvalidDateError(f'Invalid date "{value}", expected YYYY-MM-DD')
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidDateError(f'Invalid date "{value}", expected YYYY-MM-DD') from exc


def parse_month(value: str) -> str:
    """Validate a YYYY-MM literal and return it normalized."""
    if not value or not _MONTH_RE.match(value.strip()):
        raise InvalidMonthError(f'Invalid month "{value}", expected YYYY-MM')
    try:
        datetime.strptime(value.strip(), "%Y-%m")
    except ValueError as exc:
        raise InvalidMonthError(f'Invalid month "{value}", expected YYYY-MM') from exc
    return value.strip()


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
