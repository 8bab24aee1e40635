from __future__ import annotations

from ..core.exceptions import ClockOrderError, InvalidTimeError
from .datetime_utils import TimeOfDay


def require_time(value: str, field_name: str) -> TimeOfDay:
    try:
        return TimeOfDay.parse(value)
    except InvalidTimeError as exc:
        raise InvalidTimeError(f'Invalid {field_name} "{value}", expected HH:MM') from exc


def require_clock_order(clock_in: TimeOfDay, clock_out: TimeOfDay) -> None:
    if clock_out <= clock_in:
        raise ClockOrderError(f"Clock-out {clock_out} must be later than clock-in {clock_in}")
