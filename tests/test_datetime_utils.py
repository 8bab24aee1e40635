from datetime import date

import pytest

from src.work_tracker.work_tracker.common.datetime_utils import (
    TimeOfDay,
    format_minutes,
    month_of,
    parse_iso_date,
    parse_month,
)
from src.work_tracker.work_tracker.core.exceptions import InvalidDateError, InvalidMonthError, InvalidTimeError


def test_time_of_day_parse_and_render():
    value = TimeOfDay.parse("08:05")

    assert value.minutes == 485
    assert str(value) == "08:05"
    assert TimeOfDay.parse("00:00") < TimeOfDay.parse("23:59")


@pytest.mark.parametrize("literal", ["24:00", "8:30", "08:60", "0830", "", "ab:cd"])
def test_time_of_day_rejects_bad_literals(literal):
    with pytest.raises(InvalidTimeError):
        TimeOfDay.parse(literal)


def test_time_of_day_range_is_enforced():
    with pytest.raises(InvalidTimeError):
        TimeOfDay(1440)
    with pytest.raises(InvalidTimeError):
        TimeOfDay(-1)


def test_format_minutes_past_midnight():
    assert format_minutes(1050) == "17:30"
    assert format_minutes(1500) == "25:00"


def test_parse_iso_date():
    assert parse_iso_date("2026-02-10") == date(2026, 2, 10)
    with pytest.raises(InvalidDateError):
        parse_iso_date("2026-02-30")
    with pytest.raises(InvalidDateError):
        parse_iso_date("10/02/2026")


def test_parse_month():
    assert parse_month("2026-02") == "2026-02"
    assert month_of(date(2026, 2, 10)) == "2026-02"
    with pytest.raises(InvalidMonthError):
        parse_month("2026-13")
    with pytest.raises(InvalidMonthError):
        parse_month("2026-2")
