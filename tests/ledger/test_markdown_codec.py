from datetime import date

from src.work_tracker.work_tracker.common.datetime_utils import TimeOfDay
from src.work_tracker.work_tracker.ledger.markdown import parse_ledger, parse_row, render_ledger, render_row
from src.work_tracker.work_tracker.ledger.model import DayRecord, MonthLedger


def make_record(day: int, clock_in="08:30", clock_out="18:30", worked=7.5, overtime=0.5, notes=()):
    return DayRecord(
        work_date=date(2026, 2, day),
        clock_in=TimeOfDay.parse(clock_in),
        clock_out=TimeOfDay.parse(clock_out),
        worked_hours=worked,
        overtime_hours=overtime,
        notes=tuple(notes),
    )


def test_render_layout():
    ledger = MonthLedger(month="2026-02")
    ledger.upsert(make_record(10))
    ledger.upsert(make_record(3, clock_in="09:20", clock_out="17:30", worked=6.7, overtime=0.0,
                              notes=["Late: clocked in at 09:20, after flex deadline 09:10"]))

    lines = render_ledger(ledger).splitlines()

    assert lines[0] == "# Overtime log 2026-02"
    assert lines[2].startswith("| Date |")
    assert lines[4].startswith("| 2026-02-03 | 09:20 | 17:30 | 6.7 | 0.0 | Late:")
    assert lines[5] == "| 2026-02-10 | 08:30 | 18:30 | 7.5 | 0.5 🔥 |  |"
    assert "---" in lines
    assert lines[-1] == "**Summary:** 2 days, worked 14.2 h, overtime 0.5 h, late 1 days"


def test_pipe_in_notes_is_escaped_and_restored():
    record = make_record(4, notes=["left a|b", "second"])
    row = render_row(record)

    assert "left a\\|b; second" in row
    assert parse_row(row).notes == ("left a|b", "second")


def test_round_trip_reproduces_records():
    ledger = MonthLedger(month="2026-02")
    records = [
        make_record(2, notes=["Short of the required 7.5h by 12 minutes"]),
        make_record(9, clock_in="09:30", clock_out="21:00", overtime=2.5, notes=["Late: 09:30"]),
        make_record(20, clock_in="08:00", clock_out="17:00", worked=7.0, overtime=0.0),
    ]
    for r in records:
        ledger.upsert(r)

    parsed = parse_ledger(render_ledger(ledger), "2026-02")

    assert parsed.skipped_lines == 0
    assert parsed.ledger.records() == records


def test_parser_is_lossy_and_counts_bad_rows():
    text = "\n".join(
        [
            "# some title someone edited",
            "free text",
            "| Date | Clock-in | Clock-out | Worked (h) | Overtime (h) | Notes |",
            "| :---: | :---: | :---: | :---: | :---: | :--- |",
            "| 2026-02-05 | 08:30 | 19:00 | 7.5 | 1.0 🔥 | fine |",
            "| 2026-02-06 | 8:30 | 19:00 | 7.5 | 1.0 | bad time |",
            "| 2026-02-07 | 08:30 | 19:00 | n/a | 1.0 | bad hours |",
            "| not a row |",
            "---",
            "**Summary:** 99 days",
        ]
    )

    parsed = parse_ledger(text, "2026-02")

    assert [r.work_date.day for r in parsed.ledger.records()] == [5]
    assert parsed.ledger.records()[0].overtime_hours == 1.0
    assert parsed.skipped_lines == 3


def test_duplicate_rows_keep_the_last_one():
    text = "\n".join(
        [
            "| 2026-02-05 | 08:30 | 19:00 | 7.5 | 1.0 |  |",
            "| 2026-02-05 | 08:45 | 18:00 | 7.5 | 0.0 |  |",
        ]
    )

    records = parse_ledger(text, "2026-02").ledger.records()

    assert len(records) == 1
    assert str(records[0].clock_in) == "08:45"


def test_rows_without_notes_column_still_parse():
    record = parse_row("| 2026-02-05 | 08:30 | 19:00 | 7.5 | 1.0 |")

    assert record is not None
    assert record.notes == ()


def test_rows_of_empty_cells_are_skipped():
    text = "\n".join(
        [
            "| :---: | :---: |",
            "|  |  |",
            "| 2026-02-05 | 08:30 | 19:00 | 7.5 | 1.0 |  |",
        ]
    )

    parsed = parse_ledger(text, "2026-02")

    assert len(parsed.ledger) == 1
    assert parsed.skipped_lines == 1
