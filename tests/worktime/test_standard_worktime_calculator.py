from src.work_tracker.work_tracker.common.datetime_utils import TimeOfDay
from src.work_tracker.work_tracker.worktime.calculator.standard_calculator import StandardWorktimeCalculator
from src.work_tracker.work_tracker.worktime.model import WorkRules


def t(value: str) -> TimeOfDay:
    return TimeOfDay.parse(value)


def test_early_arrival_is_clamped_and_overtime_floored():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("08:05"), t("19:37"))

    assert result.schedule.effective_start == t("08:30").minutes
    assert result.schedule.required_end == t("17:30").minutes
    assert result.schedule.overtime_threshold == t("18:00").minutes
    assert result.worked_hours == 7.5
    # 97 minutes past the threshold -> three whole half hours
    assert result.overtime_hours == 1.5
    assert result.is_late is False
    assert result.notes == ()


def test_late_clock_in_with_deficit():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("09:20"), t("17:30"))

    assert result.is_late is True
    assert result.worked_hours == 400 / 60
    assert result.overtime_hours == 0
    assert len(result.notes) == 2
    assert result.notes[0].startswith("Late:")
    assert "09:20" in result.notes[0]
    assert "by 50 minutes" in result.notes[1]


def test_zero_length_day_does_not_crash():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("08:30"), t("08:30"))

    assert result.worked_hours == 0
    assert result.overtime_hours == 0
    assert "by 450 minutes" in result.notes[-1]


def test_clock_out_before_effective_start_yields_zero():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("07:00"), t("08:00"))

    assert result.worked_hours == 0
    assert result.overtime_hours == 0


def test_any_early_clock_in_starts_at_work_start():
    calc = StandardWorktimeCalculator()
    work_start = calc.rules.work_start

    for minutes in range(0, work_start + 1, 7):
        assert calc.plan(TimeOfDay(minutes)).effective_start == work_start


def test_clock_in_during_lunch_starts_after_lunch():
    calc = StandardWorktimeCalculator()
    rules = calc.rules

    for minutes in range(rules.lunch_start, rules.lunch_end):
        assert calc.plan(TimeOfDay(minutes)).required_end == rules.lunch_end + rules.required_work


def test_clock_in_after_lunch_skips_lunch_deduction():
    calc = StandardWorktimeCalculator()
    schedule = calc.plan(t("13:30"))

    assert schedule.required_end == t("13:30").minutes + 450
    assert schedule.is_late is True


def test_lunch_clock_in_full_day_meets_requirement():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("12:00"), t("20:30"))

    assert result.worked_hours == 7.5
    assert not any("Short" in n for n in result.notes)
    assert result.overtime_hours == 0


def test_overtime_below_minimum_is_dropped():
    calc = StandardWorktimeCalculator()

    assert calc.calculate(t("08:30"), t("18:29")).overtime_hours == 0
    assert calc.calculate(t("08:30"), t("18:30")).overtime_hours == 0.5
    assert calc.calculate(t("08:30"), t("18:59")).overtime_hours == 0.5
    assert calc.calculate(t("08:30"), t("19:00")).overtime_hours == 1.0


def test_worked_hours_capped_while_overtime_accrues():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("08:30"), t("22:00"))

    assert result.worked_hours == 7.5
    assert result.overtime_hours == 4.0


def test_hours_stay_within_bounds():
    calc = StandardWorktimeCalculator()

    for clock_in in range(6 * 60, 14 * 60, 17):
        for clock_out in range(clock_in + 1, 24 * 60, 23):
            result = calc.calculate(TimeOfDay(clock_in), TimeOfDay(clock_out))
            assert 0 <= result.worked_hours <= 7.5
            assert result.overtime_hours >= 0
            assert (result.overtime_hours * 2).is_integer()


def test_overtime_hint_near_boundary():
    calc = StandardWorktimeCalculator()

    before_first = calc.calculate(t("08:30"), t("18:20")).hint
    assert before_first is not None
    assert before_first.minutes_remaining == 10
    assert before_first.overtime_hours == 0.5

    assert calc.calculate(t("08:30"), t("18:40")).hint is None

    later = calc.calculate(t("08:30"), t("18:50")).hint
    assert later is not None
    assert later.minutes_remaining == 10
    assert later.overtime_hours == 1.0

    assert calc.calculate(t("08:30"), t("17:00")).hint is None


def test_hint_never_lands_in_notes():
    calc = StandardWorktimeCalculator()
    result = calc.calculate(t("08:30"), t("18:20"))

    assert result.hint is not None
    assert result.notes == ()


def test_custom_overtime_minimum():
    calc = StandardWorktimeCalculator(WorkRules(overtime_min=60))

    assert calc.calculate(t("08:30"), t("18:45")).overtime_hours == 0
    assert calc.calculate(t("08:30"), t("19:15")).overtime_hours == 1.0
