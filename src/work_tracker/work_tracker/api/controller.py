from __future__ import annotations

from flask import Flask, jsonify, request

from ..clock.model import ClockInReceipt, DayOutcome, StatusReport
from ..common.datetime_utils import format_minutes
from ..core.exceptions import LedgerWriteError, ValidationError
from ..container import Container
from ..ledger.model import DayRecord
from ..ledger.service import MonthSummary
from ..worktime.model import DaySchedule


def _schedule_json(s: DaySchedule) -> dict:
    return {
        "effective_start": format_minutes(s.effective_start),
        "required_end": format_minutes(s.required_end),
        "overtime_threshold": format_minutes(s.overtime_threshold),
        "is_late": s.is_late,
    }


def _record_json(r: DayRecord) -> dict:
    return {
        "date": r.work_date.isoformat(),
        "clock_in": str(r.clock_in),
        "clock_out": str(r.clock_out),
        "worked_hours": r.worked_hours,
        "overtime_hours": r.overtime_hours,
        "is_late": r.is_late,
        "notes": list(r.notes),
    }


def _outcome_json(o: DayOutcome) -> dict:
    hint = o.result.hint
    return {
        "record": _record_json(o.record),
        "hint": {"minutes_remaining": hint.minutes_remaining, "overtime_hours": hint.overtime_hours} if hint else None,
        "path": str(o.path),
    }


def _receipt_json(r: ClockInReceipt) -> dict:
    return {
        "date": r.pending.work_date.isoformat(),
        "time": str(r.pending.time),
        "schedule": _schedule_json(r.schedule),
        "warnings": list(r.warnings),
        "replaced": str(r.replaced.time) if r.replaced else None,
    }


def _status_json(s: StatusReport) -> dict:
    return {
        "phase": s.phase.value,
        "date": s.pending.work_date.isoformat() if s.pending else None,
        "clock_in": str(s.pending.time) if s.pending else None,
        "schedule": _schedule_json(s.schedule) if s.schedule else None,
        "is_stale": s.is_stale,
        "worked_hours": s.progress.worked_hours if s.progress else None,
        "overtime_hours": s.progress.overtime_hours if s.progress else None,
        "minutes_remaining": s.minutes_remaining,
    }


def _summary_json(s: MonthSummary) -> dict:
    return {
        "month": s.month,
        "exists": s.exists,
        "records": [_record_json(r) for r in s.records],
        "totals": {
            "days": s.totals.days,
            "worked_hours": s.totals.worked_hours,
            "overtime_hours": s.totals.overtime_hours,
            "late_days": s.totals.late_days,
        },
        "skipped_lines": s.skipped_lines,
    }


def _payload() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def register(app: Flask, container: Container) -> None:
    clock = container.clock_service

    @app.errorhandler(ValidationError)
    def validation_error(exc: ValidationError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(LedgerWriteError)
    def ledger_write_error(exc: LedgerWriteError):
        return jsonify({"error": str(exc)}), 500

    @app.route("/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        payload = _payload()
        receipt = clock.clock_in(payload.get("time"), force=bool(payload.get("force", False)))
        return jsonify(_receipt_json(receipt)), 201

    @app.route("/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        payload = _payload()
        return jsonify(_outcome_json(clock.clock_out(payload.get("time"))))

    @app.route("/status", methods=["GET"], endpoint="status")
    def status():
        return jsonify(_status_json(clock.status()))

    @app.route("/days/<work_date>", methods=["PUT"], endpoint="fix_day")
    def fix_day(work_date: str):
        payload = _payload()
        outcome = clock.fix(work_date, payload.get("clock_in", ""), payload.get("clock_out", ""))
        return jsonify(_outcome_json(outcome))

    @app.route("/summary", methods=["GET"], endpoint="summary")
    @app.route("/summary/<month>", methods=["GET"], endpoint="summary")
    def summary(month: str | None = None):
        return jsonify(_summary_json(clock.summary(month)))
