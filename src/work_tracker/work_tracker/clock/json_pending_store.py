from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from ..common.datetime_utils import TimeOfDay, now_local, parse_iso_date
from ..core.exceptions import CorruptPendingStateError, DomainError
from .model import PendingClockIn

logger = logging.getLogger(__name__)


class JsonFilePendingStore:
    """Pending clock-in persisted as ``{"time": "HH:MM", "date": "YYYY-MM-DD"}``.

    Older state files hold only the bare ``HH:MM``; those are read as today's.
    """

    def __init__(self, path: Path | str, *, today: Callable[[], date] | None = None):
        self._path = Path(path).expanduser()
        self._today = today or (lambda: now_local().date())

    @property
    def path(self) -> Path:
        return self._path

    def peek(self) -> Optional[PendingClockIn]:
        if not self._path.is_file():
            return None

        try:
            raw = self._path.read_bytes().decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise CorruptPendingStateError(
                f"Cannot read pending clock-in from {self._path}; clock in again with --force"
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            data = raw

        try:
            if isinstance(data, dict):
                time = TimeOfDay.parse(str(data.get("time", "")))
                work_date = parse_iso_date(data["date"]) if data.get("date") else self._today()
            else:
                time = TimeOfDay.parse(str(data))
                work_date = self._today()
        except DomainError as exc:
            raise CorruptPendingStateError(
                f"Cannot read pending clock-in from {self._path}; clock in again with --force"
            ) from exc

        return PendingClockIn(time=time, work_date=work_date)

    def set(self, pending: PendingClockIn) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"time": str(pending.time), "date": pending.work_date.isoformat()}
        self._path.write_text(json.dumps(payload), encoding="utf-8")
        logger.info("Pending clock-in saved: %s %s", payload["date"], payload["time"])

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
        logger.info("Pending clock-in cleared")
