from __future__ import annotations

from enum import Enum


class StatusPhase(str, Enum):
    """Where "now" falls relative to the day's schedule."""

    NOT_CLOCKED_IN = "NOT_CLOCKED_IN"
    NOT_STARTED = "NOT_STARTED"
    REGULAR = "REGULAR"
    GAP = "GAP"
    OVERTIME = "OVERTIME"
