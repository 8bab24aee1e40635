from __future__ import annotations

from abc import ABC, abstractmethod

from ...common.datetime_utils import TimeOfDay
from ..model import DaySchedule, WorkRules, WorktimeResult


class WorktimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for workplace rules)."""

    @property
    @abstractmethod
    def rules(self) -> WorkRules:
        raise NotImplementedError

    @abstractmethod
    def plan(self, clock_in: TimeOfDay) -> DaySchedule:
        raise NotImplementedError

    @abstractmethod
    def calculate(self, clock_in: TimeOfDay, clock_out: TimeOfDay) -> WorktimeResult:
        raise NotImplementedError
