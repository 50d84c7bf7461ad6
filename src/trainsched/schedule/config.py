from __future__ import annotations

import math
from dataclasses import dataclass

from trainsched.calendar import WeekCalendar

from ._exceptions import SchedulerError

DAILY_HOUR_LIMIT: float = 8.0

# Day 1 is left free; scheduling starts on the first working day from here.
FIRST_SCHEDULABLE_DAY: int = 2


@dataclass(frozen=True)
class ScheduleConfig:
    daily_hour_limit: float = DAILY_HOUR_LIMIT
    first_day: int = FIRST_SCHEDULABLE_DAY
    work_on_saturday: bool = False
    work_on_sunday: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.daily_hour_limit < math.inf:
            raise SchedulerError(
                f"Daily hour limit must be positive and finite; got {self.daily_hour_limit}."
            )
        if self.first_day < 1:
            raise SchedulerError(f"First day must be >= 1; got {self.first_day}.")

    def calendar(self) -> WeekCalendar:
        return WeekCalendar(self.work_on_saturday, self.work_on_sunday)
