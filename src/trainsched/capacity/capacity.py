import math
from typing import NamedTuple

from loguru import logger

from trainsched.calendar import WeekCalendar

_TOLERANCE: float = 1e-9


class DayChunk(NamedTuple):
    day: int
    offset: float
    hours: float


class DailyCapacity:

    def __init__(
        self,
        calendar: WeekCalendar,
        daily_limit: float = 8.0,
        first_day: int = 2,
    ) -> None:
        if not 0 < daily_limit < math.inf:
            raise ValueError("Daily limit must be positive and finite.")
        self._calendar = calendar
        self._limit: float = daily_limit
        self._day: int = calendar.next_working_day(first_day)
        self._used: float = 0

    def process(self, hours: float, label: object = None) -> list[DayChunk]:
        chunks: list[DayChunk] = []
        if not math.isfinite(hours):
            logger.error(f"Refusing to allocate {hours}h for {label!r}")
            return chunks
        remaining = hours

        while remaining > 0:
            if self._calendar.is_weekend(self._day) or self._used >= self._limit:
                if self._used >= self._limit:
                    self._day += 1
                    self._used = 0
                self._day = self._calendar.next_working_day(self._day)

            available = self.available_today
            take = min(remaining, available)
            if available > 0 and math.isclose(take, remaining, abs_tol=_TOLERANCE):
                take = remaining
            if take <= 0:
                logger.error(
                    f"Non-positive allocation of {take}h on day {self._day} "
                    f"for {label!r}; {remaining}h left unscheduled"
                )
                break

            chunks.append(DayChunk(self._day, self._used, take))
            remaining -= take
            self._used += take
            # absorb float drift so a nearly full day counts as full
            if math.isclose(self._used, self._limit, abs_tol=_TOLERANCE):
                self._used = self._limit

        return chunks

    @property
    def available_today(self) -> float:
        return self._limit - self._used

    @property
    def current_day(self) -> int:
        return self._day

    @property
    def hours_used_today(self) -> float:
        return self._used

    @property
    def daily_limit(self) -> float:
        return self._limit

    @property
    def calendar(self) -> WeekCalendar:
        return self._calendar

    def __repr__(self) -> str:
        return (
            f"DailyCapacity(daily_limit={self._limit}, "
            f"current_day={self._day}, "
            f"hours_used_today={self._used})"
        )
