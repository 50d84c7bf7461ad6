from typing import Sequence, Union

import numpy as np

from ._exceptions import CalendarError

ArrayLike = Union[int, "np.ndarray"]

DAYS_PER_WEEK: int = 7
SATURDAY: int = 6
SUNDAY: int = 7


class WeekCalendar:
    """
    Seven-day working pattern over 1-based day numbers.
    Day 1 is a Monday; day-of-week is ((day - 1) mod 7) + 1.
    Days <= 0 are never weekends.
    """

    def __init__(self, work_saturday: bool = False, work_sunday: bool = False) -> None:
        # index 0 = Monday ... index 6 = Sunday
        pattern = np.ones(DAYS_PER_WEEK, dtype=bool)
        pattern[SATURDAY - 1] = bool(work_saturday)
        pattern[SUNDAY - 1] = bool(work_sunday)
        self._pattern: np.ndarray = pattern

    @classmethod
    def from_pattern(cls, pattern: Sequence[bool]) -> "WeekCalendar":
        """Build from seven Monday-first working flags."""
        if len(pattern) != DAYS_PER_WEEK:
            raise CalendarError(
                f"Pattern must have {DAYS_PER_WEEK} entries; got {len(pattern)}."
            )
        arr = np.array([bool(p) for p in pattern], dtype=bool)
        if not arr.any():
            raise CalendarError("Pattern must contain at least one working day.")
        cal = cls.__new__(cls)
        cal._pattern = arr
        return cal

    # ── queries ──────────────────────────────────────────────────────────

    @staticmethod
    def day_of_week(day: ArrayLike) -> ArrayLike:
        """1 = Monday ... 7 = Sunday."""
        if np.ndim(day) == 0:
            return (int(day) - 1) % DAYS_PER_WEEK + 1
        return (np.asarray(day, dtype=np.int64) - 1) % DAYS_PER_WEEK + 1

    def is_weekend(self, day: ArrayLike) -> Union[bool, "np.ndarray"]:
        if np.ndim(day) == 0:
            day = int(day)
            if day <= 0:
                return False
            return not bool(self._pattern[(day - 1) % DAYS_PER_WEEK])

        days = np.asarray(day, dtype=np.int64)
        excluded = ~self._pattern[(days - 1) % DAYS_PER_WEEK]
        return excluded & (days > 0)

    def next_working_day(self, day: int) -> int:
        day = int(day)
        while self.is_weekend(day):
            day += 1
        return day

    def working_days(self, start: int, stop: int) -> list[int]:
        """Working days in the half-open range [start, stop)."""
        if stop <= start:
            return []
        days = np.arange(start, stop, dtype=np.int64)
        return [int(d) for d in days[~self.is_weekend(days)]]

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_saturday(self) -> bool:
        return bool(self._pattern[SATURDAY - 1])

    @property
    def work_sunday(self) -> bool:
        return bool(self._pattern[SUNDAY - 1])

    @property
    def pattern(self) -> tuple[bool, ...]:
        return tuple(bool(p) for p in self._pattern)

    @property
    def working_days_per_week(self) -> int:
        return int(self._pattern.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekCalendar):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __repr__(self) -> str:
        return (
            f"WeekCalendar(pattern={list(self.pattern)}, "
            f"working_days_per_week={self.working_days_per_week})"
        )


def is_weekend(day: int, work_saturday: bool, work_sunday: bool) -> bool:
    return bool(WeekCalendar(work_saturday, work_sunday).is_weekend(day))


def next_working_day(day: int, work_saturday: bool, work_sunday: bool) -> int:
    return WeekCalendar(work_saturday, work_sunday).next_working_day(day)
