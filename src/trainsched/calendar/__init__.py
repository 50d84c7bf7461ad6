"""
trainsched.calendar
~~~~~~~~~~~~~~~~~~~

Weekly working-day calendar.  Days are numbered from 1, day 1 is a Monday,
and a WeekCalendar decides which days of the 7-day cycle are excluded from
work.  Saturday and Sunday are excluded unless explicitly worked.

Basic usage::

    from trainsched.calendar import WeekCalendar

    cal = WeekCalendar(work_saturday=False, work_sunday=False)
    cal.is_weekend(6)              # → True
    cal.next_working_day(6)        # → 8

NumPy arrays are accepted by is_weekend::

    import numpy as np
    cal.is_weekend(np.arange(1, 15))

The module level functions is_weekend() and next_working_day() take the two
flags explicitly.

Public API
----------
WeekCalendar      The main class.
is_weekend        Weekend predicate with explicit flags.
next_working_day  Next working day on or after a day, with explicit flags.
CalendarError     Base exception for all calendar-related errors.
"""

from __future__ import annotations

from trainsched.calendar._exceptions import CalendarError
from trainsched.calendar.calendar import (
    WeekCalendar,
    is_weekend,
    next_working_day,
)

__all__ = [
    "WeekCalendar",
    "CalendarError",
    "is_weekend",
    "next_working_day",
]
