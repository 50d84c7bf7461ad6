"""
trainsched.capacity
~~~~~~~~~~~~~~~~~~~

Per-resource daily hour capacity.

A DailyCapacity is one resource's cursor over a WeekCalendar: the current day
and the hours already used on it.  Requirements are carved greedily into
single-day chunks bounded by the daily hour limit, and the cursor carries over
from one requirement to the next, so a resource's calendar is consumed
serially.

Basic usage::

    from trainsched.calendar import WeekCalendar
    from trainsched.capacity import DailyCapacity

    cap = DailyCapacity(WeekCalendar(), daily_limit=8)
    cap.process(20)     # → [DayChunk(2, 0, 8), DayChunk(3, 0, 8), DayChunk(4, 0, 4)]
    cap.process(6)      # → [DayChunk(4, 4, 4), DayChunk(5, 0, 2)]
"""

from trainsched.capacity.capacity import DailyCapacity, DayChunk

__all__ = ["DailyCapacity", "DayChunk"]
