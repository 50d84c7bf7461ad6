from __future__ import annotations

from dataclasses import replace
from numbers import Real
from typing import Hashable, Iterable

from trainsched.calendar import WeekCalendar

from .models import ScheduledTaskSegment


def requirement_sort_key(requirement_id: Hashable) -> tuple:
    """Numbers sort numerically before strings; strings sort lexicographically."""
    if isinstance(requirement_id, Real) and not isinstance(requirement_id, bool):
        return (0, requirement_id, "")
    return (1, 0, str(requirement_id))


def is_continuation(
    previous: ScheduledTaskSegment,
    candidate: ScheduledTaskSegment,
    calendar: WeekCalendar,
) -> bool:
    """True if candidate extends previous by the very next working day."""
    return (
        candidate.resource_id == previous.resource_id
        and candidate.original_requirement_id == previous.original_requirement_id
        and candidate.start_day == previous.end_day
        and not calendar.is_weekend(candidate.start_day)
    )


def consolidate_segments(
    segments: Iterable[ScheduledTaskSegment],
    calendar: WeekCalendar,
) -> list[ScheduledTaskSegment]:
    ordered = sorted(
        segments,
        key=lambda s: (
            s.resource_id,
            requirement_sort_key(s.original_requirement_id),
            s.start_day,
        ),
    )

    result: list[ScheduledTaskSegment] = []
    current: ScheduledTaskSegment | None = None

    for segment in ordered:
        if current is not None and is_continuation(current, segment, calendar):
            current = replace(
                current,
                duration_days=current.duration_days + segment.duration_days,
                segment_hours=current.segment_hours + segment.segment_hours,
            )
            continue
        if current is not None:
            result.append(current)
        current = replace(segment, duration_days=max(1, segment.duration_days))

    if current is not None:
        result.append(current)
    return result
