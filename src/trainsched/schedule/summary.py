from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .config import DAILY_HOUR_LIMIT
from .models import ScheduledTaskSegment


@dataclass(frozen=True)
class ResourceSummary:
    resource_id: int
    resource_name: str
    total_hours: float
    training_days: tuple[int, ...]

    @property
    def first_day(self) -> int:
        return self.training_days[0]

    @property
    def last_day(self) -> int:
        return self.training_days[-1]

    @property
    def training_days_count(self) -> int:
        return len(self.training_days)

    @property
    def business_trip_days(self) -> int:
        """Training span plus one travel day on each side, weekends included."""
        return self.last_day - self.first_day + 3


def daily_hours(
    segments: Iterable[ScheduledTaskSegment],
    daily_limit: float = DAILY_HOUR_LIMIT,
) -> dict[int, dict[int, float]]:
    """
    Expand segments back to hours per resource per day.

    A segment's hours fill its first day from start_hour_offset up to the
    limit, then whole days, with the remainder on its last day.
    """
    hours: dict[int, dict[int, float]] = {}
    for seg in segments:
        per_day = hours.setdefault(seg.resource_id, {})
        remaining = seg.segment_hours
        used = seg.start_hour_offset
        for day in range(seg.start_day, seg.end_day):
            take = min(remaining, daily_limit - used)
            if take > 0:
                per_day[day] = per_day.get(day, 0) + take
                remaining -= take
            used = 0
    return hours


def summarize_resources(
    segments: Iterable[ScheduledTaskSegment],
    daily_limit: float = DAILY_HOUR_LIMIT,
) -> list[ResourceSummary]:
    segments = list(segments)
    names: dict[int, str] = {}
    totals: dict[int, float] = {}
    for seg in segments:
        names.setdefault(seg.resource_id, seg.resource_name)
        totals[seg.resource_id] = totals.get(seg.resource_id, 0) + seg.segment_hours

    per_day = daily_hours(segments, daily_limit)
    return [
        ResourceSummary(
            resource_id=rid,
            resource_name=names[rid],
            total_hours=totals[rid],
            training_days=tuple(sorted(per_day[rid])),
        )
        for rid in sorted(totals)
        if per_day.get(rid)
    ]
