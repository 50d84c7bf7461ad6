"""
trainsched.schedule
~~~~~~~~~~~~~~~~~~~

Training requirement scheduling.  Requirements are grouped by resource, each
resource's calendar is consumed serially in input order at most
``daily_hour_limit`` hours per working day, and the resulting one-day
allocations are merged into contiguous multi-day segments.

Basic usage::

    from trainsched.schedule import TrainingRequirement, schedule_training_tasks

    reqs = [TrainingRequirement("r1", 1, "Alice", "Lathe", 20)]
    schedule_training_tasks(reqs)
    # → [ScheduledTaskSegment(id='r1-seg0', ..., segment_hours=20,
    #                         start_day=2, duration_days=3, ...)]

Public API
----------
schedule_training_tasks  Allocate and consolidate in one call.
allocate_daily           One-day allocations only.
consolidate_segments     Merge adjacent one-day allocations.
is_continuation          Adjacency test used by consolidate_segments.
summarize_resources      Per-resource hours, training days and trip length.
daily_hours              Expand segments back to hours per day.
ScheduleConfig           Hour limit, first day and weekend policy.
SchedulerError           Raised for invalid configuration.
"""

from trainsched.schedule._exceptions import SchedulerError
from trainsched.schedule.allocator import allocate_daily, group_by_resource
from trainsched.schedule.config import ScheduleConfig
from trainsched.schedule.consolidator import consolidate_segments, is_continuation
from trainsched.schedule.models import ScheduledTaskSegment, TrainingRequirement
from trainsched.schedule.scheduler import schedule_training_tasks
from trainsched.schedule.summary import (
    ResourceSummary,
    daily_hours,
    summarize_resources,
)

__all__ = [
    "ResourceSummary",
    "ScheduleConfig",
    "ScheduledTaskSegment",
    "SchedulerError",
    "TrainingRequirement",
    "allocate_daily",
    "consolidate_segments",
    "daily_hours",
    "group_by_resource",
    "is_continuation",
    "schedule_training_tasks",
    "summarize_resources",
]
