"""
trainsched
~~~~~~~~~~

Day-calendar scheduling of training requirements onto resources.

Basic usage::

    from trainsched import schedule_training_tasks

    segments = schedule_training_tasks(requirements, work_on_saturday=False)
"""

from __future__ import annotations

from trainsched.schedule import (
    ScheduleConfig,
    ScheduledTaskSegment,
    TrainingRequirement,
    schedule_training_tasks,
    summarize_resources,
)

__all__ = [
    "ScheduleConfig",
    "ScheduledTaskSegment",
    "TrainingRequirement",
    "schedule_training_tasks",
    "summarize_resources",
]
