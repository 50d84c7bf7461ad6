from __future__ import annotations

from typing import Iterable

from loguru import logger

from trainsched.capacity import DailyCapacity

from .config import ScheduleConfig
from .models import ScheduledTaskSegment, TrainingRequirement


def group_by_resource(
    requirements: Iterable[TrainingRequirement],
) -> dict[int, list[TrainingRequirement]]:
    """Group requirements by resource id, keeping input order in each group.

    Requirements without a usable resource id, or whose hours are not a
    finite number, are dropped with a warning.
    """
    groups: dict[int, list[TrainingRequirement]] = {}
    for req in requirements:
        if not req.has_resource:
            logger.warning(
                f"Dropping requirement {req.requirement_id!r} "
                f"({req.machine_name!r}): no usable resource id ({req.resource_id!r})"
            )
            continue
        if not req.has_valid_hours:
            logger.warning(
                f"Dropping requirement {req.requirement_id!r} "
                f"({req.machine_name!r}): invalid training hours ({req.training_hours!r})"
            )
            continue
        groups.setdefault(req.resource_id, []).append(req)
    return groups


def allocate_daily(
    requirements: Iterable[TrainingRequirement],
    config: ScheduleConfig | None = None,
) -> list[ScheduledTaskSegment]:
    """
    Carve every requirement into one-day segments.

    Each resource gets its own DailyCapacity cursor, created for this call
    only.  Its requirements are processed in input order and the cursor is
    not reset between them.
    """
    config = config or ScheduleConfig()
    calendar = config.calendar()
    segments: list[ScheduledTaskSegment] = []

    for resource_id, reqs in group_by_resource(requirements).items():
        capacity = DailyCapacity(
            calendar,
            daily_limit=config.daily_hour_limit,
            first_day=config.first_day,
        )
        for req in reqs:
            if not req.training_hours > 0:
                logger.debug(
                    f"Requirement {req.requirement_id!r} has "
                    f"{req.training_hours}h; nothing to schedule"
                )
                continue

            chunks = capacity.process(req.training_hours, label=req.requirement_id)
            for index, chunk in enumerate(chunks):
                segments.append(
                    ScheduledTaskSegment(
                        id=f"{req.requirement_id}-seg{index}",
                        original_requirement_id=req.requirement_id,
                        resource_id=resource_id,
                        resource_name=req.resource_name,
                        machine_name=req.machine_name,
                        total_training_hours=req.training_hours,
                        segment_hours=chunk.hours,
                        start_day=chunk.day,
                        duration_days=1,
                        start_hour_offset=chunk.offset,
                        resource_category=req.resource_category,
                    )
                )

    return segments
