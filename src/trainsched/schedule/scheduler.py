from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from loguru import logger

from .allocator import allocate_daily
from .config import ScheduleConfig
from .consolidator import consolidate_segments
from .models import ScheduledTaskSegment, TrainingRequirement

RequirementLike = Union[TrainingRequirement, Mapping[str, Any]]


def _as_requirement(item: RequirementLike) -> TrainingRequirement:
    if isinstance(item, TrainingRequirement):
        return item
    return TrainingRequirement.from_mapping(item)


def schedule_training_tasks(
    requirements: Iterable[RequirementLike],
    work_on_saturday: bool = False,
    work_on_sunday: bool = False,
    *,
    config: ScheduleConfig | None = None,
) -> list[ScheduledTaskSegment]:
    """
    Schedule training requirements onto their resources' day calendars.

    Parameters
    ----------
    requirements
        Ordered requirements, as TrainingRequirement objects or mappings with
        the same keys.  Each resource's requirements are scheduled in this
        order.
    work_on_saturday, work_on_sunday
        Weekend policy.  Ignored when ``config`` is given.
    config
        Full configuration (daily hour limit, first day, weekend policy).

    Returns
    -------
    Consolidated segments sorted by resource id, requirement id and start day.
    """
    if config is None:
        config = ScheduleConfig(
            work_on_saturday=work_on_saturday,
            work_on_sunday=work_on_sunday,
        )

    reqs = [_as_requirement(r) for r in requirements]
    daily = allocate_daily(reqs, config)
    segments = consolidate_segments(daily, config.calendar())

    logger.debug(
        f"Scheduled {len(reqs)} requirements into {len(daily)} day allocations, "
        f"{len(segments)} segments"
    )
    return segments
