from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from numbers import Integral
from typing import Any, Hashable, Literal, Mapping

ResourceCategory = Literal["Machine", "Software", "Unknown"]

_CATEGORIES = ("Machine", "Software", "Unknown")


def _coerce_resource_id(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _coerce_hours(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


@dataclass(frozen=True)
class TrainingRequirement:
    """Hours of one training item that one resource has to deliver."""

    requirement_id: Hashable
    resource_id: int | None
    resource_name: str
    machine_name: str
    training_hours: float
    resource_category: ResourceCategory = "Unknown"

    @property
    def has_resource(self) -> bool:
        return isinstance(self.resource_id, Integral) and not isinstance(self.resource_id, bool)

    @property
    def has_valid_hours(self) -> bool:
        try:
            return math.isfinite(self.training_hours)
        except TypeError:
            return False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TrainingRequirement:
        category = data.get("resource_category") or "Unknown"
        if category not in _CATEGORIES:
            category = "Unknown"
        return cls(
            requirement_id=data.get("requirement_id"),
            resource_id=_coerce_resource_id(data.get("resource_id")),
            resource_name=str(data.get("resource_name") or ""),
            machine_name=str(data.get("machine_name") or ""),
            training_hours=_coerce_hours(data.get("training_hours")),
            resource_category=category,
        )


@dataclass(frozen=True)
class ScheduledTaskSegment:
    """
    A run of calendar-adjacent working days during which one requirement
    consumes one resource.  start_hour_offset is the number of hours already
    used on start_day when the segment begins.
    """

    id: str
    original_requirement_id: Hashable
    resource_id: int
    resource_name: str
    machine_name: str
    total_training_hours: float
    segment_hours: float
    start_day: int
    duration_days: int
    start_hour_offset: float = 0
    resource_category: ResourceCategory = "Unknown"

    @property
    def end_day(self) -> int:
        """First day after the segment."""
        return self.start_day + self.duration_days

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["originalRequirementId"] = data.pop("original_requirement_id")
        return data
