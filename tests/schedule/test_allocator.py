"""
tests/schedule/test_allocator.py

Covers:
  - Grouping by resource and dropping unusable resources
  - One-day segment fields
  - Per-resource cursors
  - Zero-hour requirements
"""

import pytest

from trainsched.schedule import (
    ScheduleConfig,
    TrainingRequirement,
    allocate_daily,
    group_by_resource,
)


def req(rid, resource, hours, machine="Lathe"):
    return TrainingRequirement(rid, resource, f"R{resource}", machine, hours)


# ── Grouping ──────────────────────────────────────────────────────────────────

class TestGrouping:

    def test_preserves_input_order(self):
        reqs = [req("a", 2, 1), req("b", 1, 1), req("c", 2, 1)]
        groups = group_by_resource(reqs)
        assert list(groups) == [2, 1]
        assert [r.requirement_id for r in groups[2]] == ["a", "c"]

    def test_drops_missing_resource(self, log_messages):
        reqs = [req("a", None, 8), req("b", 1, 8)]
        groups = group_by_resource(reqs)
        assert list(groups) == [1]
        warnings = [m for m in log_messages if m["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "'a'" in warnings[0]["message"]

    @pytest.mark.parametrize("hours", [float("inf"), float("-inf"), float("nan")])
    def test_drops_non_finite_hours(self, hours, log_messages):
        groups = group_by_resource([req("bad", 1, hours), req("ok", 1, 8)])
        assert [r.requirement_id for r in groups[1]] == ["ok"]
        warnings = [m for m in log_messages if m["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "invalid training hours" in warnings[0]["message"]


# ── One-day segments ──────────────────────────────────────────────────────────

class TestAllocateDaily:

    def test_segment_fields(self):
        segments = allocate_daily([req("r1", 1, 20)])
        assert [s.start_day for s in segments] == [2, 3, 4]
        assert [s.segment_hours for s in segments] == [8, 8, 4]
        assert all(s.duration_days == 1 for s in segments)
        assert [s.id for s in segments] == ["r1-seg0", "r1-seg1", "r1-seg2"]
        first = segments[0]
        assert first.original_requirement_id == "r1"
        assert first.resource_id == 1
        assert first.resource_name == "R1"
        assert first.machine_name == "Lathe"
        assert first.total_training_hours == 20

    def test_start_hour_offset(self):
        segments = allocate_daily([req("a", 1, 5), req("b", 1, 5)])
        assert [(s.original_requirement_id, s.start_day, s.start_hour_offset) for s in segments] == [
            ("a", 2, 0),
            ("b", 2, 5),
            ("b", 3, 0),
        ]

    def test_resources_have_independent_cursors(self):
        segments = allocate_daily([req("a", 1, 16), req("b", 2, 4)])
        b = [s for s in segments if s.original_requirement_id == "b"]
        assert [s.start_day for s in b] == [2]

    def test_zero_and_negative_hours_skipped(self):
        segments = allocate_daily([req("z", 1, 0), req("n", 1, -3), req("a", 1, 4)])
        assert [s.original_requirement_id for s in segments] == ["a"]
        assert segments[0].start_day == 2

    def test_config_first_day(self):
        segments = allocate_daily([req("a", 1, 4)], ScheduleConfig(first_day=1))
        assert segments[0].start_day == 1

    def test_config_daily_limit(self):
        segments = allocate_daily([req("a", 1, 10)], ScheduleConfig(daily_hour_limit=5))
        assert [s.segment_hours for s in segments] == [5, 5]

    def test_category_passed_through(self):
        r = TrainingRequirement("s1", 1, "R1", "CAD", 4, "Software")
        assert allocate_daily([r])[0].resource_category == "Software"

    def test_fresh_state_per_call(self):
        reqs = [req("a", 1, 12)]
        assert allocate_daily(reqs) == allocate_daily(reqs)

    def test_empty_input(self):
        assert allocate_daily([]) == []
