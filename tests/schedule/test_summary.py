"""
tests/schedule/test_summary.py

Covers:
  - Expanding segments back to hours per day
  - Per-resource summaries (hours, training days, business trip length)
"""

import pytest

from trainsched.schedule import (
    ScheduleConfig,
    TrainingRequirement,
    daily_hours,
    schedule_training_tasks,
    summarize_resources,
)


def req(rid, resource, hours):
    return TrainingRequirement(rid, resource, f"R{resource}", "Lathe", hours)


# ── Daily hours ───────────────────────────────────────────────────────────────

class TestDailyHours:

    def test_single_segment(self):
        segs = schedule_training_tasks([req("a", 1, 20)])
        assert daily_hours(segs) == {1: {2: 8, 3: 8, 4: 4}}

    def test_shared_day_between_requirements(self):
        segs = schedule_training_tasks([req("a", 1, 20), req("b", 1, 10)])
        assert daily_hours(segs) == {1: {2: 8, 3: 8, 4: 8, 5: 6}}

    def test_weekend_left_empty(self):
        segs = schedule_training_tasks([req("a", 1, 40)])
        assert sorted(daily_hours(segs)[1]) == [2, 3, 4, 5, 8]

    def test_custom_limit(self):
        segs = schedule_training_tasks([req("a", 1, 10)], config=ScheduleConfig(daily_hour_limit=4))
        assert daily_hours(segs, daily_limit=4) == {1: {2: 4, 3: 4, 4: 2}}

    def test_empty(self):
        assert daily_hours([]) == {}


# ── Resource summaries ────────────────────────────────────────────────────────

class TestSummarizeResources:

    def test_single_resource(self):
        (summary,) = summarize_resources(schedule_training_tasks([req("a", 1, 20)]))
        assert summary.resource_id == 1
        assert summary.resource_name == "R1"
        assert summary.total_hours == 20
        assert summary.training_days == (2, 3, 4)
        assert summary.training_days_count == 3
        assert (summary.first_day, summary.last_day) == (2, 4)
        # travel on day 1 and day 5
        assert summary.business_trip_days == 5

    def test_trip_includes_weekend(self):
        (summary,) = summarize_resources(schedule_training_tasks([req("a", 1, 40)]))
        assert summary.training_days_count == 5
        assert summary.business_trip_days == 9

    def test_shared_day_counted_once(self):
        (summary,) = summarize_resources(
            schedule_training_tasks([req("a", 1, 4), req("b", 1, 4)])
        )
        assert summary.training_days == (2,)
        assert summary.total_hours == 8

    def test_ordered_by_resource(self):
        summaries = summarize_resources(
            schedule_training_tasks([req("a", 3, 8), req("b", 1, 8), req("c", 2, 8)])
        )
        assert [s.resource_id for s in summaries] == [1, 2, 3]

    def test_empty(self):
        assert summarize_resources([]) == []

    def test_frozen(self):
        (summary,) = summarize_resources(schedule_training_tasks([req("a", 1, 8)]))
        with pytest.raises(AttributeError):
            summary.total_hours = 0
