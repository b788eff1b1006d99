"""Tests for the Render Pipeline: filtering, ordering, layering, reconciliation."""

import math
import random

import pytest

from clockface.core.pipeline import (
    HazeConfig,
    RenderPipeline,
    filter_events,
    order_by_severity,
    ray_label,
)
from clockface.domain.enums import TimeRange
from clockface.domain.view_state import ViewState
from clockface.foundation.randomness import FixedRandom

from tests.test_event import _chart_event


def _three_events():
    return [
        _chart_event("a", hours_ago=10, severity=80),
        _chart_event("b", hours_ago=50, severity=20),
        _chart_event("c", hours_ago=200, severity=50),
    ]


@pytest.fixture
def pipeline() -> RenderPipeline:
    return RenderPipeline(rng=random.Random(7))


# ── Filter ───────────────────────────────────────────────────────────────────


class TestFilter:
    def test_day_range(self) -> None:
        assert [e.id for e in filter_events(_three_events(), TimeRange.DAY)] == ["a"]

    def test_four_day_range(self) -> None:
        assert [e.id for e in filter_events(_three_events(), TimeRange.FOUR_DAYS)] == ["a", "b"]

    def test_month_range(self) -> None:
        assert [e.id for e in filter_events(_three_events(), TimeRange.MONTH)] == ["a", "b", "c"]

    def test_boundary_is_inclusive(self) -> None:
        edge = _chart_event("edge", hours_ago=24)
        assert filter_events([edge], TimeRange.DAY) == [edge]

    def test_filter_is_idempotent(self) -> None:
        for time_range in TimeRange:
            once = filter_events(_three_events(), time_range)
            assert filter_events(once, time_range) == once


class TestOrder:
    def test_ascending_severity(self) -> None:
        ordered = order_by_severity(_three_events())
        assert [e.severity for e in ordered] == [20, 50, 80]

    def test_ties_keep_input_order(self) -> None:
        events = [_chart_event("x", severity=40), _chart_event("y", severity=40)]
        assert [e.id for e in order_by_severity(events)] == ["x", "y"]


def test_ray_label() -> None:
    ce = _chart_event(hours_ago=10)  # 02:00 UTC
    assert ray_label(ce) == "Pacific Earthquake at 02:00 in Sendai, JP"


# ── Render ───────────────────────────────────────────────────────────────────


class TestRender:
    def test_foreground_order_matches_severity(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.MONTH)
        plan = pipeline.render(_three_events(), view)
        assert [w.event_id for w in plan.foreground] == ["b", "c", "a"]
        assert [h.event_id for h in plan.handles] == ["b", "c", "a"]

    def test_visible_ids_follow_filter(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render(_three_events(), ViewState(TimeRange.FOUR_DAYS))
        assert sorted(plan.visible_ids) == ["a", "b"]

    def test_haze_counts_per_event(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render(_three_events(), ViewState(TimeRange.MONTH))
        counts = {eid: 0 for eid in "abc"}
        for wedge in plan.background:
            counts[wedge.event_id] += 1
        expected = {
            eid: pipeline.projector.haze_count(sev)
            for eid, sev in (("a", 80), ("b", 20), ("c", 50))
        }
        assert counts == expected

    def test_haze_layer_ordered_like_foreground(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render(_three_events(), ViewState(TimeRange.MONTH))
        seen: list[str] = []
        for wedge in plan.background:
            if not seen or seen[-1] != wedge.event_id:
                seen.append(wedge.event_id)
        assert seen == ["b", "c", "a"]

    def test_haze_perturbation_within_bounds(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render(_three_events(), ViewState(TimeRange.MONTH))
        assert plan.background
        for wedge in plan.background:
            assert -0.9 <= wedge.rotation_deg <= 0.9
            assert 0.9 <= wedge.scale <= 1.22

    def test_fixed_random_gives_unrotated_haze(self) -> None:
        pipeline = RenderPipeline(rng=FixedRandom(0.5))
        plan = pipeline.render([_chart_event("a")], ViewState())
        front = plan.foreground[0]
        center = pipeline.projector.config.center
        for wedge in plan.background:
            assert wedge.rotation_deg == 0.0
            assert wedge.scale == pytest.approx(1.06)
            apex, crisp_apex = wedge.points[1], front.points[1]
            r_haze = math.hypot(apex.x - center.x, apex.y - center.y)
            r_crisp = math.hypot(crisp_apex.x - center.x, crisp_apex.y - center.y)
            assert r_haze == pytest.approx(r_crisp * 1.06)

    def test_foreground_geometry_is_exact(self, pipeline: RenderPipeline) -> None:
        ce = _chart_event("a")
        plan = pipeline.render([ce], ViewState())
        assert plan.foreground[0].points == pipeline.projector.project(ce).points

    def test_seeded_sources_are_reproducible(self) -> None:
        events = _three_events()
        p1 = RenderPipeline(rng=random.Random(3)).render(events, ViewState(TimeRange.MONTH))
        p2 = RenderPipeline(rng=random.Random(3)).render(events, ViewState(TimeRange.MONTH))
        assert p1 == p2

    def test_foreground_wedges_are_interactive_and_labelled(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render(_three_events(), ViewState(TimeRange.MONTH))
        for wedge in plan.foreground:
            assert wedge.interactive is True
            assert " at " in wedge.label and " in " in wedge.label

    def test_selected_flag(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.MONTH)
        view.selected_id = "c"
        plan = pipeline.render(_three_events(), view)
        assert [w.event_id for w in plan.foreground if w.selected] == ["c"]

    def test_selected_flag_on_haze_copies(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.MONTH)
        view.selected_id = "c"
        plan = pipeline.render(_three_events(), view)
        selected = [w for w in plan.background if w.selected]
        assert selected
        assert {w.event_id for w in selected} == {"c"}
        assert len(selected) == pipeline.projector.haze_count(50)

    def test_empty_event_set(self, pipeline: RenderPipeline) -> None:
        plan = pipeline.render([], ViewState())
        assert plan.background == [] and plan.foreground == [] and plan.handles == []


class TestSelectionReconciliation:
    def test_stale_selection_flagged(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.DAY)
        view.selected_id = "c"
        plan = pipeline.render(_three_events(), view)
        assert plan.selection_stale is True

    def test_visible_selection_not_flagged(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.DAY)
        view.selected_id = "a"
        assert pipeline.render(_three_events(), view).selection_stale is False

    def test_pipeline_never_mutates_view(self, pipeline: RenderPipeline) -> None:
        view = ViewState(TimeRange.DAY)
        view.selected_id = "c"
        pipeline.render(_three_events(), view)
        assert view.selected_id == "c"


class TestHazeConfig:
    def test_inverted_scale_bounds_rejected(self) -> None:
        with pytest.raises(ValueError):
            HazeConfig(scale_min=1.3, scale_max=1.0)

    def test_negative_jitter_rejected(self) -> None:
        with pytest.raises(ValueError):
            HazeConfig(jitter_deg=-1.0)
