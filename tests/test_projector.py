"""Tests for the Event Projector."""

import pytest

from clockface.core.geometry import angle_from_minutes
from clockface.core.projector import EventProjector, ProjectionConfig
from clockface.domain.view_state import ViewState

from tests.test_event import _chart_event


@pytest.fixture
def projector() -> EventProjector:
    return EventProjector()


class TestScalarProjections:
    def test_length_bounds(self, projector: EventProjector) -> None:
        assert projector.length(0) == pytest.approx(28.0)
        assert projector.length(100) == pytest.approx(248.0)

    def test_spread_bounds(self, projector: EventProjector) -> None:
        assert projector.spread(0) == pytest.approx(1.2)
        assert projector.spread(100) == pytest.approx(7.2)

    def test_length_and_spread_monotonic(self, projector: EventProjector) -> None:
        lengths = [projector.length(s) for s in range(101)]
        spreads = [projector.spread(s) for s in range(101)]
        assert lengths == sorted(lengths)
        assert spreads == sorted(spreads)

    def test_haze_count_steps(self, projector: EventProjector) -> None:
        assert projector.haze_count(0) == 2
        assert projector.haze_count(34) == 2
        assert projector.haze_count(35) == 3
        assert projector.haze_count(70) == 4
        assert projector.haze_count(100) == 4

    def test_haze_count_never_below_two(self, projector: EventProjector) -> None:
        assert min(projector.haze_count(s) for s in range(101)) >= 2


class TestProject:
    def test_geometry_fields(self, projector: EventProjector) -> None:
        ce = _chart_event(severity=50)
        geo = projector.project(ce)
        assert geo.event_id == ce.id
        assert geo.angle_deg == pytest.approx(angle_from_minutes(ce.minutes_of_day))
        assert geo.length == pytest.approx(28.0 + 110.0)
        assert geo.spread_deg == pytest.approx(4.2)
        assert len(geo.points) == 3
        assert geo.is_selected is False

    def test_selected_flag_follows_view(self, projector: EventProjector) -> None:
        ce = _chart_event(event_id="x")
        view = ViewState()
        view.selected_id = "x"
        assert projector.project(ce, view).is_selected is True
        view.selected_id = "y"
        assert projector.project(ce, view).is_selected is False

    def test_projection_is_pure(self, projector: EventProjector) -> None:
        ce = _chart_event(severity=77)
        assert projector.project(ce) == projector.project(ce)

    def test_projection_does_not_touch_view(self, projector: EventProjector) -> None:
        view = ViewState()
        before = view.to_dict()
        projector.project(_chart_event(), view)
        assert view.to_dict() == before


class TestProjectionConfig:
    def test_haze_base_below_two_rejected(self) -> None:
        with pytest.raises(ValueError):
            ProjectionConfig(haze_base=1)

    def test_zero_divisor_rejected(self) -> None:
        with pytest.raises(ValueError):
            ProjectionConfig(haze_divisor=0)
