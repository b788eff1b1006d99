"""Tests for the SVG rendering surface."""

import random

from clockface.core.pipeline import RenderPipeline
from clockface.domain.enums import TimeRange
from clockface.domain.render import ChartTransform
from clockface.domain.view_state import ViewState
from clockface.render.svg import render_svg

from tests.test_event import _chart_event


def _plan(selected: str | None = None):
    view = ViewState(TimeRange.MONTH)
    view.selected_id = selected
    events = [
        _chart_event("a", severity=10),
        _chart_event("b", severity=90, name='Fire & "Smoke" <Alert>'),
    ]
    return RenderPipeline(rng=random.Random(0)).render(events, view)


class TestRenderSvg:
    def test_layers_and_counts(self) -> None:
        plan = _plan()
        svg = render_svg(plan)
        assert svg.startswith("<svg")
        assert svg.count('class="ray fuzzy"') == len(plan.background)
        assert svg.count('role="button"') == len(plan.foreground)
        assert svg.index('id="raysBack"') < svg.index('id="raysFront"')

    def test_transform_applied_to_zoom_layer(self) -> None:
        svg = render_svg(_plan(), ChartTransform(translate_x=10, translate_y=-5, scale=2))
        assert 'transform="translate(10 -5) scale(2)"' in svg

    def test_selected_class(self) -> None:
        svg = render_svg(_plan(selected="a"))
        assert svg.count('class="ray selected"') == 1
        assert "data-event-id=\"a\"" in svg

    def test_selected_haze_class(self) -> None:
        plan = _plan(selected="a")
        svg = render_svg(plan)
        expected = sum(1 for w in plan.background if w.event_id == "a")
        assert svg.count('class="ray fuzzy selected"') == expected
        assert svg.count('class="ray fuzzy"') == len(plan.background) - expected

    def test_labels_are_escaped(self) -> None:
        svg = render_svg(_plan())
        assert "<Alert>" not in svg
        assert "&lt;Alert&gt;" in svg
        assert "&amp;" in svg

    def test_title(self) -> None:
        assert "<title>clockface &amp; co</title>" in render_svg(_plan(), title="clockface & co")
