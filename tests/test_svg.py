"""Tests for heart image rendering."""

import re

from osculate.svg import HeartbeatStyle, format_svg, heartbeat_style, render_svg


def _duration(svg: str) -> str:
    return re.search(r"dur='([^']*)'", svg).group(1)


def _saturation(svg: str) -> str:
    return re.search(r"stroke='hsl\(\d+,(\d+%),\d+%,\d\)'", svg).group(1)


class TestHeartbeatStyle:
    def test_unkissed(self):
        style = heartbeat_style(False)
        assert style.duration == "1.5"
        assert style.saturation == 0

    def test_kissed(self):
        style = heartbeat_style(True)
        assert style.duration == "0.7"
        assert style.saturation == 30

    def test_stroke_colour(self):
        assert heartbeat_style(True).stroke.startswith("hsl(")
        assert ",30%," in heartbeat_style(True).stroke


class TestRenderSvg:
    def test_starts_with_svg_root(self):
        svg = render_svg(False)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")

    def test_unkissed_parameters(self):
        svg = render_svg(False)
        assert _duration(svg) == "1.5"
        assert _saturation(svg) == "0%"

    def test_kissed_parameters(self):
        svg = render_svg(True)
        assert _duration(svg) == "0.7"
        assert _saturation(svg) == "30%"

    def test_only_state_parameters_differ(self):
        unkissed = render_svg(False)
        kissed = render_svg(True)
        normalise = lambda s: s.replace("dur='0.7'", "dur='1.5'").replace(",30%,", ",0%,")
        assert normalise(kissed) == unkissed

    def test_deterministic(self):
        assert render_svg(True) == render_svg(True)

    def test_no_double_quotes(self):
        # Embedded inside a JSON string
        assert '"' not in render_svg(False)

    def test_custom_style(self):
        svg = format_svg(HeartbeatStyle(duration="2", saturation=75))
        assert _duration(svg) == "2"
        assert _saturation(svg) == "75%"
