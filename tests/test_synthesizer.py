import numpy as np
import pytest

from whirligig.config import SCREEN_SCALE
from whirligig.containers.parameters import BladeParameters
from whirligig.outline.synthesizer import build_contour, tip_arc_radius

STYLES = ["leaf", "rounded"]


def _point_set(XY: np.ndarray, dp: int = 9) -> set:
    return {(round(x, dp) + 0.0, round(y, dp) + 0.0) for x, y in XY}


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("kerf", [False, True])
def test_contour_is_closed(style, kerf):
    c = build_contour(BladeParameters.from_preset(style), scale=SCREEN_SCALE, apply_kerf=kerf)
    assert c.start == c.end
    assert c.is_closed
    assert c.d().startswith("M")
    assert c.d().endswith("Z")


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("kerf", [False, True])
def test_contour_is_mirror_symmetric(style, kerf):
    c = build_contour(BladeParameters.from_preset(style), scale=1.0, apply_kerf=kerf)
    pts = _point_set(c.control_points())
    for x, y in pts:
        assert (x, -y + 0.0) in pts
    XY = c.sample(40)
    sampled = _point_set(XY, dp=6)
    mirrored = _point_set(XY * np.array([1.0, -1.0]), dp=6)
    assert sampled == mirrored


def test_leaf_segment_grammar(leaf_params):
    c = build_contour(leaf_params)
    assert c.kind_counts() == {"line": 5, "cubic": 4}
    assert c.tip_style == "leaf"


def test_rounded_segment_grammar(rounded_params):
    c = build_contour(rounded_params)
    assert c.kind_counts() == {"line": 5, "quadratic": 4}


def test_equal_tab_and_root_skips_step_lines():
    p = BladeParameters(tab_width=1.75, root_width=1.75)
    assert build_contour(p).kind_counts() == {"line": 3, "cubic": 4}


@pytest.mark.parametrize("style", STYLES)
def test_kerf_grows_boundary(style):
    p = BladeParameters.from_preset(style, kerf_offset=0.01)
    xmin0, xmax0, ymin0, ymax0 = build_contour(p, scale=1.0).bounds()
    xmin1, xmax1, ymin1, ymax1 = build_contour(p, scale=1.0, apply_kerf=True).bounds()
    assert xmin1 == pytest.approx(xmin0 - 0.01, abs=1e-7)
    assert xmax1 == pytest.approx(xmax0 + 0.01, abs=1e-7)
    assert ymax1 == pytest.approx(ymax0 + 0.01, abs=1e-7)
    assert ymin1 == pytest.approx(ymin0 - 0.01, abs=1e-7)


def test_leaf_bounds_physical(leaf_params):
    xmin, xmax, ymin, ymax = build_contour(leaf_params, scale=1.0).bounds()
    assert xmin == pytest.approx(-leaf_params.tab_length)
    assert xmax == pytest.approx(leaf_params.exposed_length)
    assert ymax == pytest.approx(leaf_params.tip_width / 2, abs=1e-7)
    assert ymin == pytest.approx(-ymax)


@pytest.mark.parametrize("style", STYLES)
def test_scale_is_linear(style):
    p = BladeParameters.from_preset(style)
    one = np.array(build_contour(p, scale=1.0).bounds())
    dpi = np.array(build_contour(p, scale=150.0).bounds())
    assert np.allclose(dpi, 150.0 * one)
    assert np.allclose(build_contour(p, scale=40.0).to_scale(1.0).bounds(), one)


def test_tip_arc_radius_clamps(rounded_params):
    assert tip_arc_radius(rounded_params, 1.0, rounded_params.exposed_length) == pytest.approx(0.5)
    big = BladeParameters.from_preset("rounded", tip_radius=5.0)
    assert tip_arc_radius(big, 1.0, big.exposed_length) == pytest.approx(big.tip_width / 2)
    short = BladeParameters.from_preset("rounded", exposed_length=1.0, tip_radius=0.6)
    assert tip_arc_radius(short, 1.0, 1.0) == pytest.approx(0.3)


@pytest.mark.parametrize("style", STYLES)
def test_outline_is_simple_polygon(style):
    p = BladeParameters.from_preset(style)
    c = build_contour(p, scale=1.0)
    assert c.validity() == "Valid Geometry"
    poly = c.to_polygon()
    assert poly.area == pytest.approx(c.outline_area(50), rel=1e-9)
    assert poly.area > p.tab_length * p.tab_width


def test_unknown_style_raises():
    with pytest.raises(ValueError):
        build_contour(BladeParameters(tip_style="paddle"))  # type: ignore[arg-type]


def test_degenerate_length_still_closed():
    c = build_contour(BladeParameters(exposed_length=0.0), scale=1.0)
    assert c.is_closed
