# whirligig/outline/synthesizer.py
"""
Closed outline of the blade for drawing and cutting.

The outline is built from closed-form control points, not from the sampled
width function: the tab rectangle, one side root->tip, the tip closure, the
mirrored side back to the root, and the tab again. Every segment on the
+y side has a twin on the -y side with the secondary coordinate negated.

Coordinates: x along the span (hub face at 0, tab at negative x), y across
the blade; 'scale' path units per inch. With apply_kerf the boundary grows
by kerf_offset*scale on every half-width and on the tab/tip ends.
"""
from __future__ import annotations
import logging
from typing import List

from svgpathtools import Path, Line, CubicBezier, QuadraticBezier

from whirligig.config import (
    EPS, SCREEN_SCALE,
    LEAF_ROOT_CTRL, LEAF_SWELL_CTRL,
    ROUNDED_CURVATURE_GAIN, ROUNDED_ARC_MAX_FRAC,
)
from whirligig.containers.contour import BladeContour
from whirligig.containers.parameters import BladeParameters

logger = logging.getLogger(__name__)


def _pt(x: float, y: float) -> complex:
    return complex(x, y)


def _mirror(z: complex) -> complex:
    return z.conjugate()


def _leaf_side(p: BladeParameters, scale: float, k: float, total_x: float) -> List:
    """Four cubics: swell lobe and tip on +y, then the mirror back on -y."""
    h_root = (p.root_width / 2) * scale + k
    bulge_x = p.exposed_length * p.width_position * scale
    bulge_y = (p.tip_width / 2) * scale + k
    dist_to_tip = total_x - bulge_x

    root = _pt(0.0, h_root)
    swell = _pt(bulge_x, bulge_y)
    tip = _pt(total_x, 0.0)

    # sharpness pulls the shoulder control toward the swell; bluntness flattens the tip tangent
    c1 = CubicBezier(root, _pt(bulge_x * LEAF_ROOT_CTRL, h_root), _pt(bulge_x * LEAF_SWELL_CTRL, bulge_y), swell)
    c2 = CubicBezier(swell,
                     _pt(bulge_x + dist_to_tip * (1 - p.taper_sharpness), bulge_y),
                     _pt(total_x, bulge_y * (1 - p.tip_radius)),
                     tip)
    c3 = CubicBezier(tip, _mirror(c2.control2), _mirror(c2.control1), _mirror(swell))
    c4 = CubicBezier(_mirror(swell), _mirror(c1.control2), _mirror(c1.control1), _mirror(root))
    return [c1, c2, c3, c4]


def tip_arc_radius(p: BladeParameters, scale: float, total_x: float) -> float:
    h_tip = (p.tip_width / 2) * scale
    return max(EPS, min(p.tip_radius * scale, total_x * ROUNDED_ARC_MAX_FRAC, h_tip))


def _rounded_side(p: BladeParameters, scale: float, k: float, total_x: float) -> List:
    """Quadratic taper to the arc start, quadratic tip cap, then the mirror."""
    h_root = (p.root_width / 2) * scale
    h_tip = (p.tip_width / 2) * scale
    r = tip_arc_radius(p, scale, total_x)

    cp = _pt(total_x * 0.5,
             h_root + (h_tip - h_root) * 0.5 + k
             + (p.edge_curvature - 0.5) * ROUNDED_CURVATURE_GAIN * scale)
    root = _pt(0.0, h_root + k)
    arc_start = _pt(total_x - r, h_tip + k)
    corner = _pt(total_x, h_tip + k)
    tip = _pt(total_x, 0.0)

    return [
        QuadraticBezier(root, cp, arc_start),
        QuadraticBezier(arc_start, corner, tip),
        QuadraticBezier(tip, _mirror(corner), _mirror(arc_start)),
        QuadraticBezier(_mirror(arc_start), _mirror(cp), _mirror(root)),
    ]


_FAMILIES = {
    "leaf": _leaf_side,
    "rounded": _rounded_side,
}


def _line(a: complex, b: complex, out: List) -> None:
    if a != b:
        out.append(Line(a, b))


def build_contour(
    params: BladeParameters,
    scale: float = SCREEN_SCALE,
    apply_kerf: bool = False,
) -> BladeContour:
    try:
        family = _FAMILIES[params.tip_style]
    except KeyError:
        raise ValueError(f"Unknown tip style: {params.tip_style}")

    k = params.kerf_offset * scale if apply_kerf else 0.0
    total_x = params.exposed_length * scale + k
    tab_start_x = -params.tab_length * scale - k
    h_tab = (params.tab_width / 2) * scale + k
    h_root = (params.root_width / 2) * scale + k

    start = _pt(tab_start_x, -h_tab)
    segs: List = []
    _line(start, _pt(tab_start_x, h_tab), segs)
    _line(_pt(tab_start_x, h_tab), _pt(0.0, h_tab), segs)
    _line(_pt(0.0, h_tab), _pt(0.0, h_root), segs)
    segs.extend(family(params, scale, k, total_x))
    _line(_pt(0.0, -h_root), _pt(0.0, -h_tab), segs)
    _line(_pt(0.0, -h_tab), start, segs)

    logger.debug("Built %s contour: %d segments, scale=%g, kerf=%g",
                 params.tip_style, len(segs), scale, k)
    return BladeContour(path=Path(*segs), scale=float(scale), kerf=k, tip_style=params.tip_style)
