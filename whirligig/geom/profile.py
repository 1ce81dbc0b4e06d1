# whirligig/geom/profile.py
"""
Half-width of the blade planform as a function of the span position x.

x is measured from the hub face (x = 0) toward the tip (x = exposed_length);
negative x is inside the hub tab. Two sibling width laws are selected by the
'tip_style' tag:

- leaf    : sine ease-in from the root to a swell at width_position*L, then a
            blend of a power-law taper and a quarter circle to a point at L.
- rounded : power-law root->tip transition (edge_curvature sets the exponent),
            clipped near the tip by an arc of radius tip_radius.

Every base/radicand is clamped to >= 0 so round-off never produces NaN.
"""
from __future__ import annotations
import math
from typing import Callable, Dict

import numpy as np
import pandas as pd

from whirligig.config import MIN_PROFILE_LENGTH, MIN_SWELL_SPAN, MIN_TIP_ARC
from whirligig.containers.parameters import BladeParameters


def _leaf_half_width(x: float, p: BladeParameters, L: float) -> float:
    h_root = p.root_width / 2
    h_max = p.tip_width / 2
    b_x = L * p.width_position
    if x <= b_x:
        t = x / max(MIN_SWELL_SPAN, b_x)
        return h_root + (h_max - h_root) * math.sin(t * math.pi / 2)

    t = (x - b_x) / max(MIN_SWELL_SPAN, L - b_x)
    bluntness = p.tip_radius
    sharpness = 1 + 3 * p.taper_sharpness
    power_term = max(0.0, 1 - t) ** sharpness
    circle_term = math.sqrt(max(0.0, 1 - t * t))
    return h_max * (power_term * (1 - bluntness) + circle_term * bluntness)


def edge_exponent(edge_curvature: float) -> float:
    """<0.5 convex (front-loaded), >0.5 concave, 0.5 linear."""
    if edge_curvature < 0.5:
        return 1 + (0.5 - edge_curvature) * 4
    return 1 / (1 + (edge_curvature - 0.5) * 4)


def _rounded_half_width(x: float, p: BladeParameters, L: float) -> float:
    h_root = p.root_width / 2
    h_max = p.tip_width / 2
    t = x / L
    w = h_root + (h_max - h_root) * max(0.0, t) ** edge_exponent(p.edge_curvature)
    if x > L - p.tip_radius:
        tr = max(MIN_TIP_ARC, p.tip_radius)
        ratio = (x - (L - tr)) / tr
        w = min(w, h_max * math.sqrt(max(0.0, 1 - ratio * ratio)))
    return w


_FAMILIES: Dict[str, Callable[[float, BladeParameters, float], float]] = {
    "leaf": _leaf_half_width,
    "rounded": _rounded_half_width,
}


def half_width_at(x: float, params: BladeParameters) -> float:
    if x < 0:
        return params.tab_width / 2
    L = max(MIN_PROFILE_LENGTH, params.exposed_length)
    try:
        family = _FAMILIES[params.tip_style]
    except KeyError:
        raise ValueError(f"Unknown tip style: {params.tip_style}")
    return family(float(x), params, L)


def half_widths(xs: np.ndarray, params: BladeParameters) -> np.ndarray:
    """half_width_at over an array of stations."""
    xs = np.asarray(xs, float)
    return np.fromiter((half_width_at(x, params) for x in xs.ravel()), float, xs.size).reshape(xs.shape)


def profile_table(params: BladeParameters, n: int = 200, *, include_tab: bool = True) -> pd.DataFrame:
    """
    Sample the planform: columns x, half_width, width (inches).
    The tab is represented by its two ends when include_tab is set.
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    x = np.linspace(0.0, params.exposed_length, n)
    if include_tab and params.tab_length > 0:
        x = np.concatenate([[-params.tab_length, -1e-9], x])
    h = half_widths(x, params)
    return pd.DataFrame({"x": x, "half_width": h, "width": 2 * h})
