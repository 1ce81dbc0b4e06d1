# whirligig/physics/solver.py
"""
Flat-plate mass properties of one blade by midpoint-rule integration of the
planform width. The hub tab is a rectangle centred at x = -tab_length/2.
Inertia is taken about the rotor axis, i.e. every station sits at
r = hub_radius + x.

Degenerate geometry (no exposed length or no area) does not raise: the
divisions are floored at EPS and the result is flagged 'is_degenerate'.
"""
from __future__ import annotations
import logging

import numpy as np

from whirligig.config import EPS, HUB_RADIUS, N_SLICES
from whirligig.containers.metrics import MassProperties
from whirligig.containers.parameters import BladeParameters
from whirligig.geom.profile import half_widths

logger = logging.getLogger(__name__)


def slice_midpoints(exposed_length: float, n_slices: int = N_SLICES) -> np.ndarray:
    dx = exposed_length / n_slices
    return (np.arange(n_slices) + 0.5) * dx


def solve(
    params: BladeParameters,
    *,
    n_slices: int = N_SLICES,
    hub_radius: float = HUB_RADIUS,
) -> MassProperties:
    if n_slices < 1:
        raise ValueError("n_slices must be >= 1")

    tab_area = params.tab_length * params.tab_width
    total_area = tab_area
    weighted_x = (-params.tab_length / 2) * tab_area

    dx = params.exposed_length / n_slices
    x_mid = slice_midpoints(params.exposed_length, n_slices)
    areas = 2.0 * half_widths(x_mid, params) * dx

    exposed_area = float(areas.sum())
    total_area += exposed_area
    weighted_x += float((x_mid * areas).sum())
    moment_of_inertia = float(((hub_radius + x_mid) ** 2 * areas).sum())

    cg_x = weighted_x / max(EPS, total_area)
    cg_percent = 100.0 * cg_x / max(EPS, params.exposed_length)

    degenerate = params.exposed_length < EPS or exposed_area < EPS
    if degenerate:
        logger.warning(
            "Degenerate blade geometry (L=%.6g, exposed area=%.6g): cg%% %.6g is not meaningful.",
            params.exposed_length, exposed_area, cg_percent,
        )
    logger.debug(
        "Solved %s blade: A=%.6f, cg_x=%.6f (%.3f%%), I=%.6f over %d slices",
        params.tip_style, total_area, cg_x, cg_percent, moment_of_inertia, n_slices,
    )
    return MassProperties(
        total_area=total_area,
        exposed_area=exposed_area,
        weighted_x=weighted_x,
        cg_x=cg_x,
        cg_percent=cg_percent,
        moment_of_inertia=moment_of_inertia,
        n_slices=n_slices,
        is_degenerate=degenerate,
    )
