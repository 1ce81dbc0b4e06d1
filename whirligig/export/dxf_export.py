# whirligig/export/dxf_export.py
"""
DXF for CAM software: the kerf-inflated outline as one closed LWPOLYLINE
(curves flattened) and the pin hole as a CIRCLE. Drawing units are inches,
hub face at x = 0, blade axis on y = 0.
"""
from __future__ import annotations
import logging
from pathlib import Path

import ezdxf

from whirligig.containers.parameters import BladeParameters
from whirligig.outline.synthesizer import build_contour

logger = logging.getLogger(__name__)

OUTLINE_LAYER = "BLADE_OUTLINE"
PIN_LAYER = "PIN_HOLE"


def build_dxf(params: BladeParameters, *, apply_kerf: bool = True, num_points: int = 60):
    contour = build_contour(params, scale=1.0, apply_kerf=apply_kerf)
    XY = contour.sample(num_points)

    doc = ezdxf.new("R2010")
    doc.header["$INSUNITS"] = 1  # inches
    doc.layers.new(OUTLINE_LAYER, dxfattribs={"color": 7})
    doc.layers.new(PIN_LAYER, dxfattribs={"color": 1})
    msp = doc.modelspace()

    # closed flag carries the last edge; drop the repeated first vertex
    pts = [(float(x), float(y)) for x, y in XY[:-1]]
    msp.add_lwpolyline(pts, close=True, dxfattribs={"layer": OUTLINE_LAYER})

    if params.pin_hole.present:
        msp.add_circle(
            (-params.pin_hole.offset_from_hub, 0.0),
            params.pin_hole.radius,
            dxfattribs={"layer": PIN_LAYER},
        )
    logger.debug("DXF outline: %d vertices, pin hole=%s", len(pts), params.pin_hole.present)
    return doc


def write_dxf(params: BladeParameters, filepath: str | Path, *, apply_kerf: bool = True, num_points: int = 60) -> Path:
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    doc = build_dxf(params, apply_kerf=apply_kerf, num_points=num_points)
    try:
        doc.saveas(filepath)
    except OSError as e:
        logger.error("Failed to write DXF %s: %s", filepath, e)
        raise
    logger.info("DXF written: %s", filepath)
    return filepath
