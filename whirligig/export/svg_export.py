# whirligig/export/svg_export.py
"""
Laser-cut SVG: physical-unit canvas (inches), kerf-inflated outline and the
optional pin hole. One viewBox unit == one inch.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import svgwrite

from whirligig.config import SVG_MARGIN, SVG_STROKE
from whirligig.containers.parameters import BladeParameters
from whirligig.outline.synthesizer import build_contour

logger = logging.getLogger(__name__)


def _fmt(v: float, dp: int = 4) -> str:
    txt = f"{v:.{dp}f}".rstrip("0").rstrip(".")
    return "0" if txt in ("", "-0") else txt


def svg_canvas(params: BladeParameters) -> tuple[float, float]:
    """(width, height) in inches: blade + tab and widest section, plus margins."""
    return params.overall_length + 2 * SVG_MARGIN, params.max_width + 2 * SVG_MARGIN


def build_svg(params: BladeParameters, *, apply_kerf: bool = True) -> svgwrite.Drawing:
    width, height = svg_canvas(params)
    x_off = params.tab_length + SVG_MARGIN
    y_off = params.max_width / 2 + SVG_MARGIN

    contour = build_contour(params, scale=1.0, apply_kerf=apply_kerf)
    dwg = svgwrite.Drawing(
        size=(f"{_fmt(width)}in", f"{_fmt(height)}in"),
        viewBox=f"0 0 {_fmt(width)} {_fmt(height)}",
    )
    dwg.add(dwg.path(
        d=contour.d(),
        id="blade-outline",
        transform=f"translate({_fmt(x_off, 6)}, {_fmt(y_off, 6)})",
        fill="none", stroke="black", stroke_width=SVG_STROKE,
    ))
    if params.pin_hole.present:
        dwg.add(dwg.circle(
            center=(x_off - params.pin_hole.offset_from_hub, y_off),
            r=params.pin_hole.radius,
            id="pin-hole",
            fill="none", stroke="red", stroke_width=SVG_STROKE,
        ))
    return dwg


def write_svg(params: BladeParameters, filepath: Optional[str | Path] = None, *, apply_kerf: bool = True) -> str:
    """Return the SVG text; also write it when a path is given."""
    dwg = build_svg(params, apply_kerf=apply_kerf)
    text = dwg.tostring()
    if filepath is not None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        try:
            filepath.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write SVG %s: %s", filepath, e)
            raise
        logger.info("SVG written: %s (kerf=%s)", filepath, params.kerf_offset if apply_kerf else 0.0)
    return text
