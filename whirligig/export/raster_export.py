# whirligig/export/raster_export.py
"""
Printable raster template at a fixed DPI.

The outline (no kerf) and pin hole are drawn 1:1 in inches, with a
calibration bar (1 in, or 50 mm when the display unit is mm) so a printed
page can be checked for printer / page-scaling drift.
"""
from __future__ import annotations
import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless-safe
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, PathPatch
from matplotlib.path import Path as MplPath
from svgpathtools import Line, CubicBezier, QuadraticBezier

from whirligig.config import EXPORT_DPI, RASTER_MARGIN, RASTER_LINE_PX, JPEG_QUALITY, SCALE_BAR_COLOR
from whirligig.containers.contour import BladeContour
from whirligig.containers.parameters import BladeParameters
from whirligig.containers.units import length_scale
from whirligig.outline.synthesizer import build_contour

logger = logging.getLogger(__name__)


def contour_to_mpl_path(contour: BladeContour, x_off: float = 0.0, y_off: float = 0.0) -> MplPath:
    """Segments -> matplotlib MOVETO/LINETO/CURVE3/CURVE4 codes (no flattening)."""
    shift = complex(x_off, y_off)
    verts, codes = [], []
    prev_end = None
    for seg in contour.path:
        if prev_end is None or seg.start != prev_end:
            verts.append(seg.start + shift); codes.append(MplPath.MOVETO)
        if isinstance(seg, Line):
            pts, code = [seg.end], MplPath.LINETO
        elif isinstance(seg, QuadraticBezier):
            pts, code = [seg.control, seg.end], MplPath.CURVE3
        elif isinstance(seg, CubicBezier):
            pts, code = [seg.control1, seg.control2, seg.end], MplPath.CURVE4
        else:
            raise TypeError(f"Unsupported segment type: {type(seg).__name__}")
        verts.extend(p + shift for p in pts)
        codes.extend([code] * len(pts))
        prev_end = seg.end
    verts.append(contour.start + shift); codes.append(MplPath.CLOSEPOLY)
    return MplPath([(z.real, z.imag) for z in verts], codes)


def raster_canvas(params: BladeParameters) -> tuple[float, float]:
    return params.overall_length + 2 * RASTER_MARGIN, params.max_width + 2 * RASTER_MARGIN


def scale_bar(unit: str) -> tuple[float, str]:
    """(length in inches, label) of the calibration bar."""
    if unit == "mm":
        return 50.0 * length_scale("mm", "in"), "50MM SCALE BAR"
    return 1.0, "1 INCH SCALE BAR"


def render_template(params: BladeParameters, *, unit: str = "in", dpi: int = EXPORT_DPI):
    """Return the matplotlib Figure; 1 data unit = 1 inch = dpi pixels, y down."""
    width, height = raster_canvas(params)
    px_to_pt = 72.0 / dpi

    fig = plt.figure(figsize=(width, height), dpi=dpi, facecolor="white")
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)
    ax.axis("off")

    x_off = params.tab_length + RASTER_MARGIN
    y_off = params.max_width / 2 + RASTER_MARGIN
    contour = build_contour(params, scale=1.0, apply_kerf=False)
    ax.add_patch(PathPatch(contour_to_mpl_path(contour, x_off, y_off),
                           fill=False, edgecolor="black", linewidth=RASTER_LINE_PX * px_to_pt))
    if params.pin_hole.present:
        ax.add_patch(Circle((x_off - params.pin_hole.offset_from_hub, y_off), params.pin_hole.radius,
                            fill=False, edgecolor="red", linewidth=RASTER_LINE_PX * px_to_pt))

    bar_len, label = scale_bar(unit)
    bar_x, bar_y = 1.0, height - 0.5
    ax.plot([bar_x, bar_x + bar_len], [bar_y, bar_y], color=SCALE_BAR_COLOR,
            linewidth=RASTER_LINE_PX * px_to_pt, solid_capstyle="butt")
    ax.text(bar_x, bar_y - 10.0 / dpi, label, color=SCALE_BAR_COLOR, fontweight="bold",
            fontsize=round(0.12 * dpi) * px_to_pt, family="sans-serif", va="bottom", ha="left")
    return fig


def write_template(
    params: BladeParameters,
    filepath: str | Path,
    *,
    unit: str = "in",
    dpi: int = EXPORT_DPI,
) -> Path:
    """Save as JPEG (by extension) or any other format matplotlib knows."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    fig = render_template(params, unit=unit, dpi=dpi)
    kwargs = {}
    if filepath.suffix.lower() in (".jpg", ".jpeg"):
        kwargs["pil_kwargs"] = {"quality": JPEG_QUALITY}
    try:
        fig.savefig(filepath, dpi=dpi, facecolor="white", **kwargs)
    except OSError as e:
        logger.error("Failed to write raster template %s: %s", filepath, e)
        raise
    finally:
        plt.close(fig)
    logger.info("Raster template written: %s (%d dpi, %s scale bar)", filepath, dpi, unit)
    return filepath
