# whirligig/containers/contour.py
"""
contour.py
----------
'BladeContour' is the closed outline produced by the path synthesizer.

The segments live in an svgpathtools.Path (points are complex numbers,
x = real, y = imag) expressed in whatever scale the caller asked for:
px for the preview, inches for the laser file, dots for the raster template.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
from shapely.geometry import Polygon
from shapely.validation import explain_validity
from svgpathtools import Path, Line, CubicBezier, QuadraticBezier

# --- small helpers ---
def _ensure_closed(XY: np.ndarray, atol: float = 1e-12) -> np.ndarray:
    if XY.shape[0] < 2: return XY
    return XY if np.allclose(XY[0], XY[-1], atol=atol) else np.vstack([XY, XY[0]])

def _dedupe(XY: np.ndarray, tol: float = 1e-9) -> np.ndarray:
    """Drop consecutive duplicates left where one segment ends and the next starts."""
    if XY.shape[0] < 2: return XY
    keep = np.ones(XY.shape[0], dtype=bool)
    keep[1:] = np.linalg.norm(np.diff(XY, axis=0), axis=1) > tol
    return XY[keep]

def _poly_area_centroid(XY: np.ndarray) -> Tuple[float, float, float]:
    P = _ensure_closed(XY)
    x, y = P[:,0], P[:,1]
    cross = x[:-1]*y[1:] - y[:-1]*x[1:]
    A2 = float(cross.sum())
    A = 0.5 * A2
    if abs(A2) < 1e-16:
        return A, float(np.mean(x)), float(np.mean(y))
    cx = float(((x[:-1] + x[1:]) * cross).sum() / (3.0 * A2))
    cy = float(((y[:-1] + y[1:]) * cross).sum() / (3.0 * A2))
    return A, cx, cy

def _kind(seg) -> str:
    if isinstance(seg, Line): return "line"
    if isinstance(seg, CubicBezier): return "cubic"
    if isinstance(seg, QuadraticBezier): return "quadratic"
    return type(seg).__name__.lower()

# --- model ---
@dataclass(frozen=True)
class BladeContour:
    path: Path = field(repr=False)
    scale: float = 1.0          # path units per inch
    kerf: float = 0.0           # applied boundary growth, path units
    tip_style: str = "leaf"

    # ---- path access -----------------------------------------------------------

    def d(self) -> str:
        """SVG path data; always closed with a trailing 'Z'."""
        return self.path.d() + " Z"

    @property
    def start(self) -> complex:
        return self.path.start

    @property
    def end(self) -> complex:
        return self.path.end

    @property
    def is_closed(self) -> bool:
        return bool(self.path.isclosed())

    @property
    def segments(self) -> List:
        return list(self.path)

    def segment_kinds(self) -> List[str]:
        return [_kind(s) for s in self.path]

    def kind_counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for k in self.segment_kinds():
            out[k] = out.get(k, 0) + 1
        return out

    def control_points(self) -> np.ndarray:
        """Every segment's Bezier points (ends and controls) as an (N,2) array."""
        pts = [p for seg in self.path for p in seg.bpoints()]
        return np.array([(p.real, p.imag) for p in pts], float)

    # ---- sampling --------------------------------------------------------------

    def sample(self, num_points: int = 50) -> np.ndarray:
        """
        Flatten to an (N,2) polyline, 'num_points' per curved segment
        (lines only need their ends). Closed: first row == last row.
        """
        pts: List[complex] = []
        for seg in self.path:
            ts = np.linspace(0.0, 1.0, 2 if isinstance(seg, Line) else max(num_points, 2))
            pts.extend(seg.point(t) for t in ts)
        XY = np.array([(p.real, p.imag) for p in pts], float)
        return _ensure_closed(_dedupe(XY))

    def bounds(self) -> Tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax), svgpathtools order."""
        return tuple(float(v) for v in self.path.bbox())  # type: ignore[return-value]

    def outline_area(self, num_points: int = 200) -> float:
        A, _, _ = _poly_area_centroid(self.sample(num_points))
        return abs(A)

    def to_polygon(self, num_points: int = 50) -> Polygon:
        return Polygon(self.sample(num_points))

    def validity(self, num_points: int = 50) -> str:
        """shapely's verdict on the flattened outline ('Valid Geometry' when fine)."""
        return explain_validity(self.to_polygon(num_points))

    def to_scale(self, scale: float) -> "BladeContour":
        """Same outline re-expressed at another path-units-per-inch scale."""
        f = float(scale) / self.scale
        return BladeContour(path=self.path.scaled(f), scale=float(scale),
                            kerf=self.kerf * f, tip_style=self.tip_style)
