# whirligig/viz/blade_viz.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import matplotlib
matplotlib.use("Agg")  # headless-safe
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, PathPatch, Rectangle

from whirligig.containers.units import to_display
from whirligig.evaluate import BladeEvaluation
from whirligig.export.raster_export import contour_to_mpl_path
from whirligig.geom.profile import half_widths, profile_table
from whirligig.physics.solver import slice_midpoints


# --- Local Style Definitions ---
@dataclass
class PreviewStyle:
    blade_face: str = "#fde68a"
    blade_edge: str = "#92400e"
    sweet_color: str = "#22c55e"
    sweet_alpha: float = 0.1
    cg_color: str = "#ef4444"
    dim_color: str = "#3b82f6"
    axis_color: str = "#cbd5e1"
    grid: Dict[str, Any] = field(default_factory=lambda: {"enabled": True, "alpha": 0.25})


# --- Plotter ---
@dataclass
class BladeVisualizer:
    evaluation: BladeEvaluation
    outdir: str
    unit: str = "in"
    style: PreviewStyle = field(default_factory=PreviewStyle)

    def _save(self, fig, filename: str) -> str:
        Path(self.outdir).mkdir(parents=True, exist_ok=True)
        out_path = str(Path(self.outdir) / filename)
        fig.tight_layout()
        fig.savefig(out_path, bbox_inches="tight")
        plt.close(fig)
        return out_path

    def plot_preview(self, filename: str = "blade_preview.png") -> str:
        """Outline with sweet-spot band, CG cross and exposed-length dimension (inches)."""
        p, m, s = self.evaluation.params, self.evaluation.metrics, self.style
        contour = self.evaluation.contour.to_scale(1.0)
        half = p.max_width / 2

        fig, ax = plt.subplots(figsize=(8.0, 4.0), dpi=150)
        ax.axhline(0.0, color=s.axis_color, lw=0.8, ls="--")
        ax.add_patch(Rectangle((m.sweet_start, -1.2 * half), m.sweet_end - m.sweet_start, 2.4 * half,
                               facecolor=s.sweet_color, alpha=s.sweet_alpha, edgecolor="none"))
        ax.text((m.sweet_start + m.sweet_end) / 2, 1.25 * half, "SWEET SPOT",
                ha="center", va="bottom", fontsize=7, color=s.sweet_color, fontweight="bold")

        ax.add_patch(PathPatch(contour_to_mpl_path(contour), facecolor=s.blade_face, edgecolor=s.blade_edge, lw=1.2))
        if p.pin_hole.present:
            ax.add_patch(Circle((-p.pin_hole.offset_from_hub, 0.0), p.pin_hole.radius,
                                facecolor="white", edgecolor=s.cg_color, lw=1.0))

        ax.plot([m.cg_x], [0.0], marker="+", ms=14, mew=1.5, color=s.cg_color, zorder=5)
        ax.annotate(f"{m.cg_percent:.1f}%", (m.cg_x, 0.0), xytext=(0, -18), textcoords="offset points",
                    ha="center", fontsize=8, color=s.cg_color, family="monospace")

        dp = 1 if self.unit == "mm" else 2
        ax.annotate("", xy=(p.exposed_length, 1.1 * half), xytext=(0.0, 1.1 * half),
                    arrowprops={"arrowstyle": "<->", "color": s.dim_color, "lw": 0.8})
        ax.text(p.exposed_length / 2, 1.12 * half, f"{to_display(p.exposed_length, self.unit):.{dp}f}{self.unit}",
                ha="center", va="bottom", fontsize=8, color=s.dim_color, family="monospace")

        ax.set_xlim(-p.tab_length - 0.5, p.exposed_length + 0.5)
        ax.set_ylim(-1.5 * half, 1.5 * half)
        ax.set_aspect("equal")
        ax.set_xlabel("x from hub face [in]")
        ax.set_title(f"{p.tip_style} blade: balance {m.cg_percent:.1f}% ({m.balance_status}), "
                     f"sensitivity {m.sensitivity}, flywheel {m.flywheel_rating}", fontsize=8)
        return self._save(fig, filename)

    def plot_profile(self, filename: str = "half_width_vs_x.png", n: int = 200) -> str:
        """Sampled width law next to the slices the physics uses."""
        p, s = self.evaluation.params, self.style
        df = profile_table(p, n=n)

        fig, ax = plt.subplots(figsize=(6.8, 3.8), dpi=150)
        ax.plot(df["x"], df["half_width"], lw=1.5, color="C0", label="half width")
        ax.plot(df["x"], -df["half_width"], lw=1.5, color="C0")
        x_mid = slice_midpoints(p.exposed_length)
        ax.plot(x_mid, half_widths(x_mid, p), linestyle="none", marker="o", ms=2.5,
                mfc="white", mec="C1", label="integration midpoints")
        ax.axvline(0.0, color=s.axis_color, lw=0.8)
        ax.set_xlabel("x [in]")
        ax.set_ylabel("y [in]")
        if s.grid.get("enabled", True):
            ax.grid(True, alpha=s.grid.get("alpha", 0.25))
        ax.set_title("Planform half-width")
        ax.legend(fontsize=8)
        return self._save(fig, filename)
