# main.py
from __future__ import annotations
import json
import logging
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from whirligig.containers.parameters import BladeParameters, PinHole, validate_parameters
from whirligig.containers.units import format_length
from whirligig.evaluate import evaluate
from whirligig.export.dxf_export import write_dxf
from whirligig.export.raster_export import write_template
from whirligig.export.svg_export import write_svg
from whirligig.geom.profile import profile_table
from whirligig.logs import setup_logging
from whirligig.viz.blade_viz import BladeVisualizer


# =============================================================================
# User inputs / configuration
# =============================================================================
BASE_OUTDIR   = Path("blade_output")   # timestamped run folders will be created here
BLADE_NAME    = "Whirligig"
LABEL         = ""                     # optional free-form tag
DISPLAY_UNIT  = "in"                   # 'in' | 'mm' (scale bar + report only)
TIP_STYLE     = "leaf"                 # 'leaf' | 'rounded'

# shared geometry [in]; family fields come from the preset unless overridden
EXPOSED_LENGTH = 10.5
TAB_LENGTH     = 1.0
TAB_WIDTH      = 2.25
KERF_OFFSET    = 0.005
PRESET_OVERRIDES: dict = {}            # e.g. {"taper_sharpness": 0.6}

PIN_HOLE = PinHole(present=True, diameter=0.125, offset_from_hub=0.5)

# ---- output controls ---------------------------------------------------------
WRITE_SVG    = True
WRITE_DXF    = True
WRITE_RASTER = True
RASTER_EXT   = ".jpg"
MAKE_PLOTS   = True
PROFILE_POINTS = 200


# =============================================================================
# Helpers
# =============================================================================
def _slug(s: str) -> str:
    return (
        s.strip()
         .replace(" ", "")
         .replace("/", "-")
         .replace("\\", "-")
         .replace("(", "")
         .replace(")", "")
         .replace(",", "")
         .replace("__", "_")
    )

def _fmt_num(v: float, dp: int = 2) -> str:
    txt = f"{v:.{dp}f}".rstrip("0").rstrip(".")
    return txt.replace(".", "p")

def build_run_name(*, blade_name: str, label: str | None, params: BladeParameters,
                   tz: str = "GMT") -> tuple[str, Path, str]:
    """
    Returns (run_name, RUN_ROOT, timestamp):
      <Blade>_<label?>_<style>_L<X>in_<timestamp>
    """
    ts = datetime.now(ZoneInfo(tz)).strftime("%Y%m%d-%H%M%S")
    parts = [blade_name, (label or "").strip(), params.tip_style,
             f"L{_fmt_num(params.exposed_length, 3)}in", ts]
    run_name = "_".join(_slug(p) for p in parts if p)
    return run_name, BASE_OUTDIR / run_name, ts


def _build_params() -> BladeParameters:
    params = BladeParameters.from_preset(
        TIP_STYLE,
        exposed_length=EXPOSED_LENGTH,
        tab_length=TAB_LENGTH,
        tab_width=TAB_WIDTH,
        kerf_offset=KERF_OFFSET,
        pin_hole=PIN_HOLE,
        **PRESET_OVERRIDES,
    )
    problems = validate_parameters(params)
    if problems:
        raise ValueError("Invalid blade parameters: " + "; ".join(problems))
    return params


def _write_run_meta(RUN_ROOT: Path, run_name: str, ts: str, params: BladeParameters,
                    metrics: dict, outputs: dict) -> Path:
    run_meta = {
        "run_name": run_name,
        "timestamp": ts,
        "blade_name": BLADE_NAME,
        "label": LABEL,
        "display_unit": DISPLAY_UNIT,
        "parameters_in": params.to_dict(),
        "parameters_display": params.to_display(DISPLAY_UNIT),
        "metrics": metrics,
        "outputs": outputs,
    }
    path = RUN_ROOT / "run.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(run_meta, f, indent=2)
    return path


# =============================================================================
# Main
# =============================================================================
def main() -> None:
    params = _build_params()
    run_name, RUN_ROOT, ts = build_run_name(blade_name=BLADE_NAME, label=LABEL, params=params)
    RUN_ROOT.mkdir(parents=True, exist_ok=True)
    setup_logging(RUN_ROOT / "logs", level=logging.INFO)

    result = evaluate(params)
    m = result.metrics

    print("[SUMMARY]")
    print(f"  style:        {params.tip_style}")
    print(f"  length:       {format_length(params.exposed_length, DISPLAY_UNIT)} {DISPLAY_UNIT}")
    print(f"  balance:      {m.cg_percent:.1f}% ({m.balance_status})")
    print(f"  sweet spot:   {format_length(m.sweet_start, DISPLAY_UNIT)}-{format_length(m.sweet_end, DISPLAY_UNIT)} {DISPLAY_UNIT}")
    print(f"  sensitivity:  {m.sensitivity}")
    print(f"  flywheel:     {m.flywheel_rating} (score {m.flywheel_score:.2f})")
    if not m.is_valid:
        print("  [WARN] degenerate geometry; metrics are not meaningful")

    outputs: dict = {}
    if WRITE_SVG:
        svg_path = RUN_ROOT / "whirligig_blade_template.svg"
        write_svg(params, svg_path)
        outputs["svg"] = str(svg_path)
        print(f"[OK] SVG:           {svg_path}")
    if WRITE_DXF:
        outputs["dxf"] = str(write_dxf(params, RUN_ROOT / "whirligig_blade_template.dxf"))
        print(f"[OK] DXF:           {outputs['dxf']}")
    if WRITE_RASTER:
        outputs["raster"] = str(write_template(params, RUN_ROOT / f"whirligig_blade_scale_template{RASTER_EXT}",
                                               unit=DISPLAY_UNIT))
        print(f"[OK] Scale template: {outputs['raster']}")

    profile_csv = RUN_ROOT / "profile.csv"
    profile_table(params, n=PROFILE_POINTS).to_csv(profile_csv, index=False)
    outputs["profile_csv"] = str(profile_csv)
    print(f"[OK] Profile CSV:   {profile_csv}")

    if MAKE_PLOTS:
        viz = BladeVisualizer(result, str(RUN_ROOT / "plots"), unit=DISPLAY_UNIT)
        outputs["plots"] = {"preview": viz.plot_preview(), "profile": viz.plot_profile()}
        print(f"[OK] Preview:       {outputs['plots']['preview']}")

    meta_path = _write_run_meta(RUN_ROOT, run_name, ts, params, m.to_dict(), outputs)
    print(f"\n[OK] Run metadata:  {meta_path}")
    print(f"[OK] Run folder:    {RUN_ROOT}")


if __name__ == "__main__":
    main()
