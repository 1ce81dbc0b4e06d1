# whirligig/containers/parameters.py
"""
parameters.py
-------------
'BladeParameters' is the immutable design input every computation reads.

Lengths are inches. 'tip_radius' is a length for the rounded family but a
dimensionless bluntness (0..1) for the leaf family, so it only takes part in
unit conversion / scaling when tip_style == "rounded".

Frozen dataclasses are hashable, which is what the optional memoization in
'whirligig.evaluate' keys on.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from typing import Any, Dict, List, Literal, Tuple

from whirligig.config import PRESETS, DEFAULT_SHARED, DEFAULT_PIN_HOLE
from .units import to_display, from_display

TipStyle = Literal["leaf", "rounded"]
TIP_STYLES: Tuple[str, ...] = ("leaf", "rounded")

# family-specific fields reset by a preset switch
FAMILY_FIELDS: Tuple[str, ...] = tuple(PRESETS["leaf"].keys())

_BASE_LENGTH_FIELDS: Tuple[str, ...] = (
    "exposed_length", "tab_length", "tab_width",
    "root_width", "tip_width", "kerf_offset",
)

@dataclass(frozen=True)
class PinHole:
    present: bool = DEFAULT_PIN_HOLE["present"]
    diameter: float = DEFAULT_PIN_HOLE["diameter"]
    offset_from_hub: float = DEFAULT_PIN_HOLE["offset_from_hub"]  # back from the hub face, into the tab

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass(frozen=True)
class BladeParameters:
    # shared
    exposed_length: float = DEFAULT_SHARED["exposed_length"]
    tab_length: float = DEFAULT_SHARED["tab_length"]
    tab_width: float = DEFAULT_SHARED["tab_width"]

    # family-specific (defaults = leaf preset)
    root_width: float = PRESETS["leaf"]["root_width"]
    tip_width: float = PRESETS["leaf"]["tip_width"]
    tip_radius: float = PRESETS["leaf"]["tip_radius"]
    width_position: float = PRESETS["leaf"]["width_position"]
    taper_sharpness: float = PRESETS["leaf"]["taper_sharpness"]
    edge_curvature: float = PRESETS["leaf"]["edge_curvature"]
    tip_style: TipStyle = "leaf"

    # manufacturing
    kerf_offset: float = DEFAULT_SHARED["kerf_offset"]
    pin_hole: PinHole = field(default_factory=PinHole)

    # ---- constructors ----------------------------------------------------------

    @classmethod
    def from_preset(cls, style: str, **overrides: Any) -> "BladeParameters":
        if style not in PRESETS:
            raise ValueError(f"Unknown tip style: {style}")
        return cls(**{**PRESETS[style], "tip_style": style, **overrides})

    @classmethod
    def from_display(
        cls,
        values: Dict[str, Any],
        unit: str = "in",
        *,
        validate: bool = True,
    ) -> "BladeParameters":
        """
        Build parameters from display-unit values (the UI boundary).
        Missing keys fall back to the dataclass defaults.
        """
        vals = dict(values)
        style = vals.get("tip_style", "leaf")
        pin = vals.pop("pin_hole", None)
        for key in _length_fields_for(style):
            if key in vals:
                vals[key] = from_display(vals[key], unit)
        if isinstance(pin, dict):
            pin = dict(pin)
            for key in ("diameter", "offset_from_hub"):
                if key in pin:
                    pin[key] = from_display(pin[key], unit)
            vals["pin_hole"] = PinHole(**pin)
        elif isinstance(pin, PinHole):
            vals["pin_hole"] = pin
        params = cls(**vals)
        if validate:
            problems = validate_parameters(params)
            if problems:
                raise ValueError("Invalid blade parameters: " + "; ".join(problems))
        return params

    # ---- views -----------------------------------------------------------------

    def length_fields(self) -> Tuple[str, ...]:
        return _length_fields_for(self.tip_style)

    def to_display(self, unit: str = "in") -> Dict[str, Any]:
        """Dict of display-unit values, pin hole nested; inverse of from_display."""
        d = asdict(self)
        for key in self.length_fields():
            d[key] = to_display(d[key], unit)
        d["pin_hole"]["diameter"] = to_display(self.pin_hole.diameter, unit)
        d["pin_hole"]["offset_from_hub"] = to_display(self.pin_hole.offset_from_hub, unit)
        return d

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # ---- derived copies ----------------------------------------------------------

    def with_style(self, style: str) -> "BladeParameters":
        return apply_preset(self, style)

    def scaled(self, factor: float) -> "BladeParameters":
        """Uniformly scale every length (not the dimensionless fractions)."""
        f = float(factor)
        changes = {k: getattr(self, k) * f for k in self.length_fields()}
        pin = replace(self.pin_hole,
                      diameter=self.pin_hole.diameter * f,
                      offset_from_hub=self.pin_hole.offset_from_hub * f)
        return replace(self, pin_hole=pin, **changes)

    @property
    def max_width(self) -> float:
        return max(self.root_width, self.tab_width, self.tip_width)

    @property
    def overall_length(self) -> float:
        return self.exposed_length + self.tab_length


def _length_fields_for(style: str) -> Tuple[str, ...]:
    if style == "rounded":
        return _BASE_LENGTH_FIELDS + ("tip_radius",)
    return _BASE_LENGTH_FIELDS


def apply_preset(params: BladeParameters, style: str) -> BladeParameters:
    """
    Switch profile family: family-specific fields take the preset values,
    shared fields (length, tab, kerf, pin hole) are kept.
    """
    if style not in PRESETS:
        raise ValueError(f"Unknown tip style: {style}")
    return replace(params, tip_style=style, **PRESETS[style])


def validate_parameters(p: BladeParameters) -> List[str]:
    """
    Boundary check. Returns a list of problems (empty if fine); the core
    never calls this and computes on whatever it is given.
    """
    problems: List[str] = []
    if p.tip_style not in TIP_STYLES:
        problems.append(f"tip_style must be one of {TIP_STYLES}, got {p.tip_style!r}")
    if not p.exposed_length > 0:
        problems.append(f"exposed_length must be > 0, got {p.exposed_length}")
    for key in ("tab_length", "tab_width", "root_width", "tip_width", "tip_radius", "kerf_offset"):
        if getattr(p, key) < 0:
            problems.append(f"{key} must be >= 0, got {getattr(p, key)}")
    if not 0.0 < p.width_position < 1.0:
        problems.append(f"width_position must be in (0, 1), got {p.width_position}")
    if not 0.0 <= p.taper_sharpness <= 1.0:
        problems.append(f"taper_sharpness must be in [0, 1], got {p.taper_sharpness}")
    if not 0.0 < p.edge_curvature < 1.0:
        problems.append(f"edge_curvature must be in (0, 1), got {p.edge_curvature}")
    if p.tip_style == "leaf" and not 0.0 <= p.tip_radius <= 1.0:
        problems.append(f"leaf bluntness (tip_radius) must be in [0, 1], got {p.tip_radius}")
    if p.pin_hole.diameter < 0 or p.pin_hole.offset_from_hub < 0:
        problems.append("pin hole diameter and offset must be >= 0")
    return problems
