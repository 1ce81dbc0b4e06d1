# whirligig/containers/units.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

from whirligig.config import IN_TO_MM

DisplayUnit = Literal["in", "mm"]

@dataclass(frozen=True)
class DisplayUnits:
    length: DisplayUnit = "in"     # what the user types / reads
    angle: str = "deg"

    @property
    def label(self) -> str:
        return self.length

    @property
    def decimals(self) -> int:
        """Display precision used by the text inputs (3 dp inches, 1 dp mm)."""
        return 1 if self.length == "mm" else 3

    def toggled(self) -> "DisplayUnits":
        return DisplayUnits(length="mm" if self.length == "in" else "in", angle=self.angle)

# --- simple converters --------------------------------------------------------

# Base is inches for lengths, degrees for angles
_LENGTH_TO_INCHES = {
    "in": 1.0,
    "mm": 1.0 / IN_TO_MM,
    "cm": 10.0 / IN_TO_MM,
    "m": 1000.0 / IN_TO_MM,
    "ft": 12.0,
}

def length_scale(from_unit: str, to_unit: str) -> float:
    """
    Return the multiplicative factor to convert a value in `from_unit`
    into `to_unit` via inches.

    Example
    -------
    length_scale("in", "mm") -> 25.4
    length_scale("mm", "in") -> 0.03937...
    """
    try:
        fi = _LENGTH_TO_INCHES[from_unit]
        ti = _LENGTH_TO_INCHES[to_unit]
    except KeyError as e:
        raise ValueError(f"Unknown length unit: {e.args[0]}")
    return fi / ti

def to_display(value: float, unit: str) -> float:
    """Inches -> display unit."""
    return float(value) * length_scale("in", unit)

def from_display(value: float, unit: str) -> float:
    """Display unit -> inches."""
    return float(value) * length_scale(unit, "in")

def format_length(value: float, unit: str) -> str:
    """Format an inch value the way the input boxes show it."""
    dp = DisplayUnits(length=unit).decimals  # type: ignore[arg-type]
    return f"{to_display(value, unit):.{dp}f}"

_ANGLE_TO_DEGREES = {
    "deg": 1.0,
    "rad": 180.0 / 3.141592653589793,
}

def angle_convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert an angle between 'deg' and 'rad'."""
    if from_unit == to_unit:
        return float(value)
    if from_unit not in _ANGLE_TO_DEGREES or to_unit not in _ANGLE_TO_DEGREES:
        raise ValueError(f"Unknown angle unit: {from_unit} -> {to_unit}")
    # convert to degrees first
    in_deg = float(value) * _ANGLE_TO_DEGREES[from_unit]
    # then from degrees to target
    return in_deg / _ANGLE_TO_DEGREES[to_unit]
