# whirligig/containers/metrics.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal

from whirligig.config import SWEET_START_FRAC, SWEET_END_FRAC

Sensitivity = Literal["Low (Heavy Tip)", "Moderate", "High"]
FlywheelRating = Literal["Snappy", "Steady", "High Coast"]

@dataclass(frozen=True)
class MassProperties:
    """Area-weighted properties of the flat blade (tab + exposed span). Units: in, in^2, in^4."""
    total_area: float
    exposed_area: float
    weighted_x: float
    cg_x: float
    cg_percent: float          # not clamped; may leave 0..100 for odd inputs
    moment_of_inertia: float   # about the rotation axis, hub radius offset included
    n_slices: int
    is_degenerate: bool = False


@dataclass(frozen=True)
class Classification:
    sweet_start: float
    sweet_end: float
    torque_difficulty: float
    flywheel_score: float
    sensitivity: Sensitivity
    flywheel_rating: FlywheelRating


@dataclass(frozen=True)
class DerivedMetrics:
    """Everything the front end shows; recomputed wholesale per parameter set."""
    cg_x: float
    cg_percent: float
    sweet_start: float
    sweet_end: float
    sensitivity: Sensitivity
    flywheel_rating: FlywheelRating
    total_area: float
    moment_of_inertia: float
    torque_difficulty: float
    flywheel_score: float
    is_degenerate: bool = False

    @staticmethod
    def combine(mass: MassProperties, cls: Classification) -> "DerivedMetrics":
        return DerivedMetrics(
            cg_x=mass.cg_x,
            cg_percent=mass.cg_percent,
            sweet_start=cls.sweet_start,
            sweet_end=cls.sweet_end,
            sensitivity=cls.sensitivity,
            flywheel_rating=cls.flywheel_rating,
            total_area=mass.total_area,
            moment_of_inertia=mass.moment_of_inertia,
            torque_difficulty=cls.torque_difficulty,
            flywheel_score=cls.flywheel_score,
            is_degenerate=mass.is_degenerate,
        )

    @property
    def is_valid(self) -> bool:
        return not self.is_degenerate

    @property
    def in_sweet_spot(self) -> bool:
        return self.is_valid and 100 * SWEET_START_FRAC <= self.cg_percent <= 100 * SWEET_END_FRAC

    @property
    def balance_status(self) -> str:
        return "IDEAL RANGE" if self.in_sweet_spot else "OFFSET"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["in_sweet_spot"] = self.in_sweet_spot
        d["balance_status"] = self.balance_status
        return d
