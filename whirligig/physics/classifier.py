# whirligig/physics/classifier.py
"""
Qualitative ratings from the mass properties.

The thresholds are an empirical calibration for the 3.5 in hub, 25 deg pitch
and inch units; they are not derived from first principles.
"""
from __future__ import annotations
import logging
import math

from whirligig.config import (
    HUB_PITCH_DEG,
    SWEET_START_FRAC, SWEET_END_FRAC,
    TORQUE_CG_REF, TORQUE_PITCH_REF, TORQUE_LOW_ABOVE, TORQUE_MODERATE_ABOVE,
    FLYWHEEL_NORM, FLYWHEEL_HIGH_ABOVE, FLYWHEEL_STEADY_ABOVE,
)
from whirligig.containers.metrics import Classification, DerivedMetrics, MassProperties
from whirligig.containers.parameters import BladeParameters
from whirligig.containers.units import angle_convert
from whirligig.physics.solver import solve

logger = logging.getLogger(__name__)


def sweet_band(exposed_length: float) -> tuple[float, float]:
    return exposed_length * SWEET_START_FRAC, exposed_length * SWEET_END_FRAC


def torque_difficulty(cg_percent: float, pitch_deg: float = HUB_PITCH_DEG) -> float:
    pitch_factor = math.sin(angle_convert(pitch_deg, "deg", "rad"))
    return (cg_percent / TORQUE_CG_REF) * (pitch_factor / TORQUE_PITCH_REF)


def rate_sensitivity(difficulty: float) -> str:
    if difficulty > TORQUE_LOW_ABOVE:
        return "Low (Heavy Tip)"
    if difficulty > TORQUE_MODERATE_ABOVE:
        return "Moderate"
    return "High"


def rate_flywheel(score: float) -> str:
    if score > FLYWHEEL_HIGH_ABOVE:
        return "High Coast"
    if score > FLYWHEEL_STEADY_ABOVE:
        return "Steady"
    return "Snappy"


def classify(params: BladeParameters, mass: MassProperties) -> Classification:
    sweet_start, sweet_end = sweet_band(params.exposed_length)
    difficulty = torque_difficulty(mass.cg_percent)
    score = mass.moment_of_inertia / FLYWHEEL_NORM
    return Classification(
        sweet_start=sweet_start,
        sweet_end=sweet_end,
        torque_difficulty=difficulty,
        flywheel_score=score,
        sensitivity=rate_sensitivity(difficulty),  # type: ignore[arg-type]
        flywheel_rating=rate_flywheel(score),      # type: ignore[arg-type]
    )


def derive_metrics(params: BladeParameters) -> DerivedMetrics:
    """Solver + classifier in one go."""
    mass = solve(params)
    metrics = DerivedMetrics.combine(mass, classify(params, mass))
    logger.debug("Balance %.2f%% -> %s, sensitivity=%s, flywheel=%s",
                 metrics.cg_percent, metrics.balance_status,
                 metrics.sensitivity, metrics.flywheel_rating)
    return metrics
