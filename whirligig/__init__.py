# whirligig/__init__.py
from .containers.parameters import BladeParameters, PinHole, apply_preset, validate_parameters
from .containers.metrics import DerivedMetrics, MassProperties, Classification
from .containers.contour import BladeContour
from .geom.profile import half_width_at, profile_table
from .physics.solver import solve
from .physics.classifier import classify, derive_metrics
from .outline.synthesizer import build_contour
from .evaluate import BladeEvaluation, evaluate

__all__ = [
    "BladeParameters", "PinHole", "apply_preset", "validate_parameters",
    "DerivedMetrics", "MassProperties", "Classification", "BladeContour",
    "half_width_at", "profile_table", "solve", "classify", "derive_metrics",
    "build_contour", "BladeEvaluation", "evaluate",
]
