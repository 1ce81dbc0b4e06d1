# whirligig/evaluate.py
"""
One call that gives a front end everything it draws for a parameter set.

Metrics and contour are independent pure functions of the (frozen, hashable)
BladeParameters, so the whole evaluation is memoised on the parameter value.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache

from whirligig.config import SCREEN_SCALE
from whirligig.containers.contour import BladeContour
from whirligig.containers.metrics import DerivedMetrics
from whirligig.containers.parameters import BladeParameters
from whirligig.outline.synthesizer import build_contour
from whirligig.physics.classifier import derive_metrics


@dataclass(frozen=True)
class BladeEvaluation:
    params: BladeParameters
    metrics: DerivedMetrics
    contour: BladeContour       # preview scale, no kerf


@lru_cache(maxsize=128)
def evaluate(params: BladeParameters) -> BladeEvaluation:
    return BladeEvaluation(
        params=params,
        metrics=derive_metrics(params),
        contour=build_contour(params, scale=SCREEN_SCALE, apply_kerf=False),
    )


def clear_cache() -> None:
    evaluate.cache_clear()
