# whirligig/physics/__init__.py
from .solver import solve
from .classifier import classify, derive_metrics

__all__ = ["solve", "classify", "derive_metrics"]
