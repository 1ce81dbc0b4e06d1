# whirligig/outline/__init__.py
from .synthesizer import build_contour

__all__ = ["build_contour"]
