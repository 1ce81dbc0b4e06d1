# whirligig/geom/__init__.py
from .profile import half_width_at, half_widths, profile_table

__all__ = ["half_width_at", "half_widths", "profile_table"]
