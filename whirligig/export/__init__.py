# whirligig/export/__init__.py
from .svg_export import write_svg
from .dxf_export import write_dxf
from .raster_export import write_template

__all__ = ["write_svg", "write_dxf", "write_template"]
