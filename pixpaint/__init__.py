"""A small raster paint program with shape tools, an eraser and flood fill."""

__version__ = "0.1.0"