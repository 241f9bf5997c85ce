"""Raster graphics: line algorithms, polygon clipping and filling, Bezier curves and ray tracing."""

__version__ = "0.1.0"