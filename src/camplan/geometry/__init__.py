"""
Geometry Module
===============

Site layout handling for coverage planning.

This module provides utilities for working with a saved layout
(canvas, scale calibration, cameras, walls) loaded from JSON.
"""

from camplan.geometry.layout import LayoutManager

__all__ = [
    "LayoutManager",
]
