"""
Configuration & Constants
=========================
This module serves as the central registry for the viewer's global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (unit scale, zoom limits, sample
   counts) from being scattered throughout the parser and the renderers.
2. Consistency: The camera, the curve renderer and the grid renderer must agree
   on the same world-to-screen unit scale and zoom range.

Exports:
    UNIT_SCALE (float): Pixels per world unit at zoom = 1.
    ZOOM_MIN, ZOOM_MAX (float): Inclusive zoom clamp range.
    SAMPLE_SEGMENTS (int): Number of segments used to sample a curve.
"""
import math

# World <-> screen
UNIT_SCALE: float = 50.0

# Camera
ZOOM_MIN: float = 0.1
ZOOM_MAX: float = 10.0
ZOOM_DEFAULT: float = 1.0
WHEEL_ZOOM_SENSITIVITY: float = 0.001
ZOOM_SLIDER_STEPS: int = 100  # slider ticks per zoom unit

# Curve sampling (SAMPLE_SEGMENTS segments -> SAMPLE_SEGMENTS + 1 samples)
SAMPLE_SEGMENTS: int = 400
PARAMETRIC_RANGE: tuple[float, float] = (-2.0 * math.pi, 2.0 * math.pi)
EXPLICIT_RANGE: tuple[float, float] = (-10.0, 10.0)

# Grid
GRID_AXIS_EXTENT: int = 1000  # world units, labels for -extent..extent
GRID_LINE_WIDTH: float = 2.0
GRID_LABEL_SIZE: float = 12.0
GRID_LABEL_OFFSET: float = 2.0
GRID_COLOR: str = "#000000"
