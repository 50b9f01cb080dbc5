"""
Curve Style Values
==================
Validated style values produced once by the directive parser.

Colors and numbers arrive as strings in the directive text. The parser checks
them with the helpers below and, for error-free directives, converts them into
a `CurveStyle` so renderers never re-parse or re-validate anything.

Classes:
    Rgba: Surface-native color (channels 0-255, alpha 0-1).
    CurveStyle: Stroke color, stroke width and optional fill of one curve.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{6})$")
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_hex_color(value: str) -> bool:
    """True for a `#RRGGBB` string (case-insensitive hex digits)."""
    return HEX_COLOR_PATTERN.match(value) is not None


def parse_number(value: str) -> Optional[float]:
    """
    Parse a plain decimal number.

    Args:
        value: Trimmed string, e.g. "2", "0.5", ".5", "-1e-3".

    Returns:
        The finite float value, or None if the string is not a number.
    """
    if NUMBER_PATTERN.match(value) is None:
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class Rgba:
    """RGBA color with 0-255 channels and a 0-1 alpha."""
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} channel must be in [0, 255], got {channel}.")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be in [0, 1], got {self.alpha}.")

    @classmethod
    def from_hex(cls, hex_color: str, alpha: float = 1.0) -> Rgba:
        """
        Convert a `#RRGGBB` string and an alpha into an Rgba value.

        Raises:
            ValueError: If `hex_color` is not a 6-digit hex color.
        """
        if not is_hex_color(hex_color):
            raise ValueError(f"Expected a #RRGGBB color, got '{hex_color}'.")
        return cls(
            red=int(hex_color[1:3], 16),
            green=int(hex_color[3:5], 16),
            blue=int(hex_color[5:7], 16),
            alpha=alpha,
        )


@dataclass(frozen=True)
class CurveStyle:
    """Resolved drawing style of one directive."""
    stroke: Rgba
    width: float
    fill: Optional[Rgba] = None

    def __post_init__(self) -> None:
        if self.width <= 0.0:
            raise ValueError(f"Stroke width must be positive, got {self.width}.")
