from __future__ import annotations

import math
from typing import Optional

from paramdraw.config import DPI


def pixels_to_units(pixels: float, dpi: float = DPI) -> float:
    """Convert screen pixels to drawing units (inches)."""
    return pixels / dpi

def units_to_pixels(units: float, dpi: float = DPI) -> float:
    """Convert drawing units (inches) to screen pixels."""
    return units * dpi

def round2(value: float) -> float:
    """Round to 2 decimal places, halves towards positive infinity."""
    return math.floor(value * 100 + 0.5) / 100

def clamp(value: float, lower: Optional[float] = None, upper: Optional[float] = None) -> float:
    """Clamp value into [lower, upper]; a None bound is open."""
    if lower is not None and value < lower:
        value = lower
    if upper is not None and value > upper:
        value = upper
    return value

def format_number(value: float, decimals: int = 6) -> str:
    """Shortest fixed-point text for value, without trailing zeros."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
