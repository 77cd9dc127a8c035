"""Pure option parsers for frame rate and marker color.

These functions avoid side effects and are designed for unit testing.
"""
from __future__ import annotations
from typing import Tuple

FRAME_RATES: Tuple[float, ...] = (23.976, 24.0, 25.0, 29.97, 30.0)

# DaVinci Resolve marker palette.
MARKER_COLORS: Tuple[str, ...] = (
    'Blue', 'Cyan', 'Green', 'Yellow', 'Red', 'Pink', 'Purple', 'Fuchsia',
    'Rose', 'Lavender', 'Sky', 'Mint', 'Lemon', 'Sand', 'Cocoa', 'Cream',
)


def parse_frame_rate(value) -> float:
    """Parse a frame rate (number or string like ``"29.97"``).

    Returns the matching allowed rate. Raises ``ValueError`` for
    non-numeric values or rates outside :data:`FRAME_RATES`.
    """
    if isinstance(value, bool):
        raise ValueError('Unsupported frame rate format')
    if isinstance(value, str):
        value = value.strip().lower()
        if value.endswith('fps'):
            value = value[:-3].strip()
        try:
            value = float(value)
        except ValueError:
            raise ValueError('Non-numeric frame rate')
    if not isinstance(value, (int, float)):
        raise ValueError('Unsupported frame rate format')
    for rate in FRAME_RATES:
        if abs(rate - value) < 1e-6:
            return rate
    allowed = ', '.join(f"{r:g}" for r in FRAME_RATES)
    raise ValueError(f'Frame rate {value:g} not supported (choose one of {allowed})')


def parse_marker_color(value) -> str:
    """Parse a marker color name case-insensitively to its canonical spelling."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError('No marker color specified')
    wanted = value.strip().lower()
    for color in MARKER_COLORS:
        if color.lower() == wanted:
            return color
    raise ValueError(f'Unknown marker color {value!r} (choose one of {", ".join(MARKER_COLORS)})')
