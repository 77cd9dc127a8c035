"""
Core conversion logic for the SRT to EDL converter.

This package hosts pure, side‑effect‑free logic: timecode arithmetic,
SRT parsing and EDL rendering. File and network access live in
``srt_to_edl.services``.
"""

__all__ = [
    "Cue",
    "MarkerSettings",
    "ParseResult",
    "ConversionResult",
    "parse_srt",
    "strip_markup",
    "generate_edl",
    "edl_title",
    "output_filename",
    "parse_srt_time",
    "srt_timestamp_to_frames",
    "frames_to_timecode",
    "frames_to_srt_timestamp",
    "parse_freeform_timecode",
    "check_freeform_timecode",
    "normalize_timecode",
    "format_seconds",
    "parse_frame_rate",
    "parse_marker_color",
    "FRAME_RATES",
    "MARKER_COLORS",
]

from .models import Cue, MarkerSettings, ParseResult, ConversionResult
from .srt import parse_srt, strip_markup
from .edl import generate_edl, edl_title, output_filename
from .timeutils import (
    parse_srt_time,
    srt_timestamp_to_frames,
    frames_to_timecode,
    frames_to_srt_timestamp,
    parse_freeform_timecode,
    check_freeform_timecode,
    normalize_timecode,
    format_seconds,
)
from .selections import parse_frame_rate, parse_marker_color, FRAME_RATES, MARKER_COLORS
