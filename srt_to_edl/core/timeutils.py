"""Pure time utility helpers: SRT timestamps, frame counts and timecodes.

Frame counts are the canonical unit. Every textual form converts to and from
frames, and offsets are only ever applied in frames.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_TIMECODE_DELIMITERS = re.compile(r"[:;]")
_NUMERIC_FIELD = re.compile(r"^\d+(\.\d+)?$")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's ``round`` rounds halves to even, which would turn 0.5 frame
    into 0 and 1.5 into 2.
    """
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def parse_srt_time(time_str: str) -> float:
    """Convert an SRT timestamp to seconds.

    Accepts values like ``"00:00:10,500"`` and returns ``10.5``. A ``.``
    decimal separator is accepted too, and a missing millisecond part
    counts as zero.
    """
    clock, _, millis = time_str.strip().replace('.', ',').partition(',')
    parts = clock.split(':')
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2])
    ms = int(millis) if millis else 0
    return hours * 3600 + minutes * 60 + seconds + ms / 1000


def srt_timestamp_to_frames(time_str: str, fps: float) -> int:
    """Convert an SRT timestamp to a frame count at ``fps``."""
    return round_half_away(parse_srt_time(time_str) * fps)


def _second_start(seconds: int, fps: float) -> int:
    return round_half_away(seconds * fps)


def frames_to_timecode(frames: int, fps: float) -> str:
    """Format a frame count as ``HH:MM:SS:FF``.

    Hours, minutes and seconds come from floor division. The frame field is
    the distance from the (rounded) first frame of that second, so it always
    stays in ``[0, fps)`` and :func:`parse_freeform_timecode` reads the
    result back to the same frame count, fractional rates included.
    """
    frames = max(0, int(frames))
    # Not a plain floor/mod chain: at 23.976 or 29.97 the frame field can
    # differ by one from f % fps so that the round trip stays exact.
    total_seconds = int(math.floor(frames / fps))
    # Float division can land one second off around rounded boundaries.
    while total_seconds > 0 and _second_start(total_seconds, fps) > frames:
        total_seconds -= 1
    while _second_start(total_seconds + 1, fps) <= frames:
        total_seconds += 1

    frame_field = frames - _second_start(total_seconds, fps)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}:{frame_field:02d}"


def frames_to_srt_timestamp(frames: int, fps: float) -> str:
    """Format a frame count as an SRT timestamp ``HH:MM:SS,mmm``."""
    total_ms = round_half_away(max(0, int(frames)) * 1000 / fps)
    total_seconds, millis = divmod(total_ms, 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def check_freeform_timecode(text: Optional[str], fps: float) -> Tuple[int, Optional[str]]:
    """Parse a user-typed start timecode.

    Returns ``(frames, warning)``. ``warning`` is ``None`` when the input
    was understood; otherwise frames is 0 and the warning says why.

    Accepted shapes, tried in order:

    - a bare integer such as ``"1"``: a whole number of *hours*;
    - ``H:M:S``: frame field assumed 0;
    - ``H:M:S:F`` or ``H:M:S;F``: explicit frames added after scaling.

    ``:`` and ``;`` are interchangeable between every field.
    """
    value = (text or '').strip()
    if value.isdecimal():
        try:
            return round_half_away(int(value) * 3600 * fps), None
        except (OverflowError, ValueError):
            return 0, f"Timecode {text!r} is out of range, using 00:00:00:00"

    fields = _TIMECODE_DELIMITERS.split(value)
    if len(fields) not in (3, 4):
        return 0, f"Invalid timecode format {text!r}, using 00:00:00:00"
    if not all(_NUMERIC_FIELD.match(f.strip()) for f in fields):
        return 0, f"Non-numeric timecode field in {text!r}, using 00:00:00:00"

    numbers = [float(f) for f in fields]
    hours, minutes, seconds = numbers[:3]
    try:
        frames = round_half_away((hours * 3600 + minutes * 60 + seconds) * fps)
        if len(numbers) == 4:
            frames += round_half_away(numbers[3])
    except (OverflowError, ValueError):
        return 0, f"Timecode {text!r} is out of range, using 00:00:00:00"
    return frames, None


def parse_freeform_timecode(text: Optional[str], fps: float) -> int:
    """Parse a start timecode to frames; invalid input gives 0 and a warning log."""
    frames, warning = check_freeform_timecode(text, fps)
    if warning:
        logger.warning(warning)
    return frames


def normalize_timecode(text: Optional[str], fps: float) -> str:
    """Reformat free-form timecode input, e.g. ``"1"`` -> ``"01:00:00:00"``."""
    return frames_to_timecode(parse_freeform_timecode(text, fps), fps)


def format_seconds(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS.mmm``.

    Keeps the sign for negative values, rounds milliseconds to 3 digits.
    """
    sign = '-' if seconds < 0 else ''
    total_ms = round_half_away(abs(seconds) * 1000)
    total_seconds, millis = divmod(total_ms, 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
