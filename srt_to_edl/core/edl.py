"""EDL marker list generation.

Produces a CMX3600-style list where every cue becomes one event plus a
DaVinci Resolve marker line (``|C:`` color, ``|M:`` name, ``|D:`` duration).
"""
from __future__ import annotations

import logging
import os
import re
from typing import Iterable, Optional

from .models import ConversionResult, Cue, MarkerSettings
from .timeutils import check_freeform_timecode, frames_to_timecode, srt_timestamp_to_frames

logger = logging.getLogger(__name__)

DEFAULT_TITLE = 'Untitled'
DEFAULT_OUTPUT_FILENAME = 'subtitles.edl'
FRAME_COUNT_MODE = 'FCM: NON-DROP FRAME'
MARKER_DURATION = 1

_SRT_SUFFIX = re.compile(r"\.srt$", re.IGNORECASE)


def _stem(filename: str) -> str:
    name = os.path.basename(filename)
    if _SRT_SUFFIX.search(name):
        return _SRT_SUFFIX.sub('', name)
    return os.path.splitext(name)[0]


def edl_title(filename: Optional[str]) -> str:
    """Title line value: the source file name without its extension."""
    if not filename:
        return DEFAULT_TITLE
    return _stem(filename) or DEFAULT_TITLE


def output_filename(filename: Optional[str]) -> str:
    """Suggested output name: the extension (``.srt``, any case) swapped for ``.edl``."""
    if not filename:
        return DEFAULT_OUTPUT_FILENAME
    return _stem(filename) + '.edl'


def format_event(event_number: int, record_in: str, record_out: str) -> str:
    # Source and record timecodes are the same: markers have no source clip.
    return (
        f"{event_number:03d}  AX       V     C        "
        f"{record_in} {record_out} {record_in} {record_out}\n"
    )


def format_marker(color: str, text: str) -> str:
    name = ' '.join(text.splitlines())
    return f" |C:{color} |M:{name} |D:{MARKER_DURATION}\n"


def generate_edl(cues: Iterable[Cue], settings: MarkerSettings,
                 title: Optional[str] = None) -> ConversionResult:
    """Render cues as EDL marker events.

    Cue times are converted to frames, shifted by the start timecode and
    formatted back, so rounding happens once per position. An unreadable
    start timecode falls back to a zero offset and is reported in the
    result's diagnostics.
    """
    fps = settings.frames_per_second
    diagnostics = []

    offset_frames, warning = check_freeform_timecode(settings.start_timecode, fps)
    if warning:
        logger.warning(warning)
        diagnostics.append(warning)
    logger.debug("Start offset: %d frames (%s) at %s fps",
                 offset_frames, frames_to_timecode(offset_frames, fps), fps)

    chunks = [f"TITLE: {title or DEFAULT_TITLE}\n", f"{FRAME_COUNT_MODE}\n", "\n"]
    count = 0
    for index, cue in enumerate(cues):
        record_in = frames_to_timecode(offset_frames + srt_timestamp_to_frames(cue.start_time, fps), fps)
        record_out = frames_to_timecode(offset_frames + srt_timestamp_to_frames(cue.end_time, fps), fps)
        chunks.append(format_event(index + 1, record_in, record_out))
        chunks.append(format_marker(settings.marker_color, cue.text))
        chunks.append("\n")
        count += 1

    return ConversionResult(text=''.join(chunks), cue_count=count, diagnostics=diagnostics)
