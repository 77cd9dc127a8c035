"""SRT parsing into :class:`Cue` records.

Parsing is forgiving: malformed blocks are skipped and reported as
diagnostics instead of raising, since real-world subtitle files often carry
stray blank or broken blocks.
"""
from __future__ import annotations

import logging
import re

from .models import Cue, ParseResult

logger = logging.getLogger(__name__)

TIMING_SEPARATOR = ' --> '

_BLOCK_SPLIT = re.compile(r"\n(?:[ \t]*\n)+")
_MARKUP_TAG = re.compile(r"<[^>]*>")
_TIMESTAMP = re.compile(r"\d+:\d{1,2}:\d{1,2}(?:[,.]\d+)?")


def strip_markup(text: str) -> str:
    """Remove ``<...>`` tags (``<i>``, ``<font color=...>``) from cue text."""
    return _MARKUP_TAG.sub('', text)


def parse_srt(srt_text: str) -> ParseResult:
    """Parse raw SRT text into cues, in input order.

    Each block needs at least three lines: sequence id, timing line with
    ``" --> "``, and one or more text lines, joined with single spaces.
    """
    result = ParseResult()
    if not srt_text:
        return result

    text = srt_text.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff').strip()
    if not text:
        return result

    for block_number, block in enumerate(_BLOCK_SPLIT.split(text), 1):
        lines = block.strip('\n').split('\n')
        if len(lines) < 3:
            result.diagnostics.append(
                f"Block {block_number}: skipped, expected at least 3 lines but found {len(lines)}"
            )
            continue

        sequence_id = lines[0].strip()
        parts = lines[1].split(TIMING_SEPARATOR)
        start = parts[0].strip()
        end = parts[1].strip() if len(parts) > 1 else ''
        if not start or not end:
            result.diagnostics.append(
                f"Block {block_number}: skipped, timing line {lines[1]!r} has no start/end pair"
            )
            continue
        # Trailing position coordinates (X1:100 X2:200 ...) are ignored
        start_match = _TIMESTAMP.match(start)
        end_match = _TIMESTAMP.match(end)
        if not (start_match and end_match):
            result.diagnostics.append(
                f"Block {block_number}: skipped, unreadable timestamps {start!r} / {end!r}"
            )
            continue

        cue_text = strip_markup(' '.join(lines[2:])).strip()
        result.cues.append(Cue(
            sequence_id=sequence_id,
            start_time=start_match.group(0),
            end_time=end_match.group(0),
            text=cue_text,
        ))

    logger.debug("Parsed %d cues (%d blocks skipped)", len(result.cues), len(result.diagnostics))
    return result
