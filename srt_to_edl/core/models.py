"""Data records shared by the parser, the generator and the session."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List


DEFAULT_FRAME_RATE = 24.0
DEFAULT_MARKER_COLOR = 'Blue'
DEFAULT_START_TIMECODE = '01:00:00;00'


@dataclass(frozen=True)
class Cue:
    """One subtitle block.

    ``start_time``/``end_time`` keep the SRT form (``HH:MM:SS,mmm``).
    ``sequence_id`` is copied verbatim and never interpreted.
    """

    sequence_id: str
    start_time: str
    end_time: str
    text: str


@dataclass(frozen=True)
class MarkerSettings:
    """Conversion options: frame rate, marker color and start timecode."""

    frames_per_second: float = DEFAULT_FRAME_RATE
    marker_color: str = DEFAULT_MARKER_COLOR
    start_timecode: str = DEFAULT_START_TIMECODE

    def with_changes(self, **changes) -> 'MarkerSettings':
        return replace(self, **changes)


@dataclass
class ParseResult:
    cues: List[Cue] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)


@dataclass
class ConversionResult:
    """EDL text plus the non-fatal warnings collected while producing it."""

    text: str
    cue_count: int = 0
    diagnostics: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
