"""
Conversion session: the currently loaded subtitle source plus marker settings.

Every call to :meth:`Session.convert` recomputes the EDL from scratch, so
changing a setting or loading a new file never leaves stale output behind.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .core.edl import edl_title, generate_edl, output_filename
from .core.models import ConversionResult, MarkerSettings
from .core.srt import parse_srt
from .services import source as source_svc

logger = logging.getLogger(__name__)


def convert_srt(srt_text: str, settings: MarkerSettings,
                filename: Optional[str] = None) -> ConversionResult:
    """Parse ``srt_text`` and render it as an EDL marker list.

    Diagnostics from parsing and from generation are merged in that order.
    """
    parsed = parse_srt(srt_text)
    result = generate_edl(parsed.cues, settings, title=edl_title(filename))
    result.diagnostics = parsed.diagnostics + result.diagnostics
    return result


class Session:
    """Holds one source text, its file name, and the current settings."""

    def __init__(self, settings: Optional[MarkerSettings] = None):
        self.settings = settings or MarkerSettings()
        self.source_text = ''
        self.filename: Optional[str] = None

    @property
    def has_source(self) -> bool:
        return bool(self.source_text)

    def load_source(self, text: str, filename: Optional[str] = None,
                    convert: bool = True) -> Optional[ConversionResult]:
        """Replace the held source and convert it once.

        With ``convert=False`` the source is only stored and ``None`` is returned.
        """
        self.source_text = text or ''
        self.filename = filename
        if not convert:
            return None
        return self.convert()

    def load_file(self, location: str, convert: bool = True) -> Optional[ConversionResult]:
        """Load a local path or http(s) URL. Raises ``SourceReadError`` on I/O failure.

        The ``.srt`` extension check only warns.
        """
        if source_svc.is_url(location):
            return self.load_url(location, convert=convert)
        name = self._checked_name(location)
        text = source_svc.read_srt_file(location)
        return self.load_source(text, name or None, convert=convert)

    def load_url(self, url: str, convert: bool = True) -> Optional[ConversionResult]:
        """Fetch an SRT over http(s) and load it; the name comes from the URL path."""
        name = self._checked_name(url.split('?', 1)[0])
        text = source_svc.fetch_srt(url)
        return self.load_source(text, name or None, convert=convert)

    @staticmethod
    def _checked_name(path: str) -> str:
        name = os.path.basename(path)
        if not name.lower().endswith('.srt'):
            logger.warning("%s does not look like an .srt file, converting anyway", name or path)
        return name

    def update_settings(self, **changes) -> Optional[ConversionResult]:
        """Change frame rate, marker color or start timecode, then reconvert."""
        self.settings = self.settings.with_changes(**changes)
        return self.convert()

    def clear(self) -> None:
        self.source_text = ''
        self.filename = None

    def convert(self) -> Optional[ConversionResult]:
        """Return the EDL for the held source, or ``None`` when nothing is loaded."""
        if not self.source_text:
            return None
        result = convert_srt(self.source_text, self.settings, self.filename)
        for message in result.diagnostics:
            logger.debug("%s: %s", self.filename or 'source', message)
        logger.info("Converted %d cues from %s", result.cue_count, self.filename or 'source')
        return result

    def output_filename(self) -> str:
        return output_filename(self.filename)
