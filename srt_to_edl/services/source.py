"""SRT source loading services.

Split between local file reading and network fetching. Both return decoded
UTF‑8 text and raise :class:`SourceReadError` on failure, so the core never
sees partial content.
"""
from __future__ import annotations

import logging
import ssl
import urllib.request

from .errors import SourceReadError

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    return location.lower().startswith(('http://', 'https://'))


def read_srt_file(path: str) -> str:
    """Read an SRT file from disk. A UTF‑8 byte order mark is dropped."""
    logger.info("Reading SRT: %s", path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            text = f.read()
        logger.debug("Read SRT with %d chars", len(text))
        return text
    except Exception as e:
        logger.error("Failed to read SRT from %s: %s", path, e)
        raise SourceReadError(str(e))


def fetch_srt(url: str, timeout: int = 10) -> str:
    """Fetch SRT text from a URL with a browser-like UA header.

    Returns the decoded UTF‑8 text. Raises ``SourceReadError`` on network
    or decoding errors.
    """
    logger.info("Fetching SRT: %s", url)
    ssl_context = ssl.create_default_context()

    try:
        request = urllib.request.Request(url, headers={"User-Agent": "Mozilla/5.0"})
        with urllib.request.urlopen(request, context=ssl_context, timeout=timeout) as response:
            text = response.read().decode("utf-8-sig")
            logger.debug("Fetched SRT with %d chars", len(text))
            return text
    except Exception as e:
        logger.error("Failed to fetch SRT from %s: %s", url, e)
        raise SourceReadError(str(e))

