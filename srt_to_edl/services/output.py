"""EDL output writing."""
from __future__ import annotations

import logging
import os

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


def write_edl(text: str, output_path: str) -> str:
    """Write EDL text to ``output_path``, creating parent folders.

    Returns the ``output_path`` on success.
    """
    logger.info("Writing EDL: %s", output_path)
    try:
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        logger.debug("EDL saved to %s (%d chars)", output_path, len(text))
        return output_path
    except Exception as e:
        logger.error("Failed to write EDL to %s: %s", output_path, e)
        raise OutputWriteError(str(e))
