"""
Gzip helpers for report payloads.

Both helpers return ``None`` instead of raising, so callers can fall back
to the uncompressed form.
"""

from __future__ import annotations

import gzip
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def zip_data(data: bytes) -> Optional[bytes]:
    """Gzip-compress ``data``; ``None`` if compression fails."""
    try:
        return gzip.compress(data)
    except (OSError, TypeError) as e:
        logger.error(f"Couldn't compress data: {e}")
        return None


def unzip_data(data: bytes) -> Optional[str]:
    """Decompress gzip ``data`` into UTF-8 text; ``None`` if it isn't valid gzip."""
    try:
        return gzip.decompress(data).decode("utf-8")
    except (OSError, EOFError, UnicodeDecodeError) as e:
        logger.error(f"Couldn't decompress data: {e}")
        return None
