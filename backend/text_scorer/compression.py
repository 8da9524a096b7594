"""
ZipPy-style entropy layer (compression ratio).

Highly compressible text has lower entropy, which tends to correlate with
machine-generated prose. The ratio is mapped linearly onto a 0-1 score
between two empirically chosen bounds.
"""
import asyncio
import gzip
import logging
import zlib
from dataclasses import dataclass
from typing import Optional

from . import config
from .exceptions import CompressionUnavailableError
from .signals import clamp01

logger = logging.getLogger(__name__)

# Expected empirical range of gzip ratios
RATIO_MIN = 0.28  # maps to score 1 (AI-like)
RATIO_MAX = 0.68  # maps to score 0 (human-like)

# Compression is skipped below this many tokens
MIN_TOKENS = 60


@dataclass(frozen=True)
class ZippyResult:
    compression_ratio: float
    zippy_score: float
    applied: bool = True


NOT_APPLIED = ZippyResult(compression_ratio=0.0, zippy_score=0.0, applied=False)


def _gzip_size(data: bytes, level: int) -> int:
    # mtime=0 keeps the header, and therefore the output, stable across calls
    return len(gzip.compress(data, compresslevel=level, mtime=0))


async def compression_ratio(text: str, level: Optional[int] = None) -> float:
    """
    Gzip-compress the UTF-8 bytes of ``text`` and return compressed/original.

    Compression runs in the default executor so large inputs do not block
    the event loop.

    Raises:
        CompressionUnavailableError: if the compressor fails
    """
    data = text.encode('utf-8')
    if not data:
        return 0.0

    level = config.GZIP_LEVEL if level is None else level
    loop = asyncio.get_running_loop()
    try:
        compressed_size = await loop.run_in_executor(None, _gzip_size, data, level)
    except (OSError, zlib.error, RuntimeError, ValueError) as e:
        raise CompressionUnavailableError(f"gzip compression failed: {e}") from e

    return compressed_size / len(data)


def zippy_score(ratio: float) -> float:
    """Map a compression ratio to [0, 1]: 0.28 or lower -> 1, 0.68 or higher -> 0."""
    return 1 - clamp01((ratio - RATIO_MIN) / (RATIO_MAX - RATIO_MIN))


async def score_compression(text: str, length: int, level: Optional[int] = None) -> ZippyResult:
    """
    Compression score with the short-text gate applied.

    Texts under 60 tokens are not compressed and score exactly 0.

    Args:
        text: Text to score
        length: Token count from the signal vector
        level: gzip level (defaults to config.GZIP_LEVEL)
    """
    if length < MIN_TOKENS:
        return NOT_APPLIED

    ratio = await compression_ratio(text, level)
    logger.debug(f"Compression ratio {ratio:.4f} over {length} tokens")
    return ZippyResult(compression_ratio=ratio, zippy_score=zippy_score(ratio))
