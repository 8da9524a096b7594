"""
Configuration for the Text Scorer service.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Server settings
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '5000'))
DEBUG = _flag('DEBUG', '0')

# Input limits (characters, after trimming)
MAX_TEXT_LENGTH = int(os.getenv('MAX_TEXT_LENGTH', '50000'))

# Compression layer
GZIP_LEVEL = int(os.getenv('GZIP_LEVEL', '6'))  # zlib default level
# Score with zippy_score = 0 and mark the result degraded when gzip fails,
# instead of failing the request.
COMPRESSION_FALLBACK = _flag('COMPRESSION_FALLBACK', '1')

# Rate limiting
RATELIMIT_ENABLED = _flag('RATELIMIT_ENABLED', '1')
DEFAULT_RATE_LIMIT = os.getenv('DEFAULT_RATE_LIMIT', '100 per hour')
DETECT_RATE_LIMIT = os.getenv('DETECT_RATE_LIMIT', '30 per minute')
