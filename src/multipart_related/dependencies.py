"""Default adapter wiring.

This module provides:
- get_multipart_codec: shared codec instance configured from Settings

Call get_multipart_codec.cache_clear() after changing settings in tests.
"""

from functools import lru_cache

from .domain.mime.ports import MultipartCodecPort
from .infrastructure.mime import EmailMultipartCodec


@lru_cache()
def get_multipart_codec() -> MultipartCodecPort:
    """Get the cached default multipart codec.

    Returns:
        MultipartCodecPort: EmailMultipartCodec using Settings.linesep
    """
    return EmailMultipartCodec()
