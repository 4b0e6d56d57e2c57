"""MIME envelope domain module - body parts, boundaries, media types, multipart values

RFC Reference: RFC 2045, RFC 2046
"""

from .body_part import (
    BodyPart,
    CONTENT_DISPOSITION,
    CONTENT_ID,
    CONTENT_TRANSFER_ENCODING,
    CONTENT_TYPE,
)
from .boundary import Boundary, coerce_boundary
from .content_type import (
    ContentType,
    TransferEncoding,
    coerce_content_type,
    quote_parameter,
    IMAGE_GIF,
    IMAGE_JPEG,
    IMAGE_PNG,
    TEXT_CSS,
    TEXT_HTML_UTF8,
    TEXT_PLAIN_UTF8,
)
from .errors import InvalidBoundaryError, InvalidContentTypeError, MultipartEnvelopeError
from .multipart import Multipart

__all__ = [
    "BodyPart",
    "CONTENT_DISPOSITION",
    "CONTENT_ID",
    "CONTENT_TRANSFER_ENCODING",
    "CONTENT_TYPE",
    "Boundary",
    "coerce_boundary",
    "ContentType",
    "TransferEncoding",
    "coerce_content_type",
    "quote_parameter",
    "IMAGE_GIF",
    "IMAGE_JPEG",
    "IMAGE_PNG",
    "TEXT_CSS",
    "TEXT_HTML_UTF8",
    "TEXT_PLAIN_UTF8",
    "InvalidBoundaryError",
    "InvalidContentTypeError",
    "MultipartEnvelopeError",
    "Multipart",
]
