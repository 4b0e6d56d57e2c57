"""RFC 2387 multipart/related for Python.

Builds and parses compound MIME documents whose root part (typically HTML)
references sibling parts (images, style sheets, fonts) by Content-ID.

Example:
    from multipart_related import BodyPart, IMAGE_PNG, build_related, make_inline_part, to_bytes

    html = BodyPart.text("<img src='cid:logo@example.com'>")
    logo = make_inline_part("logo@example.com", IMAGE_PNG, png_bytes)
    related = build_related(html, [logo], boundary="----=_Part_123")
    body = to_bytes(related)
"""

from .api import parse_related, parse_related_entity, to_bytes, to_entity_bytes
from .domain.mime import (
    BodyPart,
    Boundary,
    ContentType,
    IMAGE_GIF,
    IMAGE_JPEG,
    IMAGE_PNG,
    InvalidBoundaryError,
    InvalidContentTypeError,
    Multipart,
    MultipartEnvelopeError,
    TEXT_CSS,
    TEXT_HTML_UTF8,
    TEXT_PLAIN_UTF8,
    TransferEncoding,
)
from .domain.mime.ports import MultipartCodecPort
from .domain.related import (
    ContentID,
    EmptyPartsError,
    InvalidContentIDError,
    MissingRootTypeError,
    MultipartError,
    Related,
    RelatedError,
    RelatedErrorKind,
    StartNotFoundError,
    append_related_parts,
    build_related,
    content_id_of,
    make_inline_part,
)
from .infrastructure.mime import EmailMultipartCodec

__version__ = "0.1.0"

__all__ = [
    # Build / parse / serialize
    "build_related",
    "append_related_parts",
    "parse_related",
    "parse_related_entity",
    "to_bytes",
    "to_entity_bytes",
    # Content-ID
    "ContentID",
    "content_id_of",
    "make_inline_part",
    # Values
    "Related",
    "BodyPart",
    "Boundary",
    "ContentType",
    "Multipart",
    "TransferEncoding",
    "IMAGE_GIF",
    "IMAGE_JPEG",
    "IMAGE_PNG",
    "TEXT_CSS",
    "TEXT_HTML_UTF8",
    "TEXT_PLAIN_UTF8",
    # Codec
    "MultipartCodecPort",
    "EmailMultipartCodec",
    # Errors
    "RelatedError",
    "RelatedErrorKind",
    "EmptyPartsError",
    "MissingRootTypeError",
    "StartNotFoundError",
    "MultipartError",
    "MultipartEnvelopeError",
    "InvalidBoundaryError",
    "InvalidContentTypeError",
    "InvalidContentIDError",
]
