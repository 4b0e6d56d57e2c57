"""Multipart/related domain module - Content-IDs, inline parts, build, parse, serialize

RFC Reference: RFC 2387 (The MIME Multipart/Related Content-type)
"""

from .builder import append_related_parts, build_related, related_parameters
from .content_id import ContentID, InvalidContentIDError, coerce_content_id
from .errors import (
    EmptyPartsError,
    MissingRootTypeError,
    MultipartError,
    RelatedError,
    RelatedErrorKind,
    StartNotFoundError,
)
from .inline import content_id_of, make_inline_part
from .parser import parse_related, parse_related_entity
from .related import RELATED_SUBTYPE, Related
from .serialization import to_bytes, to_entity_bytes

__all__ = [
    "append_related_parts",
    "build_related",
    "related_parameters",
    "ContentID",
    "InvalidContentIDError",
    "coerce_content_id",
    "EmptyPartsError",
    "MissingRootTypeError",
    "MultipartError",
    "RelatedError",
    "RelatedErrorKind",
    "StartNotFoundError",
    "content_id_of",
    "make_inline_part",
    "parse_related",
    "parse_related_entity",
    "RELATED_SUBTYPE",
    "Related",
    "to_bytes",
    "to_entity_bytes",
]
