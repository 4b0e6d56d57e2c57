"""Convenience entry points bound to the default codec.

These wrap the domain functions and inject get_multipart_codec() when no
codec is passed explicitly.

Usage:
    from multipart_related import BodyPart, build_related, make_inline_part, to_bytes

    html = BodyPart.text("<img src='cid:logo@example.com'>")
    logo = make_inline_part("logo@example.com", "image/png", png_bytes)
    related = build_related(html, [logo], boundary="----=_Part_123")
    body = to_bytes(related)
"""

from typing import Optional, Union

from .dependencies import get_multipart_codec
from .domain.mime.boundary import Boundary
from .domain.mime.ports import MultipartCodecPort
from .domain.related import parser, serialization
from .domain.related.builder import build_related
from .domain.related.related import Related

__all__ = [
    "build_related",
    "parse_related",
    "parse_related_entity",
    "to_bytes",
    "to_entity_bytes",
]


def parse_related(
    data: bytes,
    boundary: Union[Boundary, str],
    codec: Optional[MultipartCodecPort] = None,
) -> Related:
    """Parse multipart/related body bytes (see domain.related.parser.parse_related)."""
    return parser.parse_related(data, boundary, codec or get_multipart_codec())


def parse_related_entity(data: bytes, codec: Optional[MultipartCodecPort] = None) -> Related:
    """Parse a complete multipart/related entity (see domain.related.parser.parse_related_entity)."""
    return parser.parse_related_entity(data, codec or get_multipart_codec())


def to_bytes(related: Related, codec: Optional[MultipartCodecPort] = None) -> bytes:
    """Serialize the multipart body of related."""
    return serialization.to_bytes(related, codec or get_multipart_codec())


def to_entity_bytes(related: Related, codec: Optional[MultipartCodecPort] = None) -> bytes:
    """Serialize related with its MIME-Version and Content-Type headers."""
    return serialization.to_entity_bytes(related, codec or get_multipart_codec())
