"""Multipart/related parser.

Splitting is delegated to a MultipartCodecPort; this module re-derives the
RFC 2387 semantics (root part, root type, start) from the parsed parts.

Two entry points:
- parse_related: body bytes plus an out-of-band boundary. The outer header
  is not available, so start and start-info are not recovered.
- parse_related_entity: outer headers plus body. start and start-info are
  recovered and start is checked against the parts' Content-IDs.

RFC Reference: RFC 2387 §3.1-3.3
"""

from typing import Union

from ..mime.boundary import Boundary, coerce_boundary
from ..mime.content_type import ContentType
from ..mime.errors import InvalidContentTypeError, MultipartEnvelopeError
from ..mime.ports import MultipartCodecPort
from .builder import create_envelope, related_parameters
from .content_id import ContentID
from .errors import EmptyPartsError, MissingRootTypeError, MultipartError, StartNotFoundError
from .inline import content_id_of
from .related import (
    RELATED_SUBTYPE,
    START_INFO_PARAMETER,
    START_PARAMETER,
    TYPE_PARAMETER,
    Related,
)


def parse_related(
    data: bytes,
    boundary: Union[Boundary, str],
    codec: MultipartCodecPort,
) -> Related:
    """Parse multipart/related body bytes.

    Args:
        data: Multipart body (no outer headers)
        boundary: Boundary delimiter used in data
        codec: Multipart codec performing the byte-level split

    Returns:
        Related: Message with the first part as root; start and start_info are None

    Raises:
        MultipartError: If the boundary is invalid or the body is malformed
        EmptyPartsError: If the body contains no parts
        MissingRootTypeError: If the first part has no Content-Type
    """
    try:
        boundary = coerce_boundary(boundary)
        parts = codec.decode(data, boundary, RELATED_SUBTYPE)
    except MultipartEnvelopeError as e:
        raise MultipartError(e) from e

    if not parts:
        raise EmptyPartsError()

    root_type = parts[0].content_type
    if root_type is None:
        raise MissingRootTypeError()

    multipart = create_envelope(parts, boundary, related_parameters(root_type))
    return Related(multipart=multipart, root_type=root_type)


def _declared_root_type(content_type: ContentType):
    declared = content_type.get_param(TYPE_PARAMETER)
    if declared is None:
        return None
    try:
        return ContentType.parse(declared)
    except InvalidContentTypeError:
        return None


def parse_related_entity(data: bytes, codec: MultipartCodecPort) -> Related:
    """Parse a complete multipart/related entity (headers and body).

    The root type is the "type" parameter when present and parseable,
    otherwise the first part's Content-Type.

    Args:
        data: Entity bytes starting with the MIME headers
        codec: Multipart codec performing the byte-level split

    Returns:
        Related: Message with start and start_info recovered from the header

    Raises:
        MultipartError: If the entity is malformed or not multipart/related
        EmptyPartsError: If the body contains no parts
        MissingRootTypeError: If no root type can be resolved
        StartNotFoundError: If start names a Content-ID no part carries
    """
    try:
        content_type, parts = codec.decode_entity(data)
        if content_type.maintype != "multipart" or content_type.subtype != RELATED_SUBTYPE:
            raise MultipartEnvelopeError(
                f"Expected multipart/related entity, got {content_type.mime_type}"
            )
        boundary = coerce_boundary(content_type.get_param("boundary", ""))
    except MultipartEnvelopeError as e:
        raise MultipartError(e) from e

    if not parts:
        raise EmptyPartsError()

    root_type = _declared_root_type(content_type) or parts[0].content_type
    if root_type is None:
        raise MissingRootTypeError()

    start = None
    start_value = content_type.get_param(START_PARAMETER)
    if start_value is not None:
        start = ContentID.from_header(start_value)
        if not any(content_id_of(part) == start for part in parts):
            raise StartNotFoundError(start)

    start_info = content_type.get_param(START_INFO_PARAMETER)

    multipart = create_envelope(parts, boundary, related_parameters(root_type, start, start_info))
    return Related(multipart=multipart, root_type=root_type, start=start, start_info=start_info)
