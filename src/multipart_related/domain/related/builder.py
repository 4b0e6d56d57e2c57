"""Multipart/related builder.

Assembles a root part and its related parts into one envelope, derives the
RFC 2387 Content-Type parameters and validates the result.

Root-first convention: the root part is always placed first. The start
parameter is an advisory cross-reference and never reorders parts.

RFC Reference: RFC 2387 §3
"""

from typing import List, Optional, Sequence, Tuple, Union

from ..mime.body_part import BodyPart
from ..mime.boundary import Boundary
from ..mime.content_type import ContentType, quote_parameter
from ..mime.errors import InvalidContentTypeError, MultipartEnvelopeError
from ..mime.multipart import Multipart
from .content_id import ContentID, coerce_content_id
from .errors import MissingRootTypeError, MultipartError
from .related import (
    RELATED_SUBTYPE,
    START_INFO_PARAMETER,
    START_PARAMETER,
    TYPE_PARAMETER,
    Related,
)


def related_parameters(
    root_type: ContentType,
    start: Optional[ContentID] = None,
    start_info: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """Build the RFC 2387 Content-Type parameters.

    Order is always type, start, start-info so output is reproducible.
    Values are quoted strings; start is written in its angle-bracket form.

    Example:
        >>> related_parameters(IMAGE_PNG, ContentID("a@b"))
        [('type', '"image/png"'), ('start', '"<a@b>"')]
    """
    parameters = [(TYPE_PARAMETER, quote_parameter(root_type.header_value))]
    if start is not None:
        parameters.append((START_PARAMETER, quote_parameter(start.wire_form)))
    if start_info is not None:
        parameters.append((START_INFO_PARAMETER, quote_parameter(start_info)))
    return parameters


def create_envelope(
    parts: Sequence[BodyPart],
    boundary: Union[Boundary, str],
    parameters: Sequence[Tuple[str, str]],
) -> Multipart:
    """Create the multipart/related envelope, wrapping envelope failures.

    Raises:
        MultipartError: If the envelope rejects the parts, boundary or parameters
    """
    try:
        return Multipart.create(RELATED_SUBTYPE, parts, boundary, parameters)
    except MultipartEnvelopeError as e:
        raise MultipartError(e) from e


def _resolve_root_type(
    root_part: BodyPart,
    root_type: Optional[Union[ContentType, str]],
) -> ContentType:
    if root_type is None:
        resolved = root_part.content_type
    elif isinstance(root_type, ContentType):
        resolved = root_type
    else:
        try:
            resolved = ContentType.parse(root_type)
        except InvalidContentTypeError:
            resolved = None

    if resolved is None:
        raise MissingRootTypeError()
    return resolved


def build_related(
    root_part: BodyPart,
    related_parts: Sequence[BodyPart] = (),
    boundary: Optional[Union[Boundary, str]] = None,
    root_type: Optional[Union[ContentType, str]] = None,
    start: Optional[Union[ContentID, str]] = None,
    start_info: Optional[str] = None,
) -> Related:
    """Create a multipart/related message.

    Args:
        root_part: The root part (typically HTML)
        related_parts: Parts referenced by the root (e.g., images)
        boundary: Boundary delimiter (generated if None)
        root_type: Content-Type of the root part (defaults to the root part's)
        start: Content-ID of the root part (optional)
        start_info: Additional start information (optional)

    Returns:
        Related: The assembled message

    Raises:
        MissingRootTypeError: If no root type can be resolved
        MultipartError: If the envelope is invalid (e.g., a malformed boundary)

    Example:
        html = BodyPart.text("<img src='cid:logo@example.com'>")
        logo = make_inline_part("logo@example.com", IMAGE_PNG, png_bytes)
        related = build_related(html, [logo], boundary="----=_Part_123")
    """
    all_parts = [root_part, *related_parts]

    effective_root_type = _resolve_root_type(root_part, root_type)

    if start is not None:
        start = coerce_content_id(start)

    if boundary is None:
        boundary = Boundary.generate()

    parameters = related_parameters(effective_root_type, start, start_info)
    multipart = create_envelope(all_parts, boundary, parameters)

    return Related(
        multipart=multipart,
        root_type=effective_root_type,
        start=start,
        start_info=start_info,
    )


def append_related_parts(related: Related, parts: Sequence[BodyPart]) -> Related:
    """Return a new message with parts appended after the existing ones.

    Boundary, root type, start and start-info are carried over; the original
    value is left untouched.
    """
    root_part, *existing = related.parts
    return build_related(
        root_part,
        [*existing, *parts],
        boundary=related.boundary,
        root_type=related.root_type,
        start=related.start,
        start_info=related.start_info,
    )
