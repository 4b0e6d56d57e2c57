"""Errors raised while building or parsing multipart/related messages.

The set of kinds is closed; every error carries a human-readable message and
is a deterministic function of its input.

RFC Reference: RFC 2387 §3
"""

from enum import Enum

from ..mime.errors import MultipartEnvelopeError
from .content_id import ContentID


class RelatedErrorKind(str, Enum):
    """Classification of multipart/related failures"""
    EMPTY_PARTS = "empty_parts"              # No body parts at all
    MISSING_ROOT_TYPE = "missing_root_type"  # Root part has no resolvable Content-Type
    START_NOT_FOUND = "start_not_found"      # start parameter names no part
    MULTIPART_ERROR = "multipart_error"      # Envelope-level failure


class RelatedError(Exception):
    """Base exception for multipart/related errors."""

    kind: RelatedErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyPartsError(RelatedError):
    """Multipart/related entity has no body parts."""

    kind = RelatedErrorKind.EMPTY_PARTS

    def __init__(self):
        super().__init__("Multipart/related must have at least one body part")


class MissingRootTypeError(RelatedError):
    """Root part lacks a resolvable Content-Type."""

    kind = RelatedErrorKind.MISSING_ROOT_TYPE

    def __init__(self):
        super().__init__("Root part must have a Content-Type header")


class StartNotFoundError(RelatedError):
    """The start parameter references a Content-ID no part carries."""

    kind = RelatedErrorKind.START_NOT_FOUND

    def __init__(self, content_id: ContentID):
        self.content_id = content_id
        super().__init__(f"Start Content-ID '{content_id.wire_form}' not found in any body part")


class MultipartError(RelatedError):
    """Wraps a failure of the underlying multipart envelope."""

    kind = RelatedErrorKind.MULTIPART_ERROR

    def __init__(self, error: MultipartEnvelopeError):
        self.error = error
        super().__init__(f"Multipart error: {error}")
