"""Errors raised by the multipart envelope layer.

RFC Reference: RFC 2045 §5 (Content-Type), RFC 2046 §5.1 (Multipart)
"""


class MultipartEnvelopeError(Exception):
    """Base exception for malformed multipart envelopes."""
    pass


class InvalidBoundaryError(MultipartEnvelopeError, ValueError):
    """Boundary delimiter violates the RFC 2046 grammar."""
    pass


class InvalidContentTypeError(ValueError):
    """Content-Type header value could not be parsed."""
    pass
