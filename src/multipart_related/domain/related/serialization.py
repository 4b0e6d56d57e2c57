"""Multipart/related serialization.

Byte output is produced entirely by the codec; the RFC 2387 parameters were
fixed when the Related value was built.
"""

from ..mime.errors import MultipartEnvelopeError
from ..mime.ports import MultipartCodecPort
from .errors import MultipartError
from .related import Related


def to_bytes(related: Related, codec: MultipartCodecPort) -> bytes:
    """Serialize the multipart body (no outer headers).

    parse_related(to_bytes(x, codec), x.boundary, codec) yields equal parts
    and an equal root type.

    Raises:
        MultipartError: If a part cannot be framed (boundary collision,
            non-ASCII header or parameter)
    """
    envelope = related.multipart
    try:
        return codec.encode(envelope.subtype, envelope.parts, envelope.boundary, envelope.parameters)
    except MultipartEnvelopeError as e:
        raise MultipartError(e) from e


def to_entity_bytes(related: Related, codec: MultipartCodecPort) -> bytes:
    """Serialize MIME-Version and Content-Type headers followed by the body."""
    envelope = related.multipart
    try:
        return codec.encode_entity(envelope.subtype, envelope.parts, envelope.boundary, envelope.parameters)
    except MultipartEnvelopeError as e:
        raise MultipartError(e) from e
