"""Multipart Codec Port - Domain interface for multipart byte framing.

This port defines the contract for turning body parts into boundary-delimited
bytes and back. The domain never scans for boundaries or writes line breaks
itself; adapters delegate to a MIME library.

RFC Reference: RFC 2046 §5.1.1 (Common Syntax)
Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..body_part import BodyPart
from ..boundary import Boundary
from ..content_type import ContentType


class MultipartCodecPort(ABC):
    """Port interface for multipart encoding and decoding.

    Two shapes of input/output are supported:
    - body: the boundary-delimited part sequence only; the boundary must be
      supplied out of band when decoding
    - entity: MIME-Version and Content-Type headers followed by the body;
      the boundary is read from the Content-Type header

    Example Usage:
        codec = EmailMultipartCodec()

        data = codec.encode("related", parts, Boundary("b1"), [("type", '"text/html"')])
        parts = codec.decode(data, Boundary("b1"), "related")
    """

    @abstractmethod
    def encode(
        self,
        subtype: str,
        parts: Sequence[BodyPart],
        boundary: Boundary,
        parameters: Sequence[Tuple[str, str]],
    ) -> bytes:
        """Serialize parts to multipart body bytes.

        Args:
            subtype: Multipart subtype (e.g., 'related')
            parts: Body parts in order
            boundary: Delimiter between parts
            parameters: Extra Content-Type parameters (name, pre-quoted value)

        Returns:
            bytes: Boundary-delimited body, without outer headers

        Raises:
            MultipartEnvelopeError: If the parts cannot be framed: a payload line
                starts with the boundary delimiter, or a header or parameter
                value is not ASCII
        """
        pass

    @abstractmethod
    def encode_entity(
        self,
        subtype: str,
        parts: Sequence[BodyPart],
        boundary: Boundary,
        parameters: Sequence[Tuple[str, str]],
    ) -> bytes:
        """Serialize parts to a complete entity (outer headers + body).

        Raises:
            MultipartEnvelopeError: If the parts cannot be framed
        """
        pass

    @abstractmethod
    def decode(self, data: bytes, boundary: Boundary, subtype: str) -> List[BodyPart]:
        """Split multipart body bytes into parts.

        Args:
            data: Body bytes (no outer headers)
            boundary: Delimiter used in data
            subtype: Expected multipart subtype

        Returns:
            List[BodyPart]: Parts in order (empty if only a close delimiter)

        Raises:
            MultipartEnvelopeError: If the body is malformed or truncated
        """
        pass

    @abstractmethod
    def decode_entity(self, data: bytes) -> Tuple[ContentType, List[BodyPart]]:
        """Parse a complete entity.

        Returns:
            Tuple of (outer Content-Type, parts)

        Raises:
            MultipartEnvelopeError: If the entity is not a well-formed multipart
        """
        pass
