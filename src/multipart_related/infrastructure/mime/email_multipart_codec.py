"""Multipart codec backed by the standard library email package.

Implements MultipartCodecPort with email.generator.BytesGenerator for output
and email.parser.BytesParser for input. The compat32 policy is used with
header folding disabled so header values pass through byte-for-byte.

Transfer encodings:
- base64: email.base64mime.body_encode
- quoted-printable: binascii.b2a_qp in binary mode, so CR and LF are escaped
- 7bit / 8bit / binary / absent: content written byte-for-byte

Every payload round-trips exactly. Content whose lines would be read as a
boundary delimiter is refused rather than written.

RFC Reference: RFC 2045 §6, RFC 2046 §5.1.1
Architecture: Hexagonal - Infrastructure adapter implementing MultipartCodecPort
"""

import binascii
import logging
import re
from email import base64mime
from email import errors as email_errors
from email import policy as email_policy
from email.generator import BytesGenerator
from email.message import Message
from email.parser import BytesParser
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from ...config import get_settings
from ...domain.mime.body_part import BodyPart
from ...domain.mime.boundary import Boundary
from ...domain.mime.content_type import ContentType, TransferEncoding
from ...domain.mime.errors import InvalidContentTypeError, MultipartEnvelopeError
from ...domain.mime.ports import MultipartCodecPort

logger = logging.getLogger(__name__)

# Folded header continuation: line break followed by whitespace
_FOLDING_RE = re.compile(r"\r?\n(?=[ \t])")

# Line breaks as the feed parser splits them
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class _PayloadPreservingGenerator(BytesGenerator):
    """BytesGenerator that writes leaf payloads without rewriting line breaks.

    Multipart containers are still framed by BytesGenerator; string payloads
    (leaf parts, raw nested multipart bodies) are copied through unchanged.
    """

    def _dispatch(self, msg):
        if isinstance(msg._payload, str):
            self.write(msg._payload)
        else:
            super()._dispatch(msg)


class EmailMultipartCodec(MultipartCodecPort):
    """Multipart codec using email.generator / email.parser.

    Stateless after construction; a single instance may be shared between
    threads.

    Example:
        codec = EmailMultipartCodec()
        body = codec.encode("related", parts, Boundary("b1"), [("type", '"text/html"')])
        assert codec.decode(body, Boundary("b1"), "related") == list(parts)
    """

    def __init__(self, linesep: Optional[str] = None):
        """Initialize codec.

        Args:
            linesep: Line separator for generated bytes (defaults to Settings.linesep)
        """
        self.linesep = linesep if linesep is not None else get_settings().linesep
        self.policy = email_policy.compat32.clone(
            linesep=self.linesep,
            max_line_length=None,
        )

    # Encoding

    def encode(
        self,
        subtype: str,
        parts: Sequence[BodyPart],
        boundary: Boundary,
        parameters: Sequence[Tuple[str, str]],
    ) -> bytes:
        entity = self.encode_entity(subtype, parts, boundary, parameters)
        # Outer headers never contain blank lines, so the first one ends them
        _, separator, body = entity.partition((self.linesep * 2).encode("ascii"))
        if not separator:
            raise MultipartEnvelopeError("Generated entity has no header/body separator")
        return body

    def encode_entity(
        self,
        subtype: str,
        parts: Sequence[BodyPart],
        boundary: Boundary,
        parameters: Sequence[Tuple[str, str]],
    ) -> bytes:
        message = Message(policy=self.policy)
        message["MIME-Version"] = "1.0"
        message["Content-Type"] = self._content_type_value(subtype, boundary, parameters)
        for index, part in enumerate(parts):
            message.attach(self._to_message(index, part, boundary))

        data = self._flatten(message)
        logger.debug(
            f"Encoded multipart/{subtype} entity ({len(parts)} parts, {len(data)} bytes)",
            extra={"boundary": boundary.value, "subtype": subtype, "part_count": len(parts)},
        )
        return data

    def _content_type_value(
        self,
        subtype: str,
        boundary: Boundary,
        parameters: Sequence[Tuple[str, str]],
    ) -> str:
        rendered = [f"multipart/{subtype}", f'boundary="{boundary.value}"']
        rendered.extend(f"{name}={value}" for name, value in parameters)
        value = "; ".join(rendered)
        # compat32 would turn the whole header into an RFC 2047 encoded word
        if not value.isascii():
            raise MultipartEnvelopeError(f"Content-Type parameters must be ASCII: {value!r}")
        return value

    def _to_message(self, index: int, part: BodyPart, boundary: Boundary) -> Message:
        message = Message(policy=self.policy)
        for name, value in part.headers:
            if not value.isascii():
                raise MultipartEnvelopeError(
                    f"Body part {index} header {name} must be ASCII; use RFC 2047 or RFC 2231 encoding"
                )
            message[name] = value
        payload = self._encode_payload(part)
        self._check_framing(index, payload, boundary)
        message.set_payload(payload)
        return message

    def _encode_payload(self, part: BodyPart) -> str:
        encoding = part.transfer_encoding
        if encoding == TransferEncoding.BASE64:
            return base64mime.body_encode(part.content, eol=self.linesep)
        if encoding == TransferEncoding.QUOTED_PRINTABLE:
            encoded = binascii.b2a_qp(part.content, quotetabs=True, istext=False).decode("ascii")
            # Only soft line breaks remain; give them the configured separator
            return _LINE_BREAK_RE.sub(self.linesep, encoded)
        # surrogateescape round-trips 8-bit bytes through the generator unchanged
        return part.content.decode("ascii", "surrogateescape")

    def _check_framing(self, index: int, payload: str, boundary: Boundary) -> None:
        """Refuse payloads that the parser would not read back unchanged."""
        for line in _LINE_BREAK_RE.split(payload):
            if line.startswith(boundary.delimiter):
                raise MultipartEnvelopeError(
                    f"Body part {index} contains a line starting with the "
                    f"boundary delimiter '{boundary.delimiter}'"
                )
        # A trailing CR would merge with the LF that opens the next delimiter
        if self.linesep == "\n" and payload.endswith("\r"):
            raise MultipartEnvelopeError(
                f"Body part {index} ends with a bare CR, which LF framing cannot preserve"
            )

    def _flatten(self, message: Message) -> bytes:
        buffer = BytesIO()
        generator = _PayloadPreservingGenerator(buffer, mangle_from_=False, policy=self.policy)
        generator.flatten(message, linesep=self.linesep)
        return buffer.getvalue()

    # Decoding

    def decode(self, data: bytes, boundary: Boundary, subtype: str) -> List[BodyPart]:
        header = f'Content-Type: multipart/{subtype}; boundary="{boundary.value}"{self.linesep}{self.linesep}'
        message = BytesParser(policy=self.policy).parsebytes(header.encode("ascii") + bytes(data))
        parts = self._extract_parts(message, data, boundary)

        logger.debug(
            f"Decoded multipart/{subtype} body ({len(parts)} parts)",
            extra={"boundary": boundary.value, "subtype": subtype, "part_count": len(parts)},
        )
        return parts

    def decode_entity(self, data: bytes) -> Tuple[ContentType, List[BodyPart]]:
        message = BytesParser(policy=self.policy).parsebytes(bytes(data))

        raw_content_type = message.get("Content-Type")
        if raw_content_type is None:
            raise MultipartEnvelopeError("Entity has no Content-Type header")
        try:
            content_type = ContentType.parse(self._unfold(str(raw_content_type)))
        except InvalidContentTypeError as e:
            raise MultipartEnvelopeError(str(e)) from e

        if content_type.maintype != "multipart":
            raise MultipartEnvelopeError(f"Entity is {content_type.mime_type}, not multipart")

        boundary_value = message.get_boundary()
        if not boundary_value:
            raise MultipartEnvelopeError("Multipart entity has no boundary parameter")
        boundary = Boundary(boundary_value)

        parts = self._extract_parts(message, data, boundary)
        logger.debug(
            f"Decoded {content_type.mime_type} entity ({len(parts)} parts)",
            extra={
                "boundary": boundary.value,
                "subtype": content_type.subtype,
                "part_count": len(parts),
            },
        )
        return content_type, parts

    def _extract_parts(self, message: Message, data: bytes, boundary: Boundary) -> List[BodyPart]:
        """Convert parsed subparts, mapping parser defects to envelope errors."""
        defects = message.defects

        if not message.is_multipart():
            if any(isinstance(d, email_errors.StartBoundaryNotFoundDefect) for d in defects):
                # A lone close delimiter is a well-formed body with zero parts
                if self._has_close_delimiter(data, boundary):
                    return []
            raise MultipartEnvelopeError(
                f"Start boundary '{boundary.delimiter}' not found in multipart body"
            )

        if any(isinstance(d, email_errors.CloseBoundaryNotFoundDefect) for d in defects):
            raise MultipartEnvelopeError(
                f"Close boundary '{boundary.close_delimiter}' not found; body is truncated"
            )

        parts = []
        for index, subpart in enumerate(message.get_payload()):
            if subpart.defects:
                logger.warning(
                    f"Body part {index} has defects: {[type(d).__name__ for d in subpart.defects]}",
                    extra={"boundary": boundary.value},
                )
            parts.append(self._to_body_part(subpart))
        return parts

    def _has_close_delimiter(self, data: bytes, boundary: Boundary) -> bool:
        pattern = rb"(?m)^" + re.escape(boundary.close_delimiter.encode("ascii")) + rb"[ \t]*\r?$"
        return re.search(pattern, bytes(data)) is not None

    def _to_body_part(self, message: Message) -> BodyPart:
        headers = tuple((name, self._unfold(str(value))) for name, value in message.raw_items())
        try:
            return BodyPart(headers=headers, content=self._decode_payload(message))
        except ValueError as e:
            raise MultipartEnvelopeError(f"Malformed body part headers: {e}") from e

    def _decode_payload(self, message: Message) -> bytes:
        if message.is_multipart():
            # Nested multipart or message/* part: keep its body verbatim
            entity = self._flatten(message)
            _, _, body = entity.partition((self.linesep * 2).encode("ascii"))
            return body
        payload = message.get_payload(decode=True)
        return payload if payload is not None else b""

    def _unfold(self, value: str) -> str:
        return _FOLDING_RE.sub("", value)
