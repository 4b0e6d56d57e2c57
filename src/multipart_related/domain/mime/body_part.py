"""Body part of a multipart entity.

A body part is an ordered list of header fields plus its decoded content.
Header names are matched case-insensitively; insertion order is preserved
so that serialization is reproducible.

RFC Reference: RFC 2045 §3, RFC 2046 §5.1
"""

import re
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .content_type import ContentType, TransferEncoding, TEXT_HTML_UTF8, coerce_content_type
from .errors import InvalidContentTypeError

CONTENT_TYPE = "Content-Type"
CONTENT_TRANSFER_ENCODING = "Content-Transfer-Encoding"
CONTENT_ID = "Content-ID"
CONTENT_DISPOSITION = "Content-Disposition"

# RFC 5322 §3.6.8: printable US-ASCII except colon
_FIELD_NAME_RE = re.compile(r"^[!-9;-~]+$")


class BodyPart(BaseModel):
    """Immutable MIME body part.

    Attributes:
        headers: Ordered (name, value) header fields
        content: Decoded payload bytes (transfer encoding is applied on output)

    Example:
        >>> part = BodyPart.create("image/png", b"\\x89PNG")
        >>> part.get("content-type")
        'image/png'
    """

    model_config = ConfigDict(frozen=True)

    headers: Tuple[Tuple[str, str], ...] = Field(default=(), description="Ordered header fields")
    content: bytes = Field(default=b"", description="Decoded body content")

    @field_validator("headers")
    @classmethod
    def validate_headers(cls, v):
        """Reject malformed field names and header injection"""
        for name, value in v:
            if not _FIELD_NAME_RE.match(name):
                raise ValueError(f"Invalid header field name: {name!r}")
            if "\r" in value or "\n" in value:
                raise ValueError(f"Header {name} contains a line break")
        return v

    @classmethod
    def create(
        cls,
        content_type: Union[ContentType, str],
        content: bytes = b"",
        transfer_encoding: Optional[TransferEncoding] = None,
        headers: Tuple[Tuple[str, str], ...] = (),
    ) -> "BodyPart":
        """Build a part from a content type, optional encoding and extra headers.

        Args:
            content_type: Media type of the content
            content: Decoded content bytes
            transfer_encoding: Content-Transfer-Encoding to declare (omitted if None)
            headers: Additional header fields appended after the MIME headers

        Returns:
            BodyPart: New part

        Raises:
            InvalidContentTypeError: If content_type is an unparseable string
        """
        fields: List[Tuple[str, str]] = [(CONTENT_TYPE, coerce_content_type(content_type).header_value)]
        if transfer_encoding is not None:
            fields.append((CONTENT_TRANSFER_ENCODING, TransferEncoding(transfer_encoding).value))
        fields.extend(headers)
        return cls(headers=tuple(fields), content=content)

    @classmethod
    def text(
        cls,
        text: str,
        content_type: Union[ContentType, str] = TEXT_HTML_UTF8,
        transfer_encoding: TransferEncoding = TransferEncoding.QUOTED_PRINTABLE,
    ) -> "BodyPart":
        """Build a text part, encoding text with the declared charset.

        Example:
            >>> BodyPart.text("<p>Hello</p>").content
            b'<p>Hello</p>'
        """
        content_type = coerce_content_type(content_type)
        charset = content_type.get_param("charset", "utf-8")
        return cls.create(content_type, text.encode(charset), transfer_encoding)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value of header name, ignoring case."""
        name = name.lower()
        for field_name, value in self.headers:
            if field_name.lower() == name:
                return value
        return default

    def get_all(self, name: str) -> List[str]:
        """Return every value of header name in order."""
        name = name.lower()
        return [value for field_name, value in self.headers if field_name.lower() == name]

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def with_header(self, name: str, value: str) -> "BodyPart":
        """Return a copy with header name set to value.

        The first existing occurrence is replaced in place and any further
        occurrences are dropped; otherwise the header is appended.
        """
        lowered = name.lower()
        fields = []
        replaced = False
        for field_name, field_value in self.headers:
            if field_name.lower() == lowered:
                if not replaced:
                    fields.append((name, value))
                    replaced = True
                continue
            fields.append((field_name, field_value))
        if not replaced:
            fields.append((name, value))
        return BodyPart(headers=tuple(fields), content=self.content)

    def without_header(self, name: str) -> "BodyPart":
        """Return a copy with every occurrence of header name removed."""
        lowered = name.lower()
        fields = tuple((n, v) for n, v in self.headers if n.lower() != lowered)
        return BodyPart(headers=fields, content=self.content)

    @property
    def content_type(self) -> Optional[ContentType]:
        """Declared media type, or None if absent or unparseable."""
        value = self.get(CONTENT_TYPE)
        if value is None:
            return None
        try:
            return ContentType.parse(value)
        except InvalidContentTypeError:
            return None

    @property
    def transfer_encoding(self) -> Optional[TransferEncoding]:
        """Declared Content-Transfer-Encoding, or None if absent or unknown."""
        return TransferEncoding.parse(self.get(CONTENT_TRANSFER_ENCODING))
