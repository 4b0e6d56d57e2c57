"""Content-Type and Content-Transfer-Encoding values.

Parsing is delegated to the standard library header registry so that
quoting, comments and RFC 2231 continuations follow the stdlib grammar.

RFC Reference: RFC 2045 §5 (Content-Type), §6 (Content-Transfer-Encoding)
"""

import re
from email.headerregistry import HeaderRegistry
from email.utils import quote
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidContentTypeError

# RFC 2045 token: any CHAR except SPACE, CTLs, or tspecials
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

_header_registry = HeaderRegistry()


def is_token(value: str) -> bool:
    """Check if value is a bare RFC 2045 token."""
    return bool(_TOKEN_RE.match(value))


def quote_parameter(value: str) -> str:
    """Render value as a quoted-string, escaping backslash and DQUOTE.

    Example:
        >>> quote_parameter('text/html')
        '"text/html"'
    """
    return '"' + quote(value) + '"'


def format_parameter(value: str) -> str:
    """Render a parameter value, quoting only when the grammar requires it."""
    if value and is_token(value):
        return value
    return quote_parameter(value)


class TransferEncoding(str, Enum):
    """Content-Transfer-Encoding mechanisms (RFC 2045 §6.1)"""
    SEVEN_BIT = "7bit"
    EIGHT_BIT = "8bit"
    BINARY = "binary"
    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["TransferEncoding"]:
        """Map a header value to a mechanism, ignoring case.

        Returns None for absent or unrecognised (x-token) mechanisms.
        """
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ContentType(BaseModel):
    """Parsed MIME media type with ordered parameters.

    Type and subtype are case-insensitive and stored lower-cased. Parameter
    names are stored lower-cased; parameter values are kept verbatim.
    """

    model_config = ConfigDict(frozen=True)

    maintype: str = Field(..., description="Top-level media type (e.g., 'text')")
    subtype: str = Field(..., description="Media subtype (e.g., 'html')")
    parameters: Tuple[Tuple[str, str], ...] = Field(
        default=(), description="Ordered (name, unquoted value) pairs"
    )

    @field_validator("maintype", "subtype")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        """Lower-case and validate type tokens"""
        v = v.strip().lower()
        if not is_token(v):
            raise ValueError(f"Media type component {v!r} is not a valid token")
        return v

    @field_validator("parameters")
    @classmethod
    def normalize_parameter_names(cls, v):
        """Lower-case and validate parameter names"""
        normalized = []
        for name, value in v:
            name = name.strip().lower()
            if not is_token(name):
                raise ValueError(f"Parameter name {name!r} is not a valid token")
            normalized.append((name, value))
        return tuple(normalized)

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        """Parse a Content-Type header value.

        Args:
            value: Header value such as 'text/html; charset="utf-8"'

        Returns:
            ContentType: Parsed media type

        Raises:
            InvalidContentTypeError: If the media type cannot be recovered

        Example:
            >>> ContentType.parse('text/html; charset="utf-8"').header_value
            'text/html; charset=utf-8'
        """
        if not isinstance(value, str) or not value.strip():
            raise InvalidContentTypeError("Content-Type value cannot be empty")

        header = _header_registry("content-type", value)

        # The registry falls back to text/plain when the media type is unparseable
        declared = value.split(";", 1)[0].strip().lower()
        if header.content_type != declared:
            raise InvalidContentTypeError(f"Invalid Content-Type value: {value!r}")

        return cls(
            maintype=header.maintype,
            subtype=header.subtype,
            parameters=tuple(header.params.items()),
        )

    @property
    def mime_type(self) -> str:
        """Bare media type without parameters (e.g., 'image/png')."""
        return f"{self.maintype}/{self.subtype}"

    @property
    def header_value(self) -> str:
        """Canonical header rendering with parameters in stored order."""
        rendered = [self.mime_type]
        for name, value in self.parameters:
            rendered.append(f"{name}={format_parameter(value)}")
        return "; ".join(rendered)

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a parameter value by case-insensitive name."""
        name = name.lower()
        for param_name, value in self.parameters:
            if param_name == name:
                return value
        return default

    def __str__(self) -> str:
        return self.header_value


TEXT_PLAIN_UTF8 = ContentType(maintype="text", subtype="plain", parameters=(("charset", "utf-8"),))
TEXT_HTML_UTF8 = ContentType(maintype="text", subtype="html", parameters=(("charset", "utf-8"),))
TEXT_CSS = ContentType(maintype="text", subtype="css")
IMAGE_PNG = ContentType(maintype="image", subtype="png")
IMAGE_JPEG = ContentType(maintype="image", subtype="jpeg")
IMAGE_GIF = ContentType(maintype="image", subtype="gif")


def coerce_content_type(content_type) -> ContentType:
    """Return content_type as a ContentType, parsing plain strings.

    Raises:
        InvalidContentTypeError: If a string value cannot be parsed
    """
    if isinstance(content_type, ContentType):
        return content_type
    return ContentType.parse(content_type)
