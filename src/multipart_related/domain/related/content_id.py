"""Content-ID header value.

Content-ID uses the same msg-id grammar as the RFC 5322 Message-ID header,
`<unique-string@domain>`. Parts of a multipart/related entity are referenced
by it, typically through `cid:` URLs in HTML.

RFC Reference: RFC 2387 §3.2, RFC 2392, RFC 5322 §3.6.4
"""

from dataclasses import dataclass
from email.headerregistry import HeaderRegistry
from typing import Union

_header_registry = HeaderRegistry()


class InvalidContentIDError(ValueError):
    """Content-ID token does not match the msg-id grammar."""
    pass


@dataclass(frozen=True)
class ContentID:
    """Content-ID value compared by its bare token.

    Attributes:
        token: Bare identifier without angle brackets (e.g., 'logo@example.com')

    Example:
        >>> cid = ContentID.from_token("logo@example.com")
        >>> cid.wire_form
        '<logo@example.com>'
        >>> cid == ContentID.from_header("<logo@example.com>")
        True
    """

    token: str

    @classmethod
    def from_token(cls, token: str) -> "ContentID":
        """Wrap token verbatim, without grammar validation."""
        return cls(token)

    @classmethod
    def from_header(cls, value: str) -> "ContentID":
        """Build from a header value, stripping one layer of angle brackets.

        Values without brackets are used as the token as-is.
        """
        value = value.strip()
        if len(value) >= 2 and value.startswith("<") and value.endswith(">"):
            value = value[1:-1]
        return cls(value)

    @classmethod
    def validated(cls, token: str) -> "ContentID":
        """Build from token after checking it against the msg-id grammar.

        Raises:
            InvalidContentIDError: If the token is not a valid msg-id
        """
        content_id = cls(token)
        defects = content_id.defects()
        if defects:
            raise InvalidContentIDError(f"Invalid Content-ID {token!r}: {defects[0]}")
        return content_id

    def defects(self) -> tuple:
        """Grammar defects reported by the stdlib Message-ID parser."""
        header = _header_registry("message-id", self.wire_form)
        return tuple(header.defects)

    @property
    def is_valid(self) -> bool:
        return not self.defects()

    @property
    def wire_form(self) -> str:
        """Token enclosed in angle brackets, as written in headers."""
        return f"<{self.token}>"

    @property
    def cid_url(self) -> str:
        """RFC 2392 URL referencing the part (e.g., 'cid:logo@example.com')."""
        return f"cid:{self.token}"

    def __str__(self) -> str:
        return self.wire_form


def coerce_content_id(content_id: Union[ContentID, str]) -> ContentID:
    """Return content_id as a ContentID; strings may carry angle brackets."""
    if isinstance(content_id, ContentID):
        return content_id
    return ContentID.from_header(content_id)
