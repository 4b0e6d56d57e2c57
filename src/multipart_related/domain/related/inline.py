"""Inline part factory and Content-ID lookup.

Inline parts are the resources (images, style sheets, fonts) that the root
part references through `cid:` URLs.

RFC Reference: RFC 2387 §3.2, RFC 2392
"""

from email.utils import encode_rfc2231
from typing import Optional, Union

from ..mime.body_part import (
    BodyPart,
    CONTENT_DISPOSITION,
    CONTENT_ID,
    CONTENT_TRANSFER_ENCODING,
    CONTENT_TYPE,
)
from ..mime.content_type import ContentType, TransferEncoding, coerce_content_type, quote_parameter
from .content_id import ContentID


def make_inline_part(
    content_id: Union[ContentID, str],
    content_type: Union[ContentType, str],
    content: bytes,
    transfer_encoding: TransferEncoding = TransferEncoding.BASE64,
    filename: Optional[str] = None,
) -> BodyPart:
    """Create a part that can be referenced via a cid: URL.

    Args:
        content_id: Content-ID, as a ContentID or bare token (no angle brackets)
        content_type: Media type of the content
        content: Content bytes (empty is allowed)
        transfer_encoding: Transfer encoding (defaults to base64 for binary data)
        filename: Optional filename advertised in an inline Content-Disposition;
            non-ASCII names are written as an RFC 2231 filename* parameter

    Returns:
        BodyPart: Part with Content-Type, Content-Transfer-Encoding and Content-ID set

    Raises:
        InvalidContentTypeError: If content_type is an unparseable string

    Example:
        >>> part = make_inline_part("logo@example.com", "image/png", b"\\x89PNG")
        >>> part.get("Content-ID")
        '<logo@example.com>'

        Reference in HTML: <img src="cid:logo@example.com">
    """
    if not isinstance(content_id, ContentID):
        content_id = ContentID.from_token(content_id)

    headers = [
        (CONTENT_TYPE, coerce_content_type(content_type).header_value),
        (CONTENT_TRANSFER_ENCODING, TransferEncoding(transfer_encoding).value),
        (CONTENT_ID, content_id.wire_form),
    ]
    if filename is not None:
        if filename.isascii():
            disposition = f"inline; filename={quote_parameter(filename)}"
        else:
            disposition = f"inline; filename*={encode_rfc2231(filename, 'utf-8')}"
        headers.append((CONTENT_DISPOSITION, disposition))

    return BodyPart(headers=tuple(headers), content=bytes(content))


def content_id_of(part: BodyPart) -> Optional[ContentID]:
    """Return the Content-ID of part, or None if it has none.

    One layer of angle brackets is stripped; values stored without brackets
    are accepted as the bare token.
    """
    value = part.get(CONTENT_ID)
    if value is None:
        return None
    return ContentID.from_header(value)
