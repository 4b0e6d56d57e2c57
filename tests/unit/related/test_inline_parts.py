"""Unit tests for inline part creation and Content-ID lookup

RFC Reference: RFC 2387 §3.2, RFC 2392
"""

import pytest

from multipart_related import (
    BodyPart,
    ContentID,
    IMAGE_PNG,
    InvalidContentTypeError,
    TransferEncoding,
    content_id_of,
    make_inline_part,
)


class TestMakeInlinePart:
    """Test make_inline_part header layout"""

    def test_header_order(self, logo_part):
        """Test Content-Type, Content-Transfer-Encoding, Content-ID in order"""
        assert logo_part.headers == (
            ("Content-Type", "image/png"),
            ("Content-Transfer-Encoding", "base64"),
            ("Content-ID", "<logo@example.com>"),
        )

    def test_content_preserved(self, logo_part):
        assert logo_part.content == bytes([0x89, 0x50, 0x4E, 0x47])

    def test_string_content_id_is_token(self):
        part = make_inline_part("logo@example.com", "image/png", b"x")
        assert part.get("Content-ID") == "<logo@example.com>"

    def test_custom_transfer_encoding(self):
        part = make_inline_part("s@example.com", "text/css", b"p {}", TransferEncoding.QUOTED_PRINTABLE)
        assert part.transfer_encoding == TransferEncoding.QUOTED_PRINTABLE

    def test_empty_content_allowed(self):
        part = make_inline_part("empty@example.com", IMAGE_PNG, b"")
        assert part.content == b""

    def test_filename_adds_inline_disposition(self):
        part = make_inline_part("logo@example.com", IMAGE_PNG, b"x", filename="logo.png")
        assert part.headers[-1] == ("Content-Disposition", 'inline; filename="logo.png"')

    def test_filename_is_escaped(self):
        part = make_inline_part("logo@example.com", IMAGE_PNG, b"x", filename='my "logo".png')
        assert part.get("Content-Disposition") == 'inline; filename="my \\"logo\\".png"'

    def test_non_ascii_filename_uses_extended_parameter(self):
        """Test non-ASCII filenames are percent-encoded as filename*"""
        part = make_inline_part("logo@example.com", IMAGE_PNG, b"x", filename="café.png")
        assert part.get("Content-Disposition") == "inline; filename*=utf-8''caf%C3%A9.png"

    def test_non_ascii_filename_survives_codec(self, codec, boundary):
        part = make_inline_part("logo@example.com", IMAGE_PNG, b"x", filename="café.png")

        data = codec.encode("related", [part], boundary, [])

        assert b"Content-Disposition: inline; filename*=utf-8''caf%C3%A9.png\r\n" in data
        assert codec.decode(data, boundary, "related") == [part]

    def test_no_disposition_without_filename(self, logo_part):
        assert "Content-Disposition" not in logo_part

    def test_invalid_content_type_rejected(self):
        with pytest.raises(InvalidContentTypeError):
            make_inline_part("logo@example.com", "not a type", b"x")


class TestContentIdOf:
    """Test content_id_of lookup"""

    def test_returns_content_id(self, logo_part, logo_id):
        assert content_id_of(logo_part) == logo_id

    def test_none_without_header(self, html_part):
        assert content_id_of(html_part) is None

    def test_accepts_value_without_brackets(self):
        part = BodyPart(headers=(("content-id", "logo@example.com"),))
        assert content_id_of(part) == ContentID.from_token("logo@example.com")
