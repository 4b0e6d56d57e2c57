"""Unit tests for multipart/related serialization

RFC Reference: RFC 2046 §5.1.1, RFC 2387 §3
"""

import pytest

from multipart_related import (
    BodyPart,
    EmailMultipartCodec,
    MultipartEnvelopeError,
    MultipartError,
    TransferEncoding,
    build_related,
    parse_related,
    to_bytes,
    to_entity_bytes,
)


class TestToBytes:
    """Test body serialization"""

    def test_body_layout(self, html_part, logo_part, boundary, codec):
        data = to_bytes(build_related(html_part, [logo_part], boundary=boundary), codec)

        assert data.startswith(b"------=_Part_0123456789\r\n")
        assert data.rstrip(b"\r\n").endswith(b"------=_Part_0123456789--")
        assert data.count(b"------=_Part_0123456789\r\n") == 2

    def test_part_headers_in_order(self, html_part, logo_part, boundary, codec):
        data = to_bytes(build_related(html_part, [logo_part], boundary=boundary), codec)

        assert (
            b"Content-Type: image/png\r\n"
            b"Content-Transfer-Encoding: base64\r\n"
            b"Content-ID: <logo@example.com>\r\n"
            b"\r\n"
            b"iVBORw==\r\n"
        ) in data

    def test_quoted_printable_root(self, html_part, boundary, codec):
        data = to_bytes(build_related(html_part, boundary=boundary), codec)
        assert b"<img=20src=3D'cid:logo@example.com'>" in data

    def test_no_outer_headers(self, html_part, boundary, codec):
        data = to_bytes(build_related(html_part, boundary=boundary), codec)
        assert b"MIME-Version" not in data
        assert b"multipart/related" not in data

    def test_deterministic(self, html_part, logo_part, boundary, codec):
        related = build_related(html_part, [logo_part], boundary=boundary, start="a@b")
        assert to_bytes(related, codec) == to_bytes(related, codec)

    def test_lf_line_endings(self, html_part, logo_part, boundary):
        codec = EmailMultipartCodec(linesep="\n")
        related = build_related(html_part, [logo_part], boundary=boundary)

        data = to_bytes(related, codec)

        assert b"\r\n" not in data
        assert parse_related(data, boundary, codec).parts == related.parts

    def test_lf_content_round_trips_exactly(self, boundary, codec):
        """Test unencoded LF content is neither rewritten nor lost"""
        root = BodyPart.create("text/html", b"<p>hi</p>\n")
        related = build_related(root, boundary=boundary)

        parsed = parse_related(to_bytes(related, codec), boundary, codec)

        assert parsed.root_part.content == b"<p>hi</p>\n"

    def test_content_colliding_with_boundary(self, html_part, boundary, codec):
        """Test a part line equal to the delimiter is refused, not emitted"""
        forged = BodyPart.create(
            "text/plain",
            b"intro\r\n------=_Part_0123456789\r\nContent-Type: text/x\r\n\r\nforged",
            TransferEncoding.SEVEN_BIT,
        )
        related = build_related(html_part, [forged], boundary=boundary)

        with pytest.raises(MultipartError) as exc_info:
            to_bytes(related, codec)
        assert isinstance(exc_info.value.error, MultipartEnvelopeError)
        assert "Body part 1" in exc_info.value.message

    def test_non_ascii_part_header(self, boundary, codec):
        root = BodyPart.create("text/plain", b"x", headers=(("Content-Description", "Grüße"),))
        with pytest.raises(MultipartError, match="must be ASCII"):
            to_bytes(build_related(root, boundary=boundary), codec)


class TestToEntityBytes:
    """Test entity serialization with outer headers"""

    def test_outer_headers(self, html_part, logo_part, boundary, codec):
        related = build_related(
            html_part, [logo_part], boundary=boundary, start="logo@example.com", start_info="x"
        )

        data = to_entity_bytes(related, codec)

        assert data.startswith(
            b"MIME-Version: 1.0\r\n"
            b'Content-Type: multipart/related; boundary="----=_Part_0123456789"; '
            b'type="text/html; charset=utf-8"; start="<logo@example.com>"; start-info="x"\r\n'
            b"\r\n"
        )

    def test_entity_ends_with_body(self, html_part, boundary, codec):
        related = build_related(html_part, boundary=boundary)
        assert to_entity_bytes(related, codec).endswith(to_bytes(related, codec))

