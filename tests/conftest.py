"""Pytest fixtures for multipart/related testing.

Provides reusable test fixtures for:
- Root HTML part and inline image parts
- Fixed boundary values
- Codec instance (stdlib email adapter, CRLF line endings)
- Settings cache isolation

Usage:
    def test_build(html_part, logo_part, boundary):
        related = build_related(html_part, [logo_part], boundary=boundary)
        assert len(related.parts) == 2
"""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from multipart_related import (  # noqa: E402
    BodyPart,
    Boundary,
    ContentID,
    EmailMultipartCodec,
    IMAGE_PNG,
    TEXT_CSS,
    TEXT_HTML_UTF8,
    TransferEncoding,
    make_inline_part,
)
from multipart_related.config import get_settings  # noqa: E402
from multipart_related.dependencies import get_multipart_codec  # noqa: E402

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47])


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep cached settings and the default codec from leaking between tests."""
    monkeypatch.delenv("MULTIPART_RELATED_LINE_SEPARATOR", raising=False)
    monkeypatch.delenv("MULTIPART_RELATED_BOUNDARY_PREFIX", raising=False)
    get_settings.cache_clear()
    get_multipart_codec.cache_clear()
    yield
    get_settings.cache_clear()
    get_multipart_codec.cache_clear()


@pytest.fixture
def codec():
    """Stdlib email codec with CRLF line endings."""
    return EmailMultipartCodec(linesep="\r\n")


@pytest.fixture
def boundary():
    return Boundary("----=_Part_0123456789")


@pytest.fixture
def html_part():
    """Root HTML part referencing the logo by cid: URL."""
    return BodyPart.text("<img src='cid:logo@example.com'>", content_type=TEXT_HTML_UTF8)


@pytest.fixture
def logo_id():
    return ContentID.from_token("logo@example.com")


@pytest.fixture
def logo_part(logo_id):
    """Inline PNG part carrying Content-ID <logo@example.com>."""
    return make_inline_part(logo_id, IMAGE_PNG, PNG_SIGNATURE)


@pytest.fixture
def css_part():
    """Inline style sheet sent as quoted-printable."""
    return make_inline_part(
        "style@example.com",
        TEXT_CSS,
        b"body { color: #333; }",
        transfer_encoding=TransferEncoding.QUOTED_PRINTABLE,
    )
