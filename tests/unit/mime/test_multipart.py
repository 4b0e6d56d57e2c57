"""Unit tests for the Multipart envelope value

RFC Reference: RFC 2046 §5.1
"""

import pytest

from multipart_related import (
    BodyPart,
    Boundary,
    InvalidBoundaryError,
    Multipart,
    MultipartEnvelopeError,
)


@pytest.fixture
def part():
    return BodyPart.create("text/plain", b"hello")


class TestMultipartCreate:
    """Test Multipart.create validation"""

    def test_create(self, part):
        multipart = Multipart.create("related", [part], "b1", [("type", '"text/plain"')])
        assert multipart.subtype == "related"
        assert multipart.parts == (part,)
        assert multipart.boundary == Boundary("b1")
        assert multipart.parameters == (("type", '"text/plain"'),)

    def test_subtype_lowercased(self, part):
        assert Multipart.create("Related", [part], "b1").subtype == "related"

    def test_parameters_from_mapping(self, part):
        multipart = Multipart.create("related", [part], "b1", {"Type": '"text/plain"'})
        assert multipart.parameters == (("type", '"text/plain"'),)

    def test_empty_parts_rejected(self):
        with pytest.raises(MultipartEnvelopeError, match="at least one"):
            Multipart.create("related", [], "b1")

    def test_non_body_part_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="Part 1"):
            Multipart.create("related", [part, b"raw"], "b1")

    def test_invalid_subtype_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="subtype"):
            Multipart.create("rel ated", [part], "b1")

    def test_invalid_boundary_rejected(self, part):
        with pytest.raises(InvalidBoundaryError):
            Multipart.create("related", [part], "bad;boundary")

    def test_boundary_parameter_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="boundary"):
            Multipart.create("related", [part], "b1", [("boundary", '"other"')])

    def test_invalid_parameter_name_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="parameter name"):
            Multipart.create("related", [part], "b1", [("bad name", '"x"')])

    def test_line_break_in_parameter_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="line break"):
            Multipart.create("related", [part], "b1", [("type", '"text/plain"\r\nX-Evil: 1')])

    def test_non_ascii_parameter_rejected(self, part):
        with pytest.raises(MultipartEnvelopeError, match="must be ASCII"):
            Multipart.create("related", [part], "b1", [("start-info", '"résumé"')])


class TestMultipartContentType:
    """Test rendering of the outer Content-Type"""

    def test_header_value_boundary_first(self, part):
        multipart = Multipart.create(
            "related", [part], "b1", [("type", '"text/plain"'), ("start", '"<a@b>"')]
        )
        assert multipart.mime_type == "multipart/related"
        assert multipart.header_value == (
            'multipart/related; boundary="b1"; type="text/plain"; start="<a@b>"'
        )

    def test_content_type_unquotes_values(self, part):
        multipart = Multipart.create("related", [part], "b1", [("type", '"text/plain"')])
        content_type = multipart.content_type
        assert content_type.mime_type == "multipart/related"
        assert content_type.get_param("boundary") == "b1"
        assert content_type.get_param("type") == "text/plain"
