"""Multipart envelope value.

Holds the ordered body parts, the boundary and the extra Content-Type
parameters of a multipart entity. Byte-level framing lives in the codec
adapter (see ports.MultipartCodecPort); this module only validates shape.

RFC Reference: RFC 2046 §5.1
"""

from email.utils import unquote
from typing import Iterable, Mapping, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .body_part import BodyPart
from .boundary import Boundary, coerce_boundary
from .content_type import ContentType, is_token
from .errors import MultipartEnvelopeError

Parameters = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Multipart(BaseModel):
    """Validated multipart envelope.

    Attributes:
        subtype: Multipart subtype (e.g., 'related')
        parts: Ordered body parts
        boundary: Delimiter between parts
        parameters: Extra Content-Type parameters as (name, pre-quoted value)
    """

    model_config = ConfigDict(frozen=True)

    subtype: str
    parts: Tuple[BodyPart, ...]
    boundary: Boundary
    parameters: Tuple[Tuple[str, str], ...] = Field(default=())

    @classmethod
    def create(
        cls,
        subtype: str,
        parts: Sequence[BodyPart],
        boundary: Union[Boundary, str],
        parameters: Parameters = (),
    ) -> "Multipart":
        """Validate and assemble a multipart envelope.

        Args:
            subtype: Multipart subtype token
            parts: Body parts in serialization order
            boundary: Boundary value or string
            parameters: Extra parameters; values must already be quoted where
                the grammar requires it. Order is preserved.

        Returns:
            Multipart: Envelope value

        Raises:
            MultipartEnvelopeError: If any envelope rule is violated
        """
        boundary = coerce_boundary(boundary)

        subtype = subtype.strip().lower()
        if not is_token(subtype):
            raise MultipartEnvelopeError(f"Invalid multipart subtype: {subtype!r}")

        parts = tuple(parts)
        if not parts:
            raise MultipartEnvelopeError("Multipart entity must contain at least one body part")
        for index, part in enumerate(parts):
            if not isinstance(part, BodyPart):
                raise MultipartEnvelopeError(
                    f"Part {index} is {type(part).__name__}, expected BodyPart"
                )

        if isinstance(parameters, Mapping):
            parameters = parameters.items()
        normalized = []
        for name, value in parameters:
            name = name.strip().lower()
            if not is_token(name):
                raise MultipartEnvelopeError(f"Invalid parameter name: {name!r}")
            if name == "boundary":
                raise MultipartEnvelopeError("The boundary parameter is set from the boundary value")
            if "\r" in value or "\n" in value:
                raise MultipartEnvelopeError(f"Parameter {name} contains a line break")
            if not value.isascii():
                raise MultipartEnvelopeError(f"Parameter {name} must be ASCII (got {value!r})")
            normalized.append((name, value))

        return cls(subtype=subtype, parts=parts, boundary=boundary, parameters=tuple(normalized))

    @property
    def mime_type(self) -> str:
        return f"multipart/{self.subtype}"

    @property
    def header_value(self) -> str:
        """Content-Type header value with the boundary first, then the extra
        parameters in their stored order, values as supplied."""
        rendered = [self.mime_type, f'boundary="{self.boundary.value}"']
        rendered.extend(f"{name}={value}" for name, value in self.parameters)
        return "; ".join(rendered)

    @property
    def content_type(self) -> ContentType:
        """Outer Content-Type with unquoted parameter values."""
        params = [("boundary", self.boundary.value)]
        params.extend((name, unquote(value)) for name, value in self.parameters)
        return ContentType(maintype="multipart", subtype=self.subtype, parameters=tuple(params))
