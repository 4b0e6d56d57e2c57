"""Multipart boundary delimiter value.

RFC Reference: RFC 2046 §5.1.1 (Common Syntax)

    boundary := 0*69<bchars> bcharsnospace
    bchars := bcharsnospace / " "
    bcharsnospace := DIGIT / ALPHA / "'" / "(" / ")" /
                     "+" / "_" / "," / "-" / "." /
                     "/" / ":" / "=" / "?"
"""

import re
import uuid
from dataclasses import dataclass
from typing import Optional, Union

from ...config import get_settings
from .errors import InvalidBoundaryError

MAX_BOUNDARY_LENGTH = 70

_BOUNDARY_RE = re.compile(r"^[0-9A-Za-z'()+_,\-./:=? ]{0,69}[0-9A-Za-z'()+_,\-./:=?]$")


@dataclass(frozen=True)
class Boundary:
    """Boundary token separating the body parts of a multipart entity.

    Attributes:
        value: The delimiter token, without the leading "--"

    Example:
        >>> Boundary("CustomBoundary123").value
        'CustomBoundary123'
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidBoundaryError(
                f"Boundary must be a string (got {type(self.value).__name__})"
            )
        if not self.value:
            raise InvalidBoundaryError("Boundary cannot be empty")
        if len(self.value) > MAX_BOUNDARY_LENGTH:
            raise InvalidBoundaryError(
                f"Boundary exceeds {MAX_BOUNDARY_LENGTH} characters (got {len(self.value)})"
            )
        if not _BOUNDARY_RE.match(self.value):
            raise InvalidBoundaryError(
                f"Boundary {self.value!r} contains characters outside RFC 2046 bchars "
                "or ends with a space"
            )

    def __str__(self) -> str:
        return self.value

    @property
    def delimiter(self) -> str:
        """Dash-boundary line that opens each body part."""
        return "--" + self.value

    @property
    def close_delimiter(self) -> str:
        """Line that terminates the last body part."""
        return "--" + self.value + "--"

    @classmethod
    def generate(cls, prefix: Optional[str] = None) -> "Boundary":
        """Create a random boundary.

        Args:
            prefix: Token prefix (defaults to Settings.BOUNDARY_PREFIX)

        Returns:
            Boundary: prefix followed by a UUID4 hex string
        """
        if prefix is None:
            prefix = get_settings().BOUNDARY_PREFIX
        return cls(f"{prefix}{uuid.uuid4().hex}")


def coerce_boundary(boundary: Union[Boundary, str]) -> Boundary:
    """Return boundary as a Boundary, validating plain strings.

    Raises:
        InvalidBoundaryError: If the string violates the boundary grammar
    """
    if isinstance(boundary, Boundary):
        return boundary
    return Boundary(boundary)
