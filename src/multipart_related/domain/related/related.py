"""RFC 2387 multipart/related message.

A Related value is a compound object: the root part is processed first and
the other parts are referenced from it by Content-ID. Values are created by
build_related() or parse_related() and are never mutated afterwards.

RFC 2387 parameters mirrored on the value:
- type (required): media type of the root body part
- start (optional): Content-ID of the root body part
- start-info (optional): additional information for root processing

RFC Reference: RFC 2387 §3.1-3.3
"""

from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..mime.body_part import BodyPart
from ..mime.boundary import Boundary
from ..mime.content_type import ContentType
from ..mime.multipart import Multipart
from .content_id import ContentID, coerce_content_id
from .inline import content_id_of

RELATED_SUBTYPE = "related"

TYPE_PARAMETER = "type"
START_PARAMETER = "start"
START_INFO_PARAMETER = "start-info"


class Related(BaseModel):
    """Multipart/related message.

    Attributes:
        multipart: Underlying envelope (subtype 'related', root part first)
        root_type: Content-Type of the root part ("type" parameter)
        start: Content-ID of the root part ("start" parameter), advisory only
        start_info: Opaque "start-info" parameter, passed through uninterpreted
    """

    model_config = ConfigDict(frozen=True)

    multipart: Multipart
    root_type: ContentType
    start: Optional[ContentID] = None
    start_info: Optional[str] = None

    @property
    def content_type(self) -> ContentType:
        """The outer Content-Type of this message."""
        return self.multipart.content_type

    @property
    def parts(self) -> Tuple[BodyPart, ...]:
        """All body parts, root first."""
        return self.multipart.parts

    @property
    def boundary(self) -> Boundary:
        return self.multipart.boundary

    @property
    def root_part(self) -> Optional[BodyPart]:
        """The first body part."""
        return self.multipart.parts[0] if self.multipart.parts else None

    @property
    def related_parts(self) -> Tuple[BodyPart, ...]:
        """Parts after the root."""
        return self.multipart.parts[1:]

    @property
    def content_ids(self) -> Dict[ContentID, BodyPart]:
        """Index of parts by Content-ID; the first part wins on duplicates."""
        index: Dict[ContentID, BodyPart] = {}
        for part in self.multipart.parts:
            content_id = content_id_of(part)
            if content_id is not None and content_id not in index:
                index[content_id] = part
        return index

    def find(self, content_id: Union[ContentID, str]) -> Optional[BodyPart]:
        """Return the part carrying content_id, if any."""
        return self.content_ids.get(coerce_content_id(content_id))

    @property
    def start_part(self) -> Optional[BodyPart]:
        """Part named by start, falling back to the root part."""
        if self.start is not None:
            part = self.find(self.start)
            if part is not None:
                return part
        return self.root_part
