from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Optional, Union

from app.utils import encode_image_to_base64, encode_image_to_data_url


class ImagePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: bytes
    media_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @cached_property
    def base64(self) -> str:
        return encode_image_to_base64(self.data)

    @cached_property
    def data_url(self) -> str:
        return encode_image_to_data_url(self.data, self.media_type)


# ----- Rendered report blocks -----
class SectionHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["section_header"] = "section_header"
    text: str


class PropertyRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["property_row"] = "property_row"
    label: str
    value: str


class BulletRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet_row"] = "bullet_row"
    text: str


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    text: str


ReportBlock = Annotated[
    Union[SectionHeader, PropertyRow, BulletRow, Paragraph],
    Field(discriminator="kind"),
]


class AnalysisResponse(BaseModel):
    image_data_url: str
    media_type: str
    raw_report: str
    report: List[ReportBlock]
    demo: bool = False


class ErrorResponse(BaseModel):
    detail: str


class SessionView(BaseModel):
    """Snapshot of a session as shown on the page."""

    image_data_url: Optional[str] = None
    report: List[ReportBlock] = []
    error: Optional[str] = None
    loading: bool = False
    demo: bool = False
