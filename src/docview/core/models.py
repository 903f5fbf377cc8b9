"""Document data models: metadata and the closed set of content block variants"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class HeaderBlock(BaseModel):
    """A top-level heading."""
    model_config = ConfigDict(frozen=True)
    type: Literal["h1"] = "h1"
    text: str


class ParagraphBlock(BaseModel):
    """A paragraph of body text."""
    model_config = ConfigDict(frozen=True)
    type: Literal["p"] = "p"
    text: str


class CheckboxBlock(BaseModel):
    """A labelled checkbox."""
    model_config = ConfigDict(frozen=True)
    type: Literal["checkbox"] = "checkbox"
    text: str
    checked: bool


# Closed variant set; consumers match on it exhaustively.
Block = Annotated[
    Union[HeaderBlock, ParagraphBlock, CheckboxBlock],
    Field(discriminator="type"),
]


class DocumentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)
    title: str
    modified: datetime


class Document(BaseModel):
    """Parsed document: metadata plus blocks in source order."""
    model_config = ConfigDict(frozen=True)
    metadata: DocumentMetadata
    blocks: tuple[Block, ...] = ()
