"""Pydantic models for declarative page files."""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TextNodeSpec(BaseModel):
    """Escaped text rendered as a ``<span>``."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Plain text; escaped on render.")


class RawNodeSpec(BaseModel):
    """Trusted markup emitted verbatim."""

    kind: Literal["raw"] = "raw"
    html: str = Field(..., description="Trusted HTML fragment, never escaped.")


class ImageNodeSpec(BaseModel):
    """An ``<img />`` element."""

    kind: Literal["image"] = "image"
    src: str = Field(..., description="Image source URL.")
    alt: Optional[str] = Field(None, description="Alternative text.")
    attributes: Dict[str, str] = Field(
        default_factory=dict, description="Extra attributes such as width or loading."
    )


class ContainerNodeSpec(BaseModel):
    """A nestable element such as ``div``, ``section`` or ``p``."""

    kind: Literal["container"] = "container"
    tag: str = Field(..., min_length=1, description="Element name.")
    id: Optional[str] = Field(None, description="Value of the id attribute.")
    classes: List[str] = Field(
        default_factory=list, description="Class names, joined with a space."
    )
    attributes: Dict[str, str] = Field(
        default_factory=dict, description="Extra attributes."
    )
    text: Optional[str] = Field(
        None, description="Text added as the first child, before children."
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Nested nodes in document order."
    )


NodeSpec = Annotated[
    Union[TextNodeSpec, RawNodeSpec, ImageNodeSpec, ContainerNodeSpec],
    Field(discriminator="kind"),
]

ContainerNodeSpec.model_rebuild()


class DocumentConfig(BaseModel):
    """Document-level settings wrapped around the rendered nodes."""

    title: Optional[str] = Field(None, description="Content of the <title> tag.")
    lang: Optional[str] = Field(
        "en", description="Value of <html lang>; null omits the attribute."
    )
    meta: Dict[str, str] = Field(
        default_factory=dict,
        description="Meta name/content pairs; a charset key replaces UTF-8.",
    )
    stylesheets: List[str] = Field(
        default_factory=list, description="Stylesheet hrefs linked in <head>."
    )
    scripts: List[str] = Field(
        default_factory=list, description="Script srcs appended to <body>."
    )
    body_attributes: Dict[str, str] = Field(
        default_factory=dict,
        alias="bodyAttributes",
        description="Attributes placed on the <body> tag.",
    )

    model_config = ConfigDict(populate_by_name=True)


class PageSpec(BaseModel):
    """Schema for a page file."""

    document: DocumentConfig = Field(
        default_factory=DocumentConfig, description="Document settings."
    )
    head: List[NodeSpec] = Field(
        default_factory=list, description="Nodes rendered inside <head>."
    )
    body: List[NodeSpec] = Field(
        default_factory=list, description="Nodes rendered inside <body>."
    )
    output: Optional[str] = Field(
        None, description="Default output path, relative to the page file."
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "ContainerNodeSpec",
    "DocumentConfig",
    "ImageNodeSpec",
    "NodeSpec",
    "PageSpec",
    "RawNodeSpec",
    "TextNodeSpec",
]
