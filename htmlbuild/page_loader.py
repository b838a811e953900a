"""Load declarative page files into element trees and document builders."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .document import HtmlDocumentBuilder
from .elements import ContainerElement, HtmlElement, ImageElement, RawHtml, TextElement
from .io_utils import read_json, read_yaml, warn
from .models import (
    ContainerNodeSpec,
    ImageNodeSpec,
    PageSpec,
    RawNodeSpec,
    TextNodeSpec,
)


class PageConfigError(ValueError):
    """Raised when a page file cannot be parsed or validated."""


def _read_payload(path: Path) -> Any:
    if path.suffix.lower() == ".json":
        return read_json(path)
    return read_yaml(path)


def load_page_spec(path: Path) -> PageSpec:
    """Read and validate a YAML (or ``.json``) page file."""

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Page file not found: {path}")

    try:
        payload = _read_payload(path)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PageConfigError(f"Invalid page file {path}: {exc}") from exc
    except OSError as exc:
        raise PageConfigError(f"Cannot read page file {path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise PageConfigError(f"Page file {path} must contain a mapping at the top level.")

    try:
        page = PageSpec.model_validate(payload)
    except ValidationError as exc:
        raise PageConfigError(f"Invalid page spec in {path}: {exc}") from exc

    if not page.body:
        warn(f"[page] {path} declares no body nodes")
    return page


def node_from_spec(spec: Any) -> HtmlElement:
    """Convert a validated node spec into an element."""

    if isinstance(spec, TextNodeSpec):
        return TextElement(spec.text)
    if isinstance(spec, RawNodeSpec):
        return RawHtml(spec.html)
    if isinstance(spec, ImageNodeSpec):
        image = ImageElement(spec.src)
        if spec.alt is not None:
            image = image.with_alt(spec.alt)
        for key, value in spec.attributes.items():
            image = image.with_attribute(key, value)
        return image
    if isinstance(spec, ContainerNodeSpec):
        container = ContainerElement(spec.tag)
        if spec.id is not None:
            container = container.with_id(spec.id)
        for class_name in spec.classes:
            container = container.with_class(class_name)
        for key, value in spec.attributes.items():
            container = container.with_attribute(key, value)
        if spec.text is not None:
            container = container.with_text(spec.text)
        return container.with_children(node_from_spec(child) for child in spec.children)
    raise TypeError(f"Unsupported node spec: {type(spec).__name__}")


def builder_from_page(page: PageSpec) -> HtmlDocumentBuilder:
    builder = HtmlDocumentBuilder.from_config(page.document)
    for spec in page.head:
        builder = builder.add_head_element(node_from_spec(spec))
    for spec in page.body:
        builder = builder.add_body_element(node_from_spec(spec))
    return builder


def default_output_path(page_path: Path, page: PageSpec) -> Path:
    """Resolve ``output`` relative to the page file, or swap the suffix to .html.

    Refuses a default that would overwrite the page file itself.
    """

    page_path = Path(page_path)
    if page.output:
        return page_path.parent / page.output
    if page_path.suffix.lower() == ".html":
        raise PageConfigError(
            f"Default output for {page_path} is the page file itself; set output or pass -o."
        )
    return page_path.with_suffix(".html")


def load_page(path: Path) -> HtmlDocumentBuilder:
    """Load a page file and return a ready-to-build document builder."""

    return builder_from_page(load_page_spec(path))


__all__ = [
    "PageConfigError",
    "builder_from_page",
    "default_output_path",
    "load_page",
    "load_page_spec",
    "node_from_spec",
]
