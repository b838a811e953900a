"""Element model: the node interface and its concrete variants.

Every element escapes its own text and attribute values. The serializer in
:mod:`htmlbuild.render` only concatenates what the elements report, so the
escaping contract lives here, one variant at a time.

Elements are immutable. Each ``with_*`` method returns a new element and
leaves the receiver untouched, which makes configuration chainable::

    ContainerElement("div").with_id("main").with_class("card").with_text("Hi")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .escaping import escape_attribute, escape_markup
from .render import render_element

Attributes = List[Tuple[str, str]]
AttributePairs = Tuple[Tuple[str, str], ...]


def set_pair(pairs: AttributePairs, key: str, value: str) -> AttributePairs:
    """Return ``pairs`` with ``key`` set to ``value``, replacing an existing key in place."""

    if any(name == key for name, _ in pairs):
        return tuple((name, value if name == key else current) for name, current in pairs)
    return pairs + ((key, value),)


class HtmlElement(ABC):
    """Anything that can be rendered by :func:`render_element`."""

    @abstractmethod
    def tag(self) -> str:
        """Element name. An empty string means raw content with no wrapping tag."""

    @abstractmethod
    def attributes(self) -> Optional[Attributes]:
        """Escaped ``(name, value)`` pairs, or ``None`` for no attribute section."""

    @abstractmethod
    def text(self) -> Optional[str]:
        """Escaped text content, or ``None``."""

    def children(self) -> Sequence["HtmlElement"]:
        return ()

    @abstractmethod
    def is_void(self) -> bool:
        """True for self-closing elements such as ``<img />``."""

    def render(self) -> str:
        return render_element(self)

    def has_content(self) -> bool:
        return self.text() is not None or len(self.children()) > 0

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        # MarkupSafe protocol: Jinja2 inserts rendered elements without escaping.
        return self.render()


@dataclass(frozen=True)
class TextElement(HtmlElement):
    """Escaped text wrapped in a ``<span>``."""

    content: str

    def tag(self) -> str:
        return "span"

    def attributes(self) -> Optional[Attributes]:
        return None

    def text(self) -> Optional[str]:
        encoded = escape_markup(self.content)
        # Literal apostrophes only; entities already in the output are untouched.
        return encoded.replace("'", "&#x27;")

    def is_void(self) -> bool:
        return False


@dataclass(frozen=True)
class RawHtml(HtmlElement):
    """Trusted markup emitted verbatim, without escaping or a wrapping tag."""

    content: str

    def tag(self) -> str:
        return ""

    def attributes(self) -> Optional[Attributes]:
        return None

    def text(self) -> Optional[str]:
        return self.content

    def is_void(self) -> bool:
        return True

    def render(self) -> str:
        return self.content


@dataclass(frozen=True)
class ImageElement(HtmlElement):
    """An ``<img />`` element."""

    src: str
    alt: Optional[str] = None
    extra_attributes: AttributePairs = ()

    def with_alt(self, alt: str) -> "ImageElement":
        return replace(self, alt=alt)

    def with_attribute(self, key: str, value: str) -> "ImageElement":
        return replace(self, extra_attributes=set_pair(self.extra_attributes, key, value))

    def tag(self) -> str:
        return "img"

    def attributes(self) -> Optional[Attributes]:
        attrs: Attributes = [("src", escape_attribute(self.src))]
        if self.alt is not None:
            attrs.append(("alt", escape_attribute(self.alt)))
        for key, value in self.extra_attributes:
            attrs.append((key, escape_attribute(value)))
        return attrs

    def text(self) -> Optional[str]:
        return None

    def is_void(self) -> bool:
        return True


@dataclass(frozen=True)
class ContainerElement(HtmlElement):
    """A nestable element with an id, classes, attributes and children."""

    tag_name: str
    element_id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    extra_attributes: AttributePairs = ()
    child_elements: Tuple[HtmlElement, ...] = ()

    def with_attribute(self, key: str, value: str) -> "ContainerElement":
        return replace(self, extra_attributes=set_pair(self.extra_attributes, key, value))

    def with_child(self, child: HtmlElement) -> "ContainerElement":
        return replace(self, child_elements=self.child_elements + (child,))

    def with_children(self, children: Iterable[HtmlElement]) -> "ContainerElement":
        return replace(self, child_elements=self.child_elements + tuple(children))

    def with_class(self, class_name: str) -> "ContainerElement":
        return replace(self, classes=self.classes + (class_name,))

    def with_id(self, element_id: str) -> "ContainerElement":
        return replace(self, element_id=element_id)

    def with_text(self, text: str) -> "ContainerElement":
        """Append a :class:`TextElement` child."""

        return self.with_child(TextElement(text))

    def tag(self) -> str:
        return self.tag_name

    def attributes(self) -> Optional[Attributes]:
        attrs: Attributes = []
        if self.element_id is not None:
            attrs.append(("id", escape_attribute(self.element_id)))
        if self.classes:
            attrs.append(("class", escape_attribute(" ".join(self.classes))))
        for key, value in self.extra_attributes:
            attrs.append((escape_attribute(key), escape_attribute(value)))
        return attrs or None

    def text(self) -> Optional[str]:
        return None

    def children(self) -> Sequence[HtmlElement]:
        return self.child_elements

    def is_void(self) -> bool:
        return False


__all__ = [
    "AttributePairs",
    "Attributes",
    "ContainerElement",
    "HtmlElement",
    "ImageElement",
    "RawHtml",
    "TextElement",
    "set_pair",
]
