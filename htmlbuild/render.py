"""Recursive serializer for element trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .io_utils import warn

if TYPE_CHECKING:
    from .elements import HtmlElement


def _render_attrs(element: "HtmlElement") -> str:
    attrs = element.attributes()
    if attrs is None:
        return ""
    # Values arrive escaped; the element owns its escaping.
    return "".join(f' {name}="{value}"' for name, value in attrs)


def render_element(element: "HtmlElement") -> str:
    """Render an element and its subtree to a single line of markup."""

    tag = element.tag()
    if not tag and element.is_void():
        return element.text() or ""

    parts: List[str] = [f"<{tag}", _render_attrs(element)]

    if element.is_void():
        if element.has_content():
            warn(f"[render] dropped text/children of void element <{tag}>")
        parts.append(" />")
        return "".join(parts)

    parts.append(">")
    text = element.text()
    if text is not None:
        parts.append(text)
    for child in element.children():
        parts.append(child.render())
    parts.append(f"</{tag}>")
    return "".join(parts)


__all__ = ["render_element"]
