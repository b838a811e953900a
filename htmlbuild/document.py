"""Assembly of complete HTML documents around rendered elements."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Optional, Tuple

from .elements import AttributePairs, HtmlElement, set_pair
from .escaping import escape_attribute, escape_text
from .render import render_element
from .util_fs import PathLike, save_html

if TYPE_CHECKING:
    from pathlib import Path

    from .models import DocumentConfig

DEFAULT_DOCTYPE = "<!DOCTYPE html>"
DEFAULT_LANG = "en"


@dataclass(frozen=True)
class HtmlDocumentBuilder:
    """Fluent builder for a full ``<!DOCTYPE html>`` document.

    Every method returns a new builder. ``build()`` emits one element per
    line: meta tags, title, stylesheets and head elements inside ``<head>``,
    then body elements followed by script tags inside ``<body>``.
    """

    doctype: str = DEFAULT_DOCTYPE
    document_title: Optional[str] = None
    document_lang: Optional[str] = DEFAULT_LANG
    meta_tags: Tuple[Tuple[str, str], ...] = (("charset", "UTF-8"),)
    stylesheets: Tuple[str, ...] = ()
    scripts: Tuple[str, ...] = ()
    head_elements: Tuple[HtmlElement, ...] = ()
    body_elements: Tuple[HtmlElement, ...] = ()
    body_attributes: AttributePairs = ()

    @classmethod
    def from_config(cls, config: "DocumentConfig") -> "HtmlDocumentBuilder":
        """Create a builder from a validated :class:`DocumentConfig`."""

        builder = cls().lang(config.lang)
        if config.title is not None:
            builder = builder.title(config.title)
        for name, content in config.meta.items():
            if name == "charset":
                builder = builder.charset(content)
            else:
                builder = builder.add_meta(name, content)
        for href in config.stylesheets:
            builder = builder.add_stylesheet(href)
        for src in config.scripts:
            builder = builder.add_script(src)
        for name, value in config.body_attributes.items():
            builder = builder.add_body_attribute(name, value)
        return builder

    def title(self, title: str) -> "HtmlDocumentBuilder":
        return replace(self, document_title=title)

    def lang(self, lang: Optional[str]) -> "HtmlDocumentBuilder":
        """Set the ``lang`` attribute; ``None`` renders a bare ``<html>``."""

        return replace(self, document_lang=lang)

    def add_meta(self, name: str, content: str) -> "HtmlDocumentBuilder":
        return replace(self, meta_tags=self.meta_tags + ((name, content),))

    def charset(self, charset: str) -> "HtmlDocumentBuilder":
        """Replace the value of existing charset meta tags, or add one."""

        if not any(name == "charset" for name, _ in self.meta_tags):
            return self.add_meta("charset", charset)
        meta = tuple(
            (name, charset if name == "charset" else content)
            for name, content in self.meta_tags
        )
        return replace(self, meta_tags=meta)

    def add_stylesheet(self, href: str) -> "HtmlDocumentBuilder":
        return replace(self, stylesheets=self.stylesheets + (href,))

    def add_script(self, src: str) -> "HtmlDocumentBuilder":
        return replace(self, scripts=self.scripts + (src,))

    def add_head_element(self, element: HtmlElement) -> "HtmlDocumentBuilder":
        return replace(self, head_elements=self.head_elements + (element,))

    def add_body_element(self, element: HtmlElement) -> "HtmlDocumentBuilder":
        return replace(self, body_elements=self.body_elements + (element,))

    def add_body_attribute(self, name: str, value: str) -> "HtmlDocumentBuilder":
        return replace(self, body_attributes=set_pair(self.body_attributes, name, value))

    def _head_lines(self) -> List[str]:
        lines: List[str] = []
        for name, content in self.meta_tags:
            if name == "charset":
                lines.append(f'<meta charset="{escape_attribute(content)}">')
            else:
                lines.append(
                    f'<meta name="{escape_attribute(name)}" '
                    f'content="{escape_attribute(content)}">'
                )
        if self.document_title is not None:
            lines.append(f"<title>{escape_text(self.document_title)}</title>")
        for href in self.stylesheets:
            lines.append(f'<link rel="stylesheet" href="{escape_attribute(href)}">')
        lines.extend(render_element(element) for element in self.head_elements)
        return lines

    def _body_open(self) -> str:
        attrs = "".join(
            f' {escape_attribute(name)}="{escape_attribute(value)}"'
            for name, value in self.body_attributes
        )
        return f"<body{attrs}>"

    def build(self) -> str:
        """Render the whole document. There is no trailing newline."""

        if self.document_lang is not None:
            html_open = f'<html lang="{escape_attribute(self.document_lang)}">'
        else:
            html_open = "<html>"

        lines: List[str] = [self.doctype, html_open, "<head>"]
        lines.extend(self._head_lines())
        lines.append("</head>")
        lines.append(self._body_open())
        lines.extend(render_element(element) for element in self.body_elements)
        lines.extend(
            f'<script src="{escape_attribute(src)}"></script>' for src in self.scripts
        )
        lines.append("</body>")
        lines.append("</html>")
        return "\n".join(lines)

    def save(self, path: PathLike) -> "Path":
        """Build the document and write it with :func:`save_html`."""

        return save_html(path, self.build())


__all__ = ["DEFAULT_DOCTYPE", "DEFAULT_LANG", "HtmlDocumentBuilder"]
