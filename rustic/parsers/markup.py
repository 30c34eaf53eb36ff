"""
HTML parsing returning Results instead of raising.

Builds a small element tree with the standard library's HTMLParser. Parsing
is lenient about unclosed elements (they close with their parent) but a
closing tag with no matching open element fails the whole document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any

from ..option import NOTHING, Nothing, Some
from ..result import Err, Ok
from .types import HTMLParseError

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img",
        "input", "link", "meta", "source", "track", "wbr",
    }
)


@dataclass(slots=True)
class HtmlElement:
    """A parsed element; the document itself is the `#document` element."""

    tag: str
    attrs: dict[str, str | None] = field(default_factory=dict)
    children: list[HtmlElement | str] = field(default_factory=list)

    def text_content(self) -> str:
        """Concatenated text of this element and all its descendants."""
        return "".join(
            child if isinstance(child, str) else child.text_content()
            for child in self.children
        )

    def find(self, tag: str) -> Some[HtmlElement] | Nothing:
        """First descendant with `tag`, depth-first."""
        for element in self.iter():
            if element.tag == tag:
                return Some(element)
        return NOTHING

    def find_all(self, tag: str) -> list[HtmlElement]:
        return [element for element in self.iter() if element.tag == tag]

    def iter(self):
        """Yield every descendant element, depth-first, in document order."""
        for child in self.children:
            if isinstance(child, HtmlElement):
                yield child
                yield from child.iter()


class _TreeBuilder(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = HtmlElement("#document")
        self.unmatched: list[str] = []
        self._open = [self.root]

    def handle_starttag(self, tag, attrs):
        element = HtmlElement(tag, dict(attrs))
        self._open[-1].children.append(element)
        if tag not in VOID_ELEMENTS:
            self._open.append(element)

    def handle_startendtag(self, tag, attrs):
        self._open[-1].children.append(HtmlElement(tag, dict(attrs)))

    def handle_endtag(self, tag):
        if tag in VOID_ELEMENTS:
            return
        # Close the nearest matching element along with anything left open inside it
        for depth in range(len(self._open) - 1, 0, -1):
            if self._open[depth].tag == tag:
                del self._open[depth:]
                return
        self.unmatched.append(tag)

    def handle_data(self, data):
        self._open[-1].children.append(data)


def parse_html(text: Any) -> Ok[HtmlElement] | Err[HTMLParseError]:
    """
    Parse an HTML string into an element tree.

    Returns:
        Ok(document) with `document.tag == "#document"`
        Err(StringParseFailed, message) if `text` is not a string or could
        not be tokenized
        Err(QueryParseFailed, message) if a closing tag has no open element

    Usage:
        doc = parse_html("<h1> You are safe </h1>").unwrap()
        doc.text_content().strip()   # "You are safe"
    """
    if not isinstance(text, str):
        return Err(
            HTMLParseError.STRING_PARSE_FAILED,
            f"Expected str, got {type(text).__name__}",
        )

    builder = _TreeBuilder()
    try:
        builder.feed(text)
        builder.close()
    except Exception as e:
        logger.debug("HTML tokenizing failed: %s", e)
        return Err(HTMLParseError.STRING_PARSE_FAILED, str(e))

    if builder.unmatched:
        logger.debug("Unmatched closing tags: %s", builder.unmatched)
        return Err(
            HTMLParseError.QUERY_PARSE_FAILED,
            f"Unmatched closing tag(s): {', '.join(builder.unmatched)}",
        )

    return Ok(builder.root)
