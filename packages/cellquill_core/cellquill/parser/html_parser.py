"""
HTML Parser - builds a parse tree from an HTML fragment.

Handles:
- Element, text and comment nodes in document order
- Void elements (``<br>``, ``<br/>``, ``<img>`` ...) without closing tags
- ``class`` attributes split into class lists
- Implicit closing of elements left open at the end of the fragment
"""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..exceptions import ParsingError
from ..models.nodes import CommentNode, ElementNode, ParseNode, TextNode

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})


class HTMLTreeBuilder(HTMLParser):
    """HTML parser that collects nodes into a tree instead of emitting events."""

    def __init__(self, strict_end_tags: bool = True):
        super().__init__(convert_charrefs=True)
        self.strict_end_tags = strict_end_tags
        self.children: List[ParseNode] = []
        self.open_elements: List[ElementNode] = []

    def reset(self) -> None:
        super().reset()
        self.children = []
        self.open_elements = []

    def _append(self, node: ParseNode) -> None:
        if self.open_elements:
            self.open_elements[-1].children.append(node)
        else:
            self.children.append(node)

    def _make_element(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> ElementNode:
        attributes = {}
        classes: List[str] = []
        for attr_name, attr_value in attrs:
            attr_lower = attr_name.lower()
            if attr_lower == 'class':
                classes.extend((attr_value or '').split())
            else:
                # Valueless attributes (<font bold>) map to an empty string
                attributes[attr_lower] = attr_value or ''
        return ElementNode(name=tag.lower(), attributes=attributes, classes=classes)

    def handle_starttag(self, tag: str, attrs: list) -> None:
        element = self._make_element(tag, attrs)
        self._append(element)
        if element.name not in VOID_ELEMENTS:
            self.open_elements.append(element)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        # Self-closing tag: never becomes a parent
        self._append(self._make_element(tag, attrs))

    def handle_endtag(self, tag: str) -> None:
        tag_lower = tag.lower()

        if tag_lower in VOID_ELEMENTS:
            return

        if self.open_elements and self.open_elements[-1].name == tag_lower:
            self.open_elements.pop()
            return

        if self.strict_end_tags:
            line, column = self.getpos()
            expected = self.open_elements[-1].name if self.open_elements else None
            raise ParsingError(
                f"Unexpected closing tag </{tag_lower}>",
                details=f"expected </{expected}>" if expected else "no element is open",
                line_number=line,
                column_number=column,
            )

        # Lenient mode: close up to the nearest matching element, ignore strays
        for index in range(len(self.open_elements) - 1, -1, -1):
            if self.open_elements[index].name == tag_lower:
                del self.open_elements[index:]
                return
        logger.debug("Ignoring stray closing tag </%s>", tag_lower)

    def handle_data(self, data: str) -> None:
        if not data:
            return
        siblings = self.open_elements[-1].children if self.open_elements else self.children
        # html.parser may split character data; keep one text node per gap
        if siblings and isinstance(siblings[-1], TextNode):
            siblings[-1].text += data
        else:
            siblings.append(TextNode(data))

    def handle_comment(self, data: str) -> None:
        self._append(CommentNode(data))

    def close(self) -> None:
        super().close()
        if self.open_elements:
            logger.debug(
                "Implicitly closing %d unclosed element(s): %s",
                len(self.open_elements),
                ", ".join(element.name for element in self.open_elements),
            )
            self.open_elements = []


class HTMLFragmentParser:
    """
    Parses an HTML fragment into a list of top-level parse nodes.
    """

    def __init__(self, html_content: str, strict_end_tags: bool = True):
        """
        Initialize the fragment parser.

        Args:
            html_content: HTML fragment to parse
            strict_end_tags: Raise ParsingError on closing tags that do not
                match the innermost open element
        """
        self.html_content = html_content
        self.builder = HTMLTreeBuilder(strict_end_tags=strict_end_tags)

    def parse(self) -> List[ParseNode]:
        """
        Parse the fragment.

        Returns:
            Top-level nodes in document order

        Raises:
            ParsingError: If the fragment cannot be parsed
        """
        if not isinstance(self.html_content, str):
            raise ParsingError(
                "HTML content must be a string",
                details=type(self.html_content).__name__,
            )

        self.builder.reset()
        try:
            self.builder.feed(self.html_content)
            self.builder.close()
        except ParsingError:
            raise
        except Exception as e:
            logger.error(f"Failed to parse HTML: {e}")
            raise ParsingError("Failed to parse HTML", details=str(e)) from e

        return self.builder.children

    @staticmethod
    def parse_file(html_path: Union[str, Path], strict_end_tags: bool = True) -> List[ParseNode]:
        """
        Parse an HTML fragment stored in a UTF-8 file.

        Args:
            html_path: Path to the HTML file
            strict_end_tags: See ``HTMLFragmentParser``

        Returns:
            Top-level nodes in document order
        """
        html_path = Path(html_path)
        if not html_path.exists():
            raise ParsingError("HTML file not found", details=str(html_path))

        html_content = html_path.read_text(encoding='utf-8')
        return HTMLFragmentParser(html_content, strict_end_tags=strict_end_tags).parse()


def parse_html(html_content: str, strict_end_tags: bool = True) -> List[ParseNode]:
    """Convenience wrapper around ``HTMLFragmentParser.parse``."""
    return HTMLFragmentParser(html_content, strict_end_tags=strict_end_tags).parse()
