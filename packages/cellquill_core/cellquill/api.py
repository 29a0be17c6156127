"""
High-level API for cellquill.

Simple interface for converting HTML fragments into cell rich text:

    from cellquill import html_to_richtext

    richtext = html_to_richtext('<font color="red">test</font><br><b>bold</b>')
    sheet["A1"].value = richtext.to_cell_rich_text()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .models.flat_data import FlatRun
from .models.rich_text import RichText
from .parser.html_parser import HTMLFragmentParser
from .richtext.analysis import AnalysisMethod, DataAnalysis
from .richtext.builder import make_rich_text
from .richtext.flattener import DEFAULT_LINE_SEPARATOR, read_node

logger = logging.getLogger(__name__)

DEFAULT_CONVERSION_OPTIONS: Dict[str, Any] = {
    'line_separator': DEFAULT_LINE_SEPARATOR,
    'strict_end_tags': True,
}


class RichTextConverter:
    """
    Converts HTML fragments into RichText.

    Holds no state between conversions; one converter may be shared between
    threads.
    """

    def __init__(self, method: Optional[AnalysisMethod] = None,
                 conversion_options: Optional[Dict[str, Any]] = None):
        """
        Initialize converter.

        Args:
            method: Analysis method deciding run formatting (DataAnalysis by default)
            conversion_options: Overrides for DEFAULT_CONVERSION_OPTIONS
        """
        self.method = method if method is not None else DataAnalysis()
        self.conversion_options = dict(DEFAULT_CONVERSION_OPTIONS)
        self.conversion_options.update(conversion_options or {})

    def get_conversion_option(self, key: str, default: Any = None) -> Any:
        """
        Get conversion option value.

        Args:
            key: Option key
            default: Default value if key not found

        Returns:
            Option value
        """
        return self.conversion_options.get(key, default)

    def set_conversion_option(self, key: str, value: Any) -> None:
        self.conversion_options[key] = value

    def flatten(self, html: str) -> List[FlatRun]:
        """
        Parse and flatten an HTML fragment.

        Raises:
            ParsingError: If the fragment cannot be parsed
        """
        parser = HTMLFragmentParser(
            html, strict_end_tags=self.get_conversion_option('strict_end_tags', True)
        )
        nodes = parser.parse()
        return read_node(
            nodes,
            line_separator=self.get_conversion_option('line_separator', DEFAULT_LINE_SEPARATOR),
        )

    def convert(self, html: str) -> RichText:
        """
        Convert an HTML fragment into rich text.

        Args:
            html: HTML fragment

        Returns:
            RichText, one run per flattened span of text

        Raises:
            ParsingError: If the fragment cannot be parsed; nothing is returned
        """
        flat_runs = self.flatten(html)
        richtext = make_rich_text(flat_runs, self.method)
        logger.debug(f"Converted HTML fragment ({len(html)} chars) into {len(richtext)} run(s)")
        return richtext


def html_to_richtext(html: str) -> RichText:
    """Convert HTML into rich text using the default analysis method."""
    return RichTextConverter().convert(html)


def html_to_richtext_custom(html: str, method: AnalysisMethod) -> RichText:
    """Convert HTML into rich text using a caller-supplied analysis method."""
    return RichTextConverter(method=method).convert(html)
