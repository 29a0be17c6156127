"""
Parser module for cellquill.

Turns HTML fragments into parse trees consumed by the flattener.
"""

from .html_parser import HTMLFragmentParser, HTMLTreeBuilder, VOID_ELEMENTS, parse_html

__all__ = [
    "HTMLFragmentParser",
    "HTMLTreeBuilder",
    "VOID_ELEMENTS",
    "parse_html",
]
