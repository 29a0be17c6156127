"""
Models module for cellquill.

Parse tree nodes, flattened HTML data and the rich text result.
"""

from .nodes import TextNode, ElementNode, CommentNode, ParseNode
from .flat_data import ElementContext, FlatRun
from .rich_text import FontDescriptor, RichTextRun, RichText

__all__ = [
    "TextNode",
    "ElementNode",
    "CommentNode",
    "ParseNode",
    "ElementContext",
    "FlatRun",
    "FontDescriptor",
    "RichTextRun",
    "RichText",
]
