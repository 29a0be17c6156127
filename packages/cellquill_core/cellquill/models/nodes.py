"""
Parse tree nodes produced by the HTML parser.

The tree is built once per conversion and read once by the flattener.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass(slots=True)
class TextNode:
    """Character data between tags."""

    text: str


@dataclass(slots=True)
class CommentNode:
    """HTML comment; carries no text into the output."""

    text: str


@dataclass(slots=True)
class ElementNode:
    """Element with its attributes, classes and ordered children."""

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    children: List["ParseNode"] = field(default_factory=list)


ParseNode = Union[TextNode, ElementNode, CommentNode]
