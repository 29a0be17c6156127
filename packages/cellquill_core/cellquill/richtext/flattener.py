"""
DOM flattener.

Walks a parse tree and produces FlatRun objects in document order. Text and
line breaks accumulate into the current run; every element start closes the
current run, and the element's children are flattened under the parent's
ancestors plus the element itself. Once the element is done, its following
siblings continue under the parent's ancestors again.

The walk uses an explicit stack of frames instead of recursion, so deeply
nested markup cannot exhaust the interpreter's call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from ..models.flat_data import ElementContext, FlatRun
from ..models.nodes import ElementNode, ParseNode, TextNode

logger = logging.getLogger(__name__)

LINE_BREAK_TAG = "br"
DEFAULT_LINE_SEPARATOR = "\n"


@dataclass
class _Frame:
    """One sibling list being walked, with its inherited ancestors."""

    nodes: Iterator[ParseNode]
    ancestors: List[ElementContext]
    text: List[str] = field(default_factory=list)

    def flush(self, result: List[FlatRun]) -> None:
        if not self.text:
            return
        text = "".join(self.text)
        self.text = []
        if text:
            result.append(FlatRun(text=text, ancestors=list(self.ancestors)))


def read_node(
    node_list: Sequence[ParseNode],
    parent_elements: Sequence[ElementContext] = (),
    line_separator: str = DEFAULT_LINE_SEPARATOR,
) -> List[FlatRun]:
    """
    Flatten ``node_list`` into runs.

    Args:
        node_list: Sibling nodes to walk, in document order
        parent_elements: Ancestors inherited by ``node_list``, outer to inner
        line_separator: Text appended for every ``<br>`` element

    Returns:
        FlatRun list in document order. Every run owns its own ancestor list.
    """
    result: List[FlatRun] = []
    stack = [_Frame(iter(node_list), list(parent_elements))]

    while stack:
        frame = stack[-1]
        node = next(frame.nodes, None)

        if node is None:
            frame.flush(result)
            stack.pop()
            continue

        if isinstance(node, TextNode):
            frame.text.append(node.text)
        elif isinstance(node, ElementNode):
            if node.name == LINE_BREAK_TAG:
                frame.text.append(line_separator)
                continue
            frame.flush(result)
            ancestors = frame.ancestors + [ElementContext.from_element(node)]
            stack.append(_Frame(iter(node.children), ancestors))
        # Comments and other node kinds carry no text

    logger.debug("Flattened %d top-level node(s) into %d run(s)", len(node_list), len(result))
    return result
