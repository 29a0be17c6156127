"""
Rich text produced from HTML.

FontDescriptor keeps every facet optional: ``None`` means "not specified" and
lets the cell's own font show through, while a concrete value overrides it.
Conversion into openpyxl objects happens at the edge, in ``to_inline_font``
and ``RichText.to_cell_rich_text``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Optional

from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont

logger = logging.getLogger(__name__)

UNDERLINE_SINGLE = "single"
VERTICAL_SUPERSCRIPT = "superscript"
VERTICAL_SUBSCRIPT = "subscript"

# openpyxl only accepts RGB or ARGB hex strings for colors.
_HEX_COLOR_PATTERN = re.compile(r"^(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


@dataclass(slots=True)
class FontDescriptor:
    """Run properties with only explicitly determined facets set."""

    name: Optional[str] = None
    size: Optional[float] = None
    color: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[str] = None
    vertical_align: Optional[str] = None
    strikethrough: Optional[bool] = None

    def is_empty(self) -> bool:
        """True when no facet has been set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_dict(self) -> Dict[str, Any]:
        """Return the set facets only."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def to_inline_font(self) -> InlineFont:
        """
        Build an openpyxl InlineFont.

        Unset facets stay ``None`` so openpyxl omits them from the run
        properties. A color that is not a hex string, or a size that is not a
        positive finite number, cannot be stored in a workbook and is dropped
        with a warning.
        """
        color = self.color
        if color is not None and not _HEX_COLOR_PATTERN.match(color):
            logger.warning("Dropping color %r: not an RGB hex value", color)
            color = None

        size = self.size
        if size is not None and (not math.isfinite(size) or size <= 0):
            logger.warning("Dropping size %r: not a positive finite number", size)
            size = None

        return InlineFont(
            rFont=self.name,
            sz=size,
            color=color,
            b=self.bold,
            i=self.italic,
            u=self.underline,
            vertAlign=self.vertical_align,
            strike=self.strikethrough,
        )


@dataclass(slots=True)
class RichTextRun:
    """One formatted text run."""

    text: str
    font: FontDescriptor = field(default_factory=FontDescriptor)

    def to_text_block(self) -> TextBlock:
        return TextBlock(self.font.to_inline_font(), self.text)


@dataclass(slots=True)
class RichText:
    """Ordered collection of rich text runs."""

    runs: List[RichTextRun] = field(default_factory=list)

    def add_run(self, run: RichTextRun) -> None:
        self.runs.append(run)

    @property
    def text(self) -> str:
        """Concatenated plain text of all runs."""
        return "".join(run.text for run in self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self) -> Iterator[RichTextRun]:
        return iter(self.runs)

    def __getitem__(self, index: int) -> RichTextRun:
        return self.runs[index]

    def to_cell_rich_text(self) -> CellRichText:
        """Convert into an openpyxl CellRichText value for a worksheet cell."""
        return CellRichText([run.to_text_block() for run in self.runs])

    def to_list(self) -> List[Dict[str, Any]]:
        """JSON-friendly view: text plus the set font facets of every run."""
        return [{"text": run.text, "font": run.font.as_dict()} for run in self.runs]
