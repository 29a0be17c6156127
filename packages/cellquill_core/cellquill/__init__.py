"""
cellquill - HTML fragments as spreadsheet cell rich text.

Converts an HTML fragment into ordered, formatted text runs that can be stored
in a worksheet cell. Supported markup: ``<br>``, ``<font face size color>``,
``<b>``/``<strong>``, ``<i>``/``<em>``, ``<u>``/``<ins>``, ``<sup>``, ``<sub>``
and ``<del>``. Other tags are kept in each run's ancestor list for custom
analysis methods.

Quick Start:
    from openpyxl import Workbook
    from cellquill import html_to_richtext, set_cell_rich_text

    richtext = html_to_richtext('<font color="red">test</font><br><b>bold</b>')

    wb = Workbook()
    set_cell_rich_text(wb.active["A1"], richtext)
    wb.save("out.xlsx")
"""

from .version import __version__, __version_info__

from .exceptions import CellQuillError, ParsingError, ExportError

from .api import RichTextConverter, html_to_richtext, html_to_richtext_custom
from .models import (
    ElementContext,
    FlatRun,
    FontDescriptor,
    RichText,
    RichTextRun,
)
from .richtext import (
    AnalysisMethod,
    ClassAnalysis,
    DataAnalysis,
    FormattingFacets,
    lookup_color,
    make_rich_text,
    read_node,
)
from .export import XLSXRichTextExporter, set_cell_rich_text

__all__ = [
    "__version__",
    "__version_info__",
    "CellQuillError",
    "ParsingError",
    "ExportError",
    "RichTextConverter",
    "html_to_richtext",
    "html_to_richtext_custom",
    "ElementContext",
    "FlatRun",
    "FontDescriptor",
    "RichText",
    "RichTextRun",
    "AnalysisMethod",
    "ClassAnalysis",
    "DataAnalysis",
    "FormattingFacets",
    "lookup_color",
    "make_rich_text",
    "read_node",
    "XLSXRichTextExporter",
    "set_cell_rich_text",
]
