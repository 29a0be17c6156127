"""
Export module for cellquill.

Writes rich text into openpyxl worksheets and XLSX files.
"""

from .xlsx_exporter import DEFAULT_EXPORT_OPTIONS, XLSXRichTextExporter, set_cell_rich_text

__all__ = [
    "DEFAULT_EXPORT_OPTIONS",
    "XLSXRichTextExporter",
    "set_cell_rich_text",
]
