"""
XLSX exporter for rich text.

Writes converted HTML fragments into worksheet cells using openpyxl.
"""

from typing import Any, Dict, Optional, Sequence, Union
from pathlib import Path
import logging

from openpyxl import Workbook
from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter

from ..api import RichTextConverter
from ..exceptions import ExportError
from ..models.rich_text import RichText

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_OPTIONS: Dict[str, Any] = {
    'sheet_name': 'Rich Text',
    'wrap_text': True,
    'column': 1,
    'start_row': 1,
    'include_source': False,
    'auto_adjust_columns': True,
}

MAX_COLUMN_WIDTH = 50


def set_cell_rich_text(cell: Cell, content: Union[str, RichText],
                       wrap_text: bool = True,
                       converter: Optional[RichTextConverter] = None) -> RichText:
    """
    Store rich text in a worksheet cell.

    Args:
        cell: Target openpyxl cell
        content: HTML fragment or already converted RichText
        wrap_text: Enable wrap text on the cell so line breaks are shown
        converter: Converter used for HTML input (default converter if None)

    Returns:
        The RichText written to the cell
    """
    if isinstance(content, RichText):
        richtext = content
    else:
        richtext = (converter or RichTextConverter()).convert(content)

    cell.value = richtext.to_cell_rich_text()
    if wrap_text:
        current = cell.alignment
        cell.alignment = Alignment(
            horizontal=current.horizontal,
            vertical=current.vertical,
            wrap_text=True,
            shrink_to_fit=current.shrink_to_fit,
            indent=current.indent,
            text_rotation=current.text_rotation,
        )
    return richtext


class XLSXRichTextExporter:
    """
    Exports HTML fragments to an XLSX workbook, one fragment per row.
    """

    def __init__(self, fragments: Sequence[str], output_path: Optional[str] = None,
                 export_options: Optional[Dict[str, Any]] = None,
                 converter: Optional[RichTextConverter] = None):
        """
        Initialize XLSX exporter.

        Args:
            fragments: HTML fragments to export
            output_path: Output path for XLSX file
            export_options: Overrides for DEFAULT_EXPORT_OPTIONS
            converter: Converter for the fragments (default converter if None)
        """
        self.fragments = list(fragments)
        self.output_path = output_path
        self.export_options = dict(DEFAULT_EXPORT_OPTIONS)
        self.export_options.update(export_options or {})
        self.converter = converter or RichTextConverter()

        self.sheet_name = self.get_export_option('sheet_name')
        self.wrap_text = self.get_export_option('wrap_text')
        self.column = int(self.get_export_option('column'))
        self.start_row = int(self.get_export_option('start_row'))
        self.include_source = self.get_export_option('include_source')
        self.auto_adjust_columns = self.get_export_option('auto_adjust_columns')

        if self.column < 1 or self.start_row < 1:
            raise ValueError("column and start_row must be 1 or greater")

    def get_export_option(self, key: str, default: Any = None) -> Any:
        """
        Get export option value.

        Args:
            key: Option key
            default: Default value if key not found

        Returns:
            Option value
        """
        return self.export_options.get(key, default)

    def build_workbook(self) -> Workbook:
        """
        Convert every fragment and write it into a new workbook.

        Raises:
            ParsingError: If a fragment cannot be parsed
        """
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_name

        for offset, fragment in enumerate(self.fragments):
            row = self.start_row + offset
            richtext = set_cell_rich_text(
                ws.cell(row=row, column=self.column),
                fragment,
                wrap_text=self.wrap_text,
                converter=self.converter,
            )
            if self.include_source:
                ws.cell(row=row, column=self.column + 1, value=fragment)
            logger.debug("Row %d: %d run(s)", row, len(richtext))

        if self.auto_adjust_columns:
            self._auto_adjust_columns(ws)

        return wb

    def export_to_file(self, file_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Export fragments to an XLSX file.

        Args:
            file_path: Output file path (uses output_path if not provided)

        Returns:
            Path of the written file
        """
        if file_path is None:
            file_path = self.output_path

        if file_path is None:
            raise ValueError("No output path specified")

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        wb = self.build_workbook()
        try:
            wb.save(file_path)
        except OSError as e:
            logger.error(f"Failed to export to XLSX file: {e}")
            raise ExportError("Failed to write workbook", details=str(e)) from e

        logger.info(f"XLSX exported to {file_path}")
        return file_path

    def _auto_adjust_columns(self, ws) -> None:
        """Size columns to the longest line of text they hold."""
        for column in ws.columns:
            max_length = 0
            column_letter = get_column_letter(column[0].column)

            for cell in column:
                if cell.value is None:
                    continue
                for line in str(cell.value).splitlines() or [""]:
                    max_length = max(max_length, len(line))

            ws.column_dimensions[column_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)

    def get_export_info(self) -> Dict[str, Any]:
        """Get export information."""
        return {
            'format': 'XLSX',
            'fragments': len(self.fragments),
            'sheet_name': self.sheet_name,
            'wrap_text': self.wrap_text,
            'column': self.column,
            'start_row': self.start_row,
            'include_source': self.include_source,
        }
