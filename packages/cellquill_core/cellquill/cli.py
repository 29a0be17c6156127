"""
Command-line interface for cellquill.

Usage:
    cellquill inspect '<font color="red">test</font><br><b>bold</b>'
    cellquill inspect --file fragment.html --json
    cellquill convert '<b>bold</b>' --output out.xlsx --cell B2
    cellquill version
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.utils.cell import column_index_from_string, coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .api import RichTextConverter
from .exceptions import CellQuillError, ParsingError
from .export import set_cell_rich_text
from .richtext.analysis import FormattingFacets
from .utils.logger import setup_logging

LOG_LEVEL_ENV = "CELLQUILL_LOG_LEVEL"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cellquill",
        description="cellquill - convert HTML fragments into spreadsheet cell rich text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cellquill inspect '<font color="red">test</font><br><b>bold</b>'
  cellquill inspect --file fragment.html --json
  cellquill convert '<b>bold</b>' --output out.xlsx --cell B2
  cellquill version
        """,
    )
    parser.add_argument(
        "--log-level",
        help=f"Log level (default: ${LOG_LEVEL_ENV} or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Inspect command
    inspect_parser = subparsers.add_parser("inspect", help="Show the runs an HTML fragment converts into")
    _add_source_arguments(inspect_parser)
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )
    inspect_parser.add_argument(
        "--ancestors",
        action="store_true",
        help="Also show the enclosing tags of every run"
    )

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Write an HTML fragment into an XLSX cell")
    _add_source_arguments(convert_parser)
    convert_parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output XLSX file path"
    )
    convert_parser.add_argument(
        "--cell",
        default="A1",
        help="Target cell (default: A1)"
    )
    convert_parser.add_argument(
        "--sheet",
        default="Rich Text",
        help="Worksheet name (default: Rich Text)"
    )
    convert_parser.add_argument(
        "--no-wrap",
        action="store_true",
        help="Do not enable wrap text on the target cell"
    )

    # Version command
    subparsers.add_parser("version", help="Show version information")

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("html", nargs="?", help="HTML fragment")
    parser.add_argument("--file", help="Read the HTML fragment from a UTF-8 file")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore closing tags that do not match the open element"
    )


def _read_source(args) -> Optional[str]:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return args.html


def _converter(args) -> RichTextConverter:
    return RichTextConverter(conversion_options={'strict_end_tags': not args.lenient})


def cmd_inspect(args, console: Console) -> int:
    """Handle inspect command."""
    html = _read_source(args)
    if html is None:
        console.print("[red]Error: no HTML given (argument or --file)[/red]")
        return 1

    converter = _converter(args)
    flat_runs = converter.flatten(html)

    if args.json:
        rows = []
        for flat_run in flat_runs:
            facets = FormattingFacets.evaluate(converter.method, flat_run)
            row = {"text": flat_run.text, "facets": facets_to_dict(facets)}
            if args.ancestors:
                row["ancestors"] = flat_run.tag_names
            rows.append(row)
        console.print_json(json.dumps(rows, ensure_ascii=False))
        return 0

    table = Table(title=f"{len(flat_runs)} run(s)")
    table.add_column("#", justify="right")
    table.add_column("Text")
    table.add_column("Font")
    table.add_column("Size", justify="right")
    table.add_column("Color")
    table.add_column("Flags")
    if args.ancestors:
        table.add_column("Ancestors")

    for index, flat_run in enumerate(flat_runs, start=1):
        facets = FormattingFacets.evaluate(converter.method, flat_run)
        flags = [name for name, value in facets_to_dict(facets).items() if value is True]
        row = [
            str(index),
            repr(flat_run.text),
            facets.font_name or "",
            "" if facets.size is None else f"{facets.size:g}",
            facets.color or "",
            ", ".join(flags),
        ]
        if args.ancestors:
            row.append(" > ".join(flat_run.tag_names))
        table.add_row(*(Text(value) for value in row))

    console.print(table)
    return 0


def cmd_convert(args, console: Console) -> int:
    """Handle convert command."""
    html = _read_source(args)
    if html is None:
        console.print("[red]Error: no HTML given (argument or --file)[/red]")
        return 1

    try:
        column_letter, row = coordinate_from_string(args.cell)
    except CellCoordinatesException as e:
        console.print(
            f"Error: --cell must name a single cell such as B2 ({e})",
            style="red", markup=False, highlight=False,
        )
        return 1

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = args.sheet
    cell = ws.cell(row=row, column=column_index_from_string(column_letter))
    richtext = set_cell_rich_text(
        cell, html, wrap_text=not args.no_wrap, converter=_converter(args)
    )
    wb.save(output_path)

    console.print(f"Saved {len(richtext)} run(s) to {output_path} ({args.sheet}!{args.cell})")
    return 0


def cmd_version(args=None, console: Optional[Console] = None) -> int:
    """Handle version command."""
    from .version import __version__
    (console or Console()).print(f"cellquill v{__version__}")
    return 0


def facets_to_dict(facets: FormattingFacets) -> dict:
    return {
        "font_name": facets.font_name,
        "size": facets.size,
        "color": facets.color,
        "bold": facets.bold,
        "italic": facets.italic,
        "underline": facets.underline,
        "superscript": facets.superscript,
        "subscript": facets.subscript,
        "strikethrough": facets.strikethrough,
    }


def main(argv=None, console: Optional[Console] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    setup_logging(args.log_level or os.environ.get(LOG_LEVEL_ENV, "WARNING"))

    handlers = {
        "inspect": cmd_inspect,
        "convert": cmd_convert,
        "version": cmd_version,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args, console)
    except ParsingError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    except (CellQuillError, OSError) as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 2


if __name__ == "__main__":
    sys.exit(main() or 0)
