#!/usr/bin/env python3
"""
Example of the high-level API.

Converts a few HTML fragments and writes them into a workbook.
"""

from pathlib import Path

from openpyxl import Workbook

from cellquill import ClassAnalysis, html_to_richtext, html_to_richtext_custom, set_cell_rich_text


def main():
    """Example of the simple API."""

    # 1. Convert a fragment
    html = '<font color="red">test</font><br><font class="test" color="#48D1CC">TE<b>S</b>T<br/>TEST</font>'
    print("🔎 Converting fragment...")
    richtext = html_to_richtext(html)
    for run in richtext:
        print(f"   {run.text!r}: {run.font.as_dict()}")

    # 2. Style by class name instead of tags
    print("🎨 Converting with class styles...")
    analysis = ClassAnalysis({"test": {"italic": True, "font_name": "Courier New"}})
    styled = html_to_richtext_custom(html, analysis)

    # 3. Write both into a workbook
    print("📊 Writing workbook...")
    wb = Workbook()
    ws = wb.active
    set_cell_rich_text(ws["A1"], richtext)
    set_cell_rich_text(ws["A2"], styled)

    output_path = Path("output/simple_api_example.xlsx")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    print(f"   ✅ XLSX saved: {output_path}")


if __name__ == "__main__":
    main()
