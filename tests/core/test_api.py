"""
Tests for the high-level conversion API.
"""

import logging

import pytest
from openpyxl.cell.rich_text import CellRichText, TextBlock

from cellquill import (
    ClassAnalysis,
    ParsingError,
    RichTextConverter,
    html_to_richtext,
    html_to_richtext_custom,
)
from cellquill.models import FontDescriptor, RichText, RichTextRun


def fonts(richtext):
    return [(run.text, run.font.as_dict()) for run in richtext]


class TestHtmlToRichText:
    """End-to-end conversion with the default analysis method."""

    def test_empty_fragment(self):
        assert len(html_to_richtext("")) == 0

    def test_line_break_inside_run(self):
        assert fonts(html_to_richtext("a<br>b")) == [("a\nb", {})]

    def test_font_color(self):
        assert fonts(html_to_richtext('<font color="red">test</font>')) == [
            ("test", {"color": "FF0000"}),
        ]

    def test_font_face_and_bold_together(self):
        assert fonts(html_to_richtext('<font face="Arial"><b>x</b></font>')) == [
            ("x", {"name": "Arial", "bold": True}),
        ]

    def test_outer_font_color_wins(self):
        richtext = html_to_richtext('<font color="red"><font color="blue">x</font></font>')
        assert fonts(richtext) == [("x", {"color": "FF0000"})]

    def test_empty_element_contributes_no_run(self):
        assert fonts(html_to_richtext('<font color="red" size="3"></font>')) == []

    def test_unparsable_size_is_not_an_error(self):
        assert fonts(html_to_richtext('<font size="large">x</font>')) == [("x", {})]

    def test_size(self):
        assert fonts(html_to_richtext('<font size="14">x</font>')) == [("x", {"size": 14.0})]

    def test_all_formatting_tags(self):
        html = "<b>b</b><strong>s</strong><i>i</i><em>e</em><u>u</u><ins>n</ins><sup>p</sup><sub>d</sub><del>x</del>"
        assert fonts(html_to_richtext(html)) == [
            ("b", {"bold": True}),
            ("s", {"bold": True}),
            ("i", {"italic": True}),
            ("e", {"italic": True}),
            ("u", {"underline": "single"}),
            ("n", {"underline": "single"}),
            ("p", {"vertical_align": "superscript"}),
            ("d", {"vertical_align": "subscript"}),
            ("x", {"strikethrough": True}),
        ]

    def test_unknown_tags_have_no_effect(self):
        assert fonts(html_to_richtext("<span><p>x</p></span>")) == [("x", {})]

    def test_regression_fragment(self, regression_html):
        richtext = html_to_richtext(regression_html)
        assert fonts(richtext) == [
            ("test", {"color": "FF0000"}),
            ("\n", {}),
            ("TE", {"color": "48D1CC"}),
            ("S", {"color": "48D1CC", "bold": True}),
            ("T\nTEST", {"color": "48D1CC"}),
        ]
        assert richtext.text == "test\nTEST\nTEST"

    def test_named_color_fragment(self):
        html = '<font color="red">test</font><br><font class="test" color="green">TE<b>S</b>T<br/>TEST</font>'
        richtext = html_to_richtext(html)
        assert len(richtext) == 5
        assert richtext[3].font.as_dict() == {"color": "00FF00", "bold": True}

    def test_parse_failure_is_terminal(self):
        with pytest.raises(ParsingError):
            html_to_richtext("<b>x</i>")


class TestCustomAnalysis:
    """Conversion with a substituted analysis method."""

    def test_class_analysis(self, regression_html):
        analysis = ClassAnalysis({"test": {"italic": True, "font_name": "Courier"}})
        richtext = html_to_richtext_custom(regression_html, analysis)
        assert fonts(richtext)[0] == ("test", {"color": "FF0000"})
        assert fonts(richtext)[3] == (
            "S", {"name": "Courier", "color": "48D1CC", "bold": True, "italic": True},
        )


class TestRichTextConverter:
    """Options and flattening entry points."""

    def test_default_options(self):
        converter = RichTextConverter()
        assert converter.get_conversion_option("line_separator") == "\n"
        assert converter.get_conversion_option("strict_end_tags") is True
        assert converter.get_conversion_option("missing", 42) == 42

    def test_line_separator_option(self):
        converter = RichTextConverter(conversion_options={"line_separator": "\r\n"})
        assert converter.convert("a<br>b")[0].text == "a\r\nb"

    def test_lenient_end_tags(self):
        converter = RichTextConverter()
        converter.set_conversion_option("strict_end_tags", False)
        assert fonts(converter.convert("<b>x</i>y")) == [("xy", {"bold": True})]

    def test_flatten(self):
        runs = RichTextConverter().flatten("<b>x</b>")
        assert runs[0].tag_names == ["b"]

    def test_converter_reusable(self):
        converter = RichTextConverter()
        assert fonts(converter.convert("<b>x</b>")) == fonts(converter.convert("<b>x</b>"))


class TestOpenpyxlConversion:
    """RichText as an openpyxl cell value."""

    def test_to_cell_rich_text(self, regression_html):
        value = html_to_richtext(regression_html).to_cell_rich_text()
        assert isinstance(value, CellRichText)
        assert len(value) == 5
        assert all(isinstance(block, TextBlock) for block in value)
        assert str(value) == "test\nTEST\nTEST"

    def test_inline_font_leaves_unset_facets_none(self):
        font = FontDescriptor(bold=True).to_inline_font()
        assert font.b is True
        assert font.i is None
        assert font.rFont is None
        assert font.sz is None
        assert font.color is None
        assert font.u is None
        assert font.vertAlign is None

    def test_inline_font_all_facets(self):
        font = FontDescriptor(
            name="Arial", size=12.0, color="48D1CC", italic=True,
            underline="single", vertical_align="subscript", strikethrough=True,
        ).to_inline_font()
        assert font.rFont == "Arial"
        assert font.sz == 12.0
        assert font.color.rgb.endswith("48D1CC")
        assert font.i is True
        assert font.u == "single"
        assert font.vertAlign == "subscript"
        assert font.strike is True

    def test_non_hex_color_dropped_with_warning(self, caplog):
        run = RichTextRun(text="x", font=FontDescriptor(color="NOTACOLOR"))
        with caplog.at_level(logging.WARNING, logger="cellquill"):
            block = run.to_text_block()
        assert block.font.color is None
        assert "NOTACOLOR" in caplog.text

    def test_to_list(self):
        richtext = RichText([RichTextRun("a"), RichTextRun("b", FontDescriptor(bold=True))])
        assert richtext.to_list() == [
            {"text": "a", "font": {}},
            {"text": "b", "font": {"bold": True}},
        ]
