"""
Tests for the HTML fragment parser.
"""

import pytest

from cellquill.exceptions import ParsingError
from cellquill.models import CommentNode, ElementNode, TextNode
from cellquill.parser.html_parser import HTMLFragmentParser, parse_html


class TestHTMLFragmentParser:
    """Test cases for HTMLFragmentParser."""

    def test_parse_text_only(self):
        nodes = parse_html("plain text")
        assert nodes == [TextNode("plain text")]

    def test_parse_empty_fragment(self):
        assert parse_html("") == []

    def test_parse_nested_elements(self):
        nodes = parse_html('<font face="Arial"><b>x</b></font>')

        assert len(nodes) == 1
        font = nodes[0]
        assert isinstance(font, ElementNode)
        assert font.name == "font"
        assert font.attributes == {"face": "Arial"}
        assert len(font.children) == 1
        bold = font.children[0]
        assert bold.name == "b"
        assert bold.children == [TextNode("x")]

    def test_tag_and_attribute_names_lowercased(self):
        nodes = parse_html('<FONT COLOR="Red">x</FONT>')
        assert nodes[0].name == "font"
        # Values keep their case
        assert nodes[0].attributes == {"color": "Red"}

    def test_class_attribute_split_into_classes(self):
        nodes = parse_html('<font class="test  other" color="#48D1CC">x</font>')
        font = nodes[0]
        assert font.classes == ["test", "other"]
        assert "class" not in font.attributes
        assert font.attributes["color"] == "#48D1CC"

    def test_valueless_attribute_is_empty_string(self):
        nodes = parse_html('<font hidden>x</font>')
        assert nodes[0].attributes == {"hidden": ""}

    def test_void_and_self_closing_br(self):
        nodes = parse_html("a<br>b<br/>c")
        assert [type(node) for node in nodes] == [TextNode, ElementNode, TextNode, ElementNode, TextNode]
        assert nodes[1].name == "br" and nodes[1].children == []
        assert nodes[3].name == "br" and nodes[3].children == []
        assert nodes[4] == TextNode("c")

    def test_text_after_void_element_stays_sibling(self):
        nodes = parse_html("<b>x<br>y</b>")
        bold = nodes[0]
        assert [getattr(child, "name", None) for child in bold.children] == [None, "br", None]

    def test_character_references_decoded(self):
        nodes = parse_html("<b>a &amp; b &lt;c&gt;</b>")
        assert nodes[0].children == [TextNode("a & b <c>")]

    def test_comments_kept_as_comment_nodes(self):
        nodes = parse_html("a<!-- note -->b")
        assert nodes == [TextNode("a"), CommentNode(" note "), TextNode("b")]

    def test_unclosed_elements_closed_at_end(self):
        nodes = parse_html("<b>bold <i>both")
        bold = nodes[0]
        assert bold.name == "b"
        assert bold.children[1].name == "i"
        assert bold.children[1].children == [TextNode("both")]

    def test_stray_end_tag_raises(self):
        with pytest.raises(ParsingError) as exc_info:
            parse_html("text</b>")
        assert "</b>" in str(exc_info.value)

    def test_mismatched_end_tag_raises(self):
        with pytest.raises(ParsingError) as exc_info:
            parse_html("<b><i>x</b></i>")
        assert exc_info.value.details == "expected </i>"
        assert exc_info.value.line_number == 1

    def test_lenient_mode_recovers_from_mismatched_tags(self):
        nodes = parse_html("<b><i>x</b>y</i>", strict_end_tags=False)
        assert nodes[0].name == "b"
        assert nodes[0].children[0].name == "i"
        assert nodes[1] == TextNode("y")

    def test_non_string_input_raises(self):
        with pytest.raises(ParsingError):
            HTMLFragmentParser(b"<b>x</b>").parse()

    def test_parser_reusable(self):
        parser = HTMLFragmentParser("<b>x</b>")
        first = parser.parse()
        second = parser.parse()
        assert first == second
        assert first is not second

    def test_parse_file(self, temp_dir):
        html_path = temp_dir / "fragment.html"
        html_path.write_text('<font color="red">zażółć</font>', encoding="utf-8")

        nodes = HTMLFragmentParser.parse_file(html_path)
        assert nodes[0].children == [TextNode("zażółć")]

    def test_parse_missing_file(self, temp_dir):
        with pytest.raises(ParsingError):
            HTMLFragmentParser.parse_file(temp_dir / "missing.html")
