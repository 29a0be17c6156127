"""
Tests for the DOM flattener.
"""

from cellquill.models import CommentNode, ElementContext, ElementNode, TextNode
from cellquill.parser.html_parser import parse_html
from cellquill.richtext.flattener import read_node


def flatten(html):
    return read_node(parse_html(html))


def summary(runs):
    return [(run.text, run.tag_names) for run in runs]


class TestReadNode:
    """Test cases for read_node."""

    def test_empty_sibling_list(self):
        assert read_node([]) == []

    def test_line_break_is_not_a_run_boundary(self):
        runs = flatten("a<br>b")
        assert summary(runs) == [("a\nb", [])]

    def test_single_element(self):
        runs = flatten('<font color="red">test</font>')
        assert summary(runs) == [("test", ["font"])]
        assert runs[0].ancestors[0].attributes["color"] == "red"

    def test_element_start_and_end_split_runs(self, sample_tree):
        runs = read_node(sample_tree)
        assert summary(runs) == [("a", []), ("b", ["b"]), ("c", [])]

    def test_nested_ancestors_outer_to_inner(self):
        runs = flatten('<font face="Arial"><b>x</b></font>')
        assert summary(runs) == [("x", ["font", "b"])]

    def test_siblings_continue_under_parent_context(self):
        runs = flatten("<i>a<b>b</b>c</i>d")
        assert summary(runs) == [
            ("a", ["i"]),
            ("b", ["i", "b"]),
            ("c", ["i"]),
            ("d", []),
        ]

    def test_empty_element_produces_no_run(self):
        runs = flatten('a<font color="red"></font>b')
        assert summary(runs) == [("a", []), ("b", [])]

    def test_empty_element_alone_produces_nothing(self):
        assert flatten('<font color="red"></font>') == []

    def test_line_break_only_element(self):
        runs = flatten("<b><br></b>")
        assert summary(runs) == [("\n", ["b"])]

    def test_comments_ignored(self):
        runs = read_node([TextNode("a"), CommentNode("x"), TextNode("b")])
        assert summary(runs) == [("ab", [])]

    def test_text_preserved_verbatim(self):
        runs = flatten("  two  spaces <b> x </b>")
        assert summary(runs) == [("  two  spaces ", []), (" x ", ["b"])]

    def test_inherited_ancestors_seed_runs(self):
        parent = ElementContext(name="u")
        runs = read_node([TextNode("x"), ElementNode("b", children=[TextNode("y")])], [parent])
        assert summary(runs) == [("x", ["u"]), ("y", ["u", "b"])]

    def test_custom_line_separator(self):
        runs = read_node(parse_html("a<br>b"), line_separator="\r\n")
        assert runs[0].text == "a\r\nb"

    def test_ancestor_lists_never_alias(self):
        runs = flatten("<b>x<i>y</i>z</b>")
        first, _, third = runs
        assert summary(runs) == [("x", ["b"]), ("y", ["b", "i"]), ("z", ["b"])]
        assert first.ancestors == third.ancestors
        assert first.ancestors is not third.ancestors

        first.ancestors.append(ElementContext(name="u"))
        assert third.tag_names == ["b"]

    def test_inherited_list_not_mutated(self):
        parent = [ElementContext(name="u")]
        read_node(parse_html("<b>x</b>y"), parent)
        assert [element.name for element in parent] == ["u"]

    def test_runs_detached_from_parse_tree(self):
        nodes = parse_html('<font color="red">x</font>')
        runs = read_node(nodes)
        nodes[0].attributes["color"] = "blue"
        nodes[0].name = "span"
        assert runs[0].ancestors[0].name == "font"
        assert runs[0].ancestors[0].attributes["color"] == "red"

    def test_regression_fragment(self, regression_html):
        runs = flatten(regression_html)
        assert summary(runs) == [
            ("test", ["font"]),
            ("\n", []),
            ("TE", ["font"]),
            ("S", ["font", "b"]),
            ("T\nTEST", ["font"]),
        ]
        assert runs[2].ancestors[0].classes == ("test",)

    def test_deeply_nested_markup(self):
        depth = 5000
        html = "<b>" * depth + "deep" + "</b>" * depth
        runs = flatten(html)
        assert len(runs) == 1
        assert runs[0].text == "deep"
        assert len(runs[0].ancestors) == depth
