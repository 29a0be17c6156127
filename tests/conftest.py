"""
Pytest configuration for cellquill
"""

import logging

import pytest

from cellquill.models import ElementContext, ElementNode, FlatRun, TextNode


REGRESSION_HTML = (
    '<font color="red">test</font><br>'
    '<font class="test" color="#48D1CC">TE<b>S</b>T<br/>TEST</font>'
)


@pytest.fixture(autouse=True)
def configure_logging():
    """Reset the cellquill logger; the CLI installs a RichHandler on it."""
    package_logger = logging.getLogger("cellquill")
    package_logger.setLevel(logging.NOTSET)

    yield

    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir(tmp_path):
    """Output directory for workbooks and HTML files."""
    return tmp_path


@pytest.fixture
def regression_html():
    """Fragment with nested fonts, classes, bold and both <br> spellings."""
    return REGRESSION_HTML


@pytest.fixture
def make_run():
    """Build a FlatRun from (tag, attributes) pairs, outer to inner."""
    def _make_run(text, *elements):
        ancestors = [
            ElementContext(name=name, attributes=attributes or {}, classes=classes)
            for name, attributes, classes in (
                element if len(element) == 3 else (element[0], element[1], ())
                for element in elements
            )
        ]
        return FlatRun(text=text, ancestors=ancestors)
    return _make_run


@pytest.fixture
def sample_tree():
    """Parse tree for 'a<b>b</b>c' built by hand."""
    return [
        TextNode("a"),
        ElementNode("b", children=[TextNode("b")]),
        TextNode("c"),
    ]
