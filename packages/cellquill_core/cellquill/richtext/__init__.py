"""
Rich text module for cellquill.

DOM flattening, formatting analysis, the named color table and the rich text
builder.
"""

from .analysis import AnalysisMethod, ClassAnalysis, DataAnalysis, FormattingFacets
from .builder import make_font, make_rich_text
from .colors import COLOR_MAP, find_color, lookup_color, normalize_color_token
from .flattener import read_node

__all__ = [
    "AnalysisMethod",
    "ClassAnalysis",
    "DataAnalysis",
    "FormattingFacets",
    "make_font",
    "make_rich_text",
    "COLOR_MAP",
    "find_color",
    "lookup_color",
    "normalize_color_token",
    "read_node",
]
