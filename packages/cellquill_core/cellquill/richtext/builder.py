"""
Rich text builder.

Turns flattened runs into RichText using an analysis method. Only facets the
method actually produced are written to the run's font: a ``False`` flag or a
missing name, size or color leaves the facet unset, so the cell's own font
still applies to it.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..models.flat_data import FlatRun
from ..models.rich_text import (
    UNDERLINE_SINGLE,
    VERTICAL_SUBSCRIPT,
    VERTICAL_SUPERSCRIPT,
    FontDescriptor,
    RichText,
    RichTextRun,
)
from .analysis import AnalysisMethod, FormattingFacets

logger = logging.getLogger(__name__)


def make_font(facets: FormattingFacets) -> FontDescriptor:
    """Build a FontDescriptor holding only the produced facets."""
    font = FontDescriptor()

    if facets.font_name is not None:
        font.name = facets.font_name
    if facets.size is not None:
        font.size = facets.size
    if facets.color is not None:
        font.color = facets.color

    if facets.bold:
        font.bold = True
    if facets.italic:
        font.italic = True
    if facets.underline:
        font.underline = UNDERLINE_SINGLE
    if facets.superscript:
        font.vertical_align = VERTICAL_SUPERSCRIPT
    # Written after superscript: a run inside both ends up as subscript
    if facets.subscript:
        font.vertical_align = VERTICAL_SUBSCRIPT
    if facets.strikethrough:
        font.strikethrough = True

    return font


def make_rich_text(flat_runs: Iterable[FlatRun], method: AnalysisMethod) -> RichText:
    """
    Build rich text from flattened runs.

    Args:
        flat_runs: Runs in document order
        method: Analysis method deciding each run's facets

    Returns:
        RichText with one run per input run, in the same order
    """
    result = RichText()
    for flat_run in flat_runs:
        facets = FormattingFacets.evaluate(method, flat_run)
        result.add_run(RichTextRun(text=flat_run.text, font=make_font(facets)))

    logger.debug("Built rich text with %d run(s)", len(result))
    return result
