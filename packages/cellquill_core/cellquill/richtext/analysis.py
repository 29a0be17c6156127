"""
Formatting analysis.

An analysis method maps one FlatRun's ancestor elements to formatting facets.
``DataAnalysis`` reads tag names and ``<font>`` attributes. Any object with the
same methods can be passed to the builder instead, e.g. ``ClassAnalysis``
which styles runs by CSS class names.

Attribute lookups on ``<font>`` scan the ancestors from the outermost element
inwards and stop at the first match, so ``<font color="red"><font
color="blue">x</font></font>`` resolves to red.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable

from ..models.flat_data import FlatRun
from .colors import lookup_color

logger = logging.getLogger(__name__)

FONT_TAG = "font"
BOLD_TAGS = ("b", "strong")
ITALIC_TAGS = ("i", "em")
UNDERLINE_TAGS = ("u", "ins")
SUPERSCRIPT_TAG = "sup"
SUBSCRIPT_TAG = "sub"
STRIKETHROUGH_TAG = "del"

# Decimal or exponent notation, inf or nan; no whitespace or digit separators
_SIZE_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@runtime_checkable
class AnalysisMethod(Protocol):
    """Facets a formatting policy has to provide for each run."""

    def is_tag(self, flat_run: FlatRun, tag: str) -> bool: ...

    def font_name(self, flat_run: FlatRun) -> Optional[str]: ...

    def size(self, flat_run: FlatRun) -> Optional[float]: ...

    def color(self, flat_run: FlatRun) -> Optional[str]: ...

    def is_bold(self, flat_run: FlatRun) -> bool: ...

    def is_italic(self, flat_run: FlatRun) -> bool: ...

    def is_underline(self, flat_run: FlatRun) -> bool: ...

    def is_superscript(self, flat_run: FlatRun) -> bool: ...

    def is_subscript(self, flat_run: FlatRun) -> bool: ...

    def is_strikethrough(self, flat_run: FlatRun) -> bool: ...


@dataclass(slots=True)
class FormattingFacets:
    """All facets of one run as evaluated by an analysis method."""

    font_name: Optional[str] = None
    size: Optional[float] = None
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    superscript: bool = False
    subscript: bool = False
    strikethrough: bool = False

    @classmethod
    def evaluate(cls, method: AnalysisMethod, flat_run: FlatRun) -> "FormattingFacets":
        return cls(
            font_name=method.font_name(flat_run),
            size=method.size(flat_run),
            color=method.color(flat_run),
            bold=method.is_bold(flat_run),
            italic=method.is_italic(flat_run),
            underline=method.is_underline(flat_run),
            superscript=method.is_superscript(flat_run),
            subscript=method.is_subscript(flat_run),
            strikethrough=method.is_strikethrough(flat_run),
        )


def _parse_size(value: str) -> Optional[float]:
    if not _SIZE_PATTERN.fullmatch(value):
        return None
    return float(value)


class DataAnalysis:
    """Default policy: formatting tags plus ``<font face size color>``."""

    def _font_attributes(self, flat_run: FlatRun, attribute: str) -> Iterable[str]:
        for element in flat_run.ancestors:
            value = element.get_by_name_and_attribute(FONT_TAG, attribute)
            if value is not None:
                yield value

    def is_tag(self, flat_run: FlatRun, tag: str) -> bool:
        return any(element.has_name(tag) for element in flat_run.ancestors)

    def font_name(self, flat_run: FlatRun) -> Optional[str]:
        return next(iter(self._font_attributes(flat_run, "face")), None)

    def size(self, flat_run: FlatRun) -> Optional[float]:
        # First parsable size wins; unparsable ones are skipped
        for value in self._font_attributes(flat_run, "size"):
            size = _parse_size(value)
            if size is not None:
                return size
        return None

    def color(self, flat_run: FlatRun) -> Optional[str]:
        value = next(iter(self._font_attributes(flat_run, "color")), None)
        if value is None:
            return None
        return lookup_color(value)

    def is_bold(self, flat_run: FlatRun) -> bool:
        return any(self.is_tag(flat_run, tag) for tag in BOLD_TAGS)

    def is_italic(self, flat_run: FlatRun) -> bool:
        return any(self.is_tag(flat_run, tag) for tag in ITALIC_TAGS)

    def is_underline(self, flat_run: FlatRun) -> bool:
        return any(self.is_tag(flat_run, tag) for tag in UNDERLINE_TAGS)

    def is_superscript(self, flat_run: FlatRun) -> bool:
        return self.is_tag(flat_run, SUPERSCRIPT_TAG)

    def is_subscript(self, flat_run: FlatRun) -> bool:
        return self.is_tag(flat_run, SUBSCRIPT_TAG)

    def is_strikethrough(self, flat_run: FlatRun) -> bool:
        return self.is_tag(flat_run, STRIKETHROUGH_TAG)


class ClassAnalysis:
    """
    Class-name driven policy.

    ``class_styles`` maps a CSS class to facet overrides, e.g.
    ``{"warn": {"color": "red", "bold": True}}``. Facets not provided by any
    class of the run's ancestors come from ``fallback`` (``DataAnalysis`` by
    default). As with ``<font>`` attributes, the outermost ancestor carrying a
    matching class wins.

    Recognized facet keys: ``font_name``, ``size``, ``color``, ``bold``,
    ``italic``, ``underline``, ``superscript``, ``subscript``,
    ``strikethrough``.
    """

    FACETS = (
        "font_name", "size", "color", "bold", "italic",
        "underline", "superscript", "subscript", "strikethrough",
    )

    def __init__(self, class_styles: Mapping[str, Mapping[str, object]],
                 fallback: Optional[AnalysisMethod] = None):
        unknown = {
            key for styles in class_styles.values() for key in styles if key not in self.FACETS
        }
        if unknown:
            raise ValueError(f"Unknown facet(s) in class styles: {', '.join(sorted(unknown))}")
        self.class_styles: Dict[str, Dict[str, object]] = {
            name: dict(styles) for name, styles in class_styles.items()
        }
        self.fallback = fallback if fallback is not None else DataAnalysis()

    def _class_facet(self, flat_run: FlatRun, facet: str):
        for element in flat_run.ancestors:
            for class_name in element.classes:
                styles = self.class_styles.get(class_name)
                if styles and facet in styles:
                    return styles[facet]
        return None

    def is_tag(self, flat_run: FlatRun, tag: str) -> bool:
        return self.fallback.is_tag(flat_run, tag)

    def font_name(self, flat_run: FlatRun) -> Optional[str]:
        value = self._class_facet(flat_run, "font_name")
        return str(value) if value is not None else self.fallback.font_name(flat_run)

    def size(self, flat_run: FlatRun) -> Optional[float]:
        value = self._class_facet(flat_run, "size")
        if value is not None:
            size = _parse_size(str(value))
            if size is not None:
                return size
            logger.debug("Ignoring unparsable class size %r", value)
        return self.fallback.size(flat_run)

    def color(self, flat_run: FlatRun) -> Optional[str]:
        value = self._class_facet(flat_run, "color")
        if value is not None:
            return lookup_color(str(value))
        return self.fallback.color(flat_run)

    def _flag(self, flat_run: FlatRun, facet: str, default) -> bool:
        value = self._class_facet(flat_run, facet)
        if value is not None:
            return bool(value)
        return default(flat_run)

    def is_bold(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "bold", self.fallback.is_bold)

    def is_italic(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "italic", self.fallback.is_italic)

    def is_underline(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "underline", self.fallback.is_underline)

    def is_superscript(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "superscript", self.fallback.is_superscript)

    def is_subscript(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "subscript", self.fallback.is_subscript)

    def is_strikethrough(self, flat_run: FlatRun) -> bool:
        return self._flag(flat_run, "strikethrough", self.fallback.is_strikethrough)
