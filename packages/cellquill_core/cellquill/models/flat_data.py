"""
Flattened HTML data.

An ElementContext is a frozen snapshot of one enclosing element. A FlatRun is
a span of text together with the outer-to-inner list of contexts it was
observed under.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class ElementContext:
    """Immutable snapshot of an element's name, attributes and classes."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    classes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "classes", tuple(self.classes))

    @classmethod
    def from_element(cls, element) -> "ElementContext":
        """Snapshot a parser ElementNode."""
        return cls(name=element.name, attributes=element.attributes, classes=element.classes)

    def has_name(self, name: str) -> bool:
        return self.name == name

    def get_by_name_and_attribute(self, name: str, attribute: str) -> Optional[str]:
        """Return the attribute value if this element is named ``name``."""
        if self.name != name:
            return None
        return self.attributes.get(attribute)

    def contains_class(self, class_name: str) -> bool:
        return class_name in self.classes

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.attributes.items())), self.classes))


@dataclass(slots=True)
class FlatRun:
    """Text observed under exactly one ancestor sequence."""

    text: str = ""
    ancestors: List[ElementContext] = field(default_factory=list)

    @property
    def tag_names(self) -> List[str]:
        return [element.name for element in self.ancestors]
