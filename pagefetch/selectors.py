"""Selector data: specificity, attribute selectors and cascade ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True, order=True)
class Specificity:
    """Selector specificity, compared component by component."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __add__(self, other: Specificity) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            self.a + other.a, self.b + other.b, self.c + other.c, self.d + other.d
        )


class AttrSelectType(Enum):
    CLASS = "class"
    ID = "id"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


class AttrMatcher(Enum):
    EXISTS = ""
    EQUALS = "="
    CONTAINS_STRING = "*="
    CONTAINS_WORD = "~="
    STARTS_WITH_STRING = "^="
    STARTS_WITH_STRING_HYPHEN = "|="
    ENDS_WITH_STRING = "$="


class Combinator(Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass
class AttributeSelector:
    """One subclass or pseudo-element selector, such as ``.name`` or ``[a=b]``."""

    type: AttrSelectType = AttrSelectType.CLASS
    name: str = ""
    prefix: str = ""
    value: str = ""
    matcher: AttrMatcher = AttrMatcher.EXISTS
    caseless_match: bool = False
    selector_list: list[Any] = field(default_factory=list)
    a: int = 0
    b: int = 0

    def __bool__(self) -> bool:
        return self.name != ""


@dataclass(frozen=True, order=True)
class SelectorRank:
    """Cascade rank of a selector: specificity first, then source order."""

    specificity: Specificity = field(default_factory=Specificity)
    order: int = 0


@dataclass
class UsedSelector:
    selector: Any
    used: bool = False