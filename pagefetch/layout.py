"""Small pieces of inline, flex and float layout state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class LineContext:
    """Horizontal extent and vertical placement of a line being laid out."""

    calculated_top: int = 0
    top: int = 0
    left: int = 0
    right: int = 0

    def width(self) -> int:
        return self.right - self.left

    def fix_top(self) -> None:
        self.calculated_top = self.top


@dataclass
class ItemExtent:
    """Running vertical extent of the items placed on a line."""

    items_top: int = 0
    items_bottom: int = 0

    def reset(self) -> None:
        self.items_top = 0
        self.items_bottom = 0

    def add(self, top: int, bottom: int) -> None:
        self.items_top = min(self.items_top, top)
        self.items_bottom = max(self.items_bottom, bottom)


class LineItemType(Enum):
    TEXT_PART = "text_part"
    INLINE_START = "inline_start"
    INLINE_CONTINUE = "inline_continue"
    INLINE_END = "inline_end"


@dataclass(frozen=True, order=True)
class FlexOrder:
    """Sort key of a flex item: the ``order`` property, then source position."""

    order: int = 0
    src_order: int = 0


@dataclass
class PositionStack:
    """Current offset of a formatting context, moved in and out of nested boxes."""

    current_left: int = 0
    current_top: int = 0

    def push(self, x: int, y: int) -> None:
        self.current_left += x
        self.current_top += y

    def pop(self, x: int, y: int) -> None:
        self.current_left -= x
        self.current_top -= y