"""Box borders, corner radii and sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass
class Margins:
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


class BorderStyle(Enum):
    NONE = "none"
    HIDDEN = "hidden"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


@dataclass
class Border:
    width: int = 0
    style: BorderStyle = BorderStyle.NONE
    color: Any = None


_CORNERS = (
    ("top_left_x", "top_left_y"),
    ("top_right_x", "top_right_y"),
    ("bottom_right_x", "bottom_right_y"),
    ("bottom_left_x", "bottom_left_y"),
)


def _half(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def _ratio(num: int, den: int) -> float:
    if den == 0:
        return math.inf if num >= 0 else -math.inf
    return num / den


@dataclass
class BorderRadii:
    """Horizontal and vertical radius of each of the four corners, in pixels."""

    top_left_x: int = 0
    top_left_y: int = 0
    top_right_x: int = 0
    top_right_y: int = 0
    bottom_right_x: int = 0
    bottom_right_y: int = 0
    bottom_left_x: int = 0
    bottom_left_y: int = 0

    def clamp(self) -> None:
        """Replace negative radii with zero."""
        for x_name, y_name in _CORNERS:
            setattr(self, x_name, max(0, getattr(self, x_name)))
            setattr(self, y_name, max(0, getattr(self, y_name)))

    def fix_values(self, width: int, height: int) -> None:
        """Clamp, then scale down corners that do not fit in half the box."""
        self.clamp()
        half_width = _half(width)
        half_height = _half(height)
        for x_name, y_name in _CORNERS:
            rx = getattr(self, x_name)
            ry = getattr(self, y_name)
            if rx > half_width or ry > half_height:
                factor = min(_ratio(half_width, rx), _ratio(half_height, ry))
                setattr(self, x_name, int(rx * factor))
                setattr(self, y_name, int(ry * factor))

    def grow(self, margins: Margins) -> None:
        """Enlarge every corner by the adjoining margins."""
        self._shift(margins, 1)

    def shrink(self, margins: Margins) -> None:
        """Reduce every corner by the adjoining margins, never below zero."""
        self._shift(margins, -1)

    def _shift(self, mg: Margins, sign: int) -> None:
        self.top_left_x += sign * mg.left
        self.top_left_y += sign * mg.top
        self.top_right_x += sign * mg.right
        self.top_right_y += sign * mg.top
        self.bottom_right_x += sign * mg.right
        self.bottom_right_y += sign * mg.bottom
        self.bottom_left_x += sign * mg.left
        self.bottom_left_y += sign * mg.bottom
        self.clamp()


@dataclass
class Borders:
    left: Border = field(default_factory=Border)
    top: Border = field(default_factory=Border)
    right: Border = field(default_factory=Border)
    bottom: Border = field(default_factory=Border)
    radius: BorderRadii = field(default_factory=BorderRadii)

    def is_visible(self) -> bool:
        return any(side.width != 0 for side in (self.left, self.right, self.top, self.bottom))


@dataclass
class CssSize:
    width: Any = 0
    height: Any = 0