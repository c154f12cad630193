"""Rows, columns and cells of a table layout grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pagefetch.borders import Margins


@dataclass
class TableRow:
    height: int = 0
    el_row: Any = None
    border_top: int = 0
    border_bottom: int = 0
    top: int = 0
    bottom: int = 0
    css_height: Any = None  # None stands for "auto"
    min_height: int = 0


@dataclass
class TableColumn:
    min_width: int = 0
    max_width: int = 0
    width: int = 0
    css_width: Any = None  # None stands for "auto"
    border_left: int = 0
    border_right: int = 0
    left: int = 0
    right: int = 0


@dataclass
class TableCell:
    el: Any = None
    colspan: int = 1
    rowspan: int = 1
    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    width: int = 0
    height: int = 0
    borders: Margins = field(default_factory=Margins)


class ColumnField(Enum):
    """Selects one of the width measures of a column."""

    MAX_WIDTH = "max_width"
    MIN_WIDTH = "min_width"
    WIDTH = "width"

    def get(self, column: TableColumn) -> int:
        return getattr(column, self.value)

    def set(self, column: TableColumn, value: int) -> None:
        setattr(column, self.value, value)