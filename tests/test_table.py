import pytest

from pagefetch.borders import Margins
from pagefetch.table import ColumnField, TableCell, TableColumn, TableRow


def test_cell_spans_default_to_one():
    cell = TableCell()
    assert (cell.colspan, cell.rowspan) == (1, 1)
    assert cell.el is None


def test_cells_do_not_share_borders():
    first, second = TableCell(), TableCell()
    first.borders.left = 4
    assert second.borders == Margins()


def test_row_holds_height_and_element():
    row = TableRow(12, "tr")
    assert row.height == 12
    assert row.el_row == "tr"
    assert row.min_height == 0


def test_column_constructed_from_min_and_max():
    col = TableColumn(3, 9)
    assert col.min_width == 3
    assert col.max_width == 9
    assert col.width == 0


@pytest.mark.parametrize("which", list(ColumnField))
def test_column_field_get_after_set(which):
    col = TableColumn(1, 2)
    which.set(col, 42)
    assert which.get(col) == 42


def test_column_field_targets_distinct_attributes():
    col = TableColumn(min_width=1, max_width=2, width=3)
    assert ColumnField.MIN_WIDTH.get(col) == col.min_width
    assert ColumnField.MAX_WIDTH.get(col) == col.max_width
    assert ColumnField.WIDTH.get(col) == col.width
    ColumnField.WIDTH.set(col, 7)
    assert (col.min_width, col.max_width) == (1, 2)