"""structure/tables.py — addressing tables and cells by position."""

from __future__ import annotations

from data_model import (
    BoundsError,
    InputFormatError,
    NotFoundError,
    StructuredDocument,
    Table,
    TableCell,
)


def find_table(doc: StructuredDocument, start_index: int) -> Table:
    """Body table whose element starts exactly at `start_index`."""
    for table in doc.tables():
        if table.start_index == start_index:
            return table
    raise NotFoundError(f"table not found at index {start_index}")


def require_cell(table: Table, row: int, column: int) -> TableCell:
    if row < 0 or column < 0:
        raise InputFormatError(f"row/column must be >= 0, got ({row}, {column})")
    if row >= table.n_rows or column >= table.n_columns:
        raise BoundsError(row, column, table.n_rows, table.n_columns)
    cells = table.rows[row].cells
    # ragged rows (merged cells) report fewer cells than row 0
    if column >= len(cells):
        raise BoundsError(row, column, table.n_rows, len(cells))
    return cells[column]


def cell_text_range(cell: TableCell) -> tuple[int, int]:
    """Editable text of a cell: everything but the cell's final newline."""
    if not cell.content:
        return cell.start_index, cell.start_index
    return cell.content[0].start_index, cell.content[-1].end_index - 1
