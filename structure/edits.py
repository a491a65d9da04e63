"""
structure/edits.py — edit batches for the CLI commands.

Every builder is pure: it takes an already fetched snapshot (where one is
needed) plus the command arguments and returns list[EditOperation]. All
validation happens here, so a failing command never reaches the service.

Batches never contain zero-length deletes: an empty range is simply skipped.
"""

from __future__ import annotations

import logging

from conversion import compile_markdown, require_color
from data_model import (
    Alignment,
    BulletPreset,
    CreateParagraphBullets,
    CreateTable,
    DeleteParagraphBullets,
    DeleteRange,
    EditOperation,
    InputFormatError,
    InsertInlineImage,
    InsertText,
    SetParagraphStyle,
    SetTableCellStyle,
    SetTextStyle,
    StructuredDocument,
    TextStyle,
)

from .sections import require_section, section_body_range
from .tables import cell_text_range, find_table, require_cell

log = logging.getLogger(__name__)


def _check_range(start: int, end: int) -> None:
    if start < 1:
        raise InputFormatError(f"start index must be >= 1, got {start}")
    if end <= start:
        raise InputFormatError(f"end index must be greater than start index ({start}..{end})")


def _delete(start: int, end: int) -> list[EditOperation]:
    return [DeleteRange(start, end)] if end > start else []


# ---------------------------------------------------------------------------
# Markdown content
# ---------------------------------------------------------------------------

def replace_document(doc: StructuredDocument, markdown: str) -> list[EditOperation]:
    """Clears the body (keeping its final newline) and inserts `markdown` at 1."""
    ops = _delete(1, doc.end_index - 1)
    batch = compile_markdown(markdown, 1)
    log.debug("replace_document: %d operations, +%d indices", len(batch), batch.length)
    return ops + batch.operations


def update_section(doc: StructuredDocument, name: str, markdown: str) -> list[EditOperation]:
    """Replaces the body under the heading `name` with `markdown`."""
    section = require_section(doc, name)
    start, end = section_body_range(doc, section)
    at = section.end_index
    if at >= doc.end_index:
        # heading ends the body: insert before the final newline, as a new paragraph
        at = doc.end_index - 1
        markdown = "\n" + markdown
    batch = compile_markdown(markdown, at)
    log.debug("update_section %r: body %d..%d, %d operations", section.title, start, end, len(batch))
    return _delete(start, end) + batch.operations


def insert_after_section(doc: StructuredDocument, name: str, text: str) -> list[EditOperation]:
    section = require_section(doc, name)
    return [InsertText(min(section.end_index, doc.end_index - 1), "\n" + text + "\n")]


def delete_text(start: int, end: int) -> list[EditOperation]:
    _check_range(start, end)
    return [DeleteRange(start, end)]


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_text(
    start: int,
    end: int,
    *,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    color: str | None = None,
    size: float | None = None,
) -> list[EditOperation]:
    _check_range(start, end)
    if size is not None and size <= 0:
        raise InputFormatError(f"font size must be positive, got {size}")
    style = TextStyle(
        bold=True if bold else None,
        italic=True if italic else None,
        underline=True if underline else None,
        foreground_color=require_color(color) if color else None,
        font_size=size,
    )
    if not style.fields():
        raise InputFormatError("no formatting options specified")
    return [SetTextStyle(start, end, style)]


def align_paragraph(start: int, end: int, alignment: str) -> list[EditOperation]:
    _check_range(start, end)
    try:
        value = Alignment(alignment.upper())
    except ValueError:
        raise InputFormatError(
            f"invalid alignment: {alignment} (must be START, CENTER, END, or JUSTIFIED)"
        ) from None
    return [SetParagraphStyle(start, end, alignment=value)]


def create_list(start: int, end: int, *, numbered: bool = False) -> list[EditOperation]:
    _check_range(start, end)
    preset = BulletPreset.NUMBERED if numbered else BulletPreset.BULLET
    return [CreateParagraphBullets(start, end, preset)]


def remove_list(start: int, end: int) -> list[EditOperation]:
    _check_range(start, end)
    return [DeleteParagraphBullets(start, end)]


# ---------------------------------------------------------------------------
# Tables and images
# ---------------------------------------------------------------------------

def insert_table(index: int, rows: int, columns: int) -> list[EditOperation]:
    if index < 1:
        raise InputFormatError(f"index must be >= 1, got {index}")
    if rows < 1 or columns < 1:
        raise InputFormatError(f"table needs at least 1 row and 1 column, got {rows}x{columns}")
    return [CreateTable(index, rows, columns)]


def style_table_cell(
    doc: StructuredDocument, table_start: int, row: int, column: int, bg_color: str | None,
) -> list[EditOperation]:
    color = require_color(bg_color)
    require_cell(find_table(doc, table_start), row, column)
    return [SetTableCellStyle(table_start, row, column, color)]


def update_table_cell(
    doc: StructuredDocument, table_start: int, row: int, column: int, text: str,
) -> list[EditOperation]:
    cell = require_cell(find_table(doc, table_start), row, column)
    start, end = cell_text_range(cell)
    ops = _delete(start, end)
    if text:
        ops.append(InsertText(start, text))
    return ops


def insert_image(
    index: int, uri: str, width: float | None = None, height: float | None = None,
) -> list[EditOperation]:
    if index < 1:
        raise InputFormatError(f"index must be >= 1, got {index}")
    if not uri:
        raise InputFormatError("image URL is empty")
    # the service wants both dimensions or none
    if width and height and width > 0 and height > 0:
        return [InsertInlineImage(index, uri, width=width, height=height)]
    return [InsertInlineImage(index, uri)]


# ---------------------------------------------------------------------------
# Headers and footers
# ---------------------------------------------------------------------------

def segment_text(segment_id: str, text: str) -> list[EditOperation]:
    """Inserts `text` at the start of a header or footer segment."""
    if not segment_id:
        raise InputFormatError("header/footer id is empty")
    return [InsertText(0, text, segment_id=segment_id)]
