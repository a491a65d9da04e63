"""
structure — navigation (sections, tables) and edit batch builders.

Public API:
  sections(doc)                  -> list[Section]
  find_section(doc, name)        -> Section | None
  require_section(doc, name)     -> Section
  section_body_range(doc, sec)   -> tuple[int, int]
  find_table(doc, start_index)   -> Table
  require_cell(table, row, col)  -> TableCell
  edits                          — builders returning list[EditOperation]
"""

from .sections import find_section, require_section, section_body_range, sections
from .tables import cell_text_range, find_table, require_cell
from . import edits

__all__ = [
    "sections",
    "find_section",
    "require_section",
    "section_body_range",
    "find_table",
    "require_cell",
    "cell_text_range",
    "edits",
]
