"""
structure/sections.py — heading outline of a document.

Sections are a read-only projection recomputed from every fetched snapshot:
one Section per HEADING_<n> paragraph, in document order.

Public API:
  sections(doc)                      -> list[Section]
  find_section(doc, name)            -> Section | None
  require_section(doc, name)         -> Section          (NotFoundError)
  section_body_range(doc, section)   -> tuple[int, int]
"""

from __future__ import annotations

from data_model import NotFoundError, Section, StructuredDocument


def sections(doc: StructuredDocument) -> list[Section]:
    found: list[Section] = []
    for block in doc.paragraphs():
        level = block.heading_level
        if level is None:
            continue
        found.append(Section(
            title=block.text.strip(),
            level=level,
            start_index=block.start_index,
            end_index=block.end_index,
        ))
    return found


def find_section(doc: StructuredDocument, name: str) -> Section | None:
    """First section whose title equals `name` ignoring case (no partial matches)."""
    wanted = name.casefold()
    for section in sections(doc):
        if section.title.casefold() == wanted:
            return section
    return None


def require_section(doc: StructuredDocument, name: str) -> Section:
    section = find_section(doc, name)
    if section is None:
        raise NotFoundError(f"section not found: {name}")
    return section


def section_body_range(doc: StructuredDocument, section: Section) -> tuple[int, int]:
    """
    Range of the content under a heading, up to the next heading of the same
    or a higher level. The final newline of the body is never included.
    """
    end = doc.end_index - 1
    for other in sections(doc):
        if other.start_index >= section.end_index and other.level <= section.level:
            end = other.start_index
            break
    return section.end_index, max(end, section.end_index)
