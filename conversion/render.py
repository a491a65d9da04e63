"""
conversion/render.py — StructuredDocument -> Markdown.

Architecture:
  doc.title            -> "# title"
  heading paragraph    -> "#"*n + plain text (inline styling dropped)
  other paragraph      -> runs with **bold**, *italic*, [link](url)
  table                -> pipe table, separator after row 0, plain cell text

The conversion is lossy: list bullets, underline, colors, font
sizes and styling inside headings/cells do not survive.

Public API:
  render_markdown(doc, options) -> str
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model import Paragraph, StructuredDocument, Table, TextRun


@dataclass(slots=True, frozen=True)
class RenderOptions:
    include_title: bool = True


def render_markdown(doc: StructuredDocument, options: RenderOptions = RenderOptions()) -> str:
    """Renders a document snapshot; same input, same output, never raises."""
    parts: list[str] = []
    if options.include_title:
        parts.append(f"# {doc.title}\n\n")

    for block in doc.content:
        if isinstance(block, Paragraph):
            parts.append(_render_paragraph(block))
        elif isinstance(block, Table):
            parts.append(_render_table(block))

    return "".join(parts)


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------

def _render_paragraph(paragraph: Paragraph) -> str:
    level = paragraph.heading_level
    if level is not None:
        return "#" * level + " " + paragraph.text.strip() + "\n\n"

    text = "".join(_render_run(run) for run in paragraph.runs)
    if not text.strip():
        return ""
    return text.rstrip("\n") + "\n\n"


def _render_run(run: TextRun) -> str:
    # fixed order: bold, then italic, then link (outermost)
    if not run.text.strip():
        return ""
    content = run.text
    style = run.style
    if style.bold:
        content = f"**{content.strip()}**"
    if style.italic:
        content = f"*{content.strip()}*"
    if style.link_url:
        content = f"[{content.strip()}]({style.link_url})"
    return content


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def _render_table(table: Table) -> str:
    lines: list[str] = []
    for row_idx, row in enumerate(table.rows):
        lines.append("|" + "".join(f" {cell.text} |" for cell in row.cells))
        if row_idx == 0:
            lines.append("|" + " --- |" * len(row.cells))
    if not lines:
        return ""
    return "\n".join(lines) + "\n\n"
