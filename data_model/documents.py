"""
data_model/documents.py — structured document model (read side).

StructuredDocument is a snapshot of one Google Doc: an ordered list of block
elements (Paragraph | Table), each carrying a half-open range
[start_index, end_index) in the document's index space. Index 0 is reserved,
so the body starts at 1 and the last element's end_index is the document length.

StructuredDocument.from_api() accepts the JSON returned by documents.get and
never raises: missing fields fall back to "no styling".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from .common import RgbColor, heading_level


# ---------------------------------------------------------------------------
# TextStyle
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TextStyle:
    """
    Inline style attribute set of a run.

    None means "absent" when read from a document, and "leave unchanged" when
    used in SetTextStyle, so one type serves both directions.
    """
    bold:             bool | None = None
    italic:           bool | None = None
    underline:        bool | None = None
    foreground_color: RgbColor | None = None
    font_size:        float | None = None
    link_url:         str | None = None

    def fields(self) -> list[str]:
        """API field mask names for every attribute that is set."""
        names: list[str] = []
        if self.bold is not None:
            names.append("bold")
        if self.italic is not None:
            names.append("italic")
        if self.underline is not None:
            names.append("underline")
        if self.foreground_color is not None:
            names.append("foregroundColor")
        if self.font_size is not None:
            names.append("fontSize")
        if self.link_url is not None:
            names.append("link")
        return names

    def to_api(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.bold is not None:
            data["bold"] = self.bold
        if self.italic is not None:
            data["italic"] = self.italic
        if self.underline is not None:
            data["underline"] = self.underline
        if self.foreground_color is not None:
            data["foregroundColor"] = self.foreground_color.to_api()
        if self.font_size is not None:
            data["fontSize"] = {"magnitude": self.font_size, "unit": "PT"}
        if self.link_url is not None:
            data["link"] = {"url": self.link_url}
        return data

    @classmethod
    def from_api(cls, data: dict | None) -> TextStyle:
        data = data or {}
        size = (data.get("fontSize") or {}).get("magnitude")
        return cls(
            bold=data.get("bold"),
            italic=data.get("italic"),
            underline=data.get("underline"),
            foreground_color=RgbColor.from_api(data.get("foregroundColor")),
            font_size=float(size) if size is not None else None,
            link_url=(data.get("link") or {}).get("url"),
        )


# ---------------------------------------------------------------------------
# Block elements
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TextRun:
    text:  str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(slots=True)
class Paragraph:
    start_index: int
    end_index:   int
    runs:        list[TextRun] = field(default_factory=list)
    named_style: str | None = None

    @property
    def text(self) -> str:
        """Raw concatenated run text (including the terminating newline)."""
        return "".join(r.text for r in self.runs)

    @property
    def heading_level(self) -> int | None:
        return heading_level(self.named_style)


@dataclass(slots=True)
class TableCell:
    start_index: int
    end_index:   int
    content:     list[BlockElement] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Plain text of the cell's paragraphs, styling dropped."""
        return "".join(
            b.text.strip() for b in self.content if isinstance(b, Paragraph)
        ).strip()


@dataclass(slots=True)
class TableRow:
    cells: list[TableCell] = field(default_factory=list)


@dataclass(slots=True)
class Table:
    start_index: int
    end_index:   int
    rows:        list[TableRow] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_columns(self) -> int:
        return len(self.rows[0].cells) if self.rows else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns":    self.n_columns,
            "endIndex":   self.end_index,
            "rows":       self.n_rows,
            "startIndex": self.start_index,
        }


BlockElement: TypeAlias = Paragraph | Table


@dataclass(slots=True, frozen=True)
class Section:
    """Heading paragraph seen as a named region. Derived on every read, never stored."""
    title:       str
    level:       int        # 1..6 (HEADING_<level>)
    start_index: int        # heading paragraph start
    end_index:   int        # heading paragraph end = start of the section body

    def to_dict(self) -> dict[str, Any]:
        return {
            "endIndex":   self.end_index,
            "level":      self.level,
            "startIndex": self.start_index,
            "title":      self.title,
        }


# ---------------------------------------------------------------------------
# StructuredDocument
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class StructuredDocument:
    document_id:           str
    title:                 str = ""
    revision_id:           str | None = None
    suggestions_view_mode: str | None = None
    content:               list[BlockElement] = field(default_factory=list)
    header_ids:            list[str] = field(default_factory=list)
    footer_ids:            list[str] = field(default_factory=list)

    @property
    def end_index(self) -> int:
        """Total length of the body in index space (1 for an empty body)."""
        return self.content[-1].end_index if self.content else 1

    def paragraphs(self) -> list[Paragraph]:
        return [b for b in self.content if isinstance(b, Paragraph)]

    def tables(self) -> list[Table]:
        return [b for b in self.content if isinstance(b, Table)]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> StructuredDocument:
        body = (data.get("body") or {}).get("content") or []
        return cls(
            document_id=data.get("documentId", ""),
            title=data.get("title", ""),
            revision_id=data.get("revisionId"),
            suggestions_view_mode=data.get("suggestionsViewMode"),
            content=_parse_blocks(body),
            header_ids=list((data.get("headers") or {}).keys()),
            footer_ids=list((data.get("footers") or {}).keys()),
        )

    def info(self) -> dict[str, Any]:
        return {
            "documentId":          self.document_id,
            "revisionId":          self.revision_id,
            "suggestionsViewMode": self.suggestions_view_mode,
            "title":               self.title,
        }


# ---------------------------------------------------------------------------
# Parsing the service JSON
# ---------------------------------------------------------------------------

def _parse_blocks(elements: list[dict]) -> list[BlockElement]:
    blocks: list[BlockElement] = []
    for el in elements:
        start = int(el.get("startIndex", 0))
        end   = int(el.get("endIndex", start))
        if "paragraph" in el:
            blocks.append(_parse_paragraph(el["paragraph"] or {}, start, end))
        elif "table" in el:
            blocks.append(_parse_table(el["table"] or {}, start, end))
        # sectionBreak, tableOfContents: not part of the model
    return blocks


def _parse_paragraph(data: dict, start: int, end: int) -> Paragraph:
    runs: list[TextRun] = []
    for pe in data.get("elements") or []:
        tr = pe.get("textRun")
        if tr is None:
            continue
        runs.append(TextRun(text=tr.get("content", ""), style=TextStyle.from_api(tr.get("textStyle"))))
    style = (data.get("paragraphStyle") or {}).get("namedStyleType") or None
    return Paragraph(
        start_index=start,
        end_index=end,
        runs=runs,
        named_style=style,
    )


def _parse_table(data: dict, start: int, end: int) -> Table:
    rows: list[TableRow] = []
    for row in data.get("tableRows") or []:
        cells: list[TableCell] = []
        for cell in row.get("tableCells") or []:
            c_start = int(cell.get("startIndex", 0))
            cells.append(TableCell(
                start_index=c_start,
                end_index=int(cell.get("endIndex", c_start)),
                content=_parse_blocks(cell.get("content") or []),
            ))
        rows.append(TableRow(cells=cells))
    return Table(start_index=start, end_index=end, rows=rows)
