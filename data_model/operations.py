"""
data_model/operations.py — index-addressed edit operations (write side).

Each operation knows its own batchUpdate request JSON (to_request()).
A batch is a plain list[EditOperation] that is built once, sent in a
single batchUpdate call and discarded.

Mapping onto the Google Docs API:
  InsertText             -> insertText
  DeleteRange            -> deleteContentRange
  SetParagraphStyle      -> updateParagraphStyle
  SetTextStyle           -> updateTextStyle
  SetTableCellStyle      -> updateTableCellStyle
  CreateTable            -> insertTable
  InsertInlineImage      -> insertInlineImage
  CreateParagraphBullets -> createParagraphBullets
  DeleteParagraphBullets -> deleteParagraphBullets
  CreateHeader           -> createHeader
  CreateFooter           -> createFooter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from .common import HeaderFooterType, RgbColor
from .documents import TextStyle


def _range(start: int, end: int) -> dict[str, int]:
    return {"startIndex": start, "endIndex": end}


def _location(index: int, segment_id: str | None = None) -> dict[str, Any]:
    loc: dict[str, Any] = {"index": index}
    if segment_id:
        loc["segmentId"] = segment_id
    return loc


@dataclass(slots=True, frozen=True)
class InsertText:
    index:      int
    text:       str
    segment_id: str | None = None   # header/footer id; None = body

    def to_request(self) -> dict[str, Any]:
        return {"insertText": {"location": _location(self.index, self.segment_id), "text": self.text}}


@dataclass(slots=True, frozen=True)
class DeleteRange:
    start_index: int
    end_index:   int                # exclusive

    def to_request(self) -> dict[str, Any]:
        return {"deleteContentRange": {"range": _range(self.start_index, self.end_index)}}


@dataclass(slots=True, frozen=True)
class SetParagraphStyle:
    start_index: int
    end_index:   int
    named_style: str | None = None
    alignment:   str | None = None

    def to_request(self) -> dict[str, Any]:
        style: dict[str, str] = {}
        if self.named_style is not None:
            style["namedStyleType"] = self.named_style
        if self.alignment is not None:
            style["alignment"] = self.alignment
        return {
            "updateParagraphStyle": {
                "range":          _range(self.start_index, self.end_index),
                "paragraphStyle": style,
                "fields":         ",".join(style),
            }
        }


@dataclass(slots=True, frozen=True)
class SetTextStyle:
    start_index: int
    end_index:   int
    style:       TextStyle = field(default_factory=TextStyle)

    def to_request(self) -> dict[str, Any]:
        return {
            "updateTextStyle": {
                "range":     _range(self.start_index, self.end_index),
                "textStyle": self.style.to_api(),
                "fields":    ",".join(self.style.fields()),
            }
        }


@dataclass(slots=True, frozen=True)
class SetTableCellStyle:
    table_start_index: int
    row:               int
    column:            int
    background_color:  RgbColor

    def to_request(self) -> dict[str, Any]:
        return {
            "updateTableCellStyle": {
                "tableCellStyle": {"backgroundColor": self.background_color.to_api()},
                "tableRange": {
                    "tableCellLocation": {
                        "tableStartLocation": {"index": self.table_start_index},
                        "rowIndex":           self.row,
                        "columnIndex":        self.column,
                    },
                    "rowSpan":    1,
                    "columnSpan": 1,
                },
                "fields": "backgroundColor",
            }
        }


@dataclass(slots=True, frozen=True)
class CreateTable:
    index:   int
    rows:    int
    columns: int

    def to_request(self) -> dict[str, Any]:
        return {"insertTable": {"location": _location(self.index), "rows": self.rows, "columns": self.columns}}


@dataclass(slots=True, frozen=True)
class InsertInlineImage:
    index:  int
    uri:    str
    width:  float | None = None     # points
    height: float | None = None

    def to_request(self) -> dict[str, Any]:
        req: dict[str, Any] = {"location": _location(self.index), "uri": self.uri}
        if self.width is not None and self.height is not None:
            req["objectSize"] = {
                "width":  {"magnitude": self.width, "unit": "PT"},
                "height": {"magnitude": self.height, "unit": "PT"},
            }
        return {"insertInlineImage": req}


@dataclass(slots=True, frozen=True)
class CreateParagraphBullets:
    start_index: int
    end_index:   int
    preset:      str

    def to_request(self) -> dict[str, Any]:
        return {
            "createParagraphBullets": {
                "range":        _range(self.start_index, self.end_index),
                "bulletPreset": self.preset,
            }
        }


@dataclass(slots=True, frozen=True)
class DeleteParagraphBullets:
    start_index: int
    end_index:   int

    def to_request(self) -> dict[str, Any]:
        return {"deleteParagraphBullets": {"range": _range(self.start_index, self.end_index)}}


@dataclass(slots=True, frozen=True)
class CreateHeader:
    kind: str = HeaderFooterType.DEFAULT

    def to_request(self) -> dict[str, Any]:
        return {"createHeader": {"type": str(self.kind)}}


@dataclass(slots=True, frozen=True)
class CreateFooter:
    kind: str = HeaderFooterType.DEFAULT

    def to_request(self) -> dict[str, Any]:
        return {"createFooter": {"type": str(self.kind)}}


EditOperation: TypeAlias = (
    InsertText
    | DeleteRange
    | SetParagraphStyle
    | SetTextStyle
    | SetTableCellStyle
    | CreateTable
    | InsertInlineImage
    | CreateParagraphBullets
    | DeleteParagraphBullets
    | CreateHeader
    | CreateFooter
)


def to_requests(operations: list[EditOperation]) -> list[dict[str, Any]]:
    """Serialises a batch in order."""
    return [op.to_request() for op in operations]
