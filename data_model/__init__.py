"""
data_model — data structures shared by the conversion engine and the CLI.

Usage:
  from data_model import StructuredDocument, InsertText, InputFormatError, ...

Modules:
  common     — NamedStyle, Alignment, BulletPreset, HeaderFooterType, RgbColor
  documents  — StructuredDocument, Paragraph, TextRun, TextStyle, Table,
               TableRow, TableCell, Section
  operations — EditOperation and its variants (InsertText, DeleteRange, ...)
  errors     — DocsError, InputFormatError, NotFoundError, BoundsError,
               AuthError, DocsApiError
"""

from .common import (
    NamedStyle,
    Alignment,
    BulletPreset,
    HeaderFooterType,
    RgbColor,
    heading_level,
    heading_style,
)
from .documents import (
    BlockElement,
    Paragraph,
    Section,
    StructuredDocument,
    Table,
    TableCell,
    TableRow,
    TextRun,
    TextStyle,
)
from .operations import (
    CreateFooter,
    CreateHeader,
    CreateParagraphBullets,
    CreateTable,
    DeleteParagraphBullets,
    DeleteRange,
    EditOperation,
    InsertInlineImage,
    InsertText,
    SetParagraphStyle,
    SetTableCellStyle,
    SetTextStyle,
    to_requests,
)
from .errors import (
    AuthError,
    BoundsError,
    DocsApiError,
    DocsError,
    InputFormatError,
    NotFoundError,
)

__all__ = [
    # common
    "NamedStyle",
    "Alignment",
    "BulletPreset",
    "HeaderFooterType",
    "RgbColor",
    "heading_level",
    "heading_style",
    # documents
    "BlockElement",
    "Paragraph",
    "Section",
    "StructuredDocument",
    "Table",
    "TableCell",
    "TableRow",
    "TextRun",
    "TextStyle",
    # operations
    "CreateFooter",
    "CreateHeader",
    "CreateParagraphBullets",
    "CreateTable",
    "DeleteParagraphBullets",
    "DeleteRange",
    "EditOperation",
    "InsertInlineImage",
    "InsertText",
    "SetParagraphStyle",
    "SetTableCellStyle",
    "SetTextStyle",
    "to_requests",
    # errors
    "AuthError",
    "BoundsError",
    "DocsApiError",
    "DocsError",
    "InputFormatError",
    "NotFoundError",
]
