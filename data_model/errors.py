"""
data_model/errors.py — error taxonomy.

All errors below InputFormatError/NotFoundError/BoundsError are detected from
local data (the already fetched document or the command arguments), before any
request is sent, so the core never leaves a document half-edited.
"""

from __future__ import annotations


class DocsError(Exception):
    """Base class for every error surfaced to the CLI."""


class InputFormatError(DocsError, ValueError):
    """Malformed argument: color string, index range, alignment, table address."""


class NotFoundError(DocsError, LookupError):
    """Named section or table does not exist in the document."""


class BoundsError(DocsError, IndexError):
    """Row/column beyond the actual dimensions of the table."""

    def __init__(self, row: int, column: int, n_rows: int, n_columns: int) -> None:
        super().__init__(
            f"cell ({row}, {column}) out of bounds for a {n_rows}x{n_columns} table"
        )
        self.row = row
        self.column = column
        self.n_rows = n_rows
        self.n_columns = n_columns


class AuthError(DocsError):
    """No usable OAuth token."""


class DocsApiError(DocsError):
    """The document service rejected a request."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"HTTP {status}: {message}")
        self.status = status
        self.message = message
