"""Commands: gdm style-table-cell / update-table-cell."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import add_dry_run, submit
from structure import edits


def run_style(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    ops = edits.style_table_cell(doc, args.table_start, args.row, args.col, args.bg_color)
    submit(args, ops, f"Table cell styled (row {args.row}, col {args.col})")


def run_update(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    ops = edits.update_table_cell(doc, args.table_start, args.row, args.col, args.text)
    submit(args, ops, f"Table cell updated (row {args.row}, col {args.col})")


def _cell_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("table_start", metavar="TABLE_START", type=int,
                   help="Start index of the table (see get-structure --tables).")
    p.add_argument("row", metavar="ROW", type=int, help="0-based row.")
    p.add_argument("col", metavar="COL", type=int, help="0-based column.")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "style-table-cell",
        help="Style a table cell (background color).",
    )
    _cell_arguments(p)
    p.add_argument(
        "--bg-color",
        metavar="HEX",
        required=True,
        help="Background color (hex, e.g. #FF0000).",
    )
    add_dry_run(p)
    p.set_defaults(func=run_style)

    p = subparsers.add_parser(
        "update-table-cell",
        help="Replace the text of a table cell.",
    )
    _cell_arguments(p)
    p.add_argument("text", metavar="TEXT")
    add_dry_run(p)
    p.set_defaults(func=run_update)
