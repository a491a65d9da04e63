"""Command: gdm insert-table — insert an empty table."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    ops = edits.insert_table(args.index, args.rows, args.cols)
    submit(args, ops, f"Table inserted ({args.rows}x{args.cols})")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "insert-table",
        help="Insert a table at an index.",
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("index", metavar="INDEX", type=int)
    p.add_argument("rows", metavar="ROWS", type=int)
    p.add_argument("cols", metavar="COLS", type=int)
    add_dry_run(p)
    p.set_defaults(func=run)
