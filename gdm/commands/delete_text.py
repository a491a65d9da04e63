"""Command: gdm delete-text — delete an index range."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    ops = edits.delete_text(args.start_index, args.end_index)
    submit(args, ops, f"Text deleted from {args.start_index} to {args.end_index}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "delete-text",
        help="Delete text in a range [START, END).",
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("start_index", metavar="START", type=int)
    p.add_argument("end_index", metavar="END", type=int)
    add_dry_run(p)
    p.set_defaults(func=run)
