"""Command: gdm align-paragraph — paragraph alignment for a range."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    ops = edits.align_paragraph(args.start_index, args.end_index, args.alignment)
    submit(args, ops, f"Paragraph aligned to {args.alignment.upper()}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "align-paragraph",
        help="Align paragraphs (START, CENTER, END, JUSTIFIED).",
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("start_index", metavar="START", type=int)
    p.add_argument("end_index", metavar="END", type=int)
    p.add_argument("alignment", metavar="ALIGNMENT")
    add_dry_run(p)
    p.set_defaults(func=run)
