"""Command: gdm insert-after — insert a paragraph after a section heading."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    ops = edits.insert_after_section(doc, args.section_name, args.text)
    submit(args, ops, f"Text inserted after section '{args.section_name}'")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "insert-after",
        help="Insert text after a section heading.",
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("section_name", metavar="SECTION")
    p.add_argument("text", metavar="TEXT")
    add_dry_run(p)
    p.set_defaults(func=run)
