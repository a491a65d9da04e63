"""Command: gdm set-markdown — replace the whole body with Markdown."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import add_dry_run, read_markdown, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    markdown = read_markdown(args.markdown_file)
    doc = _client.get_client().get_document(args.document_id)
    ops = edits.replace_document(doc, markdown)
    submit(args, ops, "Document content updated from markdown")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "set-markdown",
        help="Set document content from a Markdown file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Deletes the current body and inserts the Markdown file in its place.
Supported syntax: '#'..'######' headings, **bold** / __bold__, *italic* / _italic_.
Everything else is inserted as literal text.

Examples:
  gdm set-markdown 1AbC...xyz notes.md
  gdm set-markdown 1AbC...xyz notes.md --dry-run
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("markdown_file", metavar="FILE.md")
    add_dry_run(p)
    p.set_defaults(func=run)
