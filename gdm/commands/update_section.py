"""Command: gdm update-section — replace the body of one section with Markdown."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import add_dry_run, read_markdown, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    markdown = read_markdown(args.markdown_file)
    doc = _client.get_client().get_document(args.document_id)
    ops = edits.update_section(doc, args.section_name, markdown)
    submit(args, ops, f"Section '{args.section_name}' updated")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "update-section",
        help="Update a specific section with Markdown content.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Finds the heading named SECTION (case-insensitive, exact) and replaces the
content below it, up to the next heading of the same or a higher level.

Examples:
  gdm update-section 1AbC...xyz "Introduction" intro.md
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("section_name", metavar="SECTION")
    p.add_argument("markdown_file", metavar="FILE.md")
    add_dry_run(p)
    p.set_defaults(func=run)
