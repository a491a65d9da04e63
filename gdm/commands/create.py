"""Command: gdm create — create an empty document."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import detail, success


def run(args: argparse.Namespace) -> None:
    client = _client.get_client()
    doc = client.create_document(args.title)

    if args.folder:
        client.move_to_folder(doc.document_id, args.folder)

    success(f"Document created: {doc.title}")
    detail(f"ID: {doc.document_id}")
    print(doc.document_id)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "create",
        help="Create a new document; prints its id.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Creates an empty document and prints its id on stdout.

Examples:
  gdm create "Meeting notes"
  gdm create "Meeting notes" --folder 0BxY...
        """,
    )
    p.add_argument("title", metavar="TITLE")
    p.add_argument(
        "--folder",
        metavar="FOLDER_ID",
        help="Drive folder to create the document in.",
    )
    p.set_defaults(func=run)
