"""Command: gdm copy — copy an existing document under a new title."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import detail, success


def run(args: argparse.Namespace) -> None:
    copied = _client.get_client().copy_document(args.source_id, args.title, args.folder)
    success(f"Document copied: {copied.get('name', args.title)}")
    detail(f"ID: {copied['id']}")
    print(copied["id"])


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "copy",
        help="Copy an existing document to create a new one; prints the new id.",
    )
    p.add_argument("source_id", metavar="SOURCE_DOCUMENT_ID")
    p.add_argument("title", metavar="NEW_TITLE")
    p.add_argument(
        "--folder",
        metavar="FOLDER_ID",
        help="Drive folder to place the copy in.",
    )
    p.set_defaults(func=run)
