"""Command: gdm info — document metadata as JSON."""

from __future__ import annotations

import argparse

from gdm import _client
from gdm._output import print_json


def run(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    print_json(doc.info())


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "info",
        help="Get document information (id, title, revision).",
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.set_defaults(func=run)
