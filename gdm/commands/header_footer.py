"""Commands: gdm add-header / add-footer — create a header/footer and fill in its text."""

from __future__ import annotations

import argparse

from data_model import CreateFooter, CreateHeader, DocsApiError, to_requests
from gdm import _client
from gdm._output import add_dry_run, print_json, success
from structure import edits

# reply key and id field of createHeader / createFooter
_KINDS = {
    "header": (CreateHeader, "createHeader", "headerId"),
    "footer": (CreateFooter, "createFooter", "footerId"),
}


def _add(args: argparse.Namespace, kind: str) -> None:
    create_cls, reply_key, id_key = _KINDS[kind]
    client = _client.get_client()
    doc = client.get_document(args.document_id)
    existing = doc.header_ids if kind == "header" else doc.footer_ids

    if args.dry_run:
        segment_id = existing[0] if existing else f"<new {kind} id>"
        ops = ([] if existing else [create_cls()]) + edits.segment_text(segment_id, args.text)
        print_json({"requests": to_requests(ops)})
        return

    if existing:
        segment_id = existing[0]
    else:
        replies = client.batch_update(args.document_id, [create_cls()])
        try:
            segment_id = replies[0][reply_key][id_key]
        except (IndexError, KeyError, TypeError) as e:
            raise DocsApiError(200, f"{reply_key} reply carries no {id_key}: {replies!r}") from e
        success(f"{kind.capitalize()} created")

    client.batch_update(args.document_id, edits.segment_text(segment_id, args.text))
    success(f"{kind.capitalize()} text inserted ({segment_id})")


def run_header(args: argparse.Namespace) -> None:
    _add(args, "header")


def run_footer(args: argparse.Namespace) -> None:
    _add(args, "footer")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    for kind, func in (("header", run_header), ("footer", run_footer)):
        p = subparsers.add_parser(
            f"add-{kind}",
            help=f"Add text to the document {kind} (created when missing).",
        )
        p.add_argument("document_id", metavar="DOCUMENT_ID")
        p.add_argument("text", metavar="TEXT")
        add_dry_run(p)
        p.set_defaults(func=func)
