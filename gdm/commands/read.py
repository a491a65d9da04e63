"""Command: gdm read — render a document as Markdown."""

from __future__ import annotations

import argparse
import pathlib

from conversion import RenderOptions, render_markdown
from data_model import InputFormatError
from gdm import _client
from gdm._output import success


def run(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    markdown = render_markdown(doc, RenderOptions(include_title=not args.no_title))

    if args.out:
        out_path = pathlib.Path(args.out)
        try:
            out_path.write_text(markdown, encoding="utf-8")
        except OSError as e:
            raise InputFormatError(f"error writing markdown file: {e}") from e
        success(f"Markdown written to {out_path}")
    else:
        print(markdown)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "read",
        help="Read a document and output it as Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Fetches the document and renders headings, paragraphs (bold, italic, links)
and tables as Markdown. Lists, colors and underline are not reproduced.

Examples:
  gdm read 1AbC...xyz
  gdm read 1AbC...xyz --no-title --out doc.md
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument(
        "--no-title",
        action="store_true",
        help="Do not emit the document title as a leading '# title' line.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="FILE",
        help="Write the Markdown to a file (default: stdout).",
    )
    p.set_defaults(func=run)
