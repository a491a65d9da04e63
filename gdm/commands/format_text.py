"""Command: gdm format-text — bold, italic, underline, color and size for a range."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    ops = edits.format_text(
        args.start_index,
        args.end_index,
        bold=args.bold,
        italic=args.italic,
        underline=args.underline,
        color=args.color,
        size=args.size,
    )
    submit(args, ops, "Text formatted")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "format-text",
        help="Format text (bold, italic, underline, color, size).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Applies text style to the range [START, END). At least one option is required.

Examples:
  gdm format-text 1AbC...xyz 10 25 --bold
  gdm format-text 1AbC...xyz 10 25 --italic --color "#FF0000" --size 14
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("start_index", metavar="START", type=int)
    p.add_argument("end_index", metavar="END", type=int)
    p.add_argument("--bold", action="store_true", help="Make text bold.")
    p.add_argument("--italic", action="store_true", help="Make text italic.")
    p.add_argument("--underline", action="store_true", help="Underline text.")
    p.add_argument(
        "--color",
        metavar="HEX",
        help="Text color (hex, e.g. #FF0000).",
    )
    p.add_argument(
        "--size",
        type=float,
        metavar="PT",
        help="Font size in points.",
    )
    add_dry_run(p)
    p.set_defaults(func=run)
