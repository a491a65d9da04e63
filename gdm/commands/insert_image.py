"""Command: gdm insert-image — insert an inline image from a URL."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run(args: argparse.Namespace) -> None:
    ops = edits.insert_image(args.index, args.image_url, width=args.width, height=args.height)
    submit(args, ops, "Image inserted")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "insert-image",
        help="Insert an image at an index.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Inserts a publicly reachable image. The size is applied only when both
--width and --height are given.

Examples:
  gdm insert-image 1AbC...xyz 42 https://example.com/logo.png
  gdm insert-image 1AbC...xyz 42 https://example.com/logo.png --width 120 --height 40
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("index", metavar="INDEX", type=int)
    p.add_argument("image_url", metavar="IMAGE_URL")
    p.add_argument("--width", type=float, metavar="PT", help="Image width in points.")
    p.add_argument("--height", type=float, metavar="PT", help="Image height in points.")
    add_dry_run(p)
    p.set_defaults(func=run)
