"""Commands: gdm create-bullets / create-numbered / remove-bullets."""

from __future__ import annotations

import argparse

from gdm._output import add_dry_run, submit
from structure import edits


def run_bullets(args: argparse.Namespace) -> None:
    submit(args, edits.create_list(args.start_index, args.end_index), "Bulleted list created")


def run_numbered(args: argparse.Namespace) -> None:
    submit(args, edits.create_list(args.start_index, args.end_index, numbered=True), "Numbered list created")


def run_remove(args: argparse.Namespace) -> None:
    submit(args, edits.remove_list(args.start_index, args.end_index), "Bullets/numbering removed")


def _range_parser(subparsers: argparse._SubParsersAction, name: str, help_: str, func) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(name, help=help_)
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument("start_index", metavar="START", type=int)
    p.add_argument("end_index", metavar="END", type=int)
    add_dry_run(p)
    p.set_defaults(func=func)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    _range_parser(subparsers, "create-bullets", "Create a bulleted list from the paragraphs in a range.", run_bullets)
    _range_parser(subparsers, "create-numbered", "Create a numbered list from the paragraphs in a range.", run_numbered)
    _range_parser(subparsers, "remove-bullets", "Remove bullets/numbering from the paragraphs in a range.", run_remove)
