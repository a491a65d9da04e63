"""
gdm — Google Docs Manager CLI.

Usage:
  gdm <command> [options]

Commands:
  read               Render a document as Markdown.
  info               Document metadata as JSON.
  create             Create a new document.
  copy               Copy an existing document.
  get-structure      Heading outline with index ranges.
  set-markdown       Replace the whole body with a Markdown file.
  update-section     Replace one section's body with a Markdown file.
  insert-after       Insert text after a section heading.
  delete-text        Delete an index range.
  format-text        Bold / italic / underline / color / size for a range.
  align-paragraph    Paragraph alignment for a range.
  create-bullets     Bulleted list for a range.
  create-numbered    Numbered list for a range.
  remove-bullets     Remove list formatting from a range.
  insert-table       Insert an empty table.
  style-table-cell   Background color of a table cell.
  update-table-cell  Replace the text of a table cell.
  insert-image       Insert an inline image.
  add-header         Header text (creates the header when missing).
  add-footer         Footer text (creates the footer when missing).
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows terminals may default to cp1252; force UTF-8 so ✅ and document
# text print correctly.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.logging import RichHandler
from rich.markup import escape

from data_model import DocsError
from gdm import __version__
from gdm._output import err_console
from gdm.commands import read as cmd_read
from gdm.commands import info as cmd_info
from gdm.commands import create as cmd_create
from gdm.commands import copy as cmd_copy
from gdm.commands import get_structure as cmd_get_structure
from gdm.commands import set_markdown as cmd_set_markdown
from gdm.commands import update_section as cmd_update_section
from gdm.commands import insert_after as cmd_insert_after
from gdm.commands import delete_text as cmd_delete_text
from gdm.commands import format_text as cmd_format_text
from gdm.commands import align_paragraph as cmd_align_paragraph
from gdm.commands import lists as cmd_lists
from gdm.commands import insert_table as cmd_insert_table
from gdm.commands import table_cell as cmd_table_cell
from gdm.commands import insert_image as cmd_insert_image
from gdm.commands import header_footer as cmd_header_footer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdm",
        description="Google Docs Manager — create, read, format, tables, images and more.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"gdm {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log HTTP requests and token handling to stderr.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_read.add_parser(subparsers)
    cmd_info.add_parser(subparsers)
    cmd_create.add_parser(subparsers)
    cmd_copy.add_parser(subparsers)
    cmd_get_structure.add_parser(subparsers)
    cmd_set_markdown.add_parser(subparsers)
    cmd_update_section.add_parser(subparsers)
    cmd_insert_after.add_parser(subparsers)
    cmd_delete_text.add_parser(subparsers)
    cmd_format_text.add_parser(subparsers)
    cmd_align_paragraph.add_parser(subparsers)
    cmd_lists.add_parser(subparsers)
    cmd_insert_table.add_parser(subparsers)
    cmd_table_cell.add_parser(subparsers)
    cmd_insert_image.add_parser(subparsers)
    cmd_header_footer.add_parser(subparsers)

    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        args.func(args)
    except DocsError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
