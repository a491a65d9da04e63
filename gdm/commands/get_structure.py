"""Command: gdm get-structure — heading outline (or tables) of a document."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table as RichTable

from data_model import Section, Table
from gdm import _client
from gdm._output import console, print_json
from structure import sections


def _new_table() -> RichTable:
    return RichTable(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )


def _show_sections(found: list[Section]) -> None:
    if not found:
        console.print("[yellow]No headings found.[/yellow]")
        return

    table = _new_table()
    table.add_column("LVL",   justify="right", no_wrap=True, style="dim")
    table.add_column("START", justify="right", no_wrap=True)
    table.add_column("END",   justify="right", no_wrap=True)
    table.add_column("TITLE", no_wrap=False, max_width=70, style="bold cyan")

    for section in found:
        indent = "  " * (section.level - 1)
        table.add_row(
            str(section.level),
            str(section.start_index),
            str(section.end_index),
            indent + section.title,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(found)} sections[/dim]\n")


def _show_tables(found: list[Table]) -> None:
    if not found:
        console.print("[yellow]No tables found.[/yellow]")
        return

    table = _new_table()
    table.add_column("START", justify="right", no_wrap=True, style="bold cyan")
    table.add_column("END",   justify="right", no_wrap=True)
    table.add_column("SIZE",  no_wrap=True)

    for t in found:
        table.add_row(str(t.start_index), str(t.end_index), f"{t.n_rows}x{t.n_columns}")

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(found)} tables[/dim]\n")


def run(args: argparse.Namespace) -> None:
    doc = _client.get_client().get_document(args.document_id)
    if args.tables:
        found_tables = doc.tables()
        if args.show:
            _show_tables(found_tables)
        else:
            print_json([t.to_dict() for t in found_tables])
        return

    found = sections(doc)
    if args.show:
        _show_sections(found)
    else:
        print_json([s.to_dict() for s in found])


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "get-structure",
        help="Get document structure (headings or tables with index ranges).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Lists every heading paragraph with its level and [start, end) index range.
The ranges can be passed to delete-text, format-text and similar commands.
With --tables, lists body tables instead; their start index is the
TABLE_START argument of style-table-cell and update-table-cell.

Examples:
  gdm get-structure 1AbC...xyz
  gdm get-structure 1AbC...xyz --show
  gdm get-structure 1AbC...xyz --tables
        """,
    )
    p.add_argument("document_id", metavar="DOCUMENT_ID")
    p.add_argument(
        "--show",
        action="store_true",
        help="Display a table instead of JSON.",
    )
    p.add_argument(
        "--tables",
        action="store_true",
        help="List tables (start index, size) instead of headings.",
    )
    p.set_defaults(func=run)
