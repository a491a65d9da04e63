"""Shared console output and batch submission for commands."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich.console import Console
from rich.markup import escape

from data_model import EditOperation, InputFormatError, to_requests
from gdm import _client

# stdout carries results (ids, markdown, JSON); status lines go to stderr
console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    err_console.print(f"[green]✅ {escape(message)}[/green]", highlight=False)


def detail(message: str) -> None:
    err_console.print(f"[green]   {escape(message)}[/green]", highlight=False)


def print_json(data) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def read_markdown(path: str) -> str:
    try:
        return pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputFormatError(f"error reading markdown file: {e}") from e


def add_dry_run(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the batchUpdate requests as JSON instead of sending them.",
    )


def submit(args: argparse.Namespace, ops: list[EditOperation], message: str) -> list[dict] | None:
    """
    Sends one batch for args.document_id, or prints it under --dry-run.

    Returns the service replies (None for a dry run).
    """
    if getattr(args, "dry_run", False):
        print_json({"requests": to_requests(ops)})
        return None
    replies = _client.get_client().batch_update(args.document_id, ops)
    success(message)
    return replies
