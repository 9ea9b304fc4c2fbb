# ABOUTME: The `readlog add` command for manual book entry.
# ABOUTME: Appends a book straight to the shelf, without ISBN validation or lookup.

from pathlib import Path

import click
from rich.console import Console

from readlog.cli.options import db_option, open_kv
from readlog.core.pipeline import add_manual_entry
from readlog.db.store import BookStore

console = Console()


@click.command("add")
@click.argument("title")
@click.option("--author", default=None, help="Author name.")
@click.option("--pages", type=click.IntRange(min=1), default=None, help="Total page count.")
@click.option("--isbn", default=None, help="ISBN, stored as given.")
@db_option
def add(
    title: str,
    author: str | None,
    pages: int | None,
    isbn: str | None,
    db_path: Path | None,
) -> None:
    """Add a book to the shelf by hand."""
    with open_kv(db_path) as kv:
        book = add_manual_entry(BookStore(kv), title, author=author, pages=pages, isbn=isbn)

    if book is None:
        console.print("[red]Title must not be empty.[/red]")
        raise SystemExit(1)

    by = f" by {book.author}" if book.author else ""
    console.print(f"Added: [bold]{book.title}[/bold]{by}")
