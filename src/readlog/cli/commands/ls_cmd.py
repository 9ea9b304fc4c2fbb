# ABOUTME: The `readlog ls` command for listing the shelf.
# ABOUTME: Displays a Rich table of all books with their logged pages.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from readlog.cli.options import db_option, open_kv
from readlog.db.store import BookStore

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List all books on the shelf."""
    with open_kv(db_path) as kv:
        books = BookStore(kv).load()

    if not books:
        console.print("[yellow]Your shelf is empty.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Pages", justify="right")
    table.add_column("Read", justify="right")
    table.add_column("ISBN")

    for number, book in enumerate(books, start=1):
        table.add_row(
            str(number),
            book.title,
            book.author or "[dim]unknown[/dim]",
            str(book.pages) if book.pages else "",
            str(book.read_pages) if book.read_pages else "",
            book.isbn or "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
