# ABOUTME: The `readlog log` command for logging pages read.
# ABOUTME: Adds pages to one book and stamps today's reading session for the streak.

from pathlib import Path

import click
from rich.console import Console

from readlog.cli.options import db_option, open_kv
from readlog.core.reading import log_reading
from readlog.core.streak import StreakTracker
from readlog.db.store import BookStore

console = Console()


@click.command("log")
@click.argument("number", type=int)
@click.argument("pages", type=int)
@db_option
def log(number: int, pages: int, db_path: Path | None) -> None:
    """Log PAGES read in book NUMBER (as shown by `readlog ls`)."""
    if pages <= 0:
        console.print("[red]Pages read must be a positive number.[/red]")
        raise SystemExit(1)

    with open_kv(db_path) as kv:
        store = BookStore(kv)
        book = log_reading(store, StreakTracker(kv), number - 1, pages)
        total = store.total_points()

    if book is None:
        console.print(f"[red]Book {number} not found.[/red]")
        raise SystemExit(1)

    console.print(f"Logged {pages} page(s) of [bold]{book.title}[/bold] ({book.read_pages} read)")
    console.print(f"[dim]Total points: {total}. Your streak updates next visit.[/dim]")
