# ABOUTME: The `readlog scan` command for ingesting decoded barcodes.
# ABOUTME: Reads codes from arguments, a file, or stdin, resolves metadata, and adds books.

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console

from readlog.cli.options import db_option, open_kv
from readlog.core.pipeline import (
    DEBOUNCE_SECONDS,
    IngestResult,
    IngestStatus,
    ScanIngestPipeline,
)
from readlog.db.store import BookStore
from readlog.metadata.http import ReadlogHttpClient
from readlog.metadata.resolver import default_resolver

console = Console()


def _report(result: IngestResult) -> None:
    if result.status is IngestStatus.ADDED and result.book is not None:
        book = result.book
        by = f" by {book.author}" if book.author else ""
        pages = f" · {book.pages} pages" if book.pages else ""
        console.print(f"Added: [bold]{book.title}[/bold]{by}{pages}")
    elif result.status is IngestStatus.NOT_RECOGNIZED:
        console.print(
            f"[yellow]{result.code}: not a book barcode. "
            "Look for 13 digits starting 978/979.[/yellow]"
        )
    elif result.status is IngestStatus.DEBOUNCED:
        console.print(f"[dim]{result.code}: ignored (duplicate read)[/dim]")
    elif result.status is IngestStatus.BUSY:
        console.print(f"[dim]{result.code}: ignored (still fetching previous scan)[/dim]")
    elif result.status is IngestStatus.CANCELLED:
        console.print(f"[yellow]{result.code}: scan cancelled[/yellow]")


@click.command("scan")
@click.argument("codes", nargs=-1)
@db_option
@click.option(
    "--input",
    "stream",
    type=click.File("r"),
    default="-",
    help="File of codes, one per line, used when no CODES are given (default: stdin).",
)
@click.option(
    "--once",
    is_flag=True,
    default=False,
    help="Stop after the first book is added.",
)
@click.option(
    "--debounce",
    type=click.FloatRange(min=0.0),
    default=None,
    help=(
        "Seconds to ignore repeat reads after a code "
        f"(default: 0 for arguments, {DEBOUNCE_SECONDS} for streamed input)."
    ),
)
def scan(
    codes: tuple[str, ...],
    db_path: Path | None,
    stream: TextIO,
    once: bool,
    debounce: float | None,
) -> None:
    """Add books from decoded barcodes.

    CODES are EAN-13 strings. Without CODES, one code per line is read from
    --input, e.g. a camera barcode decoder piped into stdin.
    """
    source: Iterable[str]
    if codes:
        source = codes
        window = 0.0 if debounce is None else debounce
    else:
        source = stream
        window = DEBOUNCE_SECONDS if debounce is None else debounce

    added = 0
    with ReadlogHttpClient() as http_client, open_kv(db_path) as kv:
        pipeline = ScanIngestPipeline(
            BookStore(kv), default_resolver(http_client), debounce_seconds=window
        )
        try:
            for result in pipeline.ingest_stream(source, stop_after_added=once):
                _report(result)
                added += int(result.added)
        except KeyboardInterrupt:
            pipeline.cancel()
            console.print("[yellow]Scanning stopped.[/yellow]")

    console.print(f"\n[dim]{added} book(s) added[/dim]")
