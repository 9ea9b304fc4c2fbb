# ABOUTME: The `readlog stats` command for points, badges, and the reading streak.
# ABOUTME: Evaluates the streak for today, then renders badge progress as a Rich table.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from readlog.cli.options import db_option, open_kv
from readlog.core.stats import compute_stats
from readlog.core.streak import StreakTracker
from readlog.db.store import BookStore

console = Console()


@click.command("stats")
@db_option
def stats(db_path: Path | None) -> None:
    """Show total points, badges, and the current streak."""
    with open_kv(db_path) as kv:
        streak = StreakTracker(kv).evaluate_for_today()
        result = compute_stats(BookStore(kv).load())

    console.print(f"Current streak is {streak.streak_days} days")
    console.print(f"Total points: [bold]{result.total_points}[/bold]")

    table = Table(title="Badges")
    table.add_column("", width=3)
    table.add_column("Badge", style="bold")
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for entry in result.badges:
        badge = entry.badge
        if entry.earned:
            status = "[green]Unlocked[/green]"
        else:
            status = f"Read {badge.threshold_pages} pages"
        table.add_row(
            badge.icon,
            badge.name,
            status,
            f"{entry.progress} / {badge.threshold_pages}",
            style=None if entry.earned else "dim",
        )

    console.print(table)
