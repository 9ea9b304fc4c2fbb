# ABOUTME: The `readlog suggest` command for random reading ideas.
# ABOUTME: Prints a few picks by hobby, by genre, and from the popular list.

import click
from rich.console import Console

from readlog.core.suggestions import Suggestion, suggest as pick_suggestions

console = Console()


def _print_section(heading: str, picks: list[Suggestion]) -> None:
    console.print(f"\n[bold]{heading}[/bold]")
    for pick in picks:
        console.print(f"  {pick.title} [dim]({pick.caption})[/dim]")


@click.command("suggest")
@click.option("-n", "count", type=click.IntRange(min=1), default=4, help="Picks per section.")
def suggest(count: int) -> None:
    """Suggest something to read next."""
    picks = pick_suggestions(count)
    _print_section("For your hobbies", picks.hobbies)
    _print_section("By genre", picks.genres)
    _print_section("Popular right now", picks.popular)
