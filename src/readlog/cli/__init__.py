# ABOUTME: CLI package for readlog, built on Click.
# ABOUTME: Defines the root command group, logging verbosity, and registers subcommands.

import logging

import click

from readlog.cli.commands import add_cmd, log_cmd, ls_cmd, scan_cmd, stats_cmd, suggest_cmd


@click.group()
@click.version_option(package_name="readlog")
@click.option("-v", "--verbose", count=True, help="Show info (-v) or debug (-vv) logs.")
def cli(verbose: int) -> None:
    """readlog - track the books you read, one page at a time."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(add_cmd.add)
cli.add_command(scan_cmd.scan)
cli.add_command(ls_cmd.ls)
cli.add_command(log_cmd.log)
cli.add_command(stats_cmd.stats)
cli.add_command(suggest_cmd.suggest)
