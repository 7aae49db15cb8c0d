"""
swaytab command line interface.

Usage:
    swaytab [-f COMMAND] [-a ARG]...

Picks a window from the Sway tree with a filter tool (fzf by default) and
focuses it. Set SWAYTAB_LOG_LEVEL=DEBUG for diagnostics on stderr.
"""

import asyncio
import logging
import os
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import resolve_config
from .errors import SwaytabError
from .models import TabConfig
from .picker import connect, fetch_tree, pick

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SWAYTAB_LOG_LEVEL"


def setup_logging() -> None:
    """Configure logging from SWAYTAB_LOG_LEVEL (WARNING by default)."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


async def run(config: TabConfig, console: Console) -> None:
    """Connect to Sway, then pick and focus a window."""
    conn = await connect()
    try:
        root = await fetch_tree(conn)
        await pick(conn, config, root, console)
    finally:
        conn.main_quit()


@click.command()
@click.version_option(__version__, prog_name="swaytab")
@click.option(
    '-f', '--filter-command',
    default=None,
    metavar='COMMAND',
    help='Set the filter tool to use, e.g. `-f bemenu`',
)
@click.option(
    '-a', '--args', 'filter_args',
    multiple=True,
    metavar='ARG',
    help='Command line argument for the filter tool (repeatable), e.g. `-a +i -a --multi`',
)
def cli(filter_command: Optional[str], filter_args: Tuple[str, ...]):
    """Pick a Sway window with a fuzzy filter and focus it."""
    setup_logging()
    console = Console(stderr=True)

    try:
        config = resolve_config(filter_command, filter_args)
        asyncio.run(run(config, console))
    except SwaytabError as e:
        logger.debug(f"Fatal error: {e.to_dict()}")
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        if e.suggestion:
            console.print(f"  → {escape(e.suggestion)}")
        sys.exit(1)


def main():
    """Console script entry point."""
    cli()
