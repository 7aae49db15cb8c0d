"""
Window picker.

Connects the pieces: flatten the Sway tree, let the filter choose a window and
focus it through IPC. Cancelling the filter or a missing filter binary are
reported and end the run normally; anything else propagates to the CLI.
"""

import logging
from typing import Any, Optional

from i3ipc.aio import Connection
from rich.console import Console
from rich.markup import escape

from .errors import EmptyFilterResult, FilterCommandFailed, WindowManagerUnavailable
from .filter_pipe import run_filter
from .models import Selection, TabConfig
from .tree import flatten

logger = logging.getLogger(__name__)


def focus_command(con_id: int) -> str:
    """Build the scoped focus command for a container."""
    return f"[con_id={con_id}] focus"


async def connect() -> Connection:
    """
    Open an IPC connection to Sway.

    Returns:
        Connected i3ipc.aio Connection

    Raises:
        WindowManagerUnavailable: If the socket cannot be found or reached
    """
    try:
        return await Connection(auto_reconnect=False).connect()
    except Exception as e:
        raise WindowManagerUnavailable("connect", str(e)) from e


async def fetch_tree(conn: Connection) -> Any:
    """
    Get the current layout tree.

    Raises:
        WindowManagerUnavailable: If the get_tree query fails
    """
    try:
        return await conn.get_tree()
    except Exception as e:
        raise WindowManagerUnavailable("get_tree", str(e)) from e


async def focus(conn: Connection, con_id: int, console: Optional[Console] = None) -> bool:
    """
    Focus a container by id.

    Every failed reply is reported on its own; nothing is retried.

    Args:
        conn: Sway IPC connection
        con_id: Container id to focus
        console: Console for user-facing errors (stderr by default)

    Returns:
        True if every reply succeeded
    """
    console = console or Console(stderr=True)
    command = focus_command(con_id)
    logger.debug(f"Running command: {command}")

    try:
        replies = await conn.command(command)
    except Exception as e:
        logger.error(f"Command '{command}' failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return False

    ok = True
    for reply in replies:
        if not reply.success:
            ok = False
            if reply.error:
                logger.warning(f"Command '{command}' reported error: {reply.error}")
                console.print(f"[red]Error: {escape(repr(reply.error))}[/red]")
    return ok


async def pick(
    conn: Connection,
    config: TabConfig,
    root: Any,
    console: Optional[Console] = None,
) -> Optional[Selection]:
    """
    Let the user pick a window from the tree and focus it.

    Args:
        conn: Sway IPC connection used for the focus command
        config: Effective configuration
        root: Tree snapshot returned by get_tree()
        console: Console for user-facing messages (stderr by default)

    Returns:
        The Selection that was focused, or None if nothing was chosen

    Raises:
        ProtocolViolation: If the filter printed an unparsable answer
    """
    console = console or Console(stderr=True)
    candidates = flatten(root)

    try:
        selection = await run_filter(config.filter_command, config.filter_command_args, candidates)
    except EmptyFilterResult as e:
        logger.info("Filter returned no selection")
        console.print(escape(e.message))
        return None
    except FilterCommandFailed as e:
        logger.error(e.message)
        console.print(f"[red]{escape(e.message)}[/red]")
        return None

    logger.info(f"Selected container {selection.id} ({selection.name})")
    await focus(conn, selection.id, console)
    return selection
