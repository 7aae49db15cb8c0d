"""
Filter subprocess protocol.

Candidates are written to the filter's stdin as lines of the form
``<id>, '<name>'`` and the filter prints the chosen line on stdout. Writing
happens in its own task while the caller reads stdout, so a filter that starts
printing before it has consumed all input cannot fill both pipe buffers and
hang.
"""

import asyncio
import logging
import re
from typing import Iterable, List, Optional, Sequence

from .errors import EmptyFilterResult, FilterCommandFailed, ProtocolViolation
from .models import Candidate, Selection

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Container ids are signed 64-bit integers
_ID_MIN = -(2 ** 63)
_ID_MAX = 2 ** 63 - 1


def format_candidate(candidate: Candidate) -> str:
    """Render one candidate as a filter input line."""
    return f"{candidate.id}, '{candidate.name}'\n"


def decode_name(raw_name: str) -> str:
    """
    Undo the quoting added by format_candidate.

    Args:
        raw_name: Text after the first comma of the filter output

    Returns:
        Name without the trailing line break, the separating space and the
        surrounding single quotes
    """
    name = raw_name.rstrip("\r\n")
    if name.startswith(" "):
        name = name[1:]
    if len(name) >= 2 and name.startswith("'") and name.endswith("'"):
        name = name[1:-1]
    return name


def parse_selection(output: str) -> Selection:
    """
    Parse the filter's stdout into a selection.

    Only the text up to the first comma is interpreted; the rest is kept
    verbatim as raw_name.

    Args:
        output: Captured stdout of the filter

    Returns:
        Parsed Selection

    Raises:
        EmptyFilterResult: If the output is empty or contains no comma
        ProtocolViolation: If the text before the first comma is not an integer
    """
    if output == "":
        raise EmptyFilterResult()

    id_text, sep, raw_name = output.partition(",")
    if not sep:
        logger.debug(f"Filter output has no separator: {output!r}")
        raise EmptyFilterResult()

    id_text = id_text.strip()
    if not _ID_PATTERN.fullmatch(id_text):
        raise ProtocolViolation(output, f"id {id_text!r} is not an integer")

    con_id = int(id_text)
    if not _ID_MIN <= con_id <= _ID_MAX:
        raise ProtocolViolation(output, f"id {id_text!r} is out of range")

    return Selection(id=con_id, name=decode_name(raw_name), raw_name=raw_name)


async def _feed(stdin: asyncio.StreamWriter, candidates: Iterable[Candidate]) -> None:
    """Write all candidates to the filter, then close its stdin."""
    written = 0
    try:
        for candidate in candidates:
            stdin.write(format_candidate(candidate).encode("utf-8"))
            await stdin.drain()
            written += 1
    except (BrokenPipeError, ConnectionResetError) as e:
        # Filter exited before reading everything (e.g. user hit escape)
        logger.debug(f"Filter closed its input after {written} candidates: {e}")
    finally:
        stdin.close()
        try:
            await stdin.wait_closed()
        except (BrokenPipeError, ConnectionResetError):
            pass
    logger.debug(f"Fed {written} candidates to filter")


async def run_filter(
    command: str,
    args: Optional[Sequence[str]],
    candidates: List[Candidate],
) -> Selection:
    """
    Let the user choose one candidate with an external filter tool.

    Args:
        command: Filter executable, e.g. fzf
        args: Extra command line arguments for the filter
        candidates: Candidates in display order

    Returns:
        The chosen Selection

    Raises:
        FilterCommandFailed: If the filter could not be spawned
        EmptyFilterResult: If the filter printed nothing usable
        ProtocolViolation: If the filter printed a line without an integer id
    """
    argv = [command, *(args or [])]
    logger.debug(f"Spawning filter: {argv}")

    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise FilterCommandFailed(command, e) from e

    feeder = asyncio.create_task(_feed(proc.stdin, candidates))
    try:
        stdout = await proc.stdout.read()
        returncode = await proc.wait()
    finally:
        await feeder

    logger.debug(f"Filter exited with code {returncode}, {len(stdout)} bytes of output")
    return parse_selection(stdout.decode("utf-8", errors="replace"))
