"""Subprocess helpers."""

import asyncio
import logging
import subprocess
from typing import Optional, List
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from running a command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


def _decode(data: Optional[bytes]) -> str:
    return data.decode(errors="replace") if data else ""


async def run_command(
    cmd: List[str],
    check: bool = True,
    capture_output: bool = True,
    timeout: Optional[float] = None,
    log_cmd: Optional[List[str]] = None,
    **kwargs
) -> CommandResult:
    """Run a command asynchronously.

    ``log_cmd`` replaces ``cmd`` in the debug log, for arguments that
    carry secrets. Output that is not valid UTF-8 is decoded with
    replacement characters.
    """
    logger.debug(f"Running command: {' '.join(log_cmd or cmd)}")

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE if capture_output else None,
        stderr=asyncio.subprocess.PIPE if capture_output else None,
        **kwargs
    )

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise subprocess.TimeoutExpired(log_cmd or cmd, timeout)

    result = CommandResult(
        returncode=process.returncode,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )

    if check and process.returncode != 0:
        error = subprocess.CalledProcessError(process.returncode, cmd)
        error.stdout = result.stdout
        error.stderr = result.stderr
        raise error

    return result
