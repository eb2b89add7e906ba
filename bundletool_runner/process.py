"""
Async subprocess helper used to drive external tools.

`exec_tool` launches a command, waits for it to exit and returns the captured
output. A non-zero exit raises `ProcessError` with stdout/stderr attached so
callers can wrap it in their own error message.
"""

from __future__ import annotations

import asyncio
import logging
import shlex
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .errors import ProcessError

logger = logging.getLogger(__name__)


@dataclass
class ExecResult:
    stdout: str
    stderr: str
    returncode: int = 0


def printable_command(cmd: Sequence[str]) -> str:
    return " ".join([shlex.quote(str(c)) for c in cmd])


async def exec_tool(
    executable: str,
    args: Sequence[str],
    env: Optional[Dict[str, str]] = None,
    cwd: Optional[str] = None,
) -> ExecResult:
    """Run `executable` with `args` and return its decoded output.

    No timeout is applied. If the awaiting task is cancelled the child is
    killed before the cancellation propagates.
    """
    cmd = [str(executable)] + [str(a) for a in args]
    logger.debug(f"$ {printable_command(cmd)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            env=env,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise ProcessError(cmd, -1, stderr=str(exc)) from exc

    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        if process.returncode is None:
            process.kill()
            await process.wait()
        raise

    stdout_str = stdout.decode("utf-8", errors="replace")
    stderr_str = stderr.decode("utf-8", errors="replace")

    if process.returncode != 0:
        logger.debug(f"Command exited with {process.returncode}: {printable_command(cmd)}")
        raise ProcessError(cmd, process.returncode, stdout=stdout_str, stderr=stderr_str)

    return ExecResult(stdout=stdout_str, stderr=stderr_str, returncode=process.returncode)
