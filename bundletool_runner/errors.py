"""Exceptions raised by bundletool_runner."""

from __future__ import annotations

from typing import Sequence


class ToolError(RuntimeError):
    """A bundletool operation failed. The message names the operation."""


class ProcessError(RuntimeError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: int, stdout: str = "", stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {' '.join(self.command)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)
