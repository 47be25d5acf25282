"""
Execution of external client programs (mysql, mysqldump).
"""

import logging
import os
import shlex
import subprocess
from typing import IO, Optional, Sequence

from .exceptions import ConfigurationError, ProcessExecutionError


def mask_command(cmd: Sequence[str]) -> str:
    """Render a command for logging with the password flag masked."""
    return shlex.join(
        '-p***' if arg.startswith('-p') and len(arg) > 2 else arg
        for arg in cmd
    )


def run_command(
    cmd: Sequence[str],
    output_results: bool = True,
    stdout: Optional[IO] = None,
    cwd: Optional[str] = None
) -> int:
    """
    Execute the command and return the exit code.

    Args:
        cmd: Argument vector; no shell is involved.
        output_results: Echo the captured output to the console on success.
        stdout: Open file to redirect the program's standard output into.
            Only standard error is captured in that case.
        cwd: Working directory for the program.

    Returns:
        0 when the command succeeded.

    Raises:
        ProcessExecutionError: the command could not be started or exited
            with a nonzero status.
        ConfigurationError: the working directory does not exist.
    """
    display = mask_command(cmd)
    logging.debug(f"Running: {display}")

    if cwd is not None and not os.path.isdir(cwd):
        raise ConfigurationError(f"Working directory '{cwd}' does not exist")

    try:
        if stdout is None:
            proc = subprocess.run(
                list(cmd), stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                text=True, errors='replace', cwd=cwd
            )
            captured = proc.stdout
        else:
            proc = subprocess.run(
                list(cmd), stdout=stdout, stderr=subprocess.PIPE,
                text=True, errors='replace', cwd=cwd
            )
            captured = proc.stderr
    except FileNotFoundError as e:
        missing = e.filename or cmd[0]
        raise ProcessExecutionError(f"{missing} not found: {e.strerror}", 127, cmd) from e

    output = (captured or '').splitlines()

    if proc.returncode != 0:
        if output:
            message = '\n'.join(output)
        else:
            message = (
                f"Execution of *{display}* failed with exit code {proc.returncode} "
                f"without any further output. (Please check your logs for possible errors)"
            )
        logging.error(f"Command failed with exit code {proc.returncode}: {display}")
        raise ProcessExecutionError(message, proc.returncode, cmd)

    if output_results and output:
        print('\n'.join(output))

    return proc.returncode
