import subprocess
from typing import Optional

from sysexec.logger import logger
from sysexec.paths import has_nul
from sysexec.status import ExitOutcome, from_returncode


def shell_outcome(command: Optional[str]) -> ExitOutcome:
    """
    Run `command` through /bin/sh and decode how it terminated.

    The command's output is inherited, not captured. A single synchronous
    attempt is made.
    """
    if command is None:
        return ExitOutcome.invalid_argument("command is None")
    if has_nul(command):
        return ExitOutcome.invalid_argument("command contains a NUL byte")

    try:
        completed = subprocess.run(command, shell=True, check=False)
    except OSError as e:
        return ExitOutcome.invocation_failed(f"could not start shell: {e}")

    return from_returncode(completed.returncode)


def run_shell(command: Optional[str]) -> bool:
    """Return True only if the shell ran `command` and it exited with status 0."""
    outcome = shell_outcome(command)
    if not outcome.ok:
        logger.error(f"Command {command!r} {outcome.describe()}")
    return outcome.ok
