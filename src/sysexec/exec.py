"""
Direct program execution via fork/exec, bypassing the shell.

The executable must be given as an absolute path: no PATH lookup, globbing or
variable expansion happens at this layer, the argument list reaches execv
verbatim.
"""

import os
import sys
from contextlib import contextmanager
from functools import partial
from typing import Callable, Iterator, Optional, Sequence

from sysexec.logger import logger
from sysexec.paths import PathArg, has_nul, is_absolute
from sysexec.status import ExitOutcome, from_wait_status

STDOUT_FILENO = 1
OUTPUT_FILE_MODE = 0o644
CHILD_FAILURE_STATUS = 1


@contextmanager
def owned_argv(argv: Sequence[str]) -> Iterator[list[str]]:
    """Hold a private copy of `argv` for the duration of a call."""
    owned = list(argv)
    try:
        yield owned
    finally:
        owned.clear()


def _flush_std_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


def redirect_stdout(output_path: PathArg) -> None:
    """Point fd 1 at `output_path`, created or truncated with mode 0644."""
    fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
    if fd == STDOUT_FILENO:
        return
    try:
        os.dup2(fd, STDOUT_FILENO)
    except OSError:
        os.close(fd)
        raise
    os.close(fd)


def spawn_and_replace(
    argv: list[str],
    pre_exec: Optional[Callable[[], None]] = None,
) -> ExitOutcome:
    """
    Fork, run `pre_exec` in the child, replace the child with `argv`, and wait.

    The child never returns into the caller's frames: if setup or execv fails
    it leaves through os._exit, skipping atexit hooks and buffered-stream
    flushing inherited from the parent.
    """
    _flush_std_streams()

    try:
        pid = os.fork()
    except OSError as e:
        return ExitOutcome.invocation_failed(f"fork failed: {e}")

    if pid == 0:
        try:
            if pre_exec is not None:
                pre_exec()
            os.execv(argv[0], argv)
        except OSError as e:
            logger.error(f"Could not start {argv[0]}: {e}")
        finally:
            os._exit(CHILD_FAILURE_STATUS)

    logger.debug(f"Started pid {pid}: {argv}")
    try:
        _, status = os.waitpid(pid, 0)
    except OSError as e:
        return ExitOutcome.invocation_failed(f"waitpid failed: {e}")

    return from_wait_status(status)


def exec_outcome(
    argv: Optional[Sequence[str]],
    output_path: Optional[PathArg] = None,
    *,
    redirect: bool = False,
) -> ExitOutcome:
    """
    Run `argv` directly and decode how it terminated.

    With `redirect=True` the child's stdout is written to `output_path`
    instead of being inherited.
    """
    if not argv:
        return ExitOutcome.invalid_argument("argument list is empty")

    try:
        with owned_argv(argv) as command:
            if not is_absolute(command[0]):
                return ExitOutcome.invalid_argument(
                    f"command must be an absolute path, got {command[0]!r}"
                )
            if any(has_nul(arg) for arg in command):
                return ExitOutcome.invalid_argument("argument contains a NUL byte")
            pre_exec = None
            if redirect:
                if output_path is None:
                    return ExitOutcome.invalid_argument("output path is None")
                if has_nul(output_path):
                    return ExitOutcome.invalid_argument("output path contains a NUL byte")
                pre_exec = partial(redirect_stdout, output_path)
            return spawn_and_replace(command, pre_exec)
    except MemoryError:
        return ExitOutcome.invocation_failed("could not allocate argument list")


def exec_direct(argv: Optional[Sequence[str]]) -> bool:
    """
    Execute `argv[0]` (an absolute path) with the given arguments.

    Returns True only if the program ran and exited with status 0.
    """
    outcome = exec_outcome(argv)
    if not outcome.ok:
        logger.error(f"Command {_display(argv)} {outcome.describe()}")
    return outcome.ok


def exec_redirect(output_path: Optional[PathArg], argv: Optional[Sequence[str]]) -> bool:
    """
    Like exec_direct, with the program's stdout written to `output_path`.

    The file is created if missing and truncated if present.
    """
    outcome = exec_outcome(argv, output_path, redirect=True)
    if not outcome.ok:
        logger.error(
            f"Command {_display(argv)} (stdout > {output_path}) {outcome.describe()}"
        )
    return outcome.ok


def _display(argv: Optional[Sequence[str]]) -> str:
    if not argv:
        return "<empty>"
    return " ".join(map(os.fspath, argv))
