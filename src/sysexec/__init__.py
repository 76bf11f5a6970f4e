from sysexec.exec import exec_direct, exec_outcome, exec_redirect, spawn_and_replace
from sysexec.paths import is_absolute
from sysexec.shell import run_shell, shell_outcome
from sysexec.status import ExitOutcome, OutcomeKind

__all__ = [
    "ExitOutcome",
    "OutcomeKind",
    "exec_direct",
    "exec_outcome",
    "exec_redirect",
    "is_absolute",
    "run_shell",
    "shell_outcome",
    "spawn_and_replace",
]
