"""
Exit outcome of a single process invocation.

Every operation in this package reduces to an ExitOutcome, which in turn
reduces to a boolean: only a normal exit with code 0 is success.
"""

import os
import signal
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    EXITED = "exited"
    SIGNALED = "signaled"
    ABNORMAL = "abnormal"
    INVALID_ARGUMENT = "invalid_argument"
    INVOCATION_FAILED = "invocation_failed"


def signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


@dataclass(frozen=True)
class ExitOutcome:
    kind: OutcomeKind
    code: Optional[int] = None
    signal: Optional[int] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.EXITED and self.code == 0

    def __bool__(self) -> bool:
        return self.ok

    def describe(self) -> str:
        """Human-readable diagnostic for this outcome."""
        if self.kind is OutcomeKind.EXITED:
            if self.code == 0:
                return "exited successfully"
            return f"exited with non-zero status: {self.code}"
        if self.kind is OutcomeKind.SIGNALED:
            return f"terminated by signal: {int(self.signal)} ({signal_name(self.signal)})"
        if self.kind is OutcomeKind.INVALID_ARGUMENT:
            return f"invalid argument: {self.reason}"
        if self.kind is OutcomeKind.INVOCATION_FAILED:
            return f"invocation failed: {self.reason}"
        return "did not terminate normally"

    @classmethod
    def exited(cls, code: int) -> "ExitOutcome":
        return cls(OutcomeKind.EXITED, code=code)

    @classmethod
    def signaled(cls, signum: int) -> "ExitOutcome":
        return cls(OutcomeKind.SIGNALED, signal=signum)

    @classmethod
    def abnormal(cls) -> "ExitOutcome":
        return cls(OutcomeKind.ABNORMAL)

    @classmethod
    def invalid_argument(cls, reason: str) -> "ExitOutcome":
        return cls(OutcomeKind.INVALID_ARGUMENT, reason=reason)

    @classmethod
    def invocation_failed(cls, reason: str) -> "ExitOutcome":
        return cls(OutcomeKind.INVOCATION_FAILED, reason=reason)


def from_wait_status(status: int) -> ExitOutcome:
    """Decode a raw status as returned by os.waitpid or os.system."""
    if os.WIFEXITED(status):
        return ExitOutcome.exited(os.WEXITSTATUS(status))
    if os.WIFSIGNALED(status):
        return ExitOutcome.signaled(os.WTERMSIG(status))
    return ExitOutcome.abnormal()


def from_returncode(returncode: int) -> ExitOutcome:
    """Decode a subprocess returncode, where -N means killed by signal N."""
    if returncode < 0:
        return ExitOutcome.signaled(-returncode)
    return ExitOutcome.exited(returncode)
