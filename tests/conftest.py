"""
Pytest configuration for sysexec tests.

Provides spies on process creation and on the owned argument list so tests
can assert that no child was started and that every call releases its copy.
"""
import logging
import os
from contextlib import contextmanager

import pytest

import sysexec.exec as sysexec_exec


class ForkSpy:
    def __init__(self):
        self.calls = 0


class ArgvTracker:
    def __init__(self):
        self.acquired = []
        self.releases = 0


@pytest.fixture
def fork_spy(monkeypatch):
    """Count os.fork calls made by the parent while still forking for real."""
    spy = ForkSpy()
    real_fork = os.fork

    def counting_fork():
        spy.calls += 1
        return real_fork()

    monkeypatch.setattr(os, "fork", counting_fork)
    return spy


@pytest.fixture
def argv_tracker(monkeypatch):
    """Record each owned argument list and how many times it was released."""
    tracker = ArgvTracker()
    real_owned_argv = sysexec_exec.owned_argv

    @contextmanager
    def tracking_owned_argv(argv):
        with real_owned_argv(argv) as owned:
            tracker.acquired.append(owned)
            try:
                yield owned
            finally:
                tracker.releases += 1

    monkeypatch.setattr(sysexec_exec, "owned_argv", tracking_owned_argv)
    return tracker


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
