import os
from typing import Optional

PathArg = str | os.PathLike[str]


def is_absolute(path: Optional[PathArg]) -> bool:
    """Return True if `path` is present and starts at the filesystem root.

    Purely syntactic: the path is not required to exist.
    """
    if path is None:
        return False
    return os.fspath(path).startswith(os.sep)


def has_nul(value: PathArg) -> bool:
    """NUL cannot appear in a command line, an argument or a file name."""
    return "\0" in os.fspath(value)
