import logging
from typing import Annotated, Optional

import typer

from sysexec.exec import exec_direct, exec_redirect
from sysexec.logger import setup_logging
from sysexec.shell import run_shell

PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}

app = typer.Typer(help="Run commands through the shell or directly via fork/exec.")


def _exit_with(ok: bool) -> None:
    raise typer.Exit(code=0 if ok else 1)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug diagnostics")
    ] = False,
):
    setup_logging(logging.DEBUG if verbose else None)


@app.command(help="Run COMMAND with /bin/sh -c.")
def shell(
    command: Annotated[str, typer.Argument(help="Command line passed to the shell")],
):
    _exit_with(run_shell(command))


@app.command(
    name="exec",
    help="Execute PATH directly with ARGS, no shell involved.",
    context_settings=PASSTHROUGH,
    # Everything after the program path, --help included, belongs to the program
    add_help_option=False,
)
def exec_(
    path: Annotated[str, typer.Argument(help="Absolute path of the program")],
    args: Annotated[
        Optional[list[str]], typer.Argument(help="Arguments for the program")
    ] = None,
):
    _exit_with(exec_direct([path, *(args or [])]))


@app.command(
    help="Execute PATH directly with ARGS, writing its stdout to OUTPUT.",
    context_settings=PASSTHROUGH,
    # Everything after the program path, --help included, belongs to the program
    add_help_option=False,
)
def redirect(
    output: Annotated[str, typer.Argument(help="File receiving the program's stdout")],
    path: Annotated[str, typer.Argument(help="Absolute path of the program")],
    args: Annotated[
        Optional[list[str]], typer.Argument(help="Arguments for the program")
    ] = None,
):
    _exit_with(exec_redirect(output, [path, *(args or [])]))


if __name__ == "__main__":
    app()
