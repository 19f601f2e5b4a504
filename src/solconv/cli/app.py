import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from solconv import __version__
from solconv.cli.check import check
from solconv.cli.fmt import fmt

app = typer.Typer(
    name="solconv",
    help="solconv — check naming and formatting conventions of a Solidity project.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("check")(check)
app.command("fmt")(fmt)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_version(value: bool) -> None:
    if value:
        Console().print(f"solconv {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    _configure_logging(verbose)


def main() -> None:
    app()
