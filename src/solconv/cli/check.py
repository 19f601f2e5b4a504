from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from solconv.core.ast import SolidityParseError
from solconv.core.check import ChecksFailedError, run
from solconv.core.config import ConfigError, load_config

console = Console(stderr=True)

RootOption = Annotated[
    Path,
    typer.Option("--root", envvar="SOLCONV_ROOT", help="Project root containing src, script and test."),
]


def check(root: RootOption = Path(".")) -> None:
    """Check naming conventions and formatting."""
    try:
        config = load_config(root)
        run(config, console)
    except (ConfigError, SolidityParseError, ChecksFailedError, OSError) as exc:
        console.print(f"[bold red]error[/bold red]: {exc}")
        raise typer.Exit(1) from exc
