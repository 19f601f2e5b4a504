from pathlib import Path

import typer
from rich.console import Console

from solconv.cli.check import RootOption
from solconv.core.config import ConfigError, load_config
from solconv.core.formatting import run_formatters

console = Console(stderr=True)


def fmt(root: RootOption = Path(".")) -> None:
    """Format Solidity sources with forge and foundry.toml with taplo."""
    try:
        config = load_config(root)
    except ConfigError as exc:
        console.print(f"[bold red]error[/bold red]: {exc}")
        raise typer.Exit(1) from exc

    if not run_formatters(config):
        console.print("[bold red]error[/bold red]: Formatting failed, review above output")
        raise typer.Exit(1)
    console.print("[green]Formatted[/green] project sources")
