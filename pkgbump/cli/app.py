from __future__ import annotations

import typer

from pkgbump.cli.commands.bump import bump

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

# Single command: `pkgbump LEVEL`
app.command()(bump)


def main() -> None:
    app()
