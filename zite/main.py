"""zite CLI Main Entry Point

Usage:
    zite        # build ./src into ./www (or as set in ./zite.yaml)
"""

from __future__ import annotations

import typer

from zite.commands import build_command

typer_app = typer.Typer(add_completion=False)


@typer_app.command()
def cli() -> None:
    """Render the site in the current directory."""
    build_command()


def app() -> None:
    """Entry point for the installed `zite` script."""
    typer_app()


if __name__ == "__main__":
    app()
