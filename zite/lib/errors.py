"""Shared error handling for zite."""

import sys
from pathlib import Path
from typing import NoReturn

import typer


class ZiteError(Exception):
    """Base exception for zite operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigError(ZiteError):
    """Raised when zite.yaml cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read config file {path}: {reason}", exit_code=4)


class SourceNotFoundError(ZiteError):
    """Raised when the source root does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source directory not found: {path}")


class IncludeError(ZiteError):
    """Raised when an include directive points at an unreadable file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not include {path}: {reason}")


class LayoutNotFoundError(ZiteError):
    """Raised when no _template.html exists between a page and the source root."""

    def __init__(self, start: Path, root: Path) -> None:
        self.start = start
        self.root = root
        super().__init__(f"No layout template found for {start} (searched up to {root})")


class RenderError(ZiteError):
    """Raised when a page template fails to parse or render."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not render {path}: {reason}")


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on zite errors."""
    if isinstance(error, ZiteError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
