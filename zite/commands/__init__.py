"""CLI commands"""

from .build import build_command

__all__ = ["build_command"]
