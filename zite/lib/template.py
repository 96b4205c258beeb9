"""Layout resolution for markdown pages.

A markdown page is rendered through the nearest _template.html found in
its own directory or an ancestor, stopping at the source root.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import LayoutNotFoundError
from .includes import expand_file_includes

log = logging.getLogger(__name__)

LAYOUT_FILENAME = "_template.html"


def find_layout(start_dir: Path, root: Path) -> Path:
    """Find the nearest layout template from start_dir up to root.

    Args:
        start_dir: Directory containing the markdown page.
        root: Source root; the search does not go above it.

    Returns:
        Path to the _template.html that applies.

    Raises:
        LayoutNotFoundError: If no directory up to root has one.
    """
    root = root.resolve()
    current = start_dir.resolve()

    while True:
        log.debug(f"Finding template in {current}")
        candidate = current / LAYOUT_FILENAME
        if candidate.is_file():
            return candidate
        if current == root or current == current.parent:
            raise LayoutNotFoundError(start_dir, root)
        current = current.parent


def load_layout(start_dir: Path, root: Path) -> str:
    """Find the nearest layout and return its include-expanded text."""
    return expand_file_includes(find_layout(start_dir, root))
