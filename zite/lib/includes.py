"""Include expansion - {{include <path>}} textual macros.

Each directive is replaced by the contents of the named file, resolved
relative to the directory of the file the directive appears in.
Expansion is a single pass: included text is not scanned again.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import IncludeError

INCLUDE_PATTERN = re.compile(r"\{\{include ([^}]+)\}\}")


def read_source(path: Path) -> str:
    """Read a UTF-8 source file with its line endings left as they are."""
    return path.read_bytes().decode("utf-8")


def expand_includes(text: str, base_dir: Path) -> str:
    """Replace every include directive in text.

    Args:
        text: Body that may contain {{include <path>}} directives.
        base_dir: Directory the include paths are relative to.

    Returns:
        The body with each directive replaced by the file's contents.

    Raises:
        IncludeError: If an included file cannot be read.
    """

    def replace(match: re.Match[str]) -> str:
        include_path = base_dir / match.group(1)
        try:
            return read_source(include_path)
        except (OSError, UnicodeDecodeError) as e:
            raise IncludeError(include_path, str(e)) from e

    return INCLUDE_PATTERN.sub(replace, text)


def expand_file_includes(path: Path) -> str:
    """Read a text file and expand its includes relative to its directory."""
    return expand_includes(read_source(path), path.parent)