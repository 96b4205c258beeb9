"""Tree builder - reads the source directory into Elements.

Classification by extension:
- .md    -> page, first line is the title, second is skipped
- .html  -> page, includes expanded immediately, no title
- other  -> file, copied verbatim at generate time

Names starting with "_" (layouts, partials) never enter the tree.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import SiteConfig
from .element import Element, ElementType, path_to_url
from .errors import SourceNotFoundError
from .includes import expand_file_includes, read_source

log = logging.getLogger(__name__)

HIDDEN_PREFIX = "_"
MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def is_hidden(name: str) -> bool:
    """Convention files (layouts, partials) start with an underscore."""
    return name.startswith(HIDDEN_PREFIX)


def split_markdown(text: str) -> tuple[str, str]:
    """Split markdown source into (title, body).

    Line 0 is the title, line 1 is the blank separator, the rest is body.
    """
    lines = text.split("\n")
    title = lines[0].rstrip("\r")
    return title, "\n".join(lines[2:])


def read_file(path: Path, config: SiteConfig, parent: Element | None = None) -> Element:
    """Classify a single source file into a page or file Element."""
    suffix = path.suffix
    src_root = config.src_dir

    if suffix == MARKDOWN_SUFFIX:
        title, content = split_markdown(read_source(path))
        element = Element(
            type=ElementType.PAGE,
            path=path,
            url=path_to_url(path, src_root, ElementType.PAGE),
            title=title,
            content=content,
        )
    elif suffix == HTML_SUFFIX:
        element = Element(
            type=ElementType.PAGE,
            path=path,
            url=path_to_url(path, src_root, ElementType.PAGE),
            content=expand_file_includes(path),
        )
    else:
        element = Element(
            type=ElementType.FILE,
            path=path,
            url=path_to_url(path, src_root, ElementType.FILE),
        )

    log.debug(f"Read {element.type.value} {path}")
    if parent is not None:
        parent.add_child(element)
    return element


def read_directory(
    path: Path, config: SiteConfig, parent: Element | None = None
) -> Element:
    """Recursively read a directory into a dir Element.

    The new Element is attached to parent before its own entries are read.
    """
    directory = Element(
        type=ElementType.DIR,
        path=path,
        url=path_to_url(path, config.src_dir, ElementType.DIR),
    )
    if parent is not None:
        parent.add_child(directory)

    for entry in path.iterdir():
        if is_hidden(entry.name):
            continue
        if entry.is_symlink() and entry.is_dir():
            log.warning(f"Skipping symlinked directory {entry}")
            continue
        if entry.is_dir():
            read_directory(entry, config, directory)
        else:
            read_file(entry, config, directory)

    return directory


def build_tree(config: SiteConfig) -> Element:
    """Read the whole source tree.

    Raises:
        SourceNotFoundError: If the configured source directory is missing.
    """
    src_dir = config.src_dir
    if not src_dir.is_dir():
        raise SourceNotFoundError(src_dir)

    log.debug(f"Reading source tree {src_dir}")
    return read_directory(src_dir, config)
