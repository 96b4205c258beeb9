"""Output materializer - writes the source tree into the output directory.

Pages are rendered and written with an .html extension, plain files are
copied byte for byte, directories are created as needed. The first
failure aborts the whole build.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .config import SiteConfig
from .element import Element, ElementType
from .render import PageRenderer
from .tree import build_tree

log = logging.getLogger(__name__)


@dataclass
class GenerateStats:
    """Counts of what a build produced."""

    pages: int = 0
    files: int = 0


def destination_path(element: Element, config: SiteConfig) -> Path:
    """Mirror an element's source path under the output directory."""
    relative = element.path.relative_to(config.src_dir)
    destination = config.out_dir / relative
    if element.is_page:
        destination = destination.with_suffix(".html")
    return destination


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="")


def copy_file(source: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)


def generate(
    element: Element,
    config: SiteConfig,
    renderer: PageRenderer | None = None,
    stats: GenerateStats | None = None,
) -> GenerateStats:
    """Write element and its descendants to the output directory.

    Args:
        element: Root of the (sub)tree to write.
        config: Source and output roots.
        renderer: Renderer to reuse across pages.
        stats: Counters to accumulate into.

    Returns:
        Number of pages rendered and files copied.
    """
    renderer = renderer or PageRenderer(config)
    stats = stats or GenerateStats()

    match element.type:
        case ElementType.DIR:
            for child in element.children:
                generate(child, config, renderer, stats)
        case ElementType.PAGE:
            log.info(f"Rendering {element.path}")
            rendered = renderer.render(element)
            write_file(destination_path(element, config), rendered)
            stats.pages += 1
        case ElementType.FILE:
            log.info(f"Copying {element.path}")
            copy_file(element.path, destination_path(element, config))
            stats.files += 1

    return stats


def build_site(config: SiteConfig) -> GenerateStats:
    """Read the source tree and write the whole site."""
    root = build_tree(config)
    return generate(root, config)
