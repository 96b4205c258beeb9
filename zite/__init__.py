"""zite - a small static site generator.

Markdown pages are rendered through the nearest _template.html, HTML
pages template themselves, everything else is copied as-is.
"""

from zite._version import __version__
from zite.lib.config import SiteConfig, load_config
from zite.lib.element import Element, ElementType
from zite.lib.generate import GenerateStats, build_site, generate
from zite.lib.includes import expand_includes
from zite.lib.render import PageRenderer, render_page
from zite.lib.template import find_layout
from zite.lib.tree import build_tree

__all__ = [
    "__version__",
    # Config
    "SiteConfig",
    "load_config",
    # Tree
    "Element",
    "ElementType",
    "build_tree",
    # Pipeline
    "expand_includes",
    "find_layout",
    "PageRenderer",
    "render_page",
    "generate",
    "build_site",
    "GenerateStats",
]
