"""Renderer - turns page Elements into HTML with Jinja2.

Two modes:
1. Layout: a markdown page is rendered through its nearest _template.html
2. Self-template: an HTML page's own content is the template source

In both modes the page's fields (Title, Content, URL, ...) are the
template variables. The markdown() helper converts markdown to HTML;
templates decide where to call it, e.g. {{ markdown(Content) }}.
"""

from __future__ import annotations

import markdown as markdown_lib
from jinja2 import Environment, StrictUndefined, TemplateError

from .config import SiteConfig
from .element import Element
from .errors import RenderError
from .template import load_layout
from .tree import HTML_SUFFIX, MARKDOWN_SUFFIX


def markdown_to_html(text: str) -> str:
    """Convert basic markdown to HTML."""
    return markdown_lib.markdown(text)


def create_environment() -> Environment:
    """Jinja2 environment shared by all pages of a build."""
    env = Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.globals["markdown"] = markdown_to_html
    env.filters["markdown"] = markdown_to_html
    return env


class PageRenderer:
    """Renders page Elements for one site configuration."""

    def __init__(self, config: SiteConfig, env: Environment | None = None):
        self.config = config
        self.env = env or create_environment()

    def render(self, element: Element) -> str:
        """Render a page to its final HTML.

        Raises:
            RenderError: If the element is not a page or its template fails.
            LayoutNotFoundError: If a markdown page has no layout.
        """
        if not element.is_page:
            raise RenderError(element.path, f"cannot render a {element.type.value}")

        suffix = element.path.suffix
        if suffix == HTML_SUFFIX:
            source = element.content
        elif suffix == MARKDOWN_SUFFIX:
            source = load_layout(element.path.parent, self.config.src_dir)
        else:
            raise RenderError(element.path, f"unknown page type {suffix!r}")

        return self._render_source(element, source)

    def _environment_for(self, source: str) -> Environment:
        # Jinja rewrites line breaks in template text to newline_sequence
        if "\r\n" in source:
            return self.env.overlay(newline_sequence="\r\n")
        return self.env

    def _render_source(self, element: Element, source: str) -> str:
        try:
            tmpl = self._environment_for(source).from_string(source)
            return tmpl.render(**element.template_context())
        except TemplateError as e:
            raise RenderError(element.path, str(e)) from e


def render_page(element: Element, config: SiteConfig) -> str:
    """Render a single page with a fresh renderer."""
    return PageRenderer(config).render(element)
