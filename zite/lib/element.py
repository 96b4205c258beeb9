"""Element - the single node type of the source tree.

An Element is a directory, a page (markdown or HTML source) or a plain
file. Directories own their children; children point back at their
directory through a weak reference, so ownership only ever flows down.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator


class ElementType(str, Enum):
    """Kind of source tree node."""

    DIR = "dir"
    PAGE = "page"
    FILE = "file"


def path_to_url(path: Path, src_root: Path, element_type: ElementType) -> str:
    """Compute the site URL for a source path.

    Pages map to .html, files keep their extension, directories end in "/".
    """
    relative = path.relative_to(src_root)
    if element_type is ElementType.DIR:
        parts = relative.as_posix()
        return "/" if parts == "." else f"/{parts}/"
    if element_type is ElementType.PAGE:
        relative = relative.with_suffix(".html")
    return f"/{relative.as_posix()}"


@dataclass(eq=False)
class Element:
    """A node in the source tree.

    Attributes:
        type: dir, page or file.
        path: Source location.
        url: Site URL, derived once from path.
        title: First line of a markdown page, empty otherwise.
        content: Render input for pages, empty otherwise.
        children: Child elements of a directory, in listing order.
    """

    type: ElementType
    path: Path
    url: str
    title: str = ""
    content: str = ""
    children: list[Element] = field(default_factory=list)

    _parent: weakref.ReferenceType[Element] | None = field(
        default=None, init=False, repr=False
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "url" and "url" in self.__dict__:
            raise AttributeError("Element.url is fixed at creation")
        super().__setattr__(name, value)

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def parent(self) -> Element | None:
        """Enclosing directory, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: Element) -> None:
        if self._parent is not None:
            raise ValueError(f"Parent of {self.path} is already set")
        if value.type is not ElementType.DIR:
            raise ValueError(f"Parent of {self.path} must be a directory")
        self._parent = weakref.ref(value)

    @property
    def is_dir(self) -> bool:
        return self.type is ElementType.DIR

    @property
    def is_page(self) -> bool:
        return self.type is ElementType.PAGE

    @property
    def is_file(self) -> bool:
        return self.type is ElementType.FILE

    def add_child(self, child: Element) -> Element:
        """Attach child to this directory and return it."""
        if not self.is_dir:
            raise ValueError(f"{self.path} is not a directory")
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Element]:
        """Yield this element and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def template_context(self) -> dict[str, Any]:
        """Variables exposed to a template rendering this element."""
        return {
            "Title": self.title,
            "Content": self.content,
            "URL": self.url,
            "Path": self.path.as_posix(),
            "Filename": self.filename,
            "Type": self.type.value,
            "Parent": self.parent,
            "Children": self.children,
            "page": self,
        }

    def __str__(self) -> str:
        if self.is_page:
            return f"(page: {self.filename} {self.title})"
        if self.is_dir:
            inner = ", ".join(str(child) for child in self.children)
            return f"(dir: {self.filename} [{inner}])"
        return f"(file: {self.filename})"
