"""Tests for reading the source tree."""

import pytest

from zite.lib.element import ElementType
from zite.lib.errors import SourceNotFoundError
from zite.lib.tree import build_tree, split_markdown


def test_markdown_title_and_content(config, site):
    site({"page.md": "Title Line\n\nBody line one\nBody line two"})

    root = build_tree(config)
    (page,) = root.children

    assert page.type is ElementType.PAGE
    assert page.title == "Title Line"
    assert page.content == "Body line one\nBody line two"


def test_split_markdown_edge_cases():
    assert split_markdown("Only a title") == ("Only a title", "")
    assert split_markdown("Title\r\n\r\nBody") == ("Title", "Body")
    assert split_markdown("Title\n\nBody\n") == ("Title", "Body\n")


def test_html_page_has_includes_expanded_and_no_title(config, site):
    site(
        {
            "docs/page.html": "<main>{{include partial.html}}</main>",
            "docs/partial.html": "<b>Hi</b>",
        }
    )

    root = build_tree(config)
    docs = root.children[0]
    page = next(c for c in docs.children if c.filename == "page.html")

    assert page.type is ElementType.PAGE
    assert page.title == ""
    assert page.content == "<main><b>Hi</b></main>"


def test_other_extensions_are_files(config, site):
    site({"img/logo.png": b"\x89PNG\r\n", "robots.txt": "User-agent: *"})

    root = build_tree(config)
    elements = {e.filename: e for e in root.walk()}

    assert elements["logo.png"].type is ElementType.FILE
    assert elements["robots.txt"].type is ElementType.FILE
    assert elements["robots.txt"].content == ""
    assert elements["img"].type is ElementType.DIR


def test_hidden_entries_are_skipped(config, site):
    site(
        {
            "_template.html": "{{ Content }}",
            "_partials/nav.html": "<nav/>",
            "index.md": "Home\n\nWelcome",
            "blog/_draft.md": "Draft\n\nNope",
            "blog/post.md": "Post\n\nYes",
        }
    )

    root = build_tree(config)
    names = [e.filename for e in root.walk()]

    assert not any(name.startswith("_") for name in names)
    assert sorted(names[1:]) == ["blog", "index.md", "post.md"]


def test_every_entry_once_with_parent_and_listing_order(config, site):
    src = site(
        {
            "a.md": "A\n\na",
            "b.html": "<p>b</p>",
            "c.txt": "c",
            "sub/d.md": "D\n\nd",
            "sub/e.css": "body {}",
            "sub/deeper/f.js": "1;",
        }
    )

    root = build_tree(config)

    assert root.parent is None
    elements = list(root.walk())
    assert len(elements) == len({id(e) for e in elements})
    assert len(elements) == 1 + len(list(src.rglob("*")))

    for element in elements:
        if element.is_dir:
            listing = [p.name for p in element.path.iterdir() if not p.name.startswith("_")]
            assert [c.filename for c in element.children] == listing
            for child in element.children:
                assert child.parent is element


def test_urls(config, site):
    site({"index.md": "Home\n\n", "docs/page.html": "", "img/logo.png": b""})

    root = build_tree(config)
    urls = {e.filename: e.url for e in root.walk()}

    assert urls["src"] == "/"
    assert urls["index.md"] == "/index.html"
    assert urls["docs"] == "/docs/"
    assert urls["page.html"] == "/docs/page.html"
    assert urls["logo.png"] == "/img/logo.png"


def test_missing_source_directory(tmp_path):
    from zite.lib.config import SiteConfig

    with pytest.raises(SourceNotFoundError):
        build_tree(SiteConfig(root=tmp_path, src="nope"))


def test_missing_include_in_html_aborts_build(config, site):
    from zite.lib.errors import IncludeError

    site({"page.html": "{{include gone.html}}"})

    with pytest.raises(IncludeError):
        build_tree(config)


def test_crlf_markdown_title_and_body(config, site):
    site({"page.md": b"Title\r\n\r\nline one\r\nline two\r\n"})

    (page,) = build_tree(config).children

    assert page.title == "Title"
    assert page.content == "line one\r\nline two\r\n"


def test_symlinked_directories_are_not_followed(config, site):
    src = site({"sub/page.html": "<p/>"})
    (src / "sub" / "loop").symlink_to(src, target_is_directory=True)

    root = build_tree(config)
    names = [e.filename for e in root.walk()]

    assert names == ["src", "sub", "page.html"]
