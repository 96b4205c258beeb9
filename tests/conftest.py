from pathlib import Path

import pytest

from zite.lib.config import SiteConfig


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    """Create files (and their directories) under root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)


@pytest.fixture
def config(tmp_path) -> SiteConfig:
    (tmp_path / "src").mkdir()
    return SiteConfig(root=tmp_path)


@pytest.fixture
def site(config):
    """Return a helper that populates the source directory."""

    def make(files: dict[str, str | bytes]) -> Path:
        write_tree(config.src_dir, files)
        return config.src_dir

    return make
