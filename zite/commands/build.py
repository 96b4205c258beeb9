"""Build command: regenerate the whole site from the current directory."""

from __future__ import annotations

import logging
from pathlib import Path

from zite.lib.config import load_config
from zite.lib.errors import handle_error
from zite.lib.generate import build_site

from .utils import console, setup_logging

log = logging.getLogger(__name__)


def build_command(cwd: Path | None = None) -> None:
    """Load zite.yaml, read the source tree and write the output tree."""
    setup_logging()
    try:
        config = load_config(cwd)
        log.debug(f"Source {config.src_dir}, output {config.out_dir}")
        stats = build_site(config)
    except Exception as e:
        handle_error(e)

    console.print(
        f"Built {stats.pages} pages and copied {stats.files} files into {config.out}"
    )
