"""Configuration loading for zite.

zite.yaml lives in the working directory and is optional:

    src: src    # source tree (alias: Src)
    out: www    # output tree (alias: Out)

A missing file means defaults. A file that exists but cannot be parsed
is fatal and exits with status 4.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

CONFIG_FILENAME = "zite.yaml"
FILE_KEYS = {"src", "out", "Src", "Out"}


class SiteConfig(BaseModel):
    """Source and output roots for a site build."""

    model_config = {"populate_by_name": True, "extra": "forbid"}

    src: str = Field(default="src", alias="Src", description="Source directory")
    out: str = Field(default="www", alias="Out", description="Output directory")
    root: Path = Field(
        default_factory=Path.cwd,
        description="Directory that src and out are resolved against",
    )

    @property
    def src_dir(self) -> Path:
        return self.root / self.src

    @property
    def out_dir(self) -> Path:
        return self.root / self.out


def get_config_path(cwd: Path | None = None) -> Path:
    """Return the zite.yaml path for a working directory."""
    cwd = cwd or Path.cwd()
    return cwd / CONFIG_FILENAME


def load_config(cwd: Path | None = None) -> SiteConfig:
    """Load zite.yaml from cwd, falling back to defaults if it is absent.

    Raises:
        ConfigError: If the file exists but is not a valid config mapping.
    """
    cwd = cwd or Path.cwd()
    path = get_config_path(cwd)

    if not path.exists():
        return SiteConfig(root=cwd)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping of options")

    unknown = set(data) - FILE_KEYS
    if unknown:
        raise ConfigError(path, f"unknown options: {', '.join(sorted(map(str, unknown)))}")

    try:
        return SiteConfig.model_validate({**data, "root": cwd})
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e
