from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
DEFAULT_HIGHLIGHT_STYLE = "default"


class ExtraItem(BaseModel):
    """An additional artifact, such as a feed, rendered from its own template."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    template: str = ""
    url: str = ""


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    baseurl: str = ""
    language: str = ""
    highlighting: str = ""
    minify: bool = False
    extras: list[ExtraItem] = []
    seed: Optional[int] = None
    content_dir: str = "content"
    static_dir: str = "static"
    templates_dir: str = "templates"
    output_dir: str = "public"

    @field_validator("highlighting")
    @classmethod
    def check_highlighting(cls, value: str) -> str:
        if value:
            try:
                get_style_by_name(value)
            except ClassNotFound as exc:
                raise ValueError(f"unknown Pygments style: {value}") from exc
        return value

    @property
    def highlight_style(self) -> str:
        return self.highlighting or DEFAULT_HIGHLIGHT_STYLE


def load_config(path: Path) -> SiteConfig:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"YAML config must be a mapping: {path}")
    try:
        config = SiteConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    logger.debug("Loaded config from %s", path)
    return config
