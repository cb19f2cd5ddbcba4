from __future__ import annotations

import datetime as dt
import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError

from .errors import ContentError

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%dT%H:%M:%S%z"
ZERO_TIME = dt.datetime(1, 1, 1, tzinfo=dt.timezone.utc)
MARKDOWN_SUFFIX = ".md"


def slugify(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "post"


def scan_content(root: Path) -> list[Path]:
    if not root.is_dir():
        raise ContentError(f"Content directory not found: {root}")
    files = [
        path for path in root.rglob("*") if path.is_file() and path.suffix.lower() == MARKDOWN_SUFFIX
    ]
    return sorted(files, key=lambda p: p.as_posix())


def parse_front_matter(text: str) -> tuple[dict, str]:
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        return {}, clean_text

    try:
        meta = yaml.safe_load("\n".join(lines[1:end]))
    except yaml.YAMLError as exc:
        raise ContentError(f"Invalid front matter: {exc}") from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise ContentError("Front matter must be a mapping")
    body = "\n".join(lines[end + 1 :])
    return meta, body


def parse_created(value: Any) -> dt.datetime:
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time(), tzinfo=dt.timezone.utc)
    if isinstance(value, str):
        try:
            return dt.datetime.strptime(value.strip(), DATE_FMT)
        except ValueError:
            return ZERO_TIME
    return ZERO_TIME


class FrontMatter(BaseModel):
    """Required page metadata; any other keys are carried along untouched."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: StrictStr
    url: StrictStr
    date: Any
    type: StrictStr
    draft: StrictBool

    @property
    def created(self) -> dt.datetime:
        return parse_created(self.date)


def validate_front_matter(meta: dict, source: Path) -> FrontMatter:
    if "date" not in meta:
        raise ContentError(f"{source}: missing required front matter key 'date'")
    try:
        return FrontMatter.model_validate(meta)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ContentError(f"{source}: invalid front matter ({problems})") from exc
