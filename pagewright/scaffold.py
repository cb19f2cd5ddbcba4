from __future__ import annotations

import datetime as dt
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Optional

from .content import slugify
from .errors import BuildIOError, ContentError

logger = logging.getLogger(__name__)

PROJECT_DIRS = ("templates", "content", "static")

# Seed file shipped with the package -> destination relative to the project root.
SEED_FILES = {
    "config.yaml": "config.yaml",
    "first.md": "content/first.md",
    "base.html": "templates/base.html",
    "index.html": "templates/index.html",
    "post.html": "templates/post.html",
    "index.xml": "templates/index.xml",
}


def read_seed(name: str) -> str:
    return resources.files("pagewright").joinpath("files").joinpath(name).read_text(encoding="utf-8")


def init_project(project_root: Path) -> list[Path]:
    """Create the directory layout and seed files, leaving existing files alone."""
    logger.info("Initializing new project")
    created = []
    try:
        for name in PROJECT_DIRS:
            directory = project_root / name
            directory.mkdir(parents=True, exist_ok=True)
            (directory / ".gitkeep").touch()
        for seed, dest in SEED_FILES.items():
            path = project_root / dest
            if path.exists():
                logger.debug("Keeping existing %s", path)
                continue
            path.write_text(read_seed(seed), encoding="utf-8")
            created.append(path)
    except OSError as exc:
        raise BuildIOError(f"Cannot initialize project in {project_root}: {exc}") from exc
    return created


def front_matter_stub(title: str, slug: str, when: dt.datetime) -> list[str]:
    return [
        "---",
        f"title: {json.dumps(title, ensure_ascii=False)}",
        f"url: {slug}.html",
        f"date: {when.isoformat(timespec='seconds')}",
        "type: post",
        "draft: true",
        "---",
        "",
        "Content...",
    ]


def new_page(project_root: Path, title: str, now: Optional[dt.datetime] = None) -> Path:
    when = (now or dt.datetime.now()).astimezone().replace(microsecond=0)
    slug = slugify(title)
    path = project_root / "content" / f"{when:%Y-%m-%d}-{slug}.md"
    if path.exists():
        raise ContentError(f"Page already exists: {path}")
    lines = front_matter_stub(title, slug, when)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as exc:
        raise BuildIOError(f"Cannot write {path}: {exc}") from exc
    logger.info("Page `%s` created", path.name)
    return path
