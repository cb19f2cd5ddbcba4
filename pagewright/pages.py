from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from pathlib import Path

import markdown
from markupsafe import Markup

from .content import ZERO_TIME, parse_front_matter, validate_front_matter
from .errors import BuildIOError, ContentError
from .render import plain_text
from .summary import summarize

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "footnotes",
    "attr_list",
    "toc",
    "codehilite",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.magiclink",
]


@dataclass(frozen=True)
class Page:
    filepath: Path
    raw: str
    html: Markup
    text: str
    summary: str
    meta: dict = field(default_factory=dict)
    title: str = ""
    type: str = ""
    rel_permalink: str = ""
    created: dt.datetime = ZERO_TIME
    draft: bool = False


class MarkdownConverter:
    """Python-Markdown configured once per build and reset between files."""

    def __init__(self, highlight_style: str = "default") -> None:
        self.md = markdown.Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={
                "codehilite": {
                    "pygments_style": highlight_style,
                    "noclasses": True,
                    "guess_lang": False,
                },
            },
            output_format="xhtml",
        )

    def convert(self, text: str) -> str:
        try:
            return self.md.convert(text)
        finally:
            self.md.reset()


def build_page(path: Path, converter: MarkdownConverter) -> Page:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BuildIOError(f"Cannot read {path}: {exc}") from exc
    try:
        meta, body = parse_front_matter(raw_text)
    except ContentError as exc:
        raise ContentError(f"{path}: {exc}") from exc
    front = validate_front_matter(meta, path)
    html_content = converter.convert(body)
    text = plain_text(html_content)
    logger.debug("Parsed %s", path)
    return Page(
        filepath=path,
        raw=html_content,
        html=Markup(html_content),
        text=text,
        summary=summarize(text),
        meta=meta,
        title=front.title,
        type=front.type,
        rel_permalink=front.url,
        created=front.created,
        draft=front.draft,
    )


def build_pages(paths: list[Path], converter: MarkdownConverter) -> list[Page]:
    return [build_page(path, converter) for path in paths]


def sort_pages(pages: list[Page]) -> list[Page]:
    return sorted(pages, key=lambda page: page.created, reverse=True)
