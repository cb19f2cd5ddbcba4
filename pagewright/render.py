from __future__ import annotations

import logging
import random
import shutil
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

import jinja2
import minify_html
from bs4 import BeautifulSoup

from .config import SiteConfig
from .errors import BuildIOError, ContentError, MinifyError, TemplateError
from .filters import filter_by_type, first_n, last_n, random_n
from .summary import sentences_by_relation_weight as ranked_sentences

if TYPE_CHECKING:
    from .pages import Page

logger = logging.getLogger(__name__)

BASE_TEMPLATE = "base.html"
INDEX_TEMPLATE = "index.html"


def plain_text(html_text: str) -> str:
    return BeautifulSoup(html_text, "html.parser").get_text()


def minify(html_text: str) -> str:
    try:
        return minify_html.minify(html_text, minify_css=True, minify_js=True)
    except Exception as exc:
        raise MinifyError(f"Minification failed: {exc}") from exc


def resolve_output_path(output_dir: Path, url: str) -> Path:
    """Map a page url onto a file inside ``output_dir``; anything outside is rejected."""
    rel = url.strip().lstrip("/")
    if not rel:
        raise ContentError(f"Empty output url: {url!r}")
    root = output_dir.resolve()
    target = (root / rel).resolve()
    if target == root or not target.is_relative_to(root):
        raise ContentError(f"Output url escapes the output directory: {url!r}")
    return target


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BuildIOError(f"Cannot write {path}: {exc}") from exc


def copy_static(static_dir: Path, output_dir: Path) -> None:
    if not static_dir.is_dir():
        logger.debug("No static directory at %s", static_dir)
        return
    try:
        shutil.copytree(static_dir, output_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise BuildIOError(f"Cannot copy static files from {static_dir}: {exc}") from exc


class Renderer:
    def __init__(self, config: SiteConfig, templates_dir: Path, output_dir: Path) -> None:
        self.config = config
        self.templates_dir = templates_dir
        self.output_dir = output_dir
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(templates_dir)),
            autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )
        rng = random.Random(config.seed)
        self.env.globals.update(
            first_n=first_n,
            last_n=last_n,
            random_n=partial(random_n, rng=rng),
            filter_by_type=filter_by_type,
            ranked_sentences=ranked_sentences,
        )

    def get_template(self, name: str) -> jinja2.Template:
        try:
            return self.env.get_template(name)
        except jinja2.TemplateNotFound as exc:
            raise TemplateError(f"Template not found: {self.templates_dir / name}") from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(f"Template syntax error in {exc.filename}:{exc.lineno}: {exc.message}") from exc

    def layout(self, name: str) -> jinja2.Template:
        """Resolve ``name`` together with the shared base template it extends."""
        self.get_template(BASE_TEMPLATE)
        return self.get_template(name)

    def execute(self, template: jinja2.Template, **context: object) -> str:
        try:
            return template.render(config=self.config, **context)
        except jinja2.TemplateError as exc:
            raise TemplateError(f"Cannot render {template.name}: {exc}") from exc

    def finish(self, html_text: str) -> str:
        if self.config.minify:
            return minify(html_text)
        return html_text

    def render_page(self, page: Page) -> Path | None:
        if page.draft:
            logger.info("Skipped %s", self.output_dir / page.rel_permalink)
            return None
        out_path = resolve_output_path(self.output_dir, page.rel_permalink)
        template = self.layout(f"{page.type}.html")
        write_text(out_path, self.finish(self.execute(template, page=page)))
        logger.info("Wrote %s", out_path)
        return out_path

    def render_index(self, pages: list[Page]) -> Path:
        logger.info("Writing index...")
        out_path = self.output_dir / INDEX_TEMPLATE
        template = self.layout(INDEX_TEMPLATE)
        write_text(out_path, self.finish(self.execute(template, pages=pages)))
        return out_path

    def render_extras(self, pages: list[Page]) -> list[Path]:
        written = []
        for extra in self.config.extras:
            logger.info("Writing extras %s", extra.url)
            out_path = resolve_output_path(self.output_dir, extra.url)
            template = self.get_template(extra.template)
            write_text(out_path, self.execute(template, pages=pages))
            written.append(out_path)
        return written
