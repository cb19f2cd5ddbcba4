from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import CONFIG_FILENAME, SiteConfig, load_config
from .content import scan_content
from .errors import BuildIOError
from .pages import MarkdownConverter, Page, build_pages, sort_pages
from .render import Renderer, copy_static, resolve_output_path

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    config: SiteConfig
    output_dir: Path
    pages: list[Page] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    skipped: list[Page] = field(default_factory=list)


def build_site(project_root: Path, config_path: Optional[Path] = None) -> BuildResult:
    """Run the whole pipeline; the first error aborts the build."""
    if config_path is None:
        config_path = project_root / CONFIG_FILENAME
    elif not config_path.is_absolute():
        config_path = project_root / config_path
    config = load_config(config_path)

    content_dir = project_root / config.content_dir
    templates_dir = project_root / config.templates_dir
    static_dir = project_root / config.static_dir
    output_dir = project_root / config.output_dir

    files = scan_content(content_dir)
    logger.debug("Found %d markdown files in %s", len(files), content_dir)
    converter = MarkdownConverter(config.highlight_style)
    pages = sort_pages(build_pages(files, converter))
    for page in pages:
        if not page.draft:
            resolve_output_path(output_dir, page.rel_permalink)

    result = BuildResult(config=config, output_dir=output_dir, pages=pages)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildIOError(f"Cannot create output directory {output_dir}: {exc}") from exc
    renderer = Renderer(config, templates_dir, output_dir)
    for page in pages:
        out_path = renderer.render_page(page)
        if out_path is None:
            result.skipped.append(page)
        else:
            result.written.append(out_path)
    result.written.append(renderer.render_index(pages))
    result.written.extend(renderer.render_extras(pages))

    logger.info("Copying static files...")
    copy_static(static_dir, output_dir)
    logger.info("Done & done...")
    return result
