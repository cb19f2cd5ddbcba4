from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .build import build_site
from .config import CONFIG_FILENAME, SiteConfig, load_config
from .errors import SiteError
from .scaffold import init_project, new_page
from .server import DEFAULT_PORT, serve


def project_root_from_env() -> Path:
    return Path(os.environ.get("PROJECT_ROOT") or ".")


def output_dir_for(project_root: Path, config_path: Path) -> Path:
    path = project_root / config_path
    config = load_config(path) if path.exists() else SiteConfig()
    return project_root / config.output_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pagewright", description="Markdown static site generator.")
    parser.add_argument("-i", "--init", action="store_true", help="Initialize new project.")
    parser.add_argument("-b", "--build", action="store_true", help="Build the website.")
    parser.add_argument("-s", "--server", action="store_true", help="Simple embedded HTTP server.")
    parser.add_argument("-n", "--new", action="store_true", help="Create new page.")
    parser.add_argument("title", nargs="?", default="", help="Title of the new page.")
    parser.add_argument(
        "--config",
        default=CONFIG_FILENAME,
        help="Path to the YAML config, relative to the project root.",
    )
    parser.add_argument("--port", default=DEFAULT_PORT, type=int, help="Port for --server.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    return parser


def run(args: argparse.Namespace, project_root: Path) -> int:
    if args.init:
        init_project(project_root)

    if args.build:
        start = time.perf_counter()
        result = build_site(project_root, Path(args.config))
        elapsed = time.perf_counter() - start
        print(f"Build completed in {elapsed:.2f}s.")
        print(f"Site generated in: {result.output_dir}")

    if args.server:
        serve(output_dir_for(project_root, Path(args.config)), args.port)

    if args.new:
        if not args.title:
            print("You must provide a title for the new page", file=sys.stderr)
            return 1
        new_page(project_root, args.title)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if not (args.init or args.build or args.server or args.new):
        print("No arguments provided. Try using `pagewright --help`")
        return 0

    try:
        return run(args, project_root_from_env())
    except SiteError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        return 1
