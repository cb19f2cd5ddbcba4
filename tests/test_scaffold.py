"""Tests for project initialization and new page stubs."""

import datetime as dt

import pytest

from pagewright.content import parse_front_matter, validate_front_matter
from pagewright.errors import ContentError
from pagewright.scaffold import SEED_FILES, init_project, new_page


class TestInitProject:
    def test_creates_layout_and_seed_files(self, tmp_path):
        created = init_project(tmp_path)
        for name in ("templates", "content", "static"):
            assert (tmp_path / name / ".gitkeep").exists()
        assert sorted(p.relative_to(tmp_path).as_posix() for p in created) == sorted(SEED_FILES.values())
        assert "extras:" in (tmp_path / "config.yaml").read_text(encoding="utf-8")

    def test_keeps_edited_files(self, tmp_path):
        init_project(tmp_path)
        (tmp_path / "config.yaml").write_text("title: Mine\n", encoding="utf-8")
        assert init_project(tmp_path) == []
        assert (tmp_path / "config.yaml").read_text(encoding="utf-8") == "title: Mine\n"


class TestNewPage:
    def test_writes_draft_stub(self, tmp_path):
        now = dt.datetime(2024, 3, 9, 8, 30, 15)
        path = new_page(tmp_path, 'Hello "Quoted" World', now=now)
        assert path == tmp_path / "content" / "2024-03-09-hello-quoted-world.md"
        meta, body = parse_front_matter(path.read_text(encoding="utf-8"))
        front = validate_front_matter(meta, path)
        assert front.title == 'Hello "Quoted" World'
        assert front.url == "hello-quoted-world.html"
        assert front.type == "post"
        assert front.draft is True
        assert front.created == now.astimezone()
        assert body.strip() == "Content..."

    def test_refuses_to_overwrite(self, tmp_path):
        now = dt.datetime(2024, 3, 9, 8, 30)
        new_page(tmp_path, "Twice", now=now)
        with pytest.raises(ContentError, match="already exists"):
            new_page(tmp_path, "Twice", now=now)
