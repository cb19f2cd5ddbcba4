from pathlib import Path

import pytest

BASE_TEMPLATE = "<html><body>{% block content %}{% endblock %}</body></html>\n"
POST_TEMPLATE = (
    '{% extends "base.html" %}'
    "{% block content %}<h1>{{ page.title }}</h1>\n{{ page.html }}{% endblock %}\n"
)
INDEX_TEMPLATE = (
    '{% extends "base.html" %}'
    "{% block content %}<ul>\n"
    '{% for page in pages %}<li data-url="{{ page.rel_permalink }}">{{ page.title }}</li>\n{% endfor %}'
    "</ul>{% endblock %}\n"
)


def write_page(
    root: Path,
    name: str,
    title: str = "Hello",
    url: str = "hello.html",
    date: str = "2024-01-01T00:00:00+00:00",
    draft: bool = False,
    body: str = "World",
    page_type: str = "post",
) -> Path:
    lines = ["---", f'title: "{title}"', f"url: {url}"]
    if date:
        lines.append(f"date: {date}")
    lines += [f"type: {page_type}", f"draft: {'true' if draft else 'false'}", "---", "", body, ""]
    path = root / "content" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "content").mkdir()
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    (templates / "post.html").write_text(POST_TEMPLATE, encoding="utf-8")
    (templates / "index.html").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (tmp_path / "config.yaml").write_text("title: Test Site\nminify: false\n", encoding="utf-8")
    return tmp_path
