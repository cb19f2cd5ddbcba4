"""Static site generator: Markdown content plus Jinja2 templates into a deployable tree."""

__version__ = "0.3.0"
