from __future__ import annotations


class SiteError(Exception):
    """Base class for every error that aborts a build."""


class ConfigError(SiteError):
    pass


class ContentError(SiteError):
    pass


class TemplateError(SiteError):
    pass


class MinifyError(SiteError):
    pass


class BuildIOError(SiteError):
    pass
