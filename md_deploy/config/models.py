"""Typed dataclasses describing md_deploy site configuration."""

from __future__ import annotations

import dataclasses as dc

from md_deploy._constants import DEFAULT_EXCLUDES, OUTPUT_DIRNAME

DEFAULT_ACCENT_COLOR = "#007acc"
DEFAULT_SITE_TITLE = "Documentation"
DEFAULT_FOOTER_TEXT = ""
DEFAULT_PYGMENTS_STYLE = "monokai"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SiteOptions:
    """Presentation options applied to every page of one generation run.

    Attributes
    ----------
    accent_color : str
        Hex color driving the header, links, and hover highlights.
    site_title : str
        Title shown in the header and appended to every ``<title>``.
    footer_text : str
        Text rendered in the page footer.
    """

    accent_color: str = DEFAULT_ACCENT_COLOR
    site_title: str = DEFAULT_SITE_TITLE
    footer_text: str = DEFAULT_FOOTER_TEXT


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site options plus the build settings that surround them."""

    options: SiteOptions = dc.field(default_factory=SiteOptions)
    output_dirname: str = OUTPUT_DIRNAME
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    exclude: tuple[str, ...] = DEFAULT_EXCLUDES


__all__ = [
    "DEFAULT_ACCENT_COLOR",
    "DEFAULT_FOOTER_TEXT",
    "DEFAULT_PYGMENTS_STYLE",
    "DEFAULT_SITE_TITLE",
    "SiteConfig",
    "SiteConfigError",
    "SiteOptions",
]
