"""Assemble complete HTML documents from fragments and shared chrome."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from md_deploy._constants import CSS_DIRNAME, STYLESHEET_NAME
from md_deploy.paths import relative_href
from md_deploy.theme import ThemeColors

from .navigation import build_nav
from .stylesheet import TEMPLATES_DIR

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from md_deploy.config import SiteOptions

    from .models import GeneratedPage


class PageAssembler:
    """Wrap HTML fragments in the shared page template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``index_content.jinja``.
            Defaults to the package templates.
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("page.jinja")
        self.index_template = self.env.get_template("index_content.jinja")

    def wrap_html(
        self,
        content_html: str,
        title: str,
        pages: cabc.Sequence[GeneratedPage],
        current_output_path: Path,
        site_root: Path,
        options: SiteOptions,
    ) -> str:
        """Return a complete HTML document for one page.

        Parameters
        ----------
        content_html : str
            Rendered fragment placed verbatim inside ``<main>``.
        title : str
            Page title, combined with the site title in ``<title>``.
        pages : Sequence[GeneratedPage]
            Every page of the run, used for the sidebar.
        current_output_path : Path
            Absolute path the document will be written to; every relative
            link is computed from its directory.
        site_root : Path
            Root of the generated site.
        options : SiteOptions
            Accent color, site title, and footer text.

        Raises
        ------
        InvalidColorError
            If ``options.accent_color`` is malformed.
        """
        stylesheet = site_root / CSS_DIRNAME / STYLESHEET_NAME
        context = {
            "title": title,
            "options": options,
            "theme": ThemeColors.from_accent(options.accent_color),
            "stylesheet_href": relative_href(stylesheet, current_output_path),
            "nav_entries": build_nav(pages, current_output_path, site_root),
            "content": content_html,
        }
        return self.template.render(**context)

    def index_content(self, pages: cabc.Sequence[GeneratedPage]) -> str:
        """Return the landing page fragment linking every generated page.

        Hrefs are each page's ``output_relative_path``, which is relative to
        the site root where the index lives.
        """
        return self.index_template.render(pages=pages)


__all__ = ["PageAssembler"]
