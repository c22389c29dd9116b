"""End-to-end orchestration of a static site generation run.

:class:`SiteGenerator` takes a workspace root, the :class:`SiteOptions` for the
run, and a list of Markdown sources, then writes ``docs/`` under the workspace:

* ``docs/css/styles.css``: the template stylesheet (or the built-in copy)
  followed by the Pygments highlighting rules;
* ``docs/html/<mirrored dirs>/<name>.html``: one page per source;
* ``docs/index.html``: a landing page linking every page.

Generation is two-pass. Pass 1 plans every page's output path without
rendering anything; pass 2 renders each source and assembles it with the
complete, now immutable, page list so every sidebar can link every page.

Example
-------
>>> from pathlib import Path
>>> from md_deploy.config import SiteOptions
>>> from md_deploy.generator import SiteGenerator
>>> generator = SiteGenerator(Path("/ws"), SiteOptions(site_title="Docs"))  # doctest: +SKIP
>>> result = generator.run([Path("/ws/docs/intro.md")])  # doctest: +SKIP
>>> result.index_path  # doctest: +SKIP
PosixPath('/ws/docs/index.html')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from md_deploy._constants import (
    CSS_DIRNAME,
    HOME_TITLE,
    HTML_DIRNAME,
    INDEX_FILENAME,
    OUTPUT_DIRNAME,
    STYLESHEET_NAME,
)
from md_deploy.config.loader import validate_output_dirname, validate_pygments_style
from md_deploy.config.models import DEFAULT_PYGMENTS_STYLE
from md_deploy.errors import MissingOutputRootError, PathCollisionError, WriteError
from md_deploy.theme import ThemeColors

from .assembler import PageAssembler
from .models import GeneratedPage, GenerationState, SiteGenerationResult
from .page_renderer import PageRenderer
from .renderer import HtmlContentRenderer
from .stylesheet import Stylesheet, StylesheetSource, default_sources, resolve_stylesheet

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from md_deploy.config import SiteOptions

logger = logging.getLogger(__name__)


class SiteGenerator:
    """Generate a static documentation site from Markdown sources."""

    def __init__(
        self,
        workspace_root: Path | None,
        options: SiteOptions,
        *,
        output_dirname: str = OUTPUT_DIRNAME,
        pygments_style: str = DEFAULT_PYGMENTS_STYLE,
        templates_dir: Path | None = None,
        stylesheet_sources: cabc.Sequence[StylesheetSource] | None = None,
    ) -> None:
        """Configure a generator for one workspace.

        Parameters
        ----------
        workspace_root : Path or None
            Directory that receives ``docs/`` and whose tree is mirrored.
            ``None`` means no workspace is available; :meth:`run` then fails
            with :class:`MissingOutputRootError`.
        options : SiteOptions
            Accent color, site title, and footer text for every page.
        output_dirname : str, optional
            Name of the output root under the workspace. Defaults to ``docs``.
        pygments_style : str, optional
            Pygments style for fenced code blocks.
        templates_dir : Path, optional
            Directory holding ``page.jinja``, ``index_content.jinja`` and
            ``styles.css``; defaults to the package templates.
        stylesheet_sources : Sequence[StylesheetSource], optional
            Ordered stylesheet sources; defaults to the templates directory
            followed by the built-in stylesheet.

        Raises
        ------
        SiteConfigError
            If ``output_dirname`` is not a single directory name or
            ``pygments_style`` is not an installed Pygments style.
        """
        self.workspace_root = workspace_root
        self.options = options
        self.output_dirname = validate_output_dirname(output_dirname)
        validate_pygments_style(pygments_style)
        self.templates_dir = templates_dir
        self.stylesheet_sources = (
            list(stylesheet_sources)
            if stylesheet_sources is not None
            else default_sources(templates_dir)
        )
        self.content_renderer = HtmlContentRenderer(pygments_style)
        self.assembler = PageAssembler(templates_dir=templates_dir)
        self.state = GenerationState.IDLE

    def run(self, sources: cabc.Iterable[Path]) -> SiteGenerationResult:
        """Generate the whole site and return a summary of what was written.

        Parameters
        ----------
        sources : Iterable[Path]
            Markdown documents inside the workspace, in navigation order.

        Returns
        -------
        SiteGenerationResult
            Output root, planned pages, and every written path.

        Raises
        ------
        MissingOutputRootError
            If no workspace root is available; nothing is written.
        InvalidColorError
            If the accent color is malformed; nothing is written.
        DocumentOutsideRootError, PathCollisionError
            If pass 1 cannot produce a unique layout; nothing is written.
        DocumentReadError
            If a source cannot be read during pass 2.
        WriteError
            If any output directory or file cannot be written.

        Notes
        -----
        A failed run leaves whatever was already written in place, and
        :attr:`state` reports the last step that completed.
        """
        self.state = GenerationState.IDLE
        workspace = self._resolve_workspace()
        site_root = workspace / self.output_dirname
        ThemeColors.from_accent(self.options.accent_color)
        page_renderer = PageRenderer(workspace, self.content_renderer)
        pages = self._discover_layout(page_renderer, sources)
        written: list[Path] = []

        self._prepare_directories(site_root)
        self.state = GenerationState.DIRECTORIES_PREPARED

        stylesheet = self._write_stylesheet(site_root, written)
        self.state = GenerationState.STYLESHEET_WRITTEN
        # Pass 1 already ran before any I/O; report it in step order.
        self.state = GenerationState.LAYOUT_DISCOVERED

        self._write_pages(page_renderer, pages, site_root, written)
        self.state = GenerationState.PAGES_WRITTEN

        self._write_index(pages, site_root, written)
        self.state = GenerationState.INDEX_WRITTEN

        self.state = GenerationState.DONE
        logger.info("Site generated in %s (%d pages)", site_root, len(pages))
        return SiteGenerationResult(
            output_root=site_root,
            pages=pages,
            written=written,
            stylesheet_source=stylesheet.source,
        )

    def _resolve_workspace(self) -> Path:
        """Return the absolute workspace root, failing before any I/O."""
        if self.workspace_root is None:
            msg = "No workspace folder available to hold the generated site."
            raise MissingOutputRootError(msg)
        root = Path(self.workspace_root).absolute()
        if not root.is_dir():
            msg = f"Workspace folder '{root}' does not exist."
            raise MissingOutputRootError(msg)
        return root

    def _prepare_directories(self, site_root: Path) -> None:
        for directory in (site_root, site_root / CSS_DIRNAME, site_root / HTML_DIRNAME):
            _make_dirs(directory)
        logger.debug("Prepared output directories under %s", site_root)

    def _write_stylesheet(self, site_root: Path, written: list[Path]) -> Stylesheet:
        stylesheet = resolve_stylesheet(self.stylesheet_sources)
        css = stylesheet.css.rstrip("\n")
        css = f"{css}\n\n/* Syntax highlighting */\n{self.content_renderer.stylesheet}"
        path = site_root / CSS_DIRNAME / STYLESHEET_NAME
        _write_text(path, css if css.endswith("\n") else f"{css}\n")
        written.append(path)
        return stylesheet

    @staticmethod
    def _discover_layout(
        page_renderer: PageRenderer, sources: cabc.Iterable[Path]
    ) -> list[GeneratedPage]:
        """Plan every page and reject two sources sharing an output path."""
        pages: list[GeneratedPage] = []
        claimed: dict[str, GeneratedPage] = {}
        for source in sources:
            page = page_renderer.plan(source)
            previous = claimed.get(page.output_relative_path)
            if previous is not None:
                raise PathCollisionError(
                    page.output_relative_path, previous.source_path, page.source_path
                )
            claimed[page.output_relative_path] = page
            pages.append(page)
        logger.debug("Planned %d pages", len(pages))
        return pages

    def _write_pages(
        self,
        page_renderer: PageRenderer,
        pages: list[GeneratedPage],
        site_root: Path,
        written: list[Path],
    ) -> None:
        for page in pages:
            output_path = page.output_path(site_root)
            fragment = page_renderer.render(page, pages, site_root)
            html = self.assembler.wrap_html(
                fragment, page.title, pages, output_path, site_root, self.options
            )
            _make_dirs(output_path.parent)
            _write_text(output_path, html)
            written.append(output_path)
            logger.debug("Wrote %s", output_path)

    def _write_index(
        self, pages: list[GeneratedPage], site_root: Path, written: list[Path]
    ) -> None:
        index_path = site_root / INDEX_FILENAME
        content = self.assembler.index_content(pages)
        html = self.assembler.wrap_html(
            content, HOME_TITLE, pages, index_path, site_root, self.options
        )
        _write_text(index_path, html)
        written.append(index_path)


def _make_dirs(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(directory, str(exc)) from exc


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc


__all__ = ["SiteGenerator"]
