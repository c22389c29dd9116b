"""Plan output locations for source documents and render their content."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

from md_deploy._constants import HTML_DIRNAME, PAGE_SUFFIX
from md_deploy.errors import DocumentOutsideRootError, DocumentReadError
from md_deploy.paths import sanitize_relative_dir

from .link_rewriter import DocumentLinkExtension
from .models import GeneratedPage
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def normalize_source(path: Path) -> Path:
    """Return ``path`` made absolute and lexically normalized."""
    return Path(os.path.normpath(Path(path).absolute()))


class PageRenderer:
    """Turn one source document into a planned page and an HTML fragment."""

    def __init__(
        self, workspace_root: Path, renderer: HtmlContentRenderer | None = None
    ) -> None:
        """Bind the renderer to a workspace.

        Parameters
        ----------
        workspace_root : Path
            Directory whose tree is mirrored under ``html/``.
        renderer : HtmlContentRenderer, optional
            Markdown renderer; defaults to one using the ``monokai`` style.
        """
        self.workspace_root = normalize_source(workspace_root)
        self.renderer = renderer or HtmlContentRenderer()

    def plan(self, source: Path) -> GeneratedPage:
        """Return the page that ``source`` will produce, without rendering it.

        The source's directory relative to the workspace is sanitized and
        mirrored under ``html/``; the file keeps its stem with a ``.html``
        suffix (a leading dot is dropped from the file name as well).

        Raises
        ------
        DocumentOutsideRootError
            If ``source`` is not inside the workspace root.
        """
        source_path = normalize_source(source)
        try:
            relative = source_path.relative_to(self.workspace_root)
        except ValueError as exc:
            raise DocumentOutsideRootError(source_path, self.workspace_root) from exc

        sanitized_dir = sanitize_relative_dir(str(relative.parent))
        filename = f"{source_path.stem.removeprefix('.')}{PAGE_SUFFIX}"
        output = Path(HTML_DIRNAME) / sanitized_dir / filename
        return GeneratedPage(
            source_path=source_path,
            output_relative_path=output.as_posix(),
            title=source_path.stem,
        )

    def render(
        self,
        page: GeneratedPage,
        pages: cabc.Sequence[GeneratedPage],
        site_root: Path,
    ) -> str:
        """Read the page's source and render it into an HTML fragment.

        Links to other documents in ``pages`` are rewritten to their
        generated locations.

        Raises
        ------
        DocumentReadError
            If the source cannot be read or is not valid UTF-8.
        """
        try:
            text = page.source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(page.source_path, str(exc)) from exc
        by_source = {entry.source_path: entry for entry in pages}
        extension = DocumentLinkExtension(page, by_source, site_root)
        return self.renderer.markdown(text, link_extension=extension)


__all__ = ["PageRenderer", "normalize_source"]
