"""Rewrite links between source documents to their generated pages."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path
from urllib.parse import unquote, urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from md_deploy.paths import relative_href

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from .models import GeneratedPage
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    GeneratedPage = typ.Any


class DocumentLinkExtension(Extension):
    """Point relative ``.md`` links at the pages generated in the same run.

    A link such as ``../guide/setup.md#install`` written in ``docs/intro.md``
    becomes ``../guide/setup.html#install`` in ``html/docs/intro.html``. Links
    to documents outside the run, to other files, or to absolute URLs are left
    untouched.
    """

    def __init__(
        self,
        page: GeneratedPage,
        pages_by_source: typ.Mapping[Path, GeneratedPage],
        site_root: Path,
    ) -> None:
        super().__init__()
        self.page = page
        self.pages_by_source = pages_by_source
        self.site_root = site_root

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the document-link treeprocessor on the Markdown instance."""
        processor = DocumentLinkTreeprocessor(
            md, self.page, self.pages_by_source, self.site_root
        )
        md.treeprocessors.register(processor, "md_deploy_document_links", 15)


class DocumentLinkTreeprocessor(Treeprocessor):
    """Treeprocessor doing the actual href rewriting for one page."""

    def __init__(
        self,
        md: Markdown,
        page: GeneratedPage,
        pages_by_source: typ.Mapping[Path, GeneratedPage],
        site_root: Path,
    ) -> None:
        super().__init__(md)
        self.page = page
        self.pages_by_source = pages_by_source
        self.site_root = site_root

    def run(self, root: Element) -> Element:
        """Rewrite anchors whose target is a source document of this run."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        if not target or target.startswith(("#", "/")):
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None

        source_dir = self.page.source_path.parent
        candidate = Path(os.path.normpath(source_dir / unquote(parsed.path)))
        linked = self.pages_by_source.get(candidate)
        if linked is None:
            return None

        href = relative_href(
            linked.output_path(self.site_root), self.page.output_path(self.site_root)
        )
        if parsed.query:
            href = f"{href}?{parsed.query}"
        if parsed.fragment:
            href = f"{href}#{parsed.fragment}"
        return href


__all__ = ["DocumentLinkExtension", "DocumentLinkTreeprocessor"]
