"""Shared dataclasses used by the site generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path


class GenerationState(enum.Enum):
    """Steps of a generation run, in the order they complete."""

    IDLE = "idle"
    DIRECTORIES_PREPARED = "directories_prepared"
    STYLESHEET_WRITTEN = "stylesheet_written"
    LAYOUT_DISCOVERED = "layout_discovered"
    PAGES_WRITTEN = "pages_written"
    INDEX_WRITTEN = "index_written"
    DONE = "done"


@dc.dataclass(frozen=True, slots=True)
class GeneratedPage:
    """A planned output page for one source document.

    Attributes
    ----------
    source_path : Path
        Absolute path of the Markdown source.
    output_relative_path : str
        POSIX path of the page relative to the site root, for example
        ``html/guide/setup.html``. Unique within a run.
    title : str
        Navigation label and ``<title>`` prefix; the source file stem.
    """

    source_path: Path
    output_relative_path: str
    title: str

    def output_path(self, site_root: Path) -> Path:
        """Return the absolute output path of this page under ``site_root``."""
        return site_root / self.output_relative_path


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """One sidebar link as seen from a particular page."""

    label: str
    href: str
    is_home: bool = False
    is_current: bool = False


@dc.dataclass(slots=True)
class SiteGenerationResult:
    """Summary of a completed generation run.

    Attributes
    ----------
    output_root : Path
        The ``docs`` directory that holds the generated site.
    pages : list[GeneratedPage]
        Planned pages in input order.
    written : list[Path]
        Every file written, in write order (stylesheet, pages, index).
    stylesheet_source : str
        Name of the stylesheet source that supplied ``styles.css``.
    """

    output_root: Path
    pages: list[GeneratedPage]
    written: list[Path]
    stylesheet_source: str

    @property
    def stylesheet_path(self) -> Path:
        """Return the path of the shared stylesheet, always written first."""
        return self.written[0]

    @property
    def index_path(self) -> Path:
        """Return the path of the generated landing page."""
        return self.written[-1]


__all__ = ["GeneratedPage", "GenerationState", "NavEntry", "SiteGenerationResult"]
