"""Sidebar navigation shared by every generated page."""

from __future__ import annotations

import typing as typ

from md_deploy._constants import HOME_TITLE, INDEX_FILENAME
from md_deploy.paths import relative_href

from .models import NavEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import GeneratedPage


def build_nav(
    pages: cabc.Sequence[GeneratedPage],
    current_output_path: Path,
    site_root: Path,
) -> list[NavEntry]:
    """Return the navigation entries as seen from ``current_output_path``.

    Parameters
    ----------
    pages : Sequence[GeneratedPage]
        Every page of the run, in input order.
    current_output_path : Path
        Absolute path of the page the navigation is rendered into.
    site_root : Path
        Root of the generated site (the ``docs`` directory).

    Returns
    -------
    list[NavEntry]
        ``Home`` first, then one entry per page in input order. Hrefs are
        relative to the directory containing ``current_output_path``.
    """
    home_path = site_root / INDEX_FILENAME
    entries = [
        NavEntry(
            label=HOME_TITLE,
            href=relative_href(home_path, current_output_path),
            is_home=True,
            is_current=home_path == current_output_path,
        )
    ]
    for page in pages:
        target = page.output_path(site_root)
        entries.append(
            NavEntry(
                label=page.title,
                href=relative_href(target, current_output_path),
                is_current=target == current_output_path,
            )
        )
    return entries


__all__ = ["build_nav"]
