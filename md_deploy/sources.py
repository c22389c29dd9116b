"""Discover the Markdown documents of a workspace."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_EXCLUDES, SOURCE_SUFFIXES

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def discover_sources(
    root: Path,
    *,
    exclude: cabc.Iterable[str] = DEFAULT_EXCLUDES,
    suffixes: cabc.Iterable[str] = SOURCE_SUFFIXES,
) -> list[Path]:
    """Return every Markdown file under ``root``, sorted by relative path.

    The output folder needs no special casing: it only ever receives
    ``.html`` and ``.css`` files, so Markdown kept next to it (the common
    ``docs/*.md`` layout) is still discovered.

    Parameters
    ----------
    root : Path
        Workspace directory to scan.
    exclude : Iterable[str], optional
        Directory names skipped at any depth.
    suffixes : Iterable[str], optional
        File suffixes treated as Markdown, compared case-insensitively.

    Returns
    -------
    list[Path]
        Absolute paths ordered by their POSIX path relative to ``root`` so the
        navigation order is stable across platforms and runs.
    """
    base = Path(root).absolute()
    skipped = set(exclude)
    wanted = {suffix.lower() for suffix in suffixes}
    found: list[Path] = []
    for current, dirnames, filenames in os.walk(base):
        dirnames[:] = sorted(name for name in dirnames if name not in skipped)
        found.extend(
            Path(current) / name
            for name in filenames
            if Path(name).suffix.lower() in wanted
        )
    return sorted(found, key=lambda path: path.relative_to(base).as_posix())


__all__ = ["discover_sources"]
