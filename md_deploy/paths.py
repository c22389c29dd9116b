"""Path helpers shared by the layout planner and the page assembler."""

from __future__ import annotations

import os
from pathlib import Path


def sanitize_relative_dir(relative_dir: str, sep: str = os.sep) -> str:
    """Strip one leading dot from each segment of ``relative_dir``.

    Segments that are exactly ``.`` are kept so the current-directory marker
    survives; every other segment loses a single leading ``.`` so hidden
    folders such as ``.github`` become ordinary output folders. ``..`` is not
    resolved here.

    Parameters
    ----------
    relative_dir : str
        Directory path relative to the workspace root.
    sep : str, optional
        Separator used to split and rejoin the segments. Defaults to
        :data:`os.sep`.

    Returns
    -------
    str
        The sanitized directory path, joined with ``sep``.

    Examples
    --------
    >>> sanitize_relative_dir(".hidden/sub", sep="/")
    'hidden/sub'
    >>> sanitize_relative_dir("./a/.b", sep="/")
    './a/b'
    """
    segments = relative_dir.split(sep)
    cleaned = [
        segment if segment == "." else segment.removeprefix(".")
        for segment in segments
    ]
    return sep.join(cleaned)


def relative_href(target: Path, from_file: Path) -> str:
    """Return the POSIX-relative link from the directory of ``from_file``.

    The result depends only on the two paths, so the same pair always yields
    the same href regardless of the order in which pages are produced.

    Examples
    --------
    >>> relative_href(Path("/site/index.html"), Path("/site/html/a/b.html"))
    '../../index.html'
    """
    rel_path = Path(os.path.relpath(target, start=from_file.parent))
    return rel_path.as_posix()


__all__ = ["relative_href", "sanitize_relative_dir"]
