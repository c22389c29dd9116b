"""Exceptions raised while generating a site.

Every fatal failure derives from :class:`SiteGenerationError` so callers (the
CLI in particular) can report a single message and stop. Stylesheet lookup
failures are not represented here: they are recovered with the built-in
stylesheet and only logged.
"""

from __future__ import annotations

from pathlib import Path


class SiteGenerationError(RuntimeError):
    """Base class for failures that abort a generation run."""


class MissingOutputRootError(SiteGenerationError):
    """Raised when no workspace root is available to hold the output tree."""


class InvalidColorError(SiteGenerationError, ValueError):
    """Raised when an accent color is not a 3- or 6-digit hex value."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid hex color {value!r}; expected #rgb or #rrggbb.")


class DocumentReadError(SiteGenerationError):
    """Raised when a source document cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read source document '{path}': {reason}")


class WriteError(SiteGenerationError):
    """Raised when an output directory or file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write '{path}': {reason}")


class PathCollisionError(SiteGenerationError):
    """Raised when two source documents map to the same output page."""

    def __init__(self, output_path: str, first: Path, second: Path) -> None:
        self.output_path = output_path
        self.sources = (first, second)
        msg = (
            f"Source documents '{first}' and '{second}' both map to "
            f"'{output_path}'."
        )
        super().__init__(msg)


class DocumentOutsideRootError(SiteGenerationError):
    """Raised when a source document does not live under the workspace root."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"Source document '{path}' is outside workspace '{root}'.")


__all__ = [
    "DocumentOutsideRootError",
    "DocumentReadError",
    "InvalidColorError",
    "MissingOutputRootError",
    "PathCollisionError",
    "SiteGenerationError",
    "WriteError",
]
