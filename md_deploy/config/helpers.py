"""Utility helpers shared by the md_deploy configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SiteConfigError, SiteOptions


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, label: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"'{label}' must be a mapping, got {type(value).__name__}."
            raise SiteConfigError(msg)


def _normalize_names(value: object, label: str) -> tuple[str, ...] | None:
    """Normalize a string or list of names into a tuple of non-empty strings."""
    match value:
        case None:
            return None
        case str():
            names = [segment for segment in value.split() if segment]
        case list() | tuple():
            names = [str(item).strip() for item in value if str(item).strip()]
        case _:
            msg = f"'{label}' must be a list of names."
            raise SiteConfigError(msg)
    return tuple(names)


def _merge_options(
    base: SiteOptions, override: typ.Mapping[str, typ.Any] | None
) -> SiteOptions:
    """Merge a ``site`` mapping from YAML into the base SiteOptions."""
    if not override:
        return base
    footer = override.get("footer_text", base.footer_text)
    return SiteOptions(
        accent_color=_optional_str(override.get("accent_color")) or base.accent_color,
        site_title=_optional_str(override.get("title")) or base.site_title,
        footer_text="" if footer is None else str(footer),
    )


__all__ = [
    "_merge_options",
    "_normalize_names",
    "_optional_str",
    "_require_mapping",
]
