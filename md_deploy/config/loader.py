"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from ruamel.yaml import YAML

from md_deploy._constants import DEFAULT_EXCLUDES, OUTPUT_DIRNAME

from .helpers import _merge_options, _normalize_names, _optional_str, _require_mapping
from .models import DEFAULT_PYGMENTS_STYLE, SiteConfig, SiteConfigError, SiteOptions


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing site options and build settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``md-deploy.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every missing key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure or a field has the wrong shape, or
        ``output_dir`` is not a plain directory name.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("md-deploy.yaml"))  # doctest: +SKIP
    >>> config.options.site_title  # doctest: +SKIP
    'Docs'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    raw: dict[str, typ.Any] = dict(_require_mapping(loaded, "top-level"))

    options = _merge_options(SiteOptions(), _require_mapping(raw.get("site"), "site"))
    output_dirname = validate_output_dirname(
        _optional_str(raw.get("output_dir")) or OUTPUT_DIRNAME
    )
    pygments_style = validate_pygments_style(
        _optional_str(raw.get("pygments_style")) or DEFAULT_PYGMENTS_STYLE
    )
    exclude = _normalize_names(raw.get("exclude"), "exclude")

    return SiteConfig(
        options=options,
        output_dirname=output_dirname,
        pygments_style=pygments_style,
        exclude=DEFAULT_EXCLUDES if exclude is None else exclude,
    )


def validate_output_dirname(name: str) -> str:
    """Return ``name`` if it is a single directory name under the workspace.

    Raises
    ------
    SiteConfigError
        If ``name`` is empty, ``.``/``..``, or contains a path separator.

    Examples
    --------
    >>> validate_output_dirname("public")
    'public'
    """
    if not name or Path(name).name != name or name in {".", ".."} or "\\" in name:
        msg = f"'output_dir' must be a directory name, got {name!r}."
        raise SiteConfigError(msg)
    return name


def validate_pygments_style(name: str) -> str:
    """Return ``name`` if Pygments knows a style by that name.

    Raises
    ------
    SiteConfigError
        If no such style is installed.
    """
    try:
        get_style_by_name(name)
    except ClassNotFound as exc:
        msg = f"Unknown pygments_style {name!r}."
        raise SiteConfigError(msg) from exc
    return name


__all__ = ["load_site_config", "validate_output_dirname", "validate_pygments_style"]
