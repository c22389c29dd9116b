"""Cyclopts CLI entrypoint for generating a static site from Markdown.

The ``md-deploy`` console script defined here renders every Markdown document
of a workspace into ``docs/``, with a shared sidebar, an index page, and a
stylesheet themed by a single accent color. ``md-deploy discover`` lists the
documents a ``generate`` run would pick up.

Examples
--------
Generate the site for the current directory:

>>> from md_deploy.cli import main
>>> main()  # doctest: +SKIP

Generate two documents with a red accent:

>>> from md_deploy.cli import app
>>> app(
...     ["generate", "docs/intro.md", "guide/setup.md", "--accent-color", "#ff0000"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG_NAME
from .config import (
    SiteConfig,
    SiteConfigError,
    load_site_config,
    validate_output_dirname,
    validate_pygments_style,
)
from .errors import SiteGenerationError
from .generator import SiteGenerator
from .sources import discover_sources

app = App(name="md-deploy", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

CONFIG_ERRORS = (SiteConfigError, FileNotFoundError, YAMLError)

RootOption = typ.Annotated[
    Path | None,
    Parameter(help="Workspace folder (defaults to the current directory)", env_var="INPUT_ROOT"),
]
ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help=f"Path to site config (defaults to <root>/{DEFAULT_CONFIG_NAME} when present)",
        env_var="INPUT_CONFIG",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(exc: Exception) -> typ.NoReturn:
    """Report ``exc`` on stderr and exit with a non-zero status."""
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def _resolve_config(root: Path, config: Path | None) -> SiteConfig:
    """Load the explicit config, the workspace default, or built-in defaults."""
    if config is not None:
        return load_site_config(config)
    default_path = root / DEFAULT_CONFIG_NAME
    if default_path.exists():
        return load_site_config(default_path)
    return SiteConfig()


@app.command(help="Generate the static site from Markdown documents.")
def generate(
    *paths: typ.Annotated[Path, Parameter(help="Markdown files; discovered when omitted")],
    root: RootOption = None,
    config: ConfigOption = None,
    accent_color: typ.Annotated[
        str | None,
        Parameter(help="Accent color as #rgb or #rrggbb", env_var="INPUT_ACCENT_COLOR"),
    ] = None,
    site_title: typ.Annotated[
        str | None, Parameter(help="Site title", env_var="INPUT_SITE_TITLE")
    ] = None,
    footer_text: typ.Annotated[
        str | None, Parameter(help="Footer text", env_var="INPUT_FOOTER_TEXT")
    ] = None,
    output_dir: typ.Annotated[
        str | None,
        Parameter(help="Name of the output folder under the workspace"),
    ] = None,
    pygments_style: typ.Annotated[
        str | None, Parameter(help="Pygments style for code blocks")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log every generation step")] = False,
) -> None:
    """Generate the site and report every written file.

    Parameters
    ----------
    *paths : Path
        Markdown documents to convert, in navigation order. When none are
        given, every Markdown file under ``root`` is used.
    root : Path or None, optional
        Workspace folder receiving the output directory; defaults to the
        current directory.
    config : Path or None, optional
        YAML site configuration; CLI options override its values.
    accent_color, site_title, footer_text : str or None, optional
        Overrides for the corresponding site options.
    output_dir : str or None, optional
        Override for the output folder name (``docs`` by default).
    pygments_style : str or None, optional
        Override for the code highlighting style.
    verbose : bool, optional
        Enable debug logging on stderr.

    Returns
    -------
    None
        Prints ``wrote <path>`` per file and a closing summary line.

    Raises
    ------
    SystemExit
        With status 1 when configuration or generation fails; the reason is
        printed to stderr.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    workspace = root if root is not None else Path.cwd()
    try:
        site_config = _resolve_config(workspace, config)
        output_dirname = validate_output_dirname(output_dir or site_config.output_dirname)
        style = validate_pygments_style(pygments_style or site_config.pygments_style)
    except CONFIG_ERRORS as exc:
        _fail(exc)

    overrides = {
        key: value
        for key, value in {
            "accent_color": accent_color,
            "site_title": site_title,
            "footer_text": footer_text,
        }.items()
        if value is not None
    }
    options = dc.replace(site_config.options, **overrides)

    sources = list(paths)
    if not sources and workspace.is_dir():
        sources = discover_sources(workspace, exclude=site_config.exclude)

    generator = SiteGenerator(
        workspace,
        options,
        output_dirname=output_dirname,
        pygments_style=style,
    )
    try:
        result = generator.run(sources)
    except SiteGenerationError as exc:
        _fail(exc)

    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(f"Site generated in {_format_path(result.output_root)}")


@app.command(help="List the Markdown documents a generate run would use.")
def discover(
    *,
    root: RootOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the discovered source documents, one per line, in nav order."""
    workspace = root if root is not None else Path.cwd()
    try:
        site_config = _resolve_config(workspace, config)
    except CONFIG_ERRORS as exc:
        _fail(exc)
    if not workspace.is_dir():
        _fail(FileNotFoundError(f"Workspace folder '{workspace}' does not exist."))
    for path in discover_sources(workspace, exclude=site_config.exclude):
        print(_format_path(path))


def main() -> None:
    """Invoke the Cyclopts application behind the ``md-deploy`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
