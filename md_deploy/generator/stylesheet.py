"""Resolve the site stylesheet from the template resources or a built-in copy.

The stylesheet has two sources tried in order: ``styles.css`` from the
templates directory, then :data:`DEFAULT_STYLESHEET`. A failing source is
logged and skipped; the built-in source cannot fail, so stylesheet resolution
never aborts a run.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from md_deploy._constants import STYLESHEET_NAME

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
BUILTIN_SOURCE = "builtin"
TEMPLATE_SOURCE = "template"

DEFAULT_STYLESHEET = """\
/* md-deploy built-in stylesheet (dark) */
:root {
    --bg-color: #1e1e1e;
    --text-color: #d4d4d4;
    --header-bg: #252526;
    --sidebar-bg: #252526;
    --border-color: #3e3e42;
    --accent-color: #007acc;
    --accent-text-color: #ffffff;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
    margin: 0;
    display: flex;
    flex-direction: column;
    min-height: 100vh;
    background-color: var(--bg-color);
    color: var(--text-color);
}

header {
    background-color: var(--header-bg);
    border-bottom: 1px solid var(--border-color);
    padding: 1rem;
    display: flex;
    align-items: center;
    gap: 1rem;
}

header h1 { margin: 0; font-size: 1.5rem; color: var(--accent-color); }

.container { display: flex; flex: 1; position: relative; }

nav {
    width: 250px;
    background-color: var(--sidebar-bg);
    border-right: 1px solid var(--border-color);
    padding: 1rem;
    flex-shrink: 0;
}

nav ul { list-style: none; padding: 0; margin: 0; }
nav li { margin-bottom: 0.5rem; }

nav a {
    color: var(--text-color);
    text-decoration: none;
    display: block;
    padding: 0.5rem;
    border-radius: 4px;
}

nav a:hover, nav a[aria-current="page"] {
    background-color: var(--accent-color);
    color: var(--accent-text-color);
}

main { flex: 1; padding: 2rem; max-width: 800px; overflow-x: auto; }
main h1, main h2, main h3, main h4, main h5, main h6, main a { color: var(--accent-color); }
main pre { padding: 1rem; border-radius: 5px; overflow-x: auto; }

footer {
    background-color: var(--header-bg);
    border-top: 1px solid var(--border-color);
    padding: 1rem;
    text-align: center;
    margin-top: auto;
    font-size: 0.9rem;
    color: #808080;
}

#sidebar-toggle {
    display: none;
    background: none;
    border: none;
    cursor: pointer;
    padding: 0.5rem;
    flex-direction: column;
    gap: 5px;
}

.bar { width: 25px; height: 3px; background-color: var(--text-color); display: block; }

@media (max-width: 768px) {
    #sidebar-toggle { display: flex; }
    nav {
        position: absolute;
        top: 0;
        left: -280px;
        height: 100%;
        z-index: 1000;
        transition: left 0.3s ease;
    }
    nav.active { left: 0; }
    main { padding: 1rem; }
}
"""


def read_template_resource(relative_path: str, templates_dir: Path | None = None) -> bytes:
    """Return the raw bytes of a file under the templates directory."""
    base = templates_dir or TEMPLATES_DIR
    return (base / relative_path).read_bytes()


@dc.dataclass(frozen=True, slots=True)
class StylesheetSource:
    """A named, possibly failing, way of obtaining stylesheet text."""

    name: str
    load: cabc.Callable[[], str]


@dc.dataclass(frozen=True, slots=True)
class Stylesheet:
    """Resolved stylesheet text and the source that produced it."""

    source: str
    css: str


def default_sources(templates_dir: Path | None = None) -> list[StylesheetSource]:
    """Return the template source followed by the built-in fallback."""

    def _from_templates() -> str:
        return read_template_resource(STYLESHEET_NAME, templates_dir).decode("utf-8")

    return [
        StylesheetSource(TEMPLATE_SOURCE, _from_templates),
        StylesheetSource(BUILTIN_SOURCE, lambda: DEFAULT_STYLESHEET),
    ]


def resolve_stylesheet(
    sources: cabc.Sequence[StylesheetSource] | None = None,
) -> Stylesheet:
    """Return the first stylesheet that loads, falling back to the built-in.

    Parameters
    ----------
    sources : Sequence[StylesheetSource], optional
        Sources to try in order; defaults to :func:`default_sources`.

    Returns
    -------
    Stylesheet
        Text from the first source that loaded without ``OSError`` or
        ``ValueError`` (decode errors included), or the built-in stylesheet
        when every source failed.
    """
    for source in sources if sources is not None else default_sources():
        try:
            css = source.load()
        except (OSError, ValueError) as exc:
            logger.warning(
                "Could not load stylesheet from %s source, trying fallback: %s",
                source.name,
                exc,
            )
            continue
        logger.debug("Using stylesheet from %s source", source.name)
        return Stylesheet(source=source.name, css=css)
    return Stylesheet(source=BUILTIN_SOURCE, css=DEFAULT_STYLESHEET)


__all__ = [
    "BUILTIN_SOURCE",
    "DEFAULT_STYLESHEET",
    "TEMPLATE_SOURCE",
    "TEMPLATES_DIR",
    "Stylesheet",
    "StylesheetSource",
    "default_sources",
    "read_template_resource",
    "resolve_stylesheet",
]
