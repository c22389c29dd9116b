"""Render Markdown into HTML fragments with highlighted code blocks."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_LINE = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
FENCE_LANGUAGE = re.compile(r"^[ \t]*(?P<lang>[A-Za-z0-9_+#.-]+)")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
PLAIN_LANGUAGE = "text"
MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


@dc.dataclass(frozen=True, slots=True)
class PreparedMarkdown:
    """Markdown with normalized fences and the language of each fenced block."""

    text: str
    languages: tuple[str, ...]


def prepare_fences(text: str) -> PreparedMarkdown:
    """Normalize fenced code blocks so Python-Markdown recognizes them.

    Opening and closing fences lose up to three spaces of indentation, an
    info string is cut down to its leading language word (``python,ignore``
    and ``python title="x"`` both become ``python``), and a closing fence is
    rewritten to match its opening fence exactly. Lines inside a block are
    never touched.

    Examples
    --------
    >>> prepared = prepare_fences("  ```python,ignore\\nx = 1\\n  ````\\n")
    >>> prepared.text
    '```python\\nx = 1\\n```\\n'
    >>> prepared.languages
    ('python',)
    """
    lines: list[str] = []
    languages: list[str] = []
    open_fence: str | None = None
    for line in text.split("\n"):
        match = FENCE_LINE.match(line)
        if match is None:
            lines.append(line)
            continue
        fence, info = match["fence"], match["info"]
        if open_fence is None:
            if fence.startswith("`") and "`" in info:
                lines.append(line)
                continue
            language = FENCE_LANGUAGE.match(info)
            if language:
                lines.append(f"{fence}{language['lang']}")
                languages.append(language["lang"])
            else:
                lines.append(f"{fence}{info.rstrip()}")
                languages.append(PLAIN_LANGUAGE)
            open_fence = fence
        elif (
            fence[0] == open_fence[0]
            and len(fence) >= len(open_fence)
            and not info.strip()
        ):
            lines.append(open_fence)
            open_fence = None
        else:
            lines.append(line)
    return PreparedMarkdown(text="\n".join(lines), languages=tuple(languages))


class HtmlContentRenderer:
    """Convert document bodies to HTML fragments for the page template."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Bind the renderer to a Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Style used both for highlighted blocks and for :attr:`stylesheet`.
            Unknown names raise ``pygments.util.ClassNotFound``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """CSS rules for ``.codehilite`` blocks in the configured style."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str, *, link_extension: Extension | None = None) -> str:
        """Render Markdown into an HTML fragment.

        Parameters
        ----------
        text : str
            Markdown source.
        link_extension : Extension, optional
            Extra extension that rewrites links for the page being rendered.

        Returns
        -------
        str
            The HTML fragment, or ``""`` for blank input. Each highlighted
            fenced block carries a ``data-language`` attribute.
        """
        if not text.strip():
            return ""
        prepared = prepare_fences(text)
        extensions: list[Extension | str] = list(MARKDOWN_EXTENSIONS)
        if link_extension is not None:
            extensions.append(link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return _tag_languages(md.convert(prepared.text), prepared.languages)


def _tag_languages(html: str, languages: tuple[str, ...]) -> str:
    if not languages:
        return html
    remaining = iter(languages)

    def _open_tag(_match: re.Match[str]) -> str:
        lang = escape(next(remaining, PLAIN_LANGUAGE), quote=True)
        return f'<div class="codehilite" data-language="{lang}">'

    return CODEHILITE_OPEN_TAG.sub(_open_tag, html, len(languages))


__all__ = ["HtmlContentRenderer", "PreparedMarkdown", "prepare_fences"]
