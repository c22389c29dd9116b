"""Accent color parsing and WCAG contrast resolution.

The generated stylesheet uses a single configurable accent color. Text drawn on
top of it (hovered navigation links, for instance) must stay readable, so the
text color is derived rather than configured: whichever of white or black has
the higher WCAG contrast ratio against the accent wins.

Examples
--------
>>> resolve_text_color("#000080")
'#ffffff'
>>> resolve_text_color("ff0")
'#000000'
"""

from __future__ import annotations

import dataclasses as dc
import re

from .errors import InvalidColorError

WHITE = "#ffffff"
BLACK = "#000000"
HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dc.dataclass(frozen=True, slots=True)
class ThemeColors:
    """Theme variables injected into every page.

    Attributes
    ----------
    accent : str
        Accent color as configured, with a leading ``#`` added when omitted.
    accent_text : str
        Contrasting text color, ``#ffffff`` or ``#000000``.
    """

    accent: str
    accent_text: str

    @classmethod
    def from_accent(cls, accent: str) -> ThemeColors:
        """Validate ``accent`` and derive its contrasting text color.

        Examples
        --------
        >>> ThemeColors.from_accent("ff0")
        ThemeColors(accent='#ff0', accent_text='#000000')
        """
        text_color = resolve_text_color(accent)
        return cls(accent=f"#{accent.strip().lstrip('#')}", accent_text=text_color)


def parse_hex_color(value: str) -> tuple[int, int, int]:
    """Return the ``(r, g, b)`` channels of a 3- or 6-digit hex color.

    Raises
    ------
    InvalidColorError
        If ``value`` is not ``#rgb``/``#rrggbb`` (the ``#`` is optional).
    """
    text = value.strip() if isinstance(value, str) else ""
    if not HEX_PATTERN.match(text):
        raise InvalidColorError(str(value))
    digits = text.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _linearize(channel: int) -> float:
    srgb = channel / 255
    if srgb <= 0.03928:
        return srgb / 12.92
    return ((srgb + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    """Return the WCAG relative luminance of a hex color, in ``[0, 1]``."""
    red, green, blue = parse_hex_color(value)
    return (
        0.2126 * _linearize(red)
        + 0.7152 * _linearize(green)
        + 0.0722 * _linearize(blue)
    )


def resolve_text_color(background_hex: str) -> str:
    """Return white or black, whichever contrasts more with the background.

    White wins only when its contrast ratio is strictly greater; ties go to
    black.

    Parameters
    ----------
    background_hex : str
        Background color as ``#rgb`` or ``#rrggbb`` (``#`` optional).

    Returns
    -------
    str
        ``"#ffffff"`` or ``"#000000"``.

    Raises
    ------
    InvalidColorError
        If ``background_hex`` is malformed.
    """
    luminance = relative_luminance(background_hex)
    white_contrast = 1.05 / (luminance + 0.05)
    black_contrast = (luminance + 0.05) / 0.05
    return WHITE if white_contrast > black_contrast else BLACK


__all__ = [
    "BLACK",
    "WHITE",
    "ThemeColors",
    "parse_hex_color",
    "relative_luminance",
    "resolve_text_color",
]
