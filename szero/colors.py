"""Color formatting for console output.

All helpers are pure: the color policy travels as an explicit
:class:`Theme` argument instead of process-wide terminal state.

Escape codes come from ``click.style``, which closes every span with the
full reset ``ESC[0m`` rather than the foreground-only ``ESC[39m``.
"""

from __future__ import annotations

from dataclasses import dataclass

import click


@dataclass(frozen=True)
class Theme:
    """Color policy for rendered output.

    Count badges use ``low`` for 0-1, ``medium`` for 2 and ``high`` above.
    """

    enabled: bool = True
    low: str = "red"
    medium: str = "yellow"
    high: str = "green"
    highlight: str = "magenta"


DEFAULT_THEME = Theme()
PLAIN = Theme(enabled=False)


def colorize(text: str, color: str, theme: Theme = DEFAULT_THEME) -> str:
    if not theme.enabled:
        return text
    return click.style(text, fg=color)


def red(text: str, theme: Theme = DEFAULT_THEME) -> str:
    return colorize(text, "red", theme)


def green(text: str, theme: Theme = DEFAULT_THEME) -> str:
    return colorize(text, "green", theme)


def yellow(text: str, theme: Theme = DEFAULT_THEME) -> str:
    return colorize(text, "yellow", theme)


def magenta(text: str, theme: Theme = DEFAULT_THEME) -> str:
    return colorize(text, "magenta", theme)


def apply_color(count: int, theme: Theme = DEFAULT_THEME) -> str:
    """Render ``[ count ]`` in the theme's low/medium/high color."""
    if count <= 1:
        color = theme.low
    elif count == 2:
        color = theme.medium
    else:
        color = theme.high
    return colorize(f"[ {count} ]", color, theme)
