"""
Named color schemes for plot documents.

A theme feeds two places: ``Layout.from_theme`` reads the surface, grid,
axis and text colors, and ``Candlestick.apply_theme`` reads the two
direction styles.
"""
from dataclasses import dataclass
from typing import Literal

from .config import DirectionStyle

ThemeMode = Literal["light", "dark"]


@dataclass(frozen=True)
class ChartTheme:
    """
    Colors applied to a layout and to candlestick directions.

    Attributes:
        plot_background: Color behind the traces (``plot_bgcolor``)
        paper_background: Color of the whole figure (``paper_bgcolor``)
        grid: Axis grid color (``gridcolor``)
        axis_line: Axis line color (``linecolor``)
        text: Layout font color
        increasing: Style of candles closing above their open
        decreasing: Style of candles closing below their open
        font_family: Layout font stack
    """

    plot_background: str
    paper_background: str
    grid: str
    axis_line: str
    text: str
    increasing: DirectionStyle
    decreasing: DirectionStyle
    font_family: str = '"Open Sans", verdana, arial, sans-serif'


DARK_THEME = ChartTheme(
    plot_background="#111418",
    paper_background="#0b0d10",
    grid="rgba(255, 255, 255, 0.10)",
    axis_line="#5c6670",
    text="#d6dbe0",
    increasing=DirectionStyle(color="#3fb950", fill_color="rgba(63, 185, 80, 0.6)"),
    decreasing=DirectionStyle(color="#f85149", fill_color="rgba(248, 81, 73, 0.6)"),
)

LIGHT_THEME = ChartTheme(
    plot_background="#ffffff",
    paper_background="#ffffff",
    grid="#e5ecf6",
    axis_line="#444444",
    text="#2a3f5f",
    increasing=DirectionStyle(color="#1a7f37", fill_color="rgba(26, 127, 55, 0.5)"),
    decreasing=DirectionStyle(color="#cf222e", fill_color="rgba(207, 34, 46, 0.5)"),
)

THEMES: dict[str, ChartTheme] = {"dark": DARK_THEME, "light": LIGHT_THEME}


def get_default_theme(mode: ThemeMode = "dark") -> ChartTheme:
    """
    Look up a built-in theme by name.

    Raises:
        ValueError: If ``mode`` names no built-in theme
    """
    if mode not in THEMES:
        raise ValueError(f"Invalid theme mode: {mode}. Must be one of {sorted(THEMES)}")
    return THEMES[mode]
