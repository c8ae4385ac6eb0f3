"""
Unit tests for the chart theme system.
"""
import pytest

from plotspec.config import DirectionStyle
from plotspec.theme import (
    DARK_THEME,
    LIGHT_THEME,
    THEMES,
    ChartTheme,
    get_default_theme,
)


class TestChartTheme:
    """Tests for ChartTheme dataclass."""

    def test_theme_immutability(self):
        """Test that themes are immutable."""
        with pytest.raises(Exception):  # FrozenInstanceError
            DARK_THEME.plot_background = "#000000"  # type: ignore

    @pytest.mark.parametrize("theme", [DARK_THEME, LIGHT_THEME])
    def test_directions_are_filled(self, theme):
        """Test built-in themes style both directions with a line and a fill."""
        for style in (theme.increasing, theme.decreasing):
            assert isinstance(style, DirectionStyle)
            assert style.fill_color is not None
            assert style.line_width == 1.0

        assert theme.increasing.color != theme.decreasing.color

    def test_dark_surfaces(self):
        """Test dark theme uses dark surfaces and light text."""
        assert DARK_THEME.plot_background == "#111418"
        assert DARK_THEME.paper_background == "#0b0d10"
        assert DARK_THEME.text == "#d6dbe0"

    def test_light_surfaces(self):
        """Test light theme uses white surfaces and dark text."""
        assert LIGHT_THEME.plot_background == "#ffffff"
        assert LIGHT_THEME.paper_background == "#ffffff"
        assert LIGHT_THEME.text == "#2a3f5f"

    def test_font_family_default(self):
        """Test default font family."""
        assert "Open Sans" in DARK_THEME.font_family
        assert DARK_THEME.font_family.endswith("sans-serif")

    def test_custom_theme(self):
        """Test building a theme with custom colors."""
        theme = ChartTheme(
            plot_background="#000000",
            paper_background="#111111",
            grid="#222222",
            axis_line="#333333",
            text="#ffffff",
            increasing=DirectionStyle(color="#00aa00"),
            decreasing=DirectionStyle(color="#aa0000", line_width=2.0),
            font_family="monospace",
        )

        assert theme.font_family == "monospace"
        assert theme.decreasing.line_width == 2.0
        assert theme.increasing.fill_color is None


class TestGetDefaultTheme:
    """Tests for get_default_theme function."""

    def test_get_dark_theme(self):
        """Test getting dark theme."""
        assert get_default_theme("dark") == DARK_THEME

    def test_get_light_theme(self):
        """Test getting light theme."""
        assert get_default_theme("light") == LIGHT_THEME

    def test_default_is_dark(self):
        """Test default mode is dark."""
        assert get_default_theme() == DARK_THEME

    def test_invalid_mode(self):
        """Test invalid mode raises ValueError listing the known modes."""
        with pytest.raises(ValueError, match="Invalid theme mode"):
            get_default_theme("sepia")  # type: ignore

    def test_registry(self):
        """Test every registered theme is reachable by name."""
        for mode, theme in THEMES.items():
            assert get_default_theme(mode) is theme
