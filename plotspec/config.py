"""
Type-safe configuration models for plot documents.

All configurations use frozen dataclasses for immutability and type safety.
"""
from dataclasses import dataclass, fields
from typing import Any, Literal, Optional, Union

from .common import NamedColor

# Type aliases for better readability
DisplayModeBar = Optional[Union[bool, Literal["hover"]]]


@dataclass(frozen=True)
class DirectionStyle:
    """
    Styling for one candle direction.

    Attributes:
        color: Line color
        line_width: Line width in pixels
        fill_color: Box fill; None leaves the renderer's default fill
    """

    color: Union[NamedColor, str]
    line_width: float = 1.0
    fill_color: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.line_width <= 0:
            raise ValueError(f"Line width must be > 0, got {self.line_width}")


CANDLESTICK_INCREASING = DirectionStyle(color=NamedColor.GREEN, line_width=1.0)
CANDLESTICK_DECREASING = DirectionStyle(color=NamedColor.RED, line_width=1.0)


@dataclass(frozen=True)
class PlotConfig:
    """
    Renderer options written under the document's ``config`` key.

    Unset (None) options are left to the renderer's defaults.

    Attributes:
        responsive: Resize with the container
        static_plot: Disable all interactivity
        scroll_zoom: Zoom with the mouse wheel
        editable: Allow editing titles, legends and annotations
        display_logo: Show the vendor logo in the mode bar
        display_mode_bar: True, False or "hover"
    """

    responsive: Optional[bool] = None
    static_plot: Optional[bool] = None
    scroll_zoom: Optional[bool] = None
    editable: Optional[bool] = None
    display_logo: Optional[bool] = None
    display_mode_bar: DisplayModeBar = None

    _WIRE_NAMES = {
        "responsive": "responsive",
        "static_plot": "staticPlot",
        "scroll_zoom": "scrollZoom",
        "editable": "editable",
        "display_logo": "displaylogo",
        "display_mode_bar": "displayModeBar",
    }

    def __post_init__(self):
        """Validate configuration values."""
        valid_mode_bar = (None, True, False, "hover")
        mode_bar = self.display_mode_bar
        if not (mode_bar is None or isinstance(mode_bar, bool) or mode_bar == "hover"):
            raise ValueError(
                f"Invalid display_mode_bar '{self.display_mode_bar}', "
                f"must be one of {valid_mode_bar}"
            )

    def to_plotly_json(self) -> dict[str, Any]:
        """Set options only, under the renderer's key names."""
        return {
            self._WIRE_NAMES[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
