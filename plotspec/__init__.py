"""
Declarative chart specifications for a browser-side rendering engine.

Build traces with chained mutators, collect them in a ``Plot`` and write the
document as JSON. Nothing here renders; the output is handed to the engine.
"""
from .common import (
    Calendar,
    ConstrainText,
    DashType,
    Direction,
    ErrorData,
    ErrorType,
    Fill,
    Font,
    GroupNorm,
    HoverInfo,
    Label,
    Line,
    LineShape,
    Marker,
    Mode,
    NamedColor,
    Orientation,
    PlotType,
    Position,
    Rgb,
    Rgba,
    TextAnchor,
    TextPosition,
    Visible,
)
from .config import PlotConfig
from .ndarray import ArrayTraces
from .plot import BarMode, Layout, Plot, Title
from .theme import DARK_THEME, LIGHT_THEME, ChartTheme, get_default_theme
from .traces import (
    Bar,
    BaseTrace,
    Bins,
    Candlestick,
    Cumulative,
    CurrentBin,
    HistDirection,
    HistFunc,
    HistNorm,
    Histogram,
    Scatter,
    Trace,
)
from .values import Dim, NumOrString, TruthyEnum, to_num_or_string

__version__ = "1.0.0"
__all__ = [
    # Document
    "Plot",
    "Layout",
    "Title",
    "BarMode",
    "PlotConfig",
    # Traces
    "Trace",
    "BaseTrace",
    "Bar",
    "Scatter",
    "Histogram",
    "Candlestick",
    "ArrayTraces",
    # Values
    "Dim",
    "NumOrString",
    "TruthyEnum",
    "to_num_or_string",
    # Sub-models and enums
    "Bins",
    "Cumulative",
    "CurrentBin",
    "HistDirection",
    "HistFunc",
    "HistNorm",
    "Calendar",
    "ConstrainText",
    "DashType",
    "Direction",
    "ErrorData",
    "ErrorType",
    "Fill",
    "Font",
    "GroupNorm",
    "HoverInfo",
    "Label",
    "Line",
    "LineShape",
    "Marker",
    "Mode",
    "NamedColor",
    "Orientation",
    "PlotType",
    "Position",
    "Rgb",
    "Rgba",
    "TextAnchor",
    "TextPosition",
    "Visible",
    # Themes
    "get_default_theme",
    "ChartTheme",
    "DARK_THEME",
    "LIGHT_THEME",
]
