"""
Shared enums and sub-models attached to trace attributes.

These are plain value objects: the trace builders only need them to be
optional, independently serializable and copied on assignment.
"""
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from .values import Dim


class PlotType(str, Enum):
    """Discriminant written under the ``type`` key of every trace."""

    SCATTER = "scatter"
    SCATTER_GL = "scattergl"
    BAR = "bar"
    HISTOGRAM = "histogram"
    CANDLESTICK = "candlestick"


class Mode(str, Enum):
    LINES = "lines"
    MARKERS = "markers"
    TEXT = "text"
    LINES_MARKERS = "lines+markers"
    LINES_TEXT = "lines+text"
    MARKERS_TEXT = "markers+text"
    LINES_MARKERS_TEXT = "lines+markers+text"
    NONE = "none"


class HoverInfo(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"
    X_AND_Y = "x+y"
    X_AND_Z = "x+z"
    Y_AND_Z = "y+z"
    X_AND_Y_AND_Z = "x+y+z"
    TEXT = "text"
    NAME = "name"
    ALL = "all"
    NONE = "none"
    SKIP = "skip"


class Orientation(str, Enum):
    VERTICAL = "v"
    HORIZONTAL = "h"


class TextPosition(str, Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    AUTO = "auto"
    NONE = "none"


class Position(str, Enum):
    TOP_LEFT = "top left"
    TOP_CENTER = "top center"
    TOP_RIGHT = "top right"
    MIDDLE_LEFT = "middle left"
    MIDDLE_CENTER = "middle center"
    MIDDLE_RIGHT = "middle right"
    BOTTOM_LEFT = "bottom left"
    BOTTOM_CENTER = "bottom center"
    BOTTOM_RIGHT = "bottom right"


class Visible(str, Enum):
    """Trace visibility; wrap in ``TruthyEnum`` so FALSE is written as ``false``."""

    TRUE = "true"
    FALSE = "false"
    LEGEND_ONLY = "legendonly"


class Fill(str, Enum):
    TO_ZERO_Y = "tozeroy"
    TO_ZERO_X = "tozerox"
    TO_NEXT_Y = "tonexty"
    TO_NEXT_X = "tonextx"
    TO_SELF = "toself"
    TO_NEXT = "tonext"
    NONE = "none"


class GroupNorm(str, Enum):
    DEFAULT = ""
    FRACTION = "fraction"
    PERCENT = "percent"


class ConstrainText(str, Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    BOTH = "both"
    NONE = "none"


class TextAnchor(str, Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class Calendar(str, Enum):
    GREGORIAN = "gregorian"
    CHINESE = "chinese"
    COPTIC = "coptic"
    DISCWORLD = "discworld"
    ETHIOPIAN = "ethiopian"
    HEBREW = "hebrew"
    ISLAMIC = "islamic"
    JULIAN = "julian"
    MAYAN = "mayan"
    NANAKSHAHI = "nanakshahi"
    NEPALI = "nepali"
    PERSIAN = "persian"
    JALALI = "jalali"
    TAIWAN = "taiwan"
    THAI = "thai"
    UMMALQURA = "ummalqura"


class ErrorType(str, Enum):
    PERCENT = "percent"
    CONSTANT = "constant"
    SQRT = "sqrt"
    DATA = "data"


class DashType(str, Enum):
    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    LONG_DASH = "longdash"
    DASH_DOT = "dashdot"
    LONG_DASH_DOT = "longdashdot"


class LineShape(str, Enum):
    LINEAR = "linear"
    SPLINE = "spline"
    HV = "hv"
    VH = "vh"
    HVH = "hvh"
    VHV = "vhv"


class NamedColor(str, Enum):
    """CSS color names understood by the rendering engine (subset)."""

    BLACK = "black"
    WHITE = "white"
    GRAY = "gray"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    ORANGE = "orange"
    PURPLE = "purple"
    PINK = "pink"
    BROWN = "brown"
    CYAN = "cyan"
    MAGENTA = "magenta"
    NAVY = "navy"
    TEAL = "teal"
    OLIVE = "olive"
    MAROON = "maroon"
    LIGHT_GRAY = "lightgray"
    DARK_GRAY = "darkgray"
    TRANSPARENT = "transparent"


class Rgb(BaseModel):
    """Opaque RGB color, written as ``"rgb(r, g, b)"``."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @model_serializer
    def serialize_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


class Rgba(BaseModel):
    """RGB color with alpha in [0, 1], written as ``"rgba(r, g, b, a)"``."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: float = Field(ge=0.0, le=1.0)

    @model_serializer
    def serialize_css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


Color = Union[Rgb, Rgba, NamedColor, str]


class SubModel(BaseModel):
    """Base for sub-models: wire aliases, construction by field name."""

    model_config = ConfigDict(populate_by_name=True)

    def to_plotly_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Font(SubModel):
    family: Optional[str] = None
    size: Optional[float] = None
    color: Optional[Color] = None


class Line(SubModel):
    width: Optional[float] = None
    color: Optional[Color] = None
    dash: Optional[DashType] = None
    shape: Optional[LineShape] = None
    smoothing: Optional[float] = None


class Marker(SubModel):
    symbol: Optional[str] = None
    opacity: Optional[float] = None
    size: Optional[Dim[float]] = None
    color: Optional[Dim[Color]] = None
    line: Optional[Line] = None
    size_ref: Optional[float] = Field(None, alias="sizeref")
    size_min: Optional[float] = Field(None, alias="sizemin")
    show_scale: Optional[bool] = Field(None, alias="showscale")


class ErrorData(SubModel):
    """Error bar settings for ``error_x`` / ``error_y``."""

    type: ErrorType
    array: Optional[list[float]] = None
    symmetric: Optional[bool] = None
    array_minus: Optional[list[float]] = Field(None, alias="arrayminus")
    value: Optional[float] = None
    value_minus: Optional[float] = Field(None, alias="valueminus")
    trace_ref: Optional[int] = Field(None, alias="traceref")
    trace_ref_minus: Optional[int] = Field(None, alias="tracerefminus")
    width: Optional[float] = None
    thickness: Optional[float] = None
    color: Optional[Color] = None
    visible: Optional[bool] = None


class Label(SubModel):
    """Hover label styling (``hoverlabel``)."""

    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    font: Optional[Font] = None
    align: Optional[str] = None
    name_length: Optional[int] = Field(None, alias="namelength")


class Direction(SubModel):
    """Styling for increasing or decreasing candles."""

    line: Optional[Line] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
