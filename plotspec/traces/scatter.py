"""
Scatter (and WebGL scatter) trace builder.

Scatter is the most configurable trace kind: besides the usual text and hover
attributes it accepts number-or-string anchors (``x0``, ``y0``, ``meta``),
per-point custom data and a three-state ``visible`` flag.
"""
import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import Field

from ..common import (
    Calendar,
    Color,
    ErrorData,
    Fill,
    Font,
    GroupNorm,
    HoverInfo,
    Label,
    Line,
    Marker,
    Mode,
    Orientation,
    PlotType,
    Position,
    Visible,
)
from ..ndarray import ArrayTraces, trace_vectors_from
from ..values import Dim, NumOrString, TruthyEnum, to_num_or_string, to_num_or_string_list
from .base import BaseTrace, TraceSchema, owned, owned_list

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")


class ScatterSchema(TraceSchema):
    type: PlotType = PlotType.SCATTER
    name: Optional[str] = None
    visible: Optional[TruthyEnum[Visible]] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend_group: Optional[str] = Field(None, alias="legendgroup")
    opacity: Optional[float] = None
    mode: Optional[Mode] = None
    ids: Optional[list[str]] = None
    x: Optional[list[Any]] = None
    x0: Optional[NumOrString] = None
    dx: Optional[float] = None
    y: Optional[list[Any]] = None
    y0: Optional[NumOrString] = None
    dy: Optional[float] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[Position]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    meta: Optional[NumOrString] = None
    custom_data: Optional[list[NumOrString]] = Field(None, alias="customdata")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    group_norm: Optional[GroupNorm] = Field(None, alias="groupnorm")
    stack_group: Optional[str] = Field(None, alias="stackgroup")
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    text_font: Optional[Font] = Field(None, alias="textfont")
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    clip_on_axis: Optional[bool] = Field(None, alias="cliponaxis")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    fill: Optional[Fill] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    hover_on: Optional[str] = Field(None, alias="hoveron")
    stack_gaps: Optional[str] = Field(None, alias="stackgaps")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")


class Scatter(BaseTrace, Generic[X, Y]):
    """
    Scatter trace builder.

    ``Scatter()`` without coordinates is a valid template, typically used
    with ``to_traces`` to stamp out one trace per matrix column or row.

    Examples:
        >>> trace = Scatter([1, 2], [3, 4]).mode(Mode.MARKERS).name("points")
        >>> trace.serialize()
        '{"type":"scatter","name":"points","mode":"markers","x":[1,2],"y":[3,4]}'
    """

    schema = ScatterSchema

    def __init__(self, x: Optional[Iterable[X]] = None, y: Optional[Iterable[Y]] = None):
        self._attrs = ScatterSchema.model_construct(
            x=owned_list(x) if x is not None else None,
            y=owned_list(y) if y is not None else None,
        )

    @classmethod
    def from_array(cls, x: Any, y: Any) -> "Scatter[X, Y]":
        """
        Build from one-dimensional numpy arrays (or anything with ``tolist``).

        Args:
            x: 1-D array of x coordinates
            y: 1-D array of y coordinates

        Returns:
            New Scatter builder
        """
        return cls(x, y)

    def to_traces(
        self,
        x: Iterable[X],
        traces_matrix: Any,
        array_traces: ArrayTraces,
    ) -> list["Scatter[X, Y]"]:
        """
        Produce one Scatter per column or row of a 2-D block, sharing ``x``.

        Each trace is a deep copy of this builder with ``x`` set to the shared
        axis and ``y`` to one vector of the block, in original order.

        Args:
            x: Shared x axis coordinates
            traces_matrix: 2-D block (ndarray, nested lists or DataFrame)
            array_traces: Whether traces are laid out over columns or rows

        Returns:
            List of Scatter builders

        Raises:
            ValueError: If ``traces_matrix`` is not two-dimensional

        Examples:
            >>> t = np.linspace(0, 1, 5)
            >>> ys = np.zeros((5, 3))
            >>> traces = Scatter().mode(Mode.LINES).to_traces(t, ys, ArrayTraces.OVER_COLUMNS)
            >>> len(traces)
            3
        """
        shared_x = owned_list(x)
        traces = []
        for vector in trace_vectors_from(traces_matrix, array_traces):
            trace = self.copy()
            trace._attrs.x = list(shared_x)
            trace._attrs.y = vector
            traces.append(trace)

        logger.debug(f"  → Produced {len(traces)} scatter trace(s) from block")
        return traces

    def web_gl_mode(self, on: bool) -> "Scatter[X, Y]":
        """Switch between the WebGL (``scattergl``) and SVG (``scatter``) renderers."""
        return self._set("type", PlotType.SCATTER_GL if on else PlotType.SCATTER)

    def visible(self, visible: Visible) -> "Scatter[X, Y]":
        """
        Whether the trace is drawn. ``Visible.LEGEND_ONLY`` keeps the legend
        entry but hides the trace.
        """
        return self._set("visible", TruthyEnum(visible))

    def mode(self, mode: Mode) -> "Scatter[X, Y]":
        """
        Drawing mode. Defaults to lines+markers for fewer than 20 points,
        lines otherwise.
        """
        return self._set("mode", mode)

    def ids(self, ids: Iterable[str]) -> "Scatter[X, Y]":
        return self._set("ids", [str(i) for i in ids])

    def x0(self, x0: Any) -> "Scatter[X, Y]":
        """Alternate to ``x``: starting coordinate, number or date string."""
        return self._set("x0", to_num_or_string(x0))

    def dx(self, dx: float) -> "Scatter[X, Y]":
        """Step used with ``x0``."""
        return self._set("dx", dx)

    def y0(self, y0: Any) -> "Scatter[X, Y]":
        """Alternate to ``y``: starting coordinate, number or date string."""
        return self._set("y0", to_num_or_string(y0))

    def dy(self, dy: float) -> "Scatter[X, Y]":
        """Step used with ``y0``."""
        return self._set("dy", dy)

    def text_position(self, text_position: Position) -> "Scatter[X, Y]":
        """Position of text relative to each point, same for every point."""
        return self._set("text_position", Dim.scalar(text_position))

    def text_position_array(self, text_position: Iterable[Position]) -> "Scatter[X, Y]":
        """Position of text relative to each point, one entry per point."""
        return self._set("text_position", Dim.sequence(text_position))

    def text_template(self, text_template: str) -> "Scatter[X, Y]":
        """
        Template for the text drawn next to each point, e.g. ``"%{y:.2f}"``.
        """
        return self._set("text_template", Dim.scalar(text_template))

    def text_template_array(self, text_template: Iterable[str]) -> "Scatter[X, Y]":
        return self._set("text_template", Dim.sequence(text_template))

    def hover_template(self, hover_template: str) -> "Scatter[X, Y]":
        """
        Template for the hover box; overrides ``hover_info``.

        Variables are inserted with ``%{variable}``, numbers formatted with
        d3-format (``"Price: %{y:$.2f}"``). Content inside ``<extra>`` goes to
        the secondary box; ``<extra></extra>`` hides it.
        """
        return self._set("hover_template", Dim.scalar(hover_template))

    def hover_template_array(self, hover_template: Iterable[str]) -> "Scatter[X, Y]":
        return self._set("hover_template", Dim.sequence(hover_template))

    def meta(self, meta: Any) -> "Scatter[X, Y]":
        """
        Extra value available in text attributes as ``%{meta}``.

        Args:
            meta: A number or a string

        Raises:
            TypeError: If ``meta`` is neither a number nor a string
        """
        return self._set("meta", to_num_or_string(meta))

    def custom_data(self, custom_data: Iterable[Any]) -> "Scatter[X, Y]":
        """
        Extra per-point data passed to hover, click and selection events.

        Entries may mix numbers and strings.
        """
        return self._set("custom_data", to_num_or_string_list(custom_data))

    def orientation(self, orientation: Orientation) -> "Scatter[X, Y]":
        """Stacking direction; only used together with ``stack_group``."""
        return self._set("orientation", orientation)

    def group_norm(self, group_norm: GroupNorm) -> "Scatter[X, Y]":
        """Normalization of the stack group the trace belongs to."""
        return self._set("group_norm", group_norm)

    def stack_group(self, stack_group: str) -> "Scatter[X, Y]":
        """
        Stack this trace with every other trace in the same group. Turns on
        fill to the next trace and drops gaps via ``stack_gaps``.
        """
        return self._set("stack_group", stack_group)

    def marker(self, marker: Marker) -> "Scatter[X, Y]":
        return self._set("marker", owned(marker))

    def line(self, line: Line) -> "Scatter[X, Y]":
        return self._set("line", owned(line))

    def text_font(self, text_font: Font) -> "Scatter[X, Y]":
        return self._set("text_font", owned(text_font))

    def error_x(self, error_x: ErrorData) -> "Scatter[X, Y]":
        return self._set("error_x", owned(error_x))

    def error_y(self, error_y: ErrorData) -> "Scatter[X, Y]":
        return self._set("error_y", owned(error_y))

    def clip_on_axis(self, clip_on_axis: bool) -> "Scatter[X, Y]":
        """Clip markers and text to the axis range."""
        return self._set("clip_on_axis", clip_on_axis)

    def connect_gaps(self, connect_gaps: bool) -> "Scatter[X, Y]":
        """Connect across missing (NaN / None) values."""
        return self._set("connect_gaps", connect_gaps)

    def fill(self, fill: Fill) -> "Scatter[X, Y]":
        """
        Area to fill with a solid color. ``TO_NEXT_Y`` and ``TO_NEXT_X`` fill
        between this trace and the one before it; ``TO_SELF`` closes the trace
        into a shape.
        """
        return self._set("fill", fill)

    def fill_color(self, fill_color: Color) -> "Scatter[X, Y]":
        return self._set("fill_color", owned(fill_color))

    def hover_on(self, hover_on: str) -> "Scatter[X, Y]":
        """``"points"``, ``"fills"`` or ``"points+fills"``."""
        return self._set("hover_on", hover_on)

    def stack_gaps(self, stack_gaps: str) -> "Scatter[X, Y]":
        """``"infer zero"`` or ``"interpolate"``; only used with ``stack_group``."""
        return self._set("stack_gaps", stack_gaps)

    def y_calendar(self, y_calendar: Calendar) -> "Scatter[X, Y]":
        return self._set("y_calendar", y_calendar)
