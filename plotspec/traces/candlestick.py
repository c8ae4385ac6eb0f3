"""Candlestick (OHLC) trace builder."""
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import Field

from ..common import Calendar, Direction, HoverInfo, Label, Line, PlotType
from ..config import CANDLESTICK_DECREASING, CANDLESTICK_INCREASING, DirectionStyle
from ..theme import ChartTheme
from ..values import Dim
from .base import BaseTrace, TraceSchema, owned, owned_list

T = TypeVar("T")
O = TypeVar("O")


def _direction_from(style: DirectionStyle) -> Direction:
    return Direction(
        line=Line(width=style.line_width, color=style.color),
        fill_color=style.fill_color,
    )


class CandlestickSchema(TraceSchema):
    type: PlotType = PlotType.CANDLESTICK
    x: list[Any]
    open: list[Any]
    high: list[Any]
    low: list[Any]
    close: list[Any]
    name: Optional[str] = None
    visible: Optional[bool] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend_group: Optional[str] = Field(None, alias="legendgroup")
    opacity: Optional[float] = None
    text: Optional[Dim[str]] = None
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    line: Optional[Line] = None
    whisker_width: Optional[float] = Field(None, alias="whiskerwidth")
    increasing: Optional[Direction] = None
    decreasing: Optional[Direction] = None
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")


class Candlestick(BaseTrace, Generic[T, O]):
    """
    Candlestick trace builder.

    New builders start with green increasing and red decreasing candles
    (line width 1.0). ``increasing``/``decreasing`` replace those defaults
    entirely.

    Examples:
        >>> Candlestick(["2024-01-02"], [10], [12], [9], [11]).serialize()
        '{"type":"candlestick","x":["2024-01-02"],"open":[10],"high":[12],"low":[9],"close":[11],"increasing":{"line":{"width":1.0,"color":"green"}},"decreasing":{"line":{"width":1.0,"color":"red"}}}'
    """

    schema = CandlestickSchema

    def __init__(
        self,
        x: Iterable[T],
        open: Iterable[O],
        high: Iterable[O],
        low: Iterable[O],
        close: Iterable[O],
    ):
        self._attrs = CandlestickSchema.model_construct(
            x=owned_list(x),
            open=owned_list(open),
            high=owned_list(high),
            low=owned_list(low),
            close=owned_list(close),
            increasing=_direction_from(CANDLESTICK_INCREASING),
            decreasing=_direction_from(CANDLESTICK_DECREASING),
        )

    def visible(self, visible: bool) -> "Candlestick[T, O]":
        return self._set("visible", visible)

    def line(self, line: Line) -> "Candlestick[T, O]":
        """Line style shared by both directions unless they override it."""
        return self._set("line", owned(line))

    def whisker_width(self, whisker_width: float) -> "Candlestick[T, O]":
        """Whisker width as a fraction of the box width, in [0, 1]."""
        return self._set("whisker_width", whisker_width)

    def increasing(self, increasing: Direction) -> "Candlestick[T, O]":
        return self._set("increasing", owned(increasing))

    def decreasing(self, decreasing: Direction) -> "Candlestick[T, O]":
        return self._set("decreasing", owned(decreasing))

    def apply_theme(self, theme: ChartTheme) -> "Candlestick[T, O]":
        """
        Replace both directions with the theme's direction styles.

        Args:
            theme: Chart theme providing the increasing and decreasing styles

        Returns:
            This builder
        """
        self.increasing(_direction_from(theme.increasing))
        return self.decreasing(_direction_from(theme.decreasing))
