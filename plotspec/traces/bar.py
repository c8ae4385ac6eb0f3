"""Bar chart builder."""
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import Field

from ..common import (
    Calendar,
    ConstrainText,
    ErrorData,
    Font,
    HoverInfo,
    Label,
    Marker,
    Orientation,
    PlotType,
    TextAnchor,
    TextPosition,
)
from ..values import Dim
from .base import BaseTrace, TraceSchema, owned, owned_list

X = TypeVar("X")
Y = TypeVar("Y")


class BarSchema(TraceSchema):
    x: list[Any]
    y: list[Any]
    type: PlotType = PlotType.BAR
    name: Optional[str] = None
    visible: Optional[bool] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend_group: Optional[str] = Field(None, alias="legendgroup")
    opacity: Optional[float] = None
    ids: Optional[list[str]] = None
    width: Optional[int] = None
    offset: Optional[Dim[int]] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[TextPosition]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    alignment_group: Optional[str] = Field(None, alias="alignmentgroup")
    offset_group: Optional[str] = Field(None, alias="offsetgroup")
    marker: Optional[Marker] = None
    text_angle: Optional[float] = Field(None, alias="textangle")
    text_font: Optional[Font] = Field(None, alias="textfont")
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    clip_on_axis: Optional[bool] = Field(None, alias="cliponaxis")
    constrain_text: Optional[ConstrainText] = Field(None, alias="constraintext")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    inside_text_anchor: Optional[TextAnchor] = Field(None, alias="insidetextanchor")
    inside_text_font: Optional[Font] = Field(None, alias="insidetextfont")
    outside_text_font: Optional[Font] = Field(None, alias="outsidetextfont")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")


class Bar(BaseTrace, Generic[X, Y]):
    """
    Bar trace builder.

    Examples:
        >>> Bar([1, 2, 3], [10, 20, 30]).name("Revenue").serialize()
        '{"x":[1,2,3],"y":[10,20,30],"type":"bar","name":"Revenue"}'
    """

    schema = BarSchema

    def __init__(self, x: Iterable[X], y: Iterable[Y]):
        self._attrs = BarSchema.model_construct(x=owned_list(x), y=owned_list(y))

    def visible(self, visible: bool) -> "Bar[X, Y]":
        return self._set("visible", visible)

    def ids(self, ids: Iterable[str]) -> "Bar[X, Y]":
        """Per-point identifiers used for object constancy in animations."""
        return self._set("ids", [str(i) for i in ids])

    def width(self, width: int) -> "Bar[X, Y]":
        return self._set("width", width)

    def offset(self, offset: int) -> "Bar[X, Y]":
        """Shift every bar by ``offset`` position-axis units."""
        return self._set("offset", Dim.scalar(offset))

    def offset_array(self, offset: Iterable[int]) -> "Bar[X, Y]":
        return self._set("offset", Dim.sequence(offset))

    def text_position(self, text_position: TextPosition) -> "Bar[X, Y]":
        return self._set("text_position", Dim.scalar(text_position))

    def text_position_array(self, text_position: Iterable[TextPosition]) -> "Bar[X, Y]":
        return self._set("text_position", Dim.sequence(text_position))

    def text_template(self, text_template: str) -> "Bar[X, Y]":
        return self._set("text_template", Dim.scalar(text_template))

    def text_template_array(self, text_template: Iterable[str]) -> "Bar[X, Y]":
        return self._set("text_template", Dim.sequence(text_template))

    def hover_template(self, hover_template: str) -> "Bar[X, Y]":
        return self._set("hover_template", Dim.scalar(hover_template))

    def hover_template_array(self, hover_template: Iterable[str]) -> "Bar[X, Y]":
        return self._set("hover_template", Dim.sequence(hover_template))

    def orientation(self, orientation: Orientation) -> "Bar[X, Y]":
        return self._set("orientation", orientation)

    def alignment_group(self, alignment_group: str) -> "Bar[X, Y]":
        return self._set("alignment_group", alignment_group)

    def offset_group(self, offset_group: str) -> "Bar[X, Y]":
        return self._set("offset_group", offset_group)

    def marker(self, marker: Marker) -> "Bar[X, Y]":
        return self._set("marker", owned(marker))

    def text_angle(self, text_angle: float) -> "Bar[X, Y]":
        return self._set("text_angle", text_angle)

    def text_font(self, text_font: Font) -> "Bar[X, Y]":
        return self._set("text_font", owned(text_font))

    def error_x(self, error_x: ErrorData) -> "Bar[X, Y]":
        return self._set("error_x", owned(error_x))

    def error_y(self, error_y: ErrorData) -> "Bar[X, Y]":
        return self._set("error_y", owned(error_y))

    def clip_on_axis(self, clip_on_axis: bool) -> "Bar[X, Y]":
        return self._set("clip_on_axis", clip_on_axis)

    def constrain_text(self, constrain_text: ConstrainText) -> "Bar[X, Y]":
        return self._set("constrain_text", constrain_text)

    def inside_text_anchor(self, inside_text_anchor: TextAnchor) -> "Bar[X, Y]":
        return self._set("inside_text_anchor", inside_text_anchor)

    def inside_text_font(self, inside_text_font: Font) -> "Bar[X, Y]":
        return self._set("inside_text_font", owned(inside_text_font))

    def outside_text_font(self, outside_text_font: Font) -> "Bar[X, Y]":
        return self._set("outside_text_font", owned(outside_text_font))

    def y_calendar(self, y_calendar: Calendar) -> "Bar[X, Y]":
        return self._set("y_calendar", y_calendar)
