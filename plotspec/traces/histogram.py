"""Histogram trace builder and its binning sub-models."""
import logging
from enum import Enum
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import Field

from ..common import (
    Calendar,
    ErrorData,
    HoverInfo,
    Label,
    Marker,
    Orientation,
    PlotType,
    SubModel,
)
from ..ndarray import ArrayTraces, trace_vectors_from
from ..values import Dim
from .base import BaseTrace, TraceSchema, owned, owned_list

logger = logging.getLogger(__name__)

H = TypeVar("H")


class HistFunc(str, Enum):
    COUNT = "count"
    SUM = "sum"
    AVERAGE = "avg"
    MINIMUM = "min"
    MAXIMUM = "max"


class HistNorm(str, Enum):
    DEFAULT = ""
    PERCENT = "percent"
    PROBABILITY = "probability"
    DENSITY = "density"
    PROBABILITY_DENSITY = "probability density"


class HistDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


class CurrentBin(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"
    HALF = "half"


class Bins(SubModel):
    """Explicit bin edges: ``start``, ``end`` and bin ``size``."""

    start: float
    end: float
    size: float


class Cumulative(SubModel):
    enabled: Optional[bool] = None
    direction: Optional[HistDirection] = None
    current_bin: Optional[CurrentBin] = Field(None, alias="currentbin")


class HistogramSchema(TraceSchema):
    type: PlotType = PlotType.HISTOGRAM
    name: Optional[str] = None
    visible: Optional[bool] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend_group: Optional[str] = Field(None, alias="legendgroup")
    opacity: Optional[float] = None
    x: Optional[list[Any]] = None
    y: Optional[list[Any]] = None
    text: Optional[Dim[str]] = None
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    hist_func: Optional[HistFunc] = Field(None, alias="histfunc")
    hist_norm: Optional[HistNorm] = Field(None, alias="histnorm")
    alignment_group: Optional[str] = Field(None, alias="alignmentgroup")
    offset_group: Optional[str] = Field(None, alias="offsetgroup")
    n_bins_x: Optional[int] = Field(None, alias="nbinsx")
    n_bins_y: Optional[int] = Field(None, alias="nbinsy")
    auto_bin_x: Optional[bool] = Field(None, alias="autobinx")
    auto_bin_y: Optional[bool] = Field(None, alias="autobiny")
    bin_group: Optional[str] = Field(None, alias="bingroup")
    x_bins: Optional[Bins] = Field(None, alias="xbins")
    y_bins: Optional[Bins] = Field(None, alias="ybins")
    marker: Optional[Marker] = None
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    cumulative: Optional[Cumulative] = None
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")


class Histogram(BaseTrace, Generic[H]):
    """
    Histogram trace builder.

    The engine bins the raw samples itself; ``Histogram(x)`` bins along x,
    ``Histogram.new_vertical(y)`` along y and ``Histogram.new_xy`` feeds both
    (used with ``hist_func`` to aggregate y per x bin).
    """

    schema = HistogramSchema

    def __init__(self, x: Optional[Iterable[H]] = None):
        self._attrs = HistogramSchema.model_construct(
            x=owned_list(x) if x is not None else None
        )

    @classmethod
    def new_xy(cls, x: Iterable[H], y: Iterable[H]) -> "Histogram[H]":
        trace = cls(x)
        trace._attrs.y = owned_list(y)
        return trace

    @classmethod
    def new_vertical(cls, y: Iterable[H]) -> "Histogram[H]":
        trace = cls()
        trace._attrs.y = owned_list(y)
        return trace

    @classmethod
    def from_array(cls, x: Any) -> "Histogram[H]":
        """Build from a one-dimensional numpy array."""
        return cls(x)

    def point_count(self) -> Optional[int]:
        values = self._attrs.x if self._attrs.x is not None else self._attrs.y
        return len(values) if values is not None else None

    def to_traces(self, traces_matrix: Any, array_traces: ArrayTraces) -> list["Histogram[H]"]:
        """
        Produce one Histogram per column or row of a 2-D block.

        Each trace is a deep copy of this builder with ``x`` set to one
        vector of the block, in original order.

        Args:
            traces_matrix: 2-D block (ndarray, nested lists or DataFrame)
            array_traces: Whether traces are laid out over columns or rows

        Returns:
            List of Histogram builders

        Raises:
            ValueError: If ``traces_matrix`` is not two-dimensional
        """
        traces = []
        for vector in trace_vectors_from(traces_matrix, array_traces):
            trace = self.copy()
            trace._attrs.x = vector
            traces.append(trace)

        logger.debug(f"  → Produced {len(traces)} histogram trace(s) from block")
        return traces

    def visible(self, visible: bool) -> "Histogram[H]":
        return self._set("visible", visible)

    def hover_template(self, hover_template: str) -> "Histogram[H]":
        return self._set("hover_template", Dim.scalar(hover_template))

    def hover_template_array(self, hover_template: Iterable[str]) -> "Histogram[H]":
        return self._set("hover_template", Dim.sequence(hover_template))

    def orientation(self, orientation: Orientation) -> "Histogram[H]":
        return self._set("orientation", orientation)

    def hist_func(self, hist_func: HistFunc) -> "Histogram[H]":
        """Aggregation applied to the samples of each bin (``count`` by default)."""
        return self._set("hist_func", hist_func)

    def hist_norm(self, hist_norm: HistNorm) -> "Histogram[H]":
        return self._set("hist_norm", hist_norm)

    def alignment_group(self, alignment_group: str) -> "Histogram[H]":
        return self._set("alignment_group", alignment_group)

    def offset_group(self, offset_group: str) -> "Histogram[H]":
        return self._set("offset_group", offset_group)

    def n_bins_x(self, n_bins_x: int) -> "Histogram[H]":
        """Maximum number of x bins; ignored when ``x_bins`` is set."""
        return self._set("n_bins_x", n_bins_x)

    def n_bins_y(self, n_bins_y: int) -> "Histogram[H]":
        return self._set("n_bins_y", n_bins_y)

    def auto_bin_x(self, auto_bin_x: bool) -> "Histogram[H]":
        return self._set("auto_bin_x", auto_bin_x)

    def auto_bin_y(self, auto_bin_y: bool) -> "Histogram[H]":
        return self._set("auto_bin_y", auto_bin_y)

    def bin_group(self, bin_group: str) -> "Histogram[H]":
        """Traces sharing a bin group share bin settings."""
        return self._set("bin_group", bin_group)

    def x_bins(self, x_bins: Bins) -> "Histogram[H]":
        return self._set("x_bins", owned(x_bins))

    def y_bins(self, y_bins: Bins) -> "Histogram[H]":
        return self._set("y_bins", owned(y_bins))

    def marker(self, marker: Marker) -> "Histogram[H]":
        return self._set("marker", owned(marker))

    def error_x(self, error_x: ErrorData) -> "Histogram[H]":
        return self._set("error_x", owned(error_x))

    def error_y(self, error_y: ErrorData) -> "Histogram[H]":
        return self._set("error_y", owned(error_y))

    def cumulative(self, cumulative: Cumulative) -> "Histogram[H]":
        return self._set("cumulative", owned(cumulative))

    def y_calendar(self, y_calendar: Calendar) -> "Histogram[H]":
        return self._set("y_calendar", y_calendar)
