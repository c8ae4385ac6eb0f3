"""
Plot document: an ordered collection of traces plus layout and renderer config.

Traces are embedded as the exact fragments their ``serialize`` returns, in the
order they were added.
"""
import json
import logging
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import ConfigDict, Field, field_validator

from .common import Color, Font, SubModel
from .config import PlotConfig
from .logging_utils import log_serialization
from .theme import ChartTheme
from .traces.base import Trace

logger = logging.getLogger(__name__)


class BarMode(str, Enum):
    STACK = "stack"
    GROUP = "group"
    OVERLAY = "overlay"
    RELATIVE = "relative"


class Title(SubModel):
    text: Optional[str] = None
    font: Optional[Font] = None


class Layout(SubModel):
    """
    Figure layout. Only a handful of keys are modelled; any other engine
    layout key can be passed as a keyword and is written verbatim.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: Optional[Title] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    height: Optional[int] = None
    width: Optional[int] = None
    bar_mode: Optional[BarMode] = Field(None, alias="barmode")
    plot_background_color: Optional[Color] = Field(None, alias="plot_bgcolor")
    paper_background_color: Optional[Color] = Field(None, alias="paper_bgcolor")
    font: Optional[Font] = None
    x_axis: Optional[dict[str, Any]] = Field(None, alias="xaxis")
    y_axis: Optional[dict[str, Any]] = Field(None, alias="yaxis")

    @field_validator("title", mode="before")
    @classmethod
    def title_from_text(cls, v: Any) -> Any:
        """Accept a bare string as the title text."""
        if isinstance(v, str):
            return Title(text=v)
        return v

    @classmethod
    def from_theme(cls, theme: ChartTheme, **kwargs: Any) -> "Layout":
        """
        Layout with the theme's background, font, grid and axis colors.

        Args:
            theme: Chart theme
            **kwargs: Additional layout fields (override themed values)

        Returns:
            Layout instance
        """
        axis = {"gridcolor": theme.grid, "linecolor": theme.axis_line}
        themed: dict[str, Any] = {
            "plot_background_color": theme.plot_background,
            "paper_background_color": theme.paper_background,
            "font": Font(color=theme.text, family=theme.font_family),
            "x_axis": dict(axis),
            "y_axis": dict(axis),
        }
        themed.update(kwargs)
        return cls(**themed)

    def serialize(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Plot:
    """
    Ordered collection of traces with a layout, written as one JSON document.

    Examples:
        >>> plot = Plot()
        >>> plot.add_trace(Bar([1, 2], [3, 4]))
        >>> plot.to_json()
        '{"data":[{"x":[1,2],"y":[3,4],"type":"bar"}],"layout":{}}'
    """

    def __init__(self, layout: Optional[Layout] = None, config: Optional[PlotConfig] = None):
        self._traces: list[Trace] = []
        self._layout = layout if layout is not None else Layout()
        self._config = config

    def add_trace(self, trace: Trace) -> None:
        """Append a trace; document order is insertion order."""
        self._traces.append(trace)

    def add_traces(self, traces: Iterable[Trace]) -> None:
        for trace in traces:
            self.add_trace(trace)

    def set_layout(self, layout: Layout) -> None:
        self._layout = layout

    def set_configuration(self, config: PlotConfig) -> None:
        self._config = config

    @property
    def traces(self) -> list[Trace]:
        return list(self._traces)

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def configuration(self) -> Optional[PlotConfig]:
        return self._config

    def __len__(self) -> int:
        return len(self._traces)

    @log_serialization
    def to_json(self) -> str:
        """
        Serialize the whole document.

        Returns:
            ``{"data":[...],"layout":{...}}`` plus ``"config"`` when set

        Raises:
            Any error raised while encoding a trace, unchanged
        """
        data = ",".join(trace.serialize() for trace in self._traces)
        document = f'{{"data":[{data}],"layout":{self._layout.serialize()}'
        if self._config is not None:
            config = json.dumps(self._config.to_plotly_json(), separators=(",", ":"))
            document += f',"config":{config}'
        return document + "}"

    def to_dict(self) -> dict[str, Any]:
        return json.loads(self.to_json())

    def to_figure(self) -> Any:
        """
        Hand the document to plotly's Python binding.

        Returns:
            ``plotly.graph_objects.Figure`` (validated by plotly)

        Raises:
            ValueError: If plotly rejects a key or value
        """
        import plotly.graph_objects as go

        document = self.to_dict()
        document.pop("config", None)
        return go.Figure(document)
