"""
Uniform trace abstraction and the serialization contract shared by all
chart builders.

Each chart kind is split in two:

- a ``TraceSchema`` subclass declaring the fields, their wire names
  (pydantic aliases) and their order in the output;
- a ``BaseTrace`` subclass exposing the fluent mutators.

Serialization always goes through ``BaseTrace.serialize`` so a trace held
as a ``Trace`` writes exactly the same bytes as the concrete builder.
"""
import logging
from typing import Any, ClassVar, Iterable, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

from ..common import Calendar, HoverInfo, Label, PlotType
from ..logging_utils import is_debug_mode
from ..values import Dim, plain_list

logger = logging.getLogger(__name__)

TTrace = TypeVar("TTrace", bound="BaseTrace")


@runtime_checkable
class Trace(Protocol):
    """
    Anything that can be written as one entry of a plot's ``data`` array.

    Chart builders satisfy this protocol; the plot document only relies on it.
    """

    def serialize(self) -> str:
        """
        Serialize to a JSON object fragment.

        Returns:
            Compact JSON text for a single trace
        """
        ...


class TraceSchema(BaseModel):
    """
    Field table of a chart kind.

    Field names are the Python names, aliases are the engine's keys.
    Unset optional fields hold None and are dropped on output.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def owned_list(values: Iterable[Any]) -> list[Any]:
    """Copy ``values`` into a new list; numpy items become Python scalars."""
    return plain_list(values)


def owned(value: Any) -> Any:
    """Copy sub-models so no two attribute slots share an instance."""
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)
    return value


class BaseTrace:
    """
    Base class for chart builders.

    Subclasses set ``schema`` and build ``self._attrs`` in ``__init__``
    with ``schema.model_construct``. Mutators write a single field and
    return the builder so calls can be chained.
    """

    schema: ClassVar[type[TraceSchema]]

    _attrs: TraceSchema

    @classmethod
    def _from_attrs(cls: type[TTrace], attrs: TraceSchema) -> TTrace:
        trace = cls.__new__(cls)
        trace._attrs = attrs
        return trace

    @classmethod
    def from_plotly_json(cls: type[TTrace], data: dict[str, Any]) -> TTrace:
        """
        Rebuild a builder from its decoded JSON fragment.

        Args:
            data: Dict as produced by ``to_plotly_json`` / ``json.loads(serialize())``

        Returns:
            Builder whose serialization equals the original fragment

        Raises:
            pydantic.ValidationError: If a key or value does not fit the schema
        """
        return cls._from_attrs(cls.schema.model_validate(data))

    @classmethod
    def wire_names(cls) -> dict[str, str]:
        """Mapping of Python field name to engine key, in output order."""
        return {
            name: field.alias or name
            for name, field in cls.schema.model_fields.items()
        }

    def _set(self: TTrace, field: str, value: Any) -> TTrace:
        setattr(self._attrs, field, value)
        return self

    def get(self, field: str) -> Any:
        """Current value of ``field`` (None when unset)."""
        return getattr(self._attrs, field)

    @property
    def trace_type(self) -> PlotType:
        return self._attrs.type

    def point_count(self) -> Optional[int]:
        """Number of data points, taken from the first coordinate array set."""
        for field in ("x", "y"):
            values = getattr(self._attrs, field, None)
            if values is not None:
                return len(values)
        return None

    def copy(self: TTrace) -> TTrace:
        """Deep copy; the clone shares nothing with this builder."""
        return self._from_attrs(self._attrs.model_copy(deep=True))

    def to_plotly_json(self) -> dict[str, Any]:
        return self._attrs.model_dump(mode="json", by_alias=True, exclude_none=True)

    def serialize(self) -> str:
        """
        Serialize this trace to its compact JSON fragment.

        Unset attributes are omitted and every key uses its engine name.
        Encoding errors propagate unchanged.

        Returns:
            JSON object text
        """
        if is_debug_mode():
            self._warn_on_length_mismatch()
        return self._attrs.model_dump_json(by_alias=True, exclude_none=True)

    def _warn_on_length_mismatch(self) -> None:
        expected = self.point_count()
        if expected is None:
            return
        for name, field in self.schema.model_fields.items():
            value = getattr(self._attrs, name)
            if isinstance(value, Dim) and not value.is_scalar and value.point_count() != expected:
                logger.warning(
                    f"⚠️  {self.trace_type.value}.{field.alias or name}: "
                    f"{value.point_count()} entries for {expected} points"
                )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseTrace):
            return NotImplemented
        return type(self) is type(other) and self._attrs == other._attrs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_plotly_json()!r})"

    # Attributes every chart kind carries

    def name(self: TTrace, name: str) -> TTrace:
        """Trace name shown in the legend and on hover."""
        return self._set("name", name)

    def show_legend(self: TTrace, show_legend: bool) -> TTrace:
        return self._set("show_legend", show_legend)

    def legend_group(self: TTrace, legend_group: str) -> TTrace:
        return self._set("legend_group", legend_group)

    def opacity(self: TTrace, opacity: float) -> TTrace:
        return self._set("opacity", opacity)

    def text(self: TTrace, text: str) -> TTrace:
        """Same text for every point."""
        return self._set("text", Dim.scalar(text))

    def text_array(self: TTrace, text: Iterable[str]) -> TTrace:
        """One text entry per point; replaces any earlier ``text`` call."""
        return self._set("text", Dim.sequence(text))

    def hover_text(self: TTrace, hover_text: str) -> TTrace:
        return self._set("hover_text", Dim.scalar(hover_text))

    def hover_text_array(self: TTrace, hover_text: Iterable[str]) -> TTrace:
        return self._set("hover_text", Dim.sequence(hover_text))

    def hover_info(self: TTrace, hover_info: HoverInfo) -> TTrace:
        return self._set("hover_info", hover_info)

    def x_axis(self: TTrace, axis: str) -> TTrace:
        """Reference to a cartesian x axis, e.g. ``"x2"``."""
        return self._set("x_axis", axis)

    def y_axis(self: TTrace, axis: str) -> TTrace:
        return self._set("y_axis", axis)

    def hover_label(self: TTrace, hover_label: Label) -> TTrace:
        return self._set("hover_label", owned(hover_label))

    def x_calendar(self: TTrace, x_calendar: Calendar) -> TTrace:
        return self._set("x_calendar", x_calendar)
