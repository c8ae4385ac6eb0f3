"""
Value wrappers shared by every trace attribute.

- ``Dim``: one value applied to every point, or one value per point.
- ``NumOrString``: a number or a string, written as whichever it holds.
- ``TruthyEnum``: an enum whose "false" member is written as a JSON boolean.

All three plug into pydantic through ``__get_pydantic_core_schema__`` so the
trace schemas can declare them as ordinary field types.
"""
import functools
from enum import Enum
from typing import Any, Generic, Iterable, Optional, TypeVar, Union, get_args

import numpy as np
from pydantic import BaseModel
from pydantic_core import core_schema

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def plain_value(value: Any) -> Any:
    """numpy scalars become the matching Python scalar; anything else is returned as is."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def plain_list(values: Iterable[Any]) -> list[Any]:
    """Copy ``values`` into a new list of plain Python items."""
    if hasattr(values, "tolist"):
        return values.tolist()
    return [plain_value(v) for v in values]


def encode_value(value: Any) -> Any:
    """
    Reduce a held value to the plain JSON-compatible form the engine expects.

    Args:
        value: Scalar, enum member, pydantic model, wrapper or list of those

    Returns:
        JSON-compatible Python object
    """
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    if hasattr(value, "to_plotly_json"):
        return value.to_plotly_json()
    return value


class Dim(Generic[T]):
    """
    Dimensional attribute: a scalar for all points or a per-point sequence.

    Sequence length is not checked against the owning trace's point count.

    Examples:
        >>> Dim.scalar("a").to_plotly_json()
        'a'
        >>> Dim.sequence(["a", "b"]).to_plotly_json()
        ['a', 'b']
    """

    __slots__ = ("_value", "_is_scalar")

    def __init__(self, value: Union[T, list[T]], is_scalar: bool):
        self._value = value
        self._is_scalar = is_scalar

    @classmethod
    def scalar(cls, value: T) -> "Dim[T]":
        return cls(plain_value(value), True)

    @classmethod
    def sequence(cls, values: Iterable[T]) -> "Dim[T]":
        return cls(plain_list(values), False)

    @property
    def value(self) -> Union[T, list[T]]:
        return self._value

    @property
    def is_scalar(self) -> bool:
        return self._is_scalar

    def point_count(self) -> Optional[int]:
        """Number of entries for a sequence, None for a scalar."""
        if self._is_scalar:
            return None
        return len(self._value)

    def to_plotly_json(self) -> Any:
        return encode_value(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dim):
            return NotImplemented
        return self._is_scalar == other._is_scalar and self._value == other._value

    def __hash__(self) -> int:
        if self._is_scalar:
            return hash((True, self._value))
        return hash((False, tuple(self._value)))

    def __repr__(self) -> str:
        kind = "scalar" if self._is_scalar else "sequence"
        return f"Dim.{kind}({self._value!r})"

    @classmethod
    def _from_raw(cls, raw: Any) -> "Dim":
        if isinstance(raw, list):
            return cls.sequence(raw)
        return cls.scalar(raw)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        from_raw = core_schema.no_info_after_validator_function(
            cls._from_raw,
            core_schema.union_schema([core_schema.list_schema(item_schema), item_schema]),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_raw,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_raw]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda dim: dim.to_plotly_json()
            ),
        )


class NumOrString:
    """
    A number or a string, serialized as the bare held value.

    Build instances with ``to_num_or_string``; the constructor does no checking.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, float, str]):
        self._value = value

    @property
    def value(self) -> Union[int, float, str]:
        return self._value

    @property
    def is_text(self) -> bool:
        return isinstance(self._value, str)

    @property
    def is_number(self) -> bool:
        return not self.is_text

    def to_plotly_json(self) -> Union[int, float, str]:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumOrString):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self._value), self._value))

    def __repr__(self) -> str:
        return f"NumOrString({self._value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            lambda raw: to_num_or_string(raw),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda wrapped: wrapped.to_plotly_json()
            ),
        )


@functools.singledispatch
def to_num_or_string(value: Any) -> NumOrString:
    """
    Wrap a number or string as ``NumOrString``.

    Args:
        value: int, float, str, numpy integer/floating scalar or NumOrString

    Returns:
        NumOrString holding the value unchanged (ints stay ints)

    Raises:
        TypeError: If the value is of any other type, including bool
    """
    raise TypeError(
        f"Expected a number or a string, got {type(value).__name__}: {value!r}"
    )


@to_num_or_string.register
def _(value: NumOrString) -> NumOrString:
    return value


@to_num_or_string.register
def _(value: bool) -> NumOrString:
    raise TypeError(f"Expected a number or a string, got bool: {value!r}")


@to_num_or_string.register
def _(value: int) -> NumOrString:
    return NumOrString(value)


@to_num_or_string.register
def _(value: float) -> NumOrString:
    return NumOrString(value)


@to_num_or_string.register
def _(value: str) -> NumOrString:
    return NumOrString(str(value))


@to_num_or_string.register
def _(value: np.integer) -> NumOrString:
    return NumOrString(int(value))


@to_num_or_string.register
def _(value: np.floating) -> NumOrString:
    return NumOrString(float(value))


def to_num_or_string_list(values: Iterable[Any]) -> list[NumOrString]:
    """Wrap each entry of ``values``; used for heterogeneous per-point arrays."""
    if hasattr(values, "tolist"):
        values = values.tolist()
    return [to_num_or_string(v) for v in values]


class TruthyEnum(Generic[E]):
    """
    Enum wrapper that writes the member valued ``"false"`` as JSON ``false``.

    Every other member is written as its ordinary value.
    """

    __slots__ = ("_member",)

    FALSE_VALUE = "false"

    def __init__(self, member: E):
        self._member = member

    @property
    def member(self) -> E:
        return self._member

    def to_plotly_json(self) -> Any:
        if self._member.value == self.FALSE_VALUE:
            return False
        return self._member.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TruthyEnum):
            return NotImplemented
        return self._member == other._member

    def __hash__(self) -> int:
        return hash(self._member)

    def __repr__(self) -> str:
        return f"TruthyEnum({self._member!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        args = get_args(source_type)
        enum_cls = args[0] if args else None

        def decode(raw: Any) -> "TruthyEnum":
            if isinstance(raw, cls):
                return raw
            if isinstance(raw, Enum):
                return cls(raw)
            if enum_cls is None:
                raise ValueError(f"Cannot decode {raw!r} without an enum type")
            if raw is False:
                raw = cls.FALSE_VALUE
            return cls(enum_cls(raw))

        return core_schema.no_info_plain_validator_function(
            decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda wrapped: wrapped.to_plotly_json()
            ),
        )
