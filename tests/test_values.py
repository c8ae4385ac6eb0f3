"""
Unit tests for the shared value wrappers (Dim, NumOrString, TruthyEnum).
"""
import numpy as np
import pytest
from pydantic import TypeAdapter

from plotspec.common import TextPosition, Visible
from plotspec.values import (
    Dim,
    NumOrString,
    TruthyEnum,
    encode_value,
    to_num_or_string,
    to_num_or_string_list,
)


class TestDim:
    """Tests for the scalar-or-sequence attribute type."""

    def test_scalar_serializes_bare(self):
        """Test scalar variant encodes as the bare value."""
        adapter = TypeAdapter(Dim[str])

        assert adapter.dump_json(Dim.scalar("hello")) == b'"hello"'
        assert Dim.scalar(5).to_plotly_json() == 5

    def test_sequence_serializes_as_array(self):
        """Test sequence variant encodes as an array in order."""
        adapter = TypeAdapter(Dim[int])

        assert adapter.dump_json(Dim.sequence([3, 1, 2])) == b"[3,1,2]"
        assert Dim.sequence([]).to_plotly_json() == []

    def test_enum_items_encode_as_values(self):
        """Test enum entries are written as their engine strings."""
        dim = Dim.sequence([TextPosition.INSIDE, TextPosition.OUTSIDE])

        assert dim.to_plotly_json() == ["inside", "outside"]
        assert Dim.scalar(TextPosition.AUTO).to_plotly_json() == "auto"

    def test_round_trip_keeps_variant(self):
        """Test encode -> decode -> encode is stable for both variants."""
        adapter = TypeAdapter(Dim[str])

        for dim in (Dim.scalar("a"), Dim.sequence(["a", "b"]), Dim.sequence(["a"])):
            encoded = adapter.dump_json(dim)
            decoded = adapter.validate_json(encoded)

            assert decoded == dim
            assert decoded.is_scalar == dim.is_scalar
            assert adapter.dump_json(decoded) == encoded

    def test_decode_enum_items(self):
        """Test decoding restores enum members."""
        adapter = TypeAdapter(Dim[TextPosition])

        decoded = adapter.validate_json(b'["inside","auto"]')

        assert decoded.value == [TextPosition.INSIDE, TextPosition.AUTO]

    def test_point_count(self):
        """Test point count is None for scalars, length for sequences."""
        assert Dim.scalar("x").point_count() is None
        assert Dim.sequence(["a", "b", "c"]).point_count() == 3

    def test_sequence_copies_input(self):
        """Test the sequence owns a copy of the caller's list."""
        values = ["a", "b"]
        dim = Dim.sequence(values)
        values.append("c")

        assert dim.value == ["a", "b"]

    def test_sequence_from_numpy(self):
        """Test numpy arrays become plain lists."""
        dim = Dim.sequence(np.array([1, 2, 3]))

        assert dim.value == [1, 2, 3]
        assert type(dim.value[0]) is int

    def test_scalar_and_sequence_not_equal(self):
        """Test variants with the same content differ."""
        assert Dim.scalar("a") != Dim.sequence(["a"])

    def test_numpy_scalars_become_python_scalars(self):
        """Test numpy scalars are converted for both variants."""
        adapter = TypeAdapter(Dim[float])

        assert type(Dim.scalar(np.int64(2)).value) is int
        assert Dim.sequence([np.int64(1), np.float32(0.5)]).value == [1, 0.5]
        assert adapter.dump_json(Dim.sequence([np.float64(1.5), np.int16(3)])) == b"[1.5,3]"
        assert adapter.dump_json(Dim.scalar(np.float64(0.25))) == b"0.25"

    def test_encode_value_numpy_scalars(self):
        """Test encode_value reduces numpy scalars held in raw lists."""
        assert encode_value([np.int64(4), np.bool_(True)]) == [4, True]


class TestNumOrString:
    """Tests for NumOrString and to_num_or_string."""

    def test_integer_is_bare_number(self):
        """Test integers serialize as bare JSON numbers."""
        adapter = TypeAdapter(NumOrString)

        assert adapter.dump_json(to_num_or_string(5)) == b"5"

    def test_float_is_bare_number(self):
        """Test floats serialize as bare JSON numbers."""
        adapter = TypeAdapter(NumOrString)

        assert adapter.dump_json(to_num_or_string(2.5)) == b"2.5"

    def test_string_is_bare_string(self):
        """Test strings serialize as bare JSON strings."""
        adapter = TypeAdapter(NumOrString)
        wrapped = to_num_or_string("2024-01-01")

        assert adapter.dump_json(wrapped) == b'"2024-01-01"'
        assert wrapped.is_text
        assert not wrapped.is_number

    def test_numpy_scalars(self):
        """Test numpy scalars are converted to Python numbers."""
        as_int = to_num_or_string(np.int64(7))
        as_float = to_num_or_string(np.float32(1.5))

        assert as_int.value == 7 and type(as_int.value) is int
        assert as_float.value == 1.5 and type(as_float.value) is float

    def test_no_normalization_between_variants(self):
        """Test "5" and 5 stay different."""
        assert to_num_or_string("5") != to_num_or_string(5)

    def test_existing_wrapper_passes_through(self):
        """Test wrapping twice is a no-op."""
        wrapped = to_num_or_string(3)

        assert to_num_or_string(wrapped) is wrapped

    @pytest.mark.parametrize("value", [True, None, [1], {"a": 1}])
    def test_rejects_other_types(self, value):
        """Test unsupported source types raise TypeError."""
        with pytest.raises(TypeError, match="Expected a number or a string"):
            to_num_or_string(value)

    def test_heterogeneous_list(self):
        """Test per-entry arrays keep each entry's kind."""
        adapter = TypeAdapter(list[NumOrString])
        wrapped = to_num_or_string_list([1, "two", 3.5])

        assert adapter.dump_json(wrapped) == b'[1,"two",3.5]'


class TestTruthyEnum:
    """Tests for TruthyEnum."""

    def test_false_member_is_boolean(self):
        """Test the 'false' member is written as JSON false."""
        adapter = TypeAdapter(TruthyEnum[Visible])

        assert adapter.dump_json(TruthyEnum(Visible.FALSE)) == b"false"

    def test_other_members_keep_their_value(self):
        """Test the remaining members are written as usual."""
        assert TruthyEnum(Visible.LEGEND_ONLY).to_plotly_json() == "legendonly"
        assert TruthyEnum(Visible.TRUE).to_plotly_json() == "true"

    def test_decode_boolean_false(self):
        """Test JSON false decodes back to the false member."""
        adapter = TypeAdapter(TruthyEnum[Visible])

        assert adapter.validate_json(b"false") == TruthyEnum(Visible.FALSE)
        assert adapter.validate_json(b'"legendonly"') == TruthyEnum(Visible.LEGEND_ONLY)
