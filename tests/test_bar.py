"""
Unit tests for the Bar trace builder.
"""
import json

import numpy as np
import pytest

from plotspec import (
    Bar,
    Calendar,
    ConstrainText,
    ErrorData,
    ErrorType,
    Font,
    HoverInfo,
    Marker,
    Orientation,
    TextAnchor,
    TextPosition,
)


@pytest.fixture
def bar():
    """Bar with three points and nothing else set."""
    return Bar([1, 2, 3], [10, 20, 30])


class TestBarSerialization:
    """Tests for Bar output shape."""

    def test_end_to_end_named_bar(self, bar):
        """Test a named bar writes only coordinates, type and name."""
        bar.name("Revenue")

        assert bar.serialize() == (
            '{"x":[1,2,3],"y":[10,20,30],"type":"bar","name":"Revenue"}'
        )
        assert set(json.loads(bar.serialize())) == {"x", "y", "type", "name"}

    def test_untouched_fields_are_absent(self, bar):
        """Test unset attributes are omitted, not written as null."""
        out = json.loads(bar.serialize())

        assert out == {"x": [1, 2, 3], "y": [10, 20, 30], "type": "bar"}
        assert "null" not in bar.serialize()

    def test_false_is_written(self, bar):
        """Test a field set to False is present (only unset fields are dropped)."""
        bar.show_legend(False).visible(False)

        out = json.loads(bar.serialize())

        assert out["showlegend"] is False
        assert out["visible"] is False

    def test_chained_mutators_return_builder(self, bar):
        """Test every mutator returns the same builder."""
        result = bar.name("a").opacity(0.5).width(2).orientation(Orientation.VERTICAL)

        assert result is bar

    def test_mutator_sets_one_field(self, bar):
        """Test a mutator touches exactly one key."""
        before = json.loads(bar.serialize())
        bar.legend_group("group-1")
        after = json.loads(bar.serialize())

        assert set(after) - set(before) == {"legendgroup"}
        assert after["legendgroup"] == "group-1"

    def test_coordinates_are_copied(self):
        """Test later changes to the caller's lists do not leak in."""
        xs, ys = [1, 2], [3, 4]
        bar = Bar(xs, ys)
        xs.append(3)
        ys[0] = 99

        assert bar.get("x") == [1, 2]
        assert bar.get("y") == [3, 4]


class TestBarDimensionalAttributes:
    """Tests for scalar-vs-array attribute pairs."""

    def test_text_scalar(self, bar):
        """Test scalar text is a bare string."""
        assert json.loads(bar.text("hi").serialize())["text"] == "hi"

    def test_text_array_overwrites_scalar(self, bar):
        """Test the later call wins and nothing is merged."""
        bar.text("hi").text_array(["a", "b", "c"])

        assert json.loads(bar.serialize())["text"] == ["a", "b", "c"]

    def test_scalar_overwrites_array(self, bar):
        """Test scalar after array leaves only the scalar."""
        bar.hover_template_array(["%{x}", "%{y}", "%{x}"]).hover_template("%{y}")

        assert json.loads(bar.serialize())["hovertemplate"] == "%{y}"

    def test_offset_variants(self, bar):
        """Test offset accepts one value or one per bar."""
        assert json.loads(bar.offset(1).serialize())["offset"] == 1
        assert json.loads(bar.offset_array([0, 1, 2]).serialize())["offset"] == [0, 1, 2]

    def test_text_position_array(self, bar):
        """Test per-point enum arrays are written as engine strings."""
        bar.text_position_array(
            [TextPosition.INSIDE, TextPosition.OUTSIDE, TextPosition.AUTO]
        )

        assert json.loads(bar.serialize())["textposition"] == ["inside", "outside", "auto"]

    def test_array_length_is_not_validated(self, bar):
        """Test mismatched lengths are accepted and written as given."""
        bar.text_array(["only one"])

        assert json.loads(bar.serialize())["text"] == ["only one"]


class TestBarSchema:
    """Schema conformance: Python field names to engine keys."""

    EXPECTED = {
        "show_legend": "showlegend",
        "legend_group": "legendgroup",
        "text_position": "textposition",
        "text_template": "texttemplate",
        "hover_text": "hovertext",
        "hover_info": "hoverinfo",
        "hover_template": "hovertemplate",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
        "alignment_group": "alignmentgroup",
        "offset_group": "offsetgroup",
        "text_angle": "textangle",
        "text_font": "textfont",
        "error_x": "error_x",
        "error_y": "error_y",
        "clip_on_axis": "cliponaxis",
        "constrain_text": "constraintext",
        "hover_label": "hoverlabel",
        "inside_text_anchor": "insidetextanchor",
        "inside_text_font": "insidetextfont",
        "outside_text_font": "outsidetextfont",
        "x_calendar": "xcalendar",
        "y_calendar": "ycalendar",
    }

    def test_wire_names(self):
        """Test every renamed field maps to its engine key."""
        names = Bar.wire_names()

        for field, key in self.EXPECTED.items():
            assert names[field] == key

    def test_output_order_starts_with_coordinates(self):
        """Test coordinates and discriminant come first."""
        assert list(Bar.wire_names().values())[:3] == ["x", "y", "type"]

    def test_every_mutator_uses_its_wire_key(self, bar):
        """Test each mutator writes under its documented key."""
        font = Font(size=12.0)
        calls = {
            "ids": lambda b: b.ids(["a", "b", "c"]),
            "width": lambda b: b.width(3),
            "texttemplate": lambda b: b.text_template("%{y}"),
            "hovertext": lambda b: b.hover_text("h"),
            "hoverinfo": lambda b: b.hover_info(HoverInfo.X_AND_Y),
            "xaxis": lambda b: b.x_axis("x2"),
            "yaxis": lambda b: b.y_axis("y2"),
            "alignmentgroup": lambda b: b.alignment_group("g"),
            "offsetgroup": lambda b: b.offset_group("o"),
            "marker": lambda b: b.marker(Marker(opacity=0.5)),
            "textangle": lambda b: b.text_angle(45.0),
            "textfont": lambda b: b.text_font(font),
            "error_x": lambda b: b.error_x(ErrorData(type=ErrorType.PERCENT, value=5.0)),
            "error_y": lambda b: b.error_y(ErrorData(type=ErrorType.CONSTANT, value=1.0)),
            "cliponaxis": lambda b: b.clip_on_axis(True),
            "constraintext": lambda b: b.constrain_text(ConstrainText.BOTH),
            "insidetextanchor": lambda b: b.inside_text_anchor(TextAnchor.MIDDLE),
            "insidetextfont": lambda b: b.inside_text_font(font),
            "outsidetextfont": lambda b: b.outside_text_font(font),
            "xcalendar": lambda b: b.x_calendar(Calendar.GREGORIAN),
            "ycalendar": lambda b: b.y_calendar(Calendar.JULIAN),
        }

        for key, call in calls.items():
            fresh = Bar([1, 2, 3], [10, 20, 30])
            out = json.loads(call(fresh).serialize())

            assert set(out) == {"x", "y", "type", key}, key

    def test_enum_values(self, bar):
        """Test enum attributes write their engine strings."""
        bar.hover_info(HoverInfo.X_AND_Y).orientation(Orientation.HORIZONTAL)

        out = json.loads(bar.serialize())

        assert out["hoverinfo"] == "x+y"
        assert out["orientation"] == "h"


class TestBarNumpyInput:
    """Tests for numpy scalars passed inside plain Python containers."""

    def test_list_of_numpy_scalars(self):
        """Test list(ndarray) items are written as plain numbers."""
        bar = Bar(["a", "b", "c"], list(np.array([10, 20, 30])))

        assert bar.serialize() == '{"x":["a","b","c"],"y":[10,20,30],"type":"bar"}'
        assert type(bar.get("y")[0]) is int

    def test_numpy_scalar_offset(self):
        """Test a numpy scalar passed to a per-point attribute setter."""
        bar = Bar([1, 2], [3, 4]).offset(np.int64(2))

        assert json.loads(bar.serialize())["offset"] == 2

    def test_numpy_scalar_offset_array(self):
        """Test numpy scalars inside a per-point list."""
        bar = Bar([1, 2], [3, 4]).offset_array([np.int64(0), np.int32(1)])

        assert '"offset":[0,1]' in bar.serialize()
