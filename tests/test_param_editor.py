"""Tests for the parameter editor and its numeric fields."""

import pytest

from paramdraw.controller.param_editor import NumericField, ParameterEditor, parse_number
from paramdraw.model.shape_types import CIRCLE, SQUARE


@pytest.fixture
def editor(canvas):
    return ParameterEditor(canvas)


def field_named(editor, label):
    return next(f for f in editor.fields() if f.label == label)


@pytest.mark.parametrize("text, expected", [
    ("1.5", 1.5),
    ("1.", 1.0),
    ("-2", -2.0),
    (" 3 ", 3.0),
    ("abc", None),
    ("", None),
    ("-", None),
    ("nan", None),
    ("inf", None),
    ("1_0", None),
    ("1_000.5", None),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


class TestFields:
    def test_canvas_fields_without_selection(self, editor):
        labels = [f.label for f in editor.fields()]
        assert labels == ["Canvas Width", "Canvas Height"]
        assert editor.binding_key() == ("canvas",)

    def test_shape_fields_follow_schema(self, editor, canvas):
        canvas.add_shape(SQUARE, 1.0, 1.0)
        labels = [f.label for f in editor.fields()]
        assert labels == ["X", "Y", "Width", "Height", "Fillet Radius"]
        assert [f.value for f in editor.fields()] == [1.0, 1.0, 1.0, 1.0, 0.1]
        assert editor.binding_key() == ("shape", 0, "square")


class TestEditing:
    def test_canvas_width_below_minimum_clamps_but_echo_stays(self, editor, canvas):
        width = field_named(editor, "Canvas Width")
        width.focus()
        assert width.display_text == "6"

        assert width.edit("0")
        assert canvas.width == 1.0
        assert width.display_text == "0"

        width.blur()
        assert width.display_text == "1"

    def test_shape_width_may_reach_zero(self, editor, canvas):
        canvas.add_shape(SQUARE, 1.0, 1.0)
        width = field_named(editor, "Width")
        width.edit("0")
        assert canvas.shapes[0].param_values[2] == 0.0

    def test_negative_radius_clamps_to_zero(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        radius = field_named(editor, "Radius")
        radius.focus()
        radius.edit("-3")
        assert canvas.shapes[0].param_values[2] == 0.0
        assert radius.display_text == "-3"
        radius.blur()
        assert radius.display_text == "0"

    def test_unbounded_max(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        radius = field_named(editor, "Radius")
        radius.edit("1000")
        assert canvas.shapes[0].param_values[2] == 1000.0

    def test_partial_text_does_not_commit(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        radius = field_named(editor, "Radius")
        radius.focus()
        before = canvas.shapes
        for text in ("", "-", "abc", "1_0", "nan"):
            assert not radius.edit(text)
        assert canvas.shapes is before
        assert radius.display_text == "nan"

    def test_trailing_dot_commits(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        radius = field_named(editor, "Radius")
        radius.focus()
        assert radius.edit("2.")
        assert canvas.shapes[0].param_values[2] == 2.0
        assert radius.display_text == "2."

    def test_position_bound_reads_live_canvas(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        x = field_named(editor, "X")
        x.edit("10")
        assert canvas.shapes[0].x == 6.0

        canvas.resize_canvas(8.0, 4.0)
        x.edit("10")
        assert canvas.shapes[0].x == 8.0

    def test_canvas_size_edit(self, editor, canvas):
        width = field_named(editor, "Canvas Width")
        width.edit("0.2")
        assert canvas.width == 1.0
        width.edit("7.5")
        assert canvas.width == 7.5
        assert canvas.height == 4.0

    def test_fields_see_later_edits(self, editor, canvas):
        canvas.add_shape(CIRCLE, 1.0, 1.0)
        radius = field_named(editor, "Radius")
        canvas.set_param(0, 2, 0.75)
        assert radius.value == 0.75
        assert radius.display_text == "0.75"


class TestNumericField:
    def test_setter_never_sees_out_of_range(self):
        written = []
        field = NumericField(
            "Value", getter=lambda: 1.0, setter=written.append,
            min_fn=lambda: 0.0, max_fn=lambda: 2.0,
        )
        for text in ("-5", "0.5", "9", "2", "abc"):
            field.edit(text)
        assert written == [0.0, 0.5, 2.0, 2.0]

    def test_step(self):
        store = {"v": 0.5}
        field = NumericField(
            "Value", getter=lambda: store["v"], setter=lambda v: store.update(v=v),
            min_fn=lambda: 0.0, max_fn=lambda: 0.52,
        )
        field.focus()
        field.step(+1)
        assert store["v"] == 0.51
        assert field.display_text == "0.51"
        field.step(+1)
        field.step(+1)
        assert store["v"] == 0.52
        field.step(-1)
        assert store["v"] == 0.51
