import math

import pytest
from pydantic import ValidationError

from src.services.meme.inset import (
    InsetTemplateError,
    InvalidArgumentShapeError,
    InvalidTemplateError,
    LayoutRecord,
    as_pair,
    list_templates,
    resolve_position,
)
from tests.test_template import TestTemplate

CORNERS = ["tl", "tr", "br", "bl"]
QUADRANTS = ["tlq", "trq", "brq", "blq"]


class TestAsPair(TestTemplate):
    def test_scalar_is_broadcast(self):
        assert as_pair(0.3, "size") == (0.3, 0.3)

    def test_int_becomes_float(self):
        pair = as_pair(1, "size")
        assert pair == (1.0, 1.0)
        assert all(isinstance(v, float) for v in pair)

    def test_single_item_sequence_is_broadcast(self):
        assert as_pair([0.1], "margin") == (0.1, 0.1)

    def test_pair_is_kept(self):
        assert as_pair((0.4, 0.2), "size") == (0.4, 0.2)

    @pytest.mark.parametrize(
        "value",
        [[], [0.1, 0.2, 0.3], "0.2", object(), [None, 0.2], ["a", "b"], [True], True],
    )
    def test_invalid_shapes_raise(self, value):
        with pytest.raises(InvalidArgumentShapeError) as exc_info:
            as_pair(value, "margin")

        assert exc_info.value.argument == "margin"


class TestResolvePosition(TestTemplate):
    def test_default_template_is_fixed(self):
        expected = LayoutRecord(w=0.95, h=0.6, x=0.5, y=0.325)

        assert resolve_position() == expected
        assert resolve_position("default", size=0.7, margin=(0.1, 0.3)) == expected

    @pytest.mark.parametrize("name", list_templates("position"))
    def test_default_parameters_stay_inside_canvas(self, name):
        record = resolve_position(name)

        for value in (record.w, record.h, record.x, record.y):
            assert math.isfinite(value)
            assert 0 < value < 1
        assert record.is_within_canvas()

    def test_corner_centers(self):
        # lower = 0.2 / 2 + 0.025, upper = 1 - lower
        lower, upper = 0.125, 0.875

        assert resolve_position("tl") == LayoutRecord(w=0.2, h=0.2, x=lower, y=upper)
        assert resolve_position("tr") == LayoutRecord(w=0.2, h=0.2, x=upper, y=upper)
        assert resolve_position("br") == LayoutRecord(w=0.2, h=0.2, x=upper, y=lower)
        assert resolve_position("bl") == LayoutRecord(w=0.2, h=0.2, x=lower, y=lower)

    @pytest.mark.parametrize("s, m", [(0.2, 0.025), (0.4, 0.0), (0.1, 0.1), (0.33, 0.07)])
    def test_tl_and_br_are_point_reflections(self, s, m):
        tl = resolve_position("tl", size=(s, s), margin=(m, m))
        br = resolve_position("br", size=(s, s), margin=(m, m))

        assert tl.x == pytest.approx(1 - br.x)
        assert tl.y == pytest.approx(1 - br.y)

    def test_tr_and_bl_are_point_reflections(self):
        tr = resolve_position("tr", size=0.3, margin=0.05)
        bl = resolve_position("bl", size=0.3, margin=0.05)

        assert tr.x == pytest.approx(1 - bl.x)
        assert tr.y == pytest.approx(1 - bl.y)

    def test_rectangular_size_and_margins(self):
        record = resolve_position("br", size=(0.4, 0.2), margin=(0.05, 0.1))

        assert record.w == 0.4
        assert record.h == 0.2
        assert record.x == pytest.approx(1 - (0.2 + 0.05))
        assert record.y == pytest.approx(0.1 + 0.1)

    def test_corner_with_zero_margin_touches_edges(self):
        left, bottom, width, height = resolve_position("br", size=0.4, margin=0).to_bounds()

        assert left + width == pytest.approx(1.0)
        assert bottom == pytest.approx(0.0)

    @pytest.mark.parametrize("name", QUADRANTS)
    @pytest.mark.parametrize("m", [0.0, 0.025, 0.05, 0.1])
    def test_quadrant_size_depends_on_margin_only(self, name, m):
        record = resolve_position(name, size=0.9, margin=m)

        assert record.w == 0.5 - 2 * m
        assert record.h == 0.5 - 2 * m

    def test_quadrants_match_corner_geometry(self):
        m = 0.05
        qsize = 0.5 - 2 * m

        for quadrant, corner in zip(QUADRANTS, CORNERS):
            assert resolve_position(quadrant, margin=m) == resolve_position(
                corner, size=qsize, margin=m
            )

    def test_quadrants_with_zero_margin_tile_the_canvas(self):
        centers = {(r.x, r.y) for r in (resolve_position(q, margin=0) for q in QUADRANTS)}

        assert centers == {(0.25, 0.75), (0.75, 0.75), (0.75, 0.25), (0.25, 0.25)}

    def test_center_ignores_margin(self):
        narrow = resolve_position("center", size=0.3, margin=0.025)
        wide = resolve_position("center", size=0.3, margin=0.5)

        assert narrow == wide
        assert (narrow.x, narrow.y) == (0.5, 0.5)
        assert (narrow.w, narrow.h) == (0.3, 0.3)

    @pytest.mark.parametrize("name", CORNERS + ["center"])
    def test_scalar_size_is_broadcast(self, name):
        assert resolve_position(name, size=0.4) == resolve_position(name, size=(0.4, 0.4))

    def test_scalar_margin_is_broadcast(self):
        assert resolve_position("tlq", margin=0.05) == resolve_position(
            "tlq", margin=[0.05, 0.05]
        )

    def test_inputs_are_not_mutated(self):
        size = [0.3, 0.2]
        margin = [0.01, 0.02]

        resolve_position("tr", size=size, margin=margin)

        assert size == [0.3, 0.2]
        assert margin == [0.01, 0.02]

    def test_each_call_returns_a_new_record(self):
        first = resolve_position("default")
        second = resolve_position("default")

        assert first == second
        assert first is not second

    def test_oversized_inputs_pass_through_unclamped(self):
        record = resolve_position("tr", size=1.5, margin=0.1)

        assert record.w == 1.5
        assert record.x == pytest.approx(1 - (0.75 + 0.1))
        assert not record.is_within_canvas()

    @pytest.mark.parametrize("name", ["nope", "TL", "", "op"])
    def test_unknown_template_raises(self, name):
        with pytest.raises(InvalidTemplateError):
            resolve_position(name)

    def test_invalid_size_shape_raises(self):
        with pytest.raises(InvalidArgumentShapeError):
            resolve_position("tl", size=[0.1, 0.2, 0.3])

    def test_invalid_margin_shape_raises(self):
        with pytest.raises(InvalidArgumentShapeError):
            resolve_position("tl", margin=[])

    def test_non_numeric_items_raise_package_error(self):
        with pytest.raises(InsetTemplateError):
            resolve_position("tl", size=[None, 0.2])
        with pytest.raises(InsetTemplateError):
            resolve_position("tl", margin=["a", "b"])

    def test_bool_size_is_rejected(self):
        with pytest.raises(InvalidArgumentShapeError):
            resolve_position("tl", size=True)

    def test_records_are_immutable(self):
        record = resolve_position("tl")

        with pytest.raises(ValidationError):
            record.x = 0.9


class TestLayoutRecordBounds(TestTemplate):
    def test_to_bounds_of_default(self):
        left, bottom, width, height = resolve_position().to_bounds()

        assert left == pytest.approx(0.025)
        assert bottom == pytest.approx(0.025)
        assert width == 0.95
        assert height == 0.6
