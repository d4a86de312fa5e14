"""Tests for the overflow resolver

Canvases are 400x800 with a 40 unit gutter: a [0, 400], b [440, 840],
c [880, 1280].
"""

import pytest

from canvas_compositor.core import (
    BoundsRegistry,
    CanvasBounds,
    DraggedElement,
    resolve_overflow,
    resolve_overflow_for_target,
)


def drag(owner="a", x=0.0, y=100.0, width=100.0, height=200.0, dx=0.0, dy=0.0):
    return DraggedElement(
        owner_canvas_id=owner,
        element_id="frame-0",
        original_x=x,
        original_y=y,
        element_width=width,
        element_height=height,
        offset_x=dx,
        offset_y=dy,
    )


def test_rightward_overflow_clips_left_part(row_registry):
    preview = resolve_overflow_for_target(drag(x=300, dx=50, dy=25), row_registry, "b")

    assert preview is not None
    assert preview.visible
    assert preview.overflow_amount == pytest.approx(50)
    assert preview.clip_left_pct == pytest.approx(50)
    assert preview.clip_right_pct == 0
    assert preview.offset_x == pytest.approx(-50)
    assert preview.offset_y == pytest.approx(125)
    assert (preview.source_canvas_id, preview.element_id, preview.target_canvas_id) == ("a", "frame-0", "b")


@pytest.mark.parametrize("right_edge", [401, 420, 450, 499, 500, 560])
def test_clip_left_matches_overflow_formula(row_registry, right_edge):
    width = 100
    preview = resolve_overflow_for_target(drag(x=right_edge - width, width=width), row_registry, "b")

    overflow = right_edge - 400
    expected = max(0.0, min(100.0, (width - overflow) / width * 100))
    assert preview.overflow_amount == pytest.approx(overflow)
    assert preview.clip_left_pct == pytest.approx(expected)


def test_leftward_overflow_lands_on_right_edge_of_target(row_registry):
    preview = resolve_overflow_for_target(drag(owner="b", x=-30, y=40), row_registry, "a")

    assert preview.overflow_amount == pytest.approx(30)
    assert preview.clip_right_pct == pytest.approx(70)
    assert preview.clip_left_pct == 0
    assert preview.offset_x == pytest.approx(400 - 30)
    assert preview.offset_y == pytest.approx(40)


def test_overflow_only_toward_exit_side(row_registry):
    result = resolve_overflow(drag(owner="b", x=-30), row_registry)

    assert result["a"] is not None
    assert result["c"] is None


def test_owner_is_not_a_target(row_registry):
    result = resolve_overflow(drag(x=350), row_registry)
    assert set(result) == {"b", "c"}
    assert resolve_overflow_for_target(drag(x=350), row_registry, "a") is None


def test_every_canvas_past_the_exit_edge_qualifies(row_registry):
    result = resolve_overflow(drag(x=350), row_registry)
    assert result["b"] == resolve_overflow_for_target(drag(x=350), row_registry, "b")
    assert result["c"] is not None
    assert result["c"].offset_x == result["b"].offset_x


def test_element_inside_owner_has_no_overflow(row_registry):
    result = resolve_overflow(drag(x=150), row_registry)
    assert all(preview is None for preview in result.values())


def test_touching_the_edge_is_not_overflow(row_registry):
    assert resolve_overflow_for_target(drag(x=300), row_registry, "b") is None
    assert resolve_overflow_for_target(drag(owner="b", x=0), row_registry, "a") is None


def test_dragging_back_clears_overflow(row_registry):
    element = drag(x=300, dx=80)
    assert resolve_overflow_for_target(element, row_registry, "b") is not None

    element.offset_x = 0
    assert all(preview is None for preview in resolve_overflow(element, row_registry).values())


def test_fully_crossed_element_clamps_clip(row_registry):
    preview = resolve_overflow_for_target(drag(x=450), row_registry, "b")

    assert preview.overflow_amount == pytest.approx(150)
    assert preview.clip_left_pct == 0
    assert preview.offset_x == pytest.approx(50)


def test_unknown_bounds_resolve_to_none(row_registry):
    assert resolve_overflow_for_target(drag(x=350), row_registry, "zzz") is None

    orphan = drag(owner="zzz", x=350)
    assert all(preview is None for preview in resolve_overflow(orphan, row_registry).values())


def test_ambiguous_adjacency_is_rejected(row_registry):
    # With a huge tolerance the target is both "left" and "right" of the owner
    assert resolve_overflow_for_target(drag(x=350), row_registry, "b", tolerance=10_000) is None


def test_gutter_wider_than_tolerance_still_counts_as_right():
    # The rule only compares edges, so a distant canvas to the right still qualifies
    far = BoundsRegistry()
    far.register("a", CanvasBounds.from_rect("a", 0, 0, 400, 800))
    far.register("b", CanvasBounds.from_rect("b", 5000, 0, 400, 800))
    assert resolve_overflow_for_target(drag(x=350), far, "b", tolerance=100) is not None


def test_overlapping_canvas_is_not_adjacent():
    registry = BoundsRegistry()
    registry.register("a", CanvasBounds.from_rect("a", 0, 0, 400, 800))
    registry.register("b", CanvasBounds.from_rect("b", 200, 0, 400, 800))
    assert resolve_overflow_for_target(drag(x=350), registry, "b", tolerance=100) is None


def test_zero_width_element_never_overflows(row_registry):
    assert resolve_overflow_for_target(drag(x=450, width=0), row_registry, "b") is None


def test_resolver_is_pure(row_registry):
    element = drag(x=320, dx=45, dy=-10)
    before = (element.offset_x, element.offset_y)

    first = resolve_overflow(element, row_registry)
    second = resolve_overflow(element, row_registry)

    assert first == second
    assert (element.offset_x, element.offset_y) == before
    assert len(row_registry) == 3
