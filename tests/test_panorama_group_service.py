"""Tests for panorama group membership and canvas presets"""

import pytest

from canvas_compositor.core import (
    BackgroundType,
    GradientDirection,
    ImageSpec,
    PanoramaGroup,
    background_from_dict,
)
from canvas_compositor.services import (
    LANDSCAPE,
    PanoramaGroupService,
    create_default_group,
    get_canvas_dimensions,
    get_recommended_image_dimensions,
    insert_canvas_id_in_order,
    remove_canvas,
    reorder_canvas_ids,
    toggle_canvas,
)

SCREEN_ORDER = ["s1", "s2", "s3", "s4"]


def test_default_group_uses_horizontal_gradient():
    group = create_default_group(["s1"])

    assert group.canvas_ids == ("s1",)
    assert group.background.type is BackgroundType.GRADIENT
    assert group.background.direction is GradientDirection.HORIZONTAL
    assert [(s.color, s.position_pct) for s in group.background.stops] == [
        ("#667eea", 0.0), ("#764ba2", 100.0)
    ]


def test_insert_in_screen_order():
    assert insert_canvas_id_in_order(("s1", "s4"), "s3", SCREEN_ORDER) == ("s1", "s3", "s4")
    assert insert_canvas_id_in_order(("s2", "s3"), "s1", SCREEN_ORDER) == ("s1", "s2", "s3")
    assert insert_canvas_id_in_order(("s1",), "s4", SCREEN_ORDER) == ("s1", "s4")


def test_insert_unknown_screen_is_ignored():
    assert insert_canvas_id_in_order(("s1",), "ghost", SCREEN_ORDER) == ("s1",)


def test_reorder_follows_screen_order_and_drops_missing():
    group = create_default_group(["s1", "gone", "s3", "s2"])
    assert reorder_canvas_ids(group, ["s3", "s1", "s2"]) == ("s3", "s1", "s2")


def test_toggle_creates_adds_and_removes():
    group = toggle_canvas(None, "s2", SCREEN_ORDER)
    assert group.canvas_ids == ("s2",)

    group = toggle_canvas(group, "s1", SCREEN_ORDER)
    assert group.canvas_ids == ("s1", "s2")

    group = toggle_canvas(group, "s2", SCREEN_ORDER)
    assert group.canvas_ids == ("s1",)


def test_remove_canvas_keeps_background():
    group = create_default_group(["s1", "s2"])
    updated = remove_canvas(group, "s1")

    assert updated.canvas_ids == ("s2",)
    assert updated.background == group.background
    assert group.canvas_ids == ("s1", "s2")


@pytest.mark.parametrize("size, orientation, expected", [
    ("iphone-6.9", "portrait", (1320, 2868)),
    ("iphone-6.9", LANDSCAPE, (2868, 1320)),
    ("google-tablet-10", "portrait", (1920, 1200)),
    ("unknown-device", "portrait", (1290, 2796)),
])
def test_canvas_dimensions(size, orientation, expected):
    assert get_canvas_dimensions(size, orientation) == expected


def test_recommended_image_dimensions():
    assert get_recommended_image_dimensions(3, "iphone-6.9") == {
        'width': 3960,
        'height': 2868,
        'aspect_ratio': '1.38:1',
    }


def test_group_dict_round_trip():
    group = PanoramaGroup(
        canvas_ids=("s1", "s2"),
        background=ImageSpec(source_width=4000, source_height=1500),
    )
    assert PanoramaGroup.from_dict(group.to_dict()) == group
    assert PanoramaGroup.from_dict(create_default_group(["s1"]).to_dict()) == create_default_group(["s1"])


def test_background_from_dict_rejects_unknown_values():
    with pytest.raises(ValueError):
        background_from_dict({'type': 'video'})
    with pytest.raises(ValueError):
        background_from_dict({'type': 'image', 'fit': 'stretch'})


def test_image_spec_without_dimensions_from_dict():
    spec = background_from_dict({'type': 'image', 'fit': 'fit', 'horizontal_align': 'left'})
    assert not spec.has_dimensions
    assert spec.fit.value == 'fit'


class TestPanoramaGroupService:
    """Group bookkeeping per canvas-size preset"""

    def test_toggle_then_sync_order(self):
        service = PanoramaGroupService()
        service.toggle_canvas("iphone-6.9", "s1", SCREEN_ORDER)
        service.toggle_canvas("iphone-6.9", "s3", SCREEN_ORDER)

        group = service.sync_order("iphone-6.9", ["s3", "s2", "s1"])
        assert group.canvas_ids == ("s3", "s1")
        assert service.get_group("iphone-6.9") == group

    def test_groups_are_per_preset(self):
        service = PanoramaGroupService()
        service.toggle_canvas("iphone-6.9", "s1", SCREEN_ORDER)

        assert service.get_group("ipad-13") is None
        assert service.canvas_sizes() == ["iphone-6.9"]

    def test_remove_canvas_and_clear(self):
        service = PanoramaGroupService()
        service.set_group("ipad-13", create_default_group(["s1", "s2"]))

        assert service.remove_canvas("ipad-13", "s1").canvas_ids == ("s2",)
        assert service.remove_canvas("ipad-13", "missing").canvas_ids == ("s2",)

        service.clear("ipad-13")
        assert service.get_group("ipad-13") is None
        assert service.remove_canvas("ipad-13", "s2") is None

    def test_set_background_requires_group(self):
        service = PanoramaGroupService()
        assert service.set_background("ipad-13", ImageSpec()) is None

        service.set_group("ipad-13", create_default_group(["s1"]))
        group = service.set_background("ipad-13", ImageSpec(source_width=10, source_height=5))
        assert group.background.type is BackgroundType.IMAGE

    def test_emits_group_changes(self, event_bus, record_signal):
        changed = record_signal(event_bus.panorama_group_changed)
        service = PanoramaGroupService(event_bus=event_bus)

        service.toggle_canvas("iphone-6.9", "s1", SCREEN_ORDER)
        service.clear("iphone-6.9")
        service.clear("iphone-6.9")

        assert changed.calls == [("iphone-6.9",), ("iphone-6.9",)]
