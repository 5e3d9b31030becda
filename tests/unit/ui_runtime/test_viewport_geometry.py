import pytest

from vlist.api.sizing import SizeAndPosition
from vlist.ui_runtime.geometry import Rect, item_rect


def test_rect_contains_edges() -> None:
    rect = Rect(10, 20, 30, 40)
    assert rect.contains(10, 20)
    assert rect.contains(40, 60)
    assert not rect.contains(41, 60)


def test_item_rect_vertical_uses_offset_as_y() -> None:
    rect = item_rect(SizeAndPosition(offset=120.0, size=35.0), cross_size=200.0)
    assert rect == Rect(x=0.0, y=120.0, w=200.0, h=35.0)


def test_item_rect_horizontal_uses_offset_as_x() -> None:
    rect = item_rect(
        SizeAndPosition(offset=120.0, size=35.0), direction="horizontal", cross_size=64.0
    )
    assert rect == Rect(x=120.0, y=0.0, w=35.0, h=64.0)


def test_item_rect_accepts_direction_aliases() -> None:
    sap = SizeAndPosition(offset=10.0, size=5.0)
    assert item_rect(sap, direction="X", cross_size=4.0) == Rect(x=10.0, y=0.0, w=5.0, h=4.0)
    assert item_rect(sap, direction=None, cross_size=4.0) == Rect(x=0.0, y=10.0, w=4.0, h=5.0)


def test_item_rect_rejects_unknown_direction() -> None:
    with pytest.raises(ValueError):
        item_rect(SizeAndPosition(offset=0.0, size=1.0), direction="diagonal")
