from __future__ import annotations

import numpy as np
import pytest

from vlist.api.errors import InvalidSizeError
from vlist.api.sizing import SizeIndexConfig
from vlist.runtime.item_size import item_size_getter, resolve_estimated_item_size
from vlist.runtime.size_index import RuntimeSizeIndex


def test_constant_size_source() -> None:
    getter = item_size_getter(35)
    assert [getter(i) for i in (0, 7, 1000)] == [35.0, 35.0, 35.0]


def test_sequence_size_source_returns_none_past_end() -> None:
    getter = item_size_getter([10, 20, 30])
    assert getter(0) == 10.0
    assert getter(2) == 30.0
    assert getter(3) is None
    assert getter(-1) is None


def test_sequence_is_snapshotted() -> None:
    sizes = [10.0, 20.0]
    getter = item_size_getter(sizes)
    sizes[0] = 99.0
    assert getter(0) == 10.0


def test_numpy_array_size_source() -> None:
    getter = item_size_getter(np.array([4, 8, 15], dtype=np.int32))
    assert getter(1) == 8.0
    assert isinstance(getter(1), float)


def test_callable_size_source_is_called_per_index() -> None:
    seen: list[int] = []

    def _size(index: int) -> float:
        seen.append(index)
        return index * 2.0

    getter = item_size_getter(_size)
    assert getter(4) == 8.0
    assert seen == [4]


def test_multidimensional_array_rejected() -> None:
    with pytest.raises(ValueError):
        item_size_getter(np.ones((2, 2)))


def test_string_source_rejected() -> None:
    with pytest.raises(TypeError):
        item_size_getter("50")  # type: ignore[arg-type]


def test_short_sequence_surfaces_as_invalid_size() -> None:
    index = RuntimeSizeIndex(
        SizeIndexConfig(
            item_count=4,
            item_size_getter=item_size_getter([10.0, 10.0]),
            estimated_item_size=10.0,
        ),
        trace=False,
    )
    with pytest.raises(InvalidSizeError) as info:
        index.get_size_and_position(3)
    assert info.value.index == 2
    assert index.last_measured_index == 1


def test_sequence_with_missing_entry_surfaces_as_invalid_size() -> None:
    index = RuntimeSizeIndex(
        SizeIndexConfig(
            item_count=3,
            item_size_getter=item_size_getter([10.0, None, 10.0]),  # type: ignore[list-item]
            estimated_item_size=10.0,
        ),
        trace=False,
    )
    with pytest.raises(InvalidSizeError):
        index.get_size_and_position(2)


def test_estimated_size_prefers_explicit_value() -> None:
    assert resolve_estimated_item_size(30, 80, default=50) == 80.0


def test_estimated_size_falls_back_to_constant_item_size() -> None:
    assert resolve_estimated_item_size(30, None, default=50) == 30.0


def test_estimated_size_falls_back_to_default_for_variable_sources() -> None:
    assert resolve_estimated_item_size([10, 20], None, default=42) == 42.0
    assert resolve_estimated_item_size(lambda _: 10.0, 0, default=42) == 42.0


def test_estimated_size_uses_configured_default() -> None:
    from vlist.runtime import config as config_module

    config_module.set_config(config_module.load_config(env={"VLIST_ESTIMATED_ITEM_SIZE": "64"}))
    try:
        assert resolve_estimated_item_size([1, 2]) == 64.0
    finally:
        config_module.set_config(config_module.load_config(env={}))
