from __future__ import annotations

import random

from vlist.api.list_viewport import create_list_viewport
from vlist.runtime.config import load_config


def _reference_window(
    sizes: list[float], offset: float, container: float, overscan: int
) -> tuple[int, int]:
    starts = [sum(sizes[:i]) for i in range(len(sizes))]
    start = max(i for i, s in enumerate(starts) if s <= max(0.0, offset))
    stop = start
    end = starts[start] + sizes[start]
    while end < offset + container and stop < len(sizes) - 1:
        stop += 1
        end += sizes[stop]
    return max(0, start - overscan), min(len(sizes) - 1, stop + overscan)


def test_scrolling_variable_sizes_matches_reference_scan() -> None:
    rng = random.Random(1234)
    sizes = [float(rng.randint(10, 90)) for _ in range(400)]
    calls: list[int] = []

    def _size(index: int) -> float:
        calls.append(index)
        return sizes[index]

    viewport = create_list_viewport(
        item_count=len(sizes),
        item_size=_size,
        container_size=300,
        estimated_item_size=40,
        overscan_count=2,
        config=load_config(env={}),
    )

    for offset in (0.0, 37.0, 480.0, 2500.0, 1200.0, 9000.0, 19_000.0):
        viewport.observe_scroll(offset)
        window = viewport.visible_range()
        assert (window.start, window.stop) == _reference_window(sizes, offset, 300, 2)

    assert len(calls) == len(set(calls))


def test_jump_to_index_then_resize_items() -> None:
    sizes = [30.0] * 100
    viewport = create_list_viewport(
        item_count=100,
        item_size=sizes,
        container_size=200,
        overscan_count=0,
        scroll_to_alignment="start",
        config=load_config(env={}),
    )

    assert viewport.scroll_to_index(50) == 1500.0
    assert [item.index for item in viewport.rendered_items()][0] == 50

    viewport.update_items(item_size=[10.0] * 100)

    assert viewport.offset == 500.0
    rendered = viewport.rendered_items()
    assert rendered[0].index == 50
    assert rendered[0].size_and_position.offset == 500.0
    assert viewport.size_index.last_measured_index == 69
    assert viewport.total_size() == 700.0 + 30 * 50.0
