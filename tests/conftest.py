from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from vlist.api.sizing import SizeIndexConfig
from vlist.runtime.config import VlistConfig, load_config
from vlist.runtime.size_index import RuntimeSizeIndex


class RecordingSizeSource:
    """Size source that records every index it is asked about."""

    def __init__(self, sizes: Sequence[object] | float) -> None:
        self.sizes = sizes
        self.calls: list[int] = []

    def __call__(self, index: int) -> object:
        self.calls.append(index)
        if isinstance(self.sizes, (int, float)):
            return float(self.sizes)
        return self.sizes[index]


@pytest.fixture
def recording_source() -> Callable[[Sequence[object] | float], RecordingSizeSource]:
    return RecordingSizeSource


@pytest.fixture
def make_index() -> Callable[..., RuntimeSizeIndex]:
    def _make(
        source: Callable[[int], object],
        *,
        item_count: int,
        estimated_item_size: float = 50.0,
    ) -> RuntimeSizeIndex:
        return RuntimeSizeIndex(
            SizeIndexConfig(
                item_count=item_count,
                item_size_getter=source,  # type: ignore[arg-type]
                estimated_item_size=estimated_item_size,
            ),
            trace=False,
        )

    return _make


@pytest.fixture
def default_config() -> VlistConfig:
    return load_config(env={})
