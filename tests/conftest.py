"""Pytest configuration and shared fixtures for layout engine tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from roomlayout.domain.entities import PlacedItem, RoomSpec
from roomlayout.domain.value_objects import FurnitureType

LAYOUT_FIXTURES = Path(__file__).parent / "fixtures" / "layouts"


def make_item(
    item_id: str,
    x: float,
    y: float,
    width: float,
    depth: float,
    height: float = 700.0,
    rotation: float = 0.0,
    type: FurnitureType = FurnitureType.BED,
    **kwargs: Any,
) -> PlacedItem:
    """Build a PlacedItem with test-friendly defaults."""
    return PlacedItem(
        id=item_id,
        type=type,
        x=x,
        y=y,
        width=width,
        depth=depth,
        height=height,
        rotation=rotation,
        **kwargs,
    )


@pytest.fixture
def item() -> Callable[..., PlacedItem]:
    """Factory fixture for PlacedItem (see ``make_item``)."""
    return make_item


@pytest.fixture
def room() -> RoomSpec:
    """A 4000 x 3000 mm room with a 100 mm snapping grid."""
    return RoomSpec(width=4000, height=3000, grid_size=100, snap_enabled=True)


@pytest.fixture
def layouts_path() -> Path:
    """Directory holding the JSON layout fixtures."""
    return LAYOUT_FIXTURES


@pytest.fixture
def load_fixture() -> Callable[[str], dict[str, Any]]:
    """Load a JSON layout fixture by file name."""

    def _load(name: str) -> dict[str, Any]:
        return json.loads((LAYOUT_FIXTURES / name).read_text(encoding="utf-8"))

    return _load
