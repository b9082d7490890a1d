"""Update commands accepted by the layout editor.

Each command is an explicit, typed change to one entity. Field values are
range-checked when the command is built, using the same limits as the
document schema, so an impossible command (a 10 mm wide bed, a door that
opens 500 degrees) raises ``ValueError`` before it reaches the editor.

``apply`` returns the updated entity; the editor still decides whether
the result is acceptable in context (snapping, room constraints,
collisions, wall rules). Fields left as None are not changed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar, Union

from roomlayout.application.config.schemas.base import (
    HEX_COLOR_PATTERN,
    MAX_DOOR_OPEN_ANGLE,
    MIN_DOOR_THICKNESS,
    MIN_FURNITURE_SIZE,
    MIN_WINDOW_SIZE,
)
from roomlayout.domain.entities import Door, PlacedItem, Window
from roomlayout.domain.value_objects import (
    DoorHinge,
    DoorSwing,
    DoorType,
    SlideDirection,
    WallSide,
)

E = TypeVar("E", PlacedItem, Door, Window)


def _changes(command: Any) -> dict[str, Any]:
    return {
        f.name: getattr(command, f.name)
        for f in fields(command)
        if getattr(command, f.name) is not None
    }


def _require_min(name: str, value: float | None, minimum: float) -> None:
    if value is not None and value < minimum:
        raise ValueError(f"{name} must be at least {minimum:g} mm, got {value:g}")


def _require_color(value: str | None) -> None:
    if value is not None and not re.match(HEX_COLOR_PATTERN, value):
        raise ValueError(f"color must be a hex colour like #a0b1c2, got {value!r}")


class _Command:
    """Shared ``apply``: copy every non-None field onto the target."""

    #: True for commands that change the footprint or position of an item.
    geometric = False

    def apply(self, target: E) -> E:
        return replace(target, **_changes(self))


# --- Furniture commands ---


@dataclass(frozen=True)
class MoveItem(_Command):
    """Move an item's anchor (snapped to the grid when snapping is on)."""

    x: float
    y: float

    geometric = True


@dataclass(frozen=True)
class RotateItem(_Command):
    """Set an item's rotation in degrees."""

    rotation: float

    geometric = True


@dataclass(frozen=True)
class ResizeItem(_Command):
    """Change any of an item's dimensions."""

    width: float | None = None
    depth: float | None = None
    height: float | None = None

    geometric = True

    def __post_init__(self) -> None:
        _require_min("width", self.width, MIN_FURNITURE_SIZE)
        _require_min("depth", self.depth, MIN_FURNITURE_SIZE)
        _require_min("height", self.height, MIN_FURNITURE_SIZE)


@dataclass(frozen=True)
class SetItemLocked(_Command):
    locked: bool


@dataclass(frozen=True)
class RenameItem(_Command):
    name: str


@dataclass(frozen=True)
class RecolorItem(_Command):
    color: str

    def __post_init__(self) -> None:
        _require_color(self.color)


# --- Opening commands ---


@dataclass(frozen=True)
class MoveOpening(_Command):
    """Move a door or window along its wall, optionally to another wall."""

    offset: float
    wall: WallSide | None = None

    geometric = True

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset:g}")


@dataclass(frozen=True)
class ResizeOpening(_Command):
    """Change an opening's size.

    Only the window minimum is known here; the editor applies the larger
    door minimums once it knows the target is a door.
    """

    width: float | None = None
    height: float | None = None

    geometric = True

    def __post_init__(self) -> None:
        _require_min("width", self.width, MIN_WINDOW_SIZE)
        _require_min("height", self.height, MIN_WINDOW_SIZE)


@dataclass(frozen=True)
class ConfigureDoor(_Command):
    """Change a door's mechanism or leaf settings."""

    door_type: DoorType | None = None
    hinge: DoorHinge | None = None
    swing: DoorSwing | None = None
    open_angle: float | None = None
    slide_direction: SlideDirection | None = None
    thickness: float | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        if self.open_angle is not None and not 0 <= self.open_angle <= MAX_DOOR_OPEN_ANGLE:
            raise ValueError(
                f"open_angle must be between 0 and {MAX_DOOR_OPEN_ANGLE:g} degrees, "
                f"got {self.open_angle:g}"
            )
        _require_min("thickness", self.thickness, MIN_DOOR_THICKNESS)
        _require_color(self.color)


@dataclass(frozen=True)
class ConfigureWindow(_Command):
    sill_height: float

    def __post_init__(self) -> None:
        if self.sill_height < 0:
            raise ValueError(f"sill_height must not be negative, got {self.sill_height:g}")


ItemCommand = Union[MoveItem, RotateItem, ResizeItem, SetItemLocked, RenameItem, RecolorItem]
DoorCommand = Union[MoveOpening, ResizeOpening, ConfigureDoor]
WindowCommand = Union[MoveOpening, ResizeOpening, ConfigureWindow]

ITEM_COMMANDS: tuple[type, ...] = (
    MoveItem,
    RotateItem,
    ResizeItem,
    SetItemLocked,
    RenameItem,
    RecolorItem,
)
DOOR_COMMANDS: tuple[type, ...] = (MoveOpening, ResizeOpening, ConfigureDoor)
WINDOW_COMMANDS: tuple[type, ...] = (MoveOpening, ResizeOpening, ConfigureWindow)
