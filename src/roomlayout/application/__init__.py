"""Application layer - editor loop, catalog and document handling."""

from .commands import (
    ConfigureDoor,
    ConfigureWindow,
    MoveItem,
    MoveOpening,
    RecolorItem,
    RenameItem,
    ResizeItem,
    ResizeOpening,
    RotateItem,
    SetItemLocked,
)
from .editor import EditorState, LayoutEditor

__all__ = [
    "ConfigureDoor",
    "ConfigureWindow",
    "EditorState",
    "LayoutEditor",
    "MoveItem",
    "MoveOpening",
    "RecolorItem",
    "RenameItem",
    "ResizeItem",
    "ResizeOpening",
    "RotateItem",
    "SetItemLocked",
]
