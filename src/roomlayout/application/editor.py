"""Layout editor: apply one command, get one new state.

``LayoutEditor`` owns an explicit ``EditorState`` value and replaces it on
every command. A rejected command leaves the layout and history untouched
and records the reason in ``EditorState.errors``; an accepted command
clears them.

History policy: adding, removing, attaching and detaching push a snapshot
before the change. Updates (moves, rotations, resizes, room changes) are
provisional, like the intermediate positions of a drag; the caller pushes
a snapshot with ``commit_history`` at the start of the gesture.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError

from roomlayout.application.catalog import (
    DEFAULT_FURNITURE_COLOR,
    DEFAULT_HISTORY_MAX,
    DEFAULT_ROOM,
    FURNITURE_CATALOG,
    default_door,
    default_window,
    find_preset,
)
from roomlayout.application.commands import (
    DOOR_COMMANDS,
    ITEM_COMMANDS,
    WINDOW_COMMANDS,
    DoorCommand,
    ItemCommand,
    MoveItem,
    WindowCommand,
)
from roomlayout.application.config.adapter import (
    document_to_snapshot,
    door_to_config,
    item_to_config,
    room_to_config,
    snapshot_to_document,
    utc_now_iso,
    window_to_config,
)
from roomlayout.application.config.loader import extract_validation_errors
from roomlayout.application.config.schemas import LayoutDocument
from roomlayout.domain.entities import (
    Door,
    LayoutSnapshot,
    PlacedItem,
    RoomSpec,
    Window,
)
from roomlayout.domain.services import attachment, geometry, openings, placement
from roomlayout.domain.services.history import (
    History,
    create_history,
    push,
    redo as redo_history,
    undo as undo_history,
)
from roomlayout.domain.value_objects import FurnitureType, WallSide

logger = logging.getLogger(__name__)

FURNITURE_COLLISION_ERROR = "Furniture cannot be placed here: it overlaps another item"


@dataclass(frozen=True)
class EditorState:
    """Complete editor state after a command.

    Attributes:
        room: Current room.
        furniture: Placed items in draw order.
        doors: Doors on any wall.
        windows: Windows on any wall.
        history: Undo/redo stacks of snapshots.
        errors: Reasons the last command was rejected (empty if accepted).
        created_at: Creation timestamp carried through import/export.
    """

    room: RoomSpec
    furniture: tuple[PlacedItem, ...] = ()
    doors: tuple[Door, ...] = ()
    windows: tuple[Window, ...] = ()
    history: History = field(default_factory=create_history)
    errors: tuple[str, ...] = ()
    created_at: str = ""

    def snapshot(self) -> LayoutSnapshot:
        """Value copy of the layout (without history)."""
        return LayoutSnapshot(
            room=self.room,
            furniture=self.furniture,
            doors=self.doors,
            windows=self.windows,
            created_at=self.created_at,
        )

    def find_item(self, item_id: str) -> PlacedItem | None:
        return next((f for f in self.furniture if f.id == item_id), None)

    def find_door(self, door_id: str) -> Door | None:
        return next((d for d in self.doors if d.id == door_id), None)

    def find_window(self, window_id: str) -> Window | None:
        return next((w for w in self.windows if w.id == window_id), None)


def _new_id() -> str:
    return str(uuid.uuid4())


def _limit_error(to_config: Callable[[Any], Any], entity: Any) -> str | None:
    """First document-limit violation of ``entity``, or None if it can be saved.

    Keeps the editor from reaching a state that ``export_document`` could
    not serialise.
    """
    try:
        to_config(entity)
    except PydanticValidationError as e:
        detail = extract_validation_errors(e)[0]
        return f"{detail['path']}: {detail['message']}"
    return None


class LayoutEditor:
    """Command loop over an ``EditorState``.

    Every public command returns the new state, which is also kept in
    ``self.state``. Commands must be applied one at a time.

    Args:
        room: Initial room; defaults to the catalog default room.
        history_max: Undo capacity.
        id_factory: Generates ids for new furniture, doors and windows.
    """

    def __init__(
        self,
        room: RoomSpec | None = None,
        history_max: int = DEFAULT_HISTORY_MAX,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.history_max = history_max
        self._new_id = id_factory or _new_id
        self.state = EditorState(
            room=room or DEFAULT_ROOM,
            history=create_history(history_max),
        )

    # --- internal helpers ---

    def _accept(self, **changes: Any) -> EditorState:
        self.state = replace(self.state, errors=(), **changes)
        return self.state

    def _reject(self, message: str) -> EditorState:
        logger.debug(f"Command rejected: {message}")
        self.state = replace(self.state, errors=(message,))
        return self.state

    def _pushed_history(self) -> History:
        return push(self.state.history, self.state.snapshot())

    def _restore(self, snapshot: LayoutSnapshot, new_history: History) -> EditorState:
        return self._accept(
            room=snapshot.room,
            furniture=snapshot.furniture,
            doors=snapshot.doors,
            windows=snapshot.windows,
            history=new_history,
        )

    # --- room ---

    def set_room(self, room: RoomSpec) -> EditorState:
        """Replace the room specification.

        Rooms below the document minimums (1000 mm walls, 2000 mm ceiling,
        50 mm grid) are rejected.
        """
        error = _limit_error(room_to_config, room)
        if error is not None:
            return self._reject(f"Invalid room: {error}")
        return self._accept(room=room)

    # --- furniture ---

    def new_item(
        self,
        furniture_type: FurnitureType,
        preset: str | None = None,
        **overrides: Any,
    ) -> PlacedItem:
        """Build an unplaced item centred in the room.

        Dimensions come from the preset if given, otherwise from the
        catalog entry of the type; ``overrides`` win over both.

        Raises:
            ValueError: If the preset is unknown or belongs to another type.
        """
        entry = FURNITURE_CATALOG[furniture_type]
        name, width, depth, height = entry.label, entry.width, entry.depth, entry.height
        if preset is not None:
            found = find_preset(preset)
            if found is None or found.type != furniture_type:
                raise ValueError(
                    f"Unknown preset '{preset}' for furniture type '{furniture_type.value}'"
                )
            name, width, depth, height = found.name, found.width, found.depth, found.height
        room = self.state.room
        values: dict[str, Any] = {
            "id": self._new_id(),
            "type": furniture_type,
            "name": name,
            "x": room.width / 2 - width / 2,
            "y": room.height / 2 - depth / 2,
            "width": width,
            "depth": depth,
            "height": height,
            "color": DEFAULT_FURNITURE_COLOR,
        }
        values.update(overrides)
        return PlacedItem(**values)

    def add_furniture(
        self,
        furniture_type: FurnitureType,
        preset: str | None = None,
        **overrides: Any,
    ) -> EditorState:
        """Create an item from the catalog and commit it to the layout."""
        try:
            item = self.new_item(furniture_type, preset, **overrides)
        except ValueError as e:
            return self._reject(str(e))
        return self.commit_furniture(item)

    def commit_furniture(self, item: PlacedItem) -> EditorState:
        """Place a new item.

        The item is kept inside the room. An attachable item dropped onto a
        desk or table is snapped to the nearest parent edge and attached.
        The commit is rejected if the item collides with anything other
        than its parent and siblings.
        """
        furniture = self.state.furniture
        if self.state.find_item(item.id) is not None:
            return self._reject(f"Furniture id '{item.id}' already exists")
        error = _limit_error(item_to_config, item)
        if error is not None:
            return self._reject(f"Invalid furniture: {error}")

        anchor = placement.constrain_to_room(item, self.state.room)
        item = replace(item, x=anchor.x, y=anchor.y)

        if attachment.is_attachable_type(item.type) and item.parent_id is None:
            parent = attachment.find_overlapping_parent(item, furniture)
            if parent is not None:
                center = item.center
                snapped = attachment.snap_to_parent_edge(item, parent, center.x, center.y)
                item = replace(item, x=snapped.x, y=snapped.y, parent_id=parent.id)
                offset = attachment.attach_offset(item, parent)
                item = replace(item, attach_offset_x=offset.x, attach_offset_y=offset.y)
                logger.debug(f"Auto-attached '{item.id}' to '{parent.id}'")

        excluded: set[str] = set()
        if item.parent_id is not None:
            excluded.add(item.parent_id)
            excluded.update(f.id for f in furniture if f.parent_id == item.parent_id)

        if geometry.collides_with_any(item, furniture, excluded):
            return self._reject(FURNITURE_COLLISION_ERROR)

        return self._accept(
            furniture=furniture + (item,),
            history=self._pushed_history(),
        )

    def update_furniture(self, item_id: str, command: ItemCommand) -> EditorState:
        """Apply an update command to one item.

        Geometric commands run snap (moves only), room constraint and
        collision checks; a colliding result is rejected and the item keeps
        its previous state. After an accepted geometric change a parent
        carries its children along, and a child's offset is recomputed.
        Locked items reject geometric commands.
        """
        if not isinstance(command, ITEM_COMMANDS):
            return self._reject(f"{type(command).__name__} does not apply to furniture")
        furniture = self.state.furniture
        target = self.state.find_item(item_id)
        if target is None:
            return self._reject(f"Furniture '{item_id}' not found")
        if command.geometric and target.locked:
            return self._reject(f"Furniture '{target.name or target.id}' is locked")

        candidate = command.apply(target)
        error = _limit_error(item_to_config, candidate)
        if error is not None:
            return self._reject(f"Invalid furniture: {error}")
        if not command.geometric:
            return self._accept(
                furniture=tuple(candidate if f.id == item_id else f for f in furniture)
            )

        room = self.state.room
        if isinstance(command, MoveItem):
            snapped = placement.snap_position(candidate.x, candidate.y, room)
            candidate = replace(candidate, x=snapped.x, y=snapped.y)
        anchor = placement.constrain_to_room(candidate, room)
        candidate = replace(candidate, x=anchor.x, y=anchor.y)

        excluded = attachment.exclude_ids(item_id, furniture)
        if geometry.collides_with_any(candidate, furniture, excluded):
            return self._reject(FURNITURE_COLLISION_ERROR)

        updated = [candidate if f.id == item_id else f for f in furniture]
        if candidate.parent_id is None:
            updated = attachment.sync_children(candidate, updated)
        else:
            parent = next((f for f in updated if f.id == candidate.parent_id), None)
            if parent is not None:
                offset = attachment.attach_offset(candidate, parent)
                candidate = replace(
                    candidate, attach_offset_x=offset.x, attach_offset_y=offset.y
                )
                updated = [candidate if f.id == item_id else f for f in updated]
        return self._accept(furniture=tuple(updated))

    def remove_furniture(self, item_id: str) -> EditorState:
        """Remove an item together with everything attached to it."""
        if self.state.find_item(item_id) is None:
            return self._reject(f"Furniture '{item_id}' not found")
        removed = {item_id} | {
            f.id for f in attachment.children_of(item_id, self.state.furniture)
        }
        return self._accept(
            furniture=tuple(f for f in self.state.furniture if f.id not in removed),
            history=self._pushed_history(),
        )

    # --- attachment ---

    def attach(self, child_id: str, parent_id: str) -> EditorState:
        """Attach an item to a desk or table at its current position."""
        child = self.state.find_item(child_id)
        parent = self.state.find_item(parent_id)
        if child is None or parent is None:
            return self._reject("Both items must exist to attach")
        if child_id == parent_id:
            return self._reject("An item cannot be attached to itself")
        if child.parent_id is not None:
            return self._reject(f"'{child.name or child.id}' is already attached")
        if parent.parent_id is not None:
            return self._reject(f"'{parent.name or parent.id}' is itself attached")
        if not attachment.is_parent_type(parent.type):
            return self._reject(f"'{parent.type.value}' cannot host attachments")
        if attachment.children_of(child_id, self.state.furniture):
            return self._reject(f"'{child.name or child.id}' has attachments of its own")

        offset = attachment.attach_offset(child, parent)
        attached = replace(
            child,
            parent_id=parent_id,
            attach_offset_x=offset.x,
            attach_offset_y=offset.y,
        )
        return self._accept(
            furniture=tuple(
                attached if f.id == child_id else f for f in self.state.furniture
            ),
            history=self._pushed_history(),
        )

    def detach(self, child_id: str) -> EditorState:
        """Detach an item from its parent, leaving it where it is."""
        child = self.state.find_item(child_id)
        if child is None or child.parent_id is None:
            return self._reject(f"Furniture '{child_id}' is not attached")
        detached = replace(
            child, parent_id=None, attach_offset_x=None, attach_offset_y=None
        )
        return self._accept(
            furniture=tuple(
                detached if f.id == child_id else f for f in self.state.furniture
            ),
            history=self._pushed_history(),
        )

    # --- doors ---

    def add_door(self, wall: WallSide, offset: float = 0.0) -> EditorState:
        """Add a default door, clamped onto the wall."""
        door = default_door(self._new_id(), wall, offset)
        door = replace(
            door,
            offset=openings.constrain_offset(wall, offset, door.width, self.state.room),
        )
        check = openings.validate_door(
            door, self.state.doors, self.state.windows, self.state.room
        )
        if not check.valid:
            return self._reject(check.error or "Invalid door placement")
        return self._accept(
            doors=self.state.doors + (door,),
            history=self._pushed_history(),
        )

    def update_door(self, door_id: str, command: DoorCommand) -> EditorState:
        """Apply an update command to one door."""
        if not isinstance(command, DOOR_COMMANDS):
            return self._reject(f"{type(command).__name__} does not apply to doors")
        target = self.state.find_door(door_id)
        if target is None:
            return self._reject(f"Door '{door_id}' not found")
        door = command.apply(target)
        if command.geometric:
            door = replace(
                door,
                offset=openings.constrain_offset(
                    door.wall, door.offset, door.width, self.state.room
                ),
            )
        error = _limit_error(door_to_config, door)
        if error is not None:
            return self._reject(f"Invalid door: {error}")
        doors = tuple(door if d.id == door_id else d for d in self.state.doors)
        check = openings.validate_door(door, doors, self.state.windows, self.state.room)
        if not check.valid:
            return self._reject(check.error or "Invalid door placement")
        return self._accept(doors=doors)

    def remove_door(self, door_id: str) -> EditorState:
        if self.state.find_door(door_id) is None:
            return self._reject(f"Door '{door_id}' not found")
        return self._accept(
            doors=tuple(d for d in self.state.doors if d.id != door_id),
            history=self._pushed_history(),
        )

    # --- windows ---

    def add_window(self, wall: WallSide, offset: float = 0.0) -> EditorState:
        """Add a default window, clamped onto the wall."""
        window = default_window(self._new_id(), wall, offset)
        window = replace(
            window,
            offset=openings.constrain_offset(wall, offset, window.width, self.state.room),
        )
        check = openings.validate_window(
            window, self.state.doors, self.state.windows, self.state.room
        )
        if not check.valid:
            return self._reject(check.error or "Invalid window placement")
        return self._accept(
            windows=self.state.windows + (window,),
            history=self._pushed_history(),
        )

    def update_window(self, window_id: str, command: WindowCommand) -> EditorState:
        """Apply an update command to one window."""
        if not isinstance(command, WINDOW_COMMANDS):
            return self._reject(f"{type(command).__name__} does not apply to windows")
        target = self.state.find_window(window_id)
        if target is None:
            return self._reject(f"Window '{window_id}' not found")
        window = command.apply(target)
        if command.geometric:
            window = replace(
                window,
                offset=openings.constrain_offset(
                    window.wall, window.offset, window.width, self.state.room
                ),
            )
        error = _limit_error(window_to_config, window)
        if error is not None:
            return self._reject(f"Invalid window: {error}")
        windows = tuple(window if w.id == window_id else w for w in self.state.windows)
        check = openings.validate_window(
            window, self.state.doors, windows, self.state.room
        )
        if not check.valid:
            return self._reject(check.error or "Invalid window placement")
        return self._accept(windows=windows)

    def remove_window(self, window_id: str) -> EditorState:
        if self.state.find_window(window_id) is None:
            return self._reject(f"Window '{window_id}' not found")
        return self._accept(
            windows=tuple(w for w in self.state.windows if w.id != window_id),
            history=self._pushed_history(),
        )

    # --- history ---

    def commit_history(self) -> EditorState:
        """Checkpoint the current layout for undo."""
        return self._accept(history=self._pushed_history())

    def undo(self) -> EditorState:
        """Restore the previous snapshot; a no-op when there is none."""
        new_history, restored = undo_history(self.state.history, self.state.snapshot())
        if restored is None:
            return self.state
        return self._restore(restored, new_history)

    def redo(self) -> EditorState:
        """Restore the next snapshot; a no-op when there is none."""
        new_history, restored = redo_history(self.state.history, self.state.snapshot())
        if restored is None:
            return self.state
        return self._restore(restored, new_history)

    # --- persistence ---

    def import_document(self, document: LayoutDocument) -> EditorState:
        """Replace the layout with a validated document.

        Attachments whose parent is missing are dropped; attached children
        are placed from their stored offsets. History is reset.
        """
        snapshot = document_to_snapshot(document)
        ids = {f.id for f in snapshot.furniture}
        cleaned: list[PlacedItem] = []
        for item in snapshot.furniture:
            if item.parent_id is not None and item.parent_id not in ids:
                logger.warning(
                    f"Dropping attachment of '{item.id}' to missing parent '{item.parent_id}'"
                )
                item = replace(
                    item, parent_id=None, attach_offset_x=None, attach_offset_y=None
                )
            cleaned.append(item)

        parents = [f for f in cleaned if f.parent_id is None]
        for parent in parents:
            cleaned = attachment.sync_children(parent, cleaned)

        self.state = EditorState(
            room=snapshot.room,
            furniture=tuple(cleaned),
            doors=snapshot.doors,
            windows=snapshot.windows,
            history=create_history(self.history_max),
            created_at=snapshot.created_at or utc_now_iso(),
        )
        logger.info(
            f"Imported layout with {len(cleaned)} furniture items, "
            f"{len(snapshot.doors)} doors, {len(snapshot.windows)} windows"
        )
        return self.state

    def export_document(self, now: str | None = None) -> LayoutDocument:
        """Export the current layout as a latest-version document."""
        document = snapshot_to_document(self.state.snapshot(), now=now)
        logger.info(f"Exported layout with {len(document.furniture)} furniture items")
        return document
