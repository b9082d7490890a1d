"""Unit tests for the layout editor command loop.

These tests verify:
- Adding furniture from the catalog and presets
- Rejected commands leave the layout unchanged and report an error
- Snapping, room constraints and collisions on updates
- Auto-attach, manual attach/detach and children following their parent
- Door and window commands
- Undo/redo checkpoints
- Import and export of documents
"""

import itertools
import logging

import pytest

from roomlayout.application import (
    ConfigureDoor,
    ConfigureWindow,
    LayoutEditor,
    MoveItem,
    MoveOpening,
    RenameItem,
    ResizeItem,
    ResizeOpening,
    RotateItem,
    SetItemLocked,
)
from roomlayout.application.config import load_layout_from_dict
from roomlayout.application.editor import FURNITURE_COLLISION_ERROR
from roomlayout.domain.entities import RoomSpec
from roomlayout.domain.services.geometry import rotated_bounds
from roomlayout.domain.value_objects import DoorType, FurnitureType, WallSide


@pytest.fixture
def editor() -> LayoutEditor:
    counter = itertools.count(1)
    return LayoutEditor(id_factory=lambda: f"id-{next(counter)}")


class TestAddFurniture:
    """Tests for adding furniture."""

    def test_new_item_is_centred_with_catalog_size(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.BED)
        bed = state.furniture[0]
        assert (bed.id, bed.name) == ("id-1", "Bed")
        assert (bed.width, bed.depth, bed.height) == (2000, 1500, 500)
        assert (bed.x, bed.y) == (1000, 750)
        assert state.errors == ()
        assert len(state.history.past) == 1

    def test_preset_sets_name_and_size(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.BED, preset="bed-queen")
        bed = state.furniture[0]
        assert bed.name == "Queen bed"
        assert (bed.width, bed.depth) == (1500, 2000)

    def test_overrides_win(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.CHAIR, x=100, y=200, name="Stool")
        chair = state.furniture[0]
        assert (chair.x, chair.y, chair.name) == (100, 200, "Stool")

    def test_preset_of_another_type_is_rejected(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.BED, preset="sofa-2")
        assert state.furniture == ()
        assert "Unknown preset 'sofa-2'" in state.errors[0]

    def test_new_item_outside_room_is_pulled_back(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.DESK, x=-300, y=2800)
        desk = state.furniture[0]
        assert (desk.x, desk.y) == (0, 2400)

    def test_colliding_item_is_rejected(self, editor) -> None:
        editor.add_furniture(FurnitureType.BED)
        state = editor.add_furniture(FurnitureType.BED)
        assert len(state.furniture) == 1
        assert state.errors == (FURNITURE_COLLISION_ERROR,)
        assert len(state.history.past) == 1

    def test_accepted_command_clears_errors(self, editor) -> None:
        editor.add_furniture(FurnitureType.BED)
        editor.add_furniture(FurnitureType.BED)
        state = editor.add_furniture(FurnitureType.CHAIR, x=0, y=0)
        assert state.errors == ()

    def test_duplicate_id_is_rejected(self, editor) -> None:
        item = editor.new_item(FurnitureType.CHAIR, x=0, y=0)
        editor.commit_furniture(item)
        state = editor.commit_furniture(item)
        assert len(state.furniture) == 1
        assert "already exists" in state.errors[0]

    def test_chair_tucks_under_desk(self, editor) -> None:
        editor.add_furniture(FurnitureType.DESK, x=0, y=0)
        state = editor.add_furniture(FurnitureType.CHAIR, x=375, y=300)
        assert len(state.furniture) == 2
        beside = editor.add_furniture(FurnitureType.CHAIR, x=1375, y=100)
        assert beside.errors == ()
        pushed_in = editor.add_furniture(FurnitureType.CHAIR, x=375, y=100)
        assert pushed_in.errors == (FURNITURE_COLLISION_ERROR,)


class TestUpdateFurniture:
    """Tests for update_furniture."""

    @pytest.fixture
    def bed_id(self, editor) -> str:
        return editor.add_furniture(FurnitureType.BED, x=0, y=0).furniture[0].id

    def test_move_snaps_to_grid(self, editor, bed_id) -> None:
        state = editor.update_furniture(bed_id, MoveItem(x=1234, y=567))
        bed = state.find_item(bed_id)
        assert (bed.x, bed.y) == (1200, 600)

    def test_move_is_constrained_to_room(self, editor, bed_id) -> None:
        state = editor.update_furniture(bed_id, MoveItem(x=3900, y=100))
        assert state.find_item(bed_id).x == 2000

    def test_rotation_keeps_item_inside(self, editor, bed_id) -> None:
        state = editor.update_furniture(bed_id, RotateItem(rotation=90))
        bed = state.find_item(bed_id)
        assert bed.rotation == 90
        bounds = rotated_bounds(bed)
        assert bounds.min_y >= -1e-9
        assert bounds.min_x >= -1e-9

    def test_colliding_move_is_rejected(self, editor, bed_id) -> None:
        other = editor.add_furniture(FurnitureType.BED, x=2000, y=1500).furniture[1]
        state = editor.update_furniture(other.id, MoveItem(x=1500, y=1000))
        assert state.errors == (FURNITURE_COLLISION_ERROR,)
        assert (state.find_item(other.id).x, state.find_item(other.id).y) == (2000, 1500)

    def test_updates_do_not_push_history(self, editor, bed_id) -> None:
        before = editor.state.history
        state = editor.update_furniture(bed_id, MoveItem(x=500, y=500))
        assert state.history == before

    def test_locked_item_rejects_geometric_commands(self, editor, bed_id) -> None:
        editor.update_furniture(bed_id, SetItemLocked(locked=True))
        state = editor.update_furniture(bed_id, MoveItem(x=500, y=500))
        assert "is locked" in state.errors[0]
        assert state.find_item(bed_id).x == 0

    def test_locked_item_accepts_rename(self, editor, bed_id) -> None:
        editor.update_furniture(bed_id, SetItemLocked(locked=True))
        state = editor.update_furniture(bed_id, RenameItem(name="Guest bed"))
        assert state.errors == ()
        assert state.find_item(bed_id).name == "Guest bed"

    def test_wrong_command_type(self, editor, bed_id) -> None:
        state = editor.update_furniture(bed_id, ConfigureWindow(sill_height=800))
        assert state.errors == ("ConfigureWindow does not apply to furniture",)

    def test_unknown_item(self, editor) -> None:
        state = editor.update_furniture("ghost", MoveItem(x=0, y=0))
        assert state.errors == ("Furniture 'ghost' not found",)


class TestAttachment:
    """Tests for auto-attach, attach and detach."""

    @pytest.fixture
    def desk_id(self, editor) -> str:
        return editor.add_furniture(FurnitureType.DESK, x=1000, y=1000).furniture[0].id

    def test_stand_dropped_on_desk_is_attached(self, editor, desk_id) -> None:
        state = editor.add_furniture(FurnitureType.MONITOR_STAND, x=1300, y=1100)
        stand = state.furniture[1]
        assert stand.parent_id == desk_id
        assert (stand.x, stand.y) == pytest.approx((1300, 875))
        assert stand.attach_offset_x == pytest.approx(0)
        assert stand.attach_offset_y == pytest.approx(-300)

    def test_children_follow_parent_move(self, editor, desk_id) -> None:
        stand_id = editor.add_furniture(
            FurnitureType.MONITOR_STAND, x=1300, y=1100
        ).furniture[1].id
        state = editor.update_furniture(desk_id, MoveItem(x=2000, y=1000))
        stand = state.find_item(stand_id)
        assert (stand.x, stand.y) == pytest.approx((2300, 875))

    def test_moving_child_updates_offset(self, editor, desk_id) -> None:
        stand_id = editor.add_furniture(
            FurnitureType.MONITOR_STAND, x=1300, y=1100
        ).furniture[1].id
        state = editor.update_furniture(stand_id, MoveItem(x=1200, y=900))
        stand = state.find_item(stand_id)
        assert stand.attach_offset_x == pytest.approx(-100)
        assert stand.attach_offset_y == pytest.approx(-275)

    def test_removing_parent_removes_children(self, editor, desk_id) -> None:
        editor.add_furniture(FurnitureType.MONITOR_STAND, x=1300, y=1100)
        editor.add_furniture(FurnitureType.CHAIR, x=0, y=0)
        state = editor.remove_furniture(desk_id)
        assert [f.type for f in state.furniture] == [FurnitureType.CHAIR]

    def test_manual_attach_and_detach(self, editor, desk_id) -> None:
        arm_id = editor.add_furniture(FurnitureType.MONITOR_ARM, x=100, y=100).furniture[1].id
        assert editor.state.find_item(arm_id).parent_id is None

        state = editor.attach(arm_id, desk_id)
        arm = state.find_item(arm_id)
        assert arm.parent_id == desk_id
        assert arm.attach_offset_x == pytest.approx(175 - 1600)
        assert len(state.history.past) == 3

        assert "already attached" in editor.attach(arm_id, desk_id).errors[0]

        state = editor.detach(arm_id)
        arm = state.find_item(arm_id)
        assert arm.parent_id is None
        assert arm.attach_offset_x is None
        assert (arm.x, arm.y) == (100, 100)

        assert "is not attached" in editor.detach(arm_id).errors[0]

    def test_attach_requires_parent_type(self, editor, desk_id) -> None:
        chair_id = editor.add_furniture(FurnitureType.CHAIR, x=0, y=1500).furniture[1].id
        arm_id = editor.add_furniture(FurnitureType.MONITOR_ARM, x=100, y=100).furniture[2].id
        state = editor.attach(arm_id, chair_id)
        assert state.errors == ("'chair' cannot host attachments",)

    def test_attach_to_itself(self, editor, desk_id) -> None:
        assert editor.attach(desk_id, desk_id).errors == (
            "An item cannot be attached to itself",
        )


class TestOpenings:
    """Tests for door and window commands."""

    def test_add_door_clamps_offset(self, editor) -> None:
        state = editor.add_door(WallSide.NORTH, offset=3500)
        door = state.doors[0]
        assert door.offset == 3100
        assert door.width == 900
        assert len(state.history.past) == 1

    def test_overlapping_door_is_rejected(self, editor) -> None:
        editor.add_door(WallSide.NORTH, offset=3500)
        state = editor.add_door(WallSide.NORTH, offset=3000)
        assert len(state.doors) == 1
        assert state.errors == ("Door overlaps with another door",)

    def test_move_door_onto_window_is_rejected(self, editor) -> None:
        door_id = editor.add_door(WallSide.NORTH, offset=2000).doors[0].id
        editor.add_window(WallSide.NORTH, offset=0)
        state = editor.update_door(door_id, MoveOpening(offset=500))
        assert state.errors == ("Door overlaps with a window",)
        assert state.find_door(door_id).offset == 2000

    def test_move_door_to_another_wall(self, editor) -> None:
        door_id = editor.add_door(WallSide.NORTH, offset=2000).doors[0].id
        state = editor.update_door(door_id, MoveOpening(offset=500, wall=WallSide.EAST))
        door = state.find_door(door_id)
        assert (door.wall, door.offset) == (WallSide.EAST, 500)

    def test_oversized_door_is_rejected(self, editor) -> None:
        door_id = editor.add_door(WallSide.EAST, offset=0).doors[0].id
        state = editor.update_door(door_id, ResizeOpening(width=3500))
        assert state.errors == ("Door exceeds wall boundaries",)

    def test_configure_door(self, editor) -> None:
        door_id = editor.add_door(WallSide.SOUTH).doors[0].id
        past = editor.state.history.past
        state = editor.update_door(door_id, ConfigureDoor(door_type=DoorType.SLIDE))
        assert state.find_door(door_id).door_type is DoorType.SLIDE
        assert state.history.past == past

    def test_window_commands(self, editor) -> None:
        window_id = editor.add_window(WallSide.WEST, offset=100).windows[0].id
        state = editor.update_window(window_id, ConfigureWindow(sill_height=1000))
        assert state.find_window(window_id).sill_height == 1000
        state = editor.update_window(window_id, ConfigureDoor(hinge=None))
        assert state.errors == ("ConfigureDoor does not apply to windows",)
        state = editor.remove_window(window_id)
        assert state.windows == ()

    def test_remove_unknown_door(self, editor) -> None:
        assert editor.remove_door("ghost").errors == ("Door 'ghost' not found",)


class TestEntityLimits:
    """Edits below the document minimums are rejected and export keeps working."""

    def test_undersized_resize_cannot_be_built(self) -> None:
        with pytest.raises(ValueError, match="width must be at least 100"):
            ResizeItem(width=10)

    def test_out_of_range_open_angle_cannot_be_built(self) -> None:
        with pytest.raises(ValueError, match="open_angle"):
            ConfigureDoor(open_angle=500)

    def test_undersized_new_item_is_rejected(self, editor) -> None:
        state = editor.add_furniture(FurnitureType.CHAIR, x=0, y=0, width=10)
        assert state.furniture == ()
        assert state.errors[0].startswith("Invalid furniture: width:")
        assert editor.export_document().furniture == []

    def test_door_narrower_than_door_minimum_is_rejected(self, editor) -> None:
        door_id = editor.add_door(WallSide.NORTH, offset=1000).doors[0].id
        state = editor.update_door(door_id, ResizeOpening(width=400))
        assert state.errors[0].startswith("Invalid door: width:")
        assert state.find_door(door_id).width == 900
        assert editor.export_document().doors[0].width == 900

    def test_window_resize_to_window_minimum_is_accepted(self, editor) -> None:
        window_id = editor.add_window(WallSide.WEST, offset=100).windows[0].id
        state = editor.update_window(window_id, ResizeOpening(width=400))
        assert state.errors == ()
        assert state.find_window(window_id).width == 400

    def test_undersized_room_is_rejected(self, editor) -> None:
        room = editor.state.room
        state = editor.set_room(RoomSpec(width=500, height=3000))
        assert state.room == room
        assert state.errors[0].startswith("Invalid room: width:")
        assert editor.export_document().room.width == room.width

    def test_export_after_rejected_edits(self, editor) -> None:
        bed_id = editor.add_furniture(FurnitureType.BED, x=0, y=0).furniture[0].id
        door_id = editor.add_door(WallSide.SOUTH).doors[0].id
        editor.update_furniture(bed_id, ResizeItem(width=1800))
        editor.update_door(door_id, ConfigureDoor(open_angle=120))
        editor.set_room(RoomSpec(width=800, height=800))
        document = editor.export_document()
        assert document.furniture[0].width == 1800
        assert document.doors[0].open_angle == 120
        assert document.room.width == 4000


class TestHistory:
    """Tests for undo, redo and checkpoints."""

    def test_undo_and_redo(self, editor) -> None:
        editor.add_furniture(FurnitureType.BED, x=0, y=0)
        editor.add_furniture(FurnitureType.DESK, x=2500, y=0)
        assert len(editor.undo().furniture) == 1
        assert len(editor.undo().furniture) == 0
        assert len(editor.redo().furniture) == 1
        assert len(editor.redo().furniture) == 2

    def test_undo_without_history_is_noop(self, editor) -> None:
        state = editor.state
        assert editor.undo() is state
        assert editor.redo() is state

    def test_checkpoint_before_drag(self, editor) -> None:
        bed_id = editor.add_furniture(FurnitureType.BED, x=0, y=0).furniture[0].id
        editor.commit_history()
        editor.update_furniture(bed_id, MoveItem(x=500, y=0))
        editor.update_furniture(bed_id, MoveItem(x=1000, y=0))
        state = editor.undo()
        assert state.find_item(bed_id).x == 0

    def test_history_capacity(self) -> None:
        editor = LayoutEditor(history_max=2)
        for x in (0, 500, 1000):
            editor.add_furniture(FurnitureType.CHAIR, x=x, y=0)
        assert len(editor.state.history.past) == 2

    def test_set_room_does_not_push(self, editor) -> None:
        room = RoomSpec(width=5000, height=4000)
        state = editor.set_room(room)
        assert state.room == room
        assert state.history.past == ()


class TestImportExport:
    """Tests for import_document and export_document."""

    def test_import_valid_layout(self, editor, load_fixture) -> None:
        state = editor.import_document(load_layout_from_dict(load_fixture("valid_layout.json")))
        assert [f.id for f in state.furniture] == ["desk-1", "chair-1", "stand-1", "bed-1"]
        stand = state.find_item("stand-1")
        assert (stand.x, stand.y) == pytest.approx((400, 100))
        assert state.created_at == "2024-03-01T09:00:00Z"
        assert state.history.past == ()

    def test_import_detaches_orphans(self, editor, load_fixture, caplog) -> None:
        document = load_layout_from_dict(load_fixture("orphan_attachment.json"))
        with caplog.at_level(logging.WARNING, logger="roomlayout.application.editor"):
            state = editor.import_document(document)
        arm = state.find_item("arm-1")
        assert arm.parent_id is None
        assert arm.attach_offset_x is None
        assert "missing-desk" in caplog.text

    def test_import_resets_history(self, editor, load_fixture) -> None:
        editor.add_furniture(FurnitureType.BED)
        state = editor.import_document(load_layout_from_dict(load_fixture("valid_layout.json")))
        assert not state.history.can_undo

    def test_export_round_trip(self, editor, load_fixture) -> None:
        data = load_fixture("valid_layout.json")
        editor.import_document(load_layout_from_dict(data))
        exported = editor.export_document(now="2025-01-01T00:00:00Z").to_json_dict()
        data["meta"]["updatedAt"] = "2025-01-01T00:00:00Z"
        assert exported == data

    def test_export_new_layout(self, editor) -> None:
        editor.add_furniture(FurnitureType.SOFA)
        document = editor.export_document(now="2025-01-01T00:00:00Z")
        assert document.version == "1.2.0"
        assert document.meta.created_at == "2025-01-01T00:00:00Z"
        assert document.furniture[0].category.value == "furniture"
