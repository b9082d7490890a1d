"""Unit tests for layout validation.

These tests verify:
- ValidationResult exit codes and merging
- The full validate_document pipeline on each fixture
- Cross-entity checks (ids, attachments, openings, placement)
"""

import pytest

from roomlayout.application.config.validator import (
    ValidationError,
    ValidationResult,
    validate_document,
)


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_result_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0
        assert not result.success

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("furniture[0]", "Outside")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code_wins(self) -> None:
        result = ValidationResult().add_warning("a", "w").add_error("b", "e")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "one")
        second = ValidationResult().add_error("b", "two").add_warning("c", "three")
        first.merge(second)
        assert [e.path for e in first.errors] == ["a", "b"]
        assert len(first.warnings) == 1

    def test_error_str(self) -> None:
        assert str(ValidationError("room.width", "too small")) == "room.width: too small"
        assert str(ValidationError("", "not an object")) == "not an object"


class TestValidateDocument:
    """Tests for validate_document on the fixtures."""

    def test_valid_layout(self, load_fixture) -> None:
        result = validate_document(load_fixture("valid_layout.json"))
        assert result.success
        assert result.errors == []
        assert result.warnings == []
        assert result.exit_code == 0
        assert result.data is not None
        assert result.data.version == "1.2.0"

    def test_legacy_layout_is_migrated(self, load_fixture) -> None:
        result = validate_document(load_fixture("legacy_v1_1_0.json"))
        assert result.success
        assert result.data.version == "1.2.0"

    def test_unsupported_version(self, load_fixture) -> None:
        result = validate_document(load_fixture("unsupported_version.json"))
        assert not result.success
        assert result.errors[0].path == "version"
        assert result.errors[0].value == "9.9.9"
        assert result.data is None

    def test_non_object(self) -> None:
        result = validate_document("layout")
        assert not result.success
        assert result.exit_code == 1

    def test_schema_errors(self, load_fixture) -> None:
        result = validate_document(load_fixture("invalid_layout.json"))
        paths = {e.path for e in result.errors}
        assert {"room.width", "furniture[0].width"} <= paths
        assert result.exit_code == 1

    def test_overlapping_furniture_is_a_warning(self, load_fixture) -> None:
        result = validate_document(load_fixture("overlapping_layout.json"))
        assert result.success
        assert result.exit_code == 2
        assert [(w.path, w.message) for w in result.warnings] == [
            ("furniture[0]", "'Sofa A' overlaps 'Sofa B'")
        ]

    def test_misplaced_openings(self, load_fixture) -> None:
        result = validate_document(load_fixture("misplaced_openings.json"))
        assert [(e.path, e.message) for e in result.errors] == [
            ("doors[0]", "Door exceeds wall boundaries"),
            ("doors[1]", "Door overlaps with a window"),
        ]
        assert result.data is None

    def test_orphan_attachment_is_a_warning(self, load_fixture) -> None:
        result = validate_document(load_fixture("orphan_attachment.json"))
        assert result.success
        assert result.exit_code == 2
        warning = result.warnings[0]
        assert warning.path == "furniture[0].parentId"
        assert warning.message == "Parent 'missing-desk' does not exist"
        assert warning.suggestion is not None


class TestCrossEntityChecks:
    """Tests for checks that span several entities."""

    @pytest.fixture
    def data(self, load_fixture) -> dict:
        return load_fixture("valid_layout.json")

    def test_duplicate_window_ids(self, data) -> None:
        data["windows"].append(dict(data["windows"][0], wall="west", offset=0))
        result = validate_document(data)
        assert [(e.path, e.message) for e in result.errors] == [
            ("windows[0].id", "Duplicate id 'window-1'"),
            ("windows[1].id", "Duplicate id 'window-1'"),
        ]

    def test_parent_must_be_parent_type(self, data) -> None:
        data["furniture"][2]["parentId"] = "bed-1"
        result = validate_document(data)
        assert len(result.errors) == 1
        assert result.errors[0].path == "furniture[2].parentId"
        assert "cannot host attachments" in result.errors[0].message

    def test_non_attachable_child_is_a_warning(self, data) -> None:
        data["furniture"][1]["parentId"] = "desk-1"
        result = validate_document(data)
        assert result.is_valid
        assert any(w.path == "furniture[1].type" for w in result.warnings)

    def test_item_outside_room_is_a_warning(self, data) -> None:
        data["furniture"][3]["x"] = 3000
        result = validate_document(data)
        assert result.success
        assert [w.message for w in result.warnings] == [
            "'Queen bed' extends outside the room"
        ]

    def test_window_overlapping_door_is_reported_once(self, data) -> None:
        data["windows"][0].update(wall="north", offset=2000)
        result = validate_document(data)
        assert [(e.path, e.message) for e in result.errors] == [
            ("doors[0]", "Door overlaps with a window"),
        ]
