"""Validation structures and cross-entity layout checks.

Structural validation (types, required fields, numeric ranges, colour
patterns) is done by the Pydantic schemas, which collect every violation
in one pass. This module adds the checks that span several entities:
unique ids, attachment references, opening placement on the walls, and
advisory warnings for furniture outside the room or overlapping other
furniture.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomlayout.application.config.adapter import document_to_snapshot
from roomlayout.application.config.loader import extract_validation_errors
from roomlayout.application.config.migration import migrate
from roomlayout.application.config.schemas import LayoutDocument
from roomlayout.application.inspection import find_collisions
from roomlayout.domain.entities import LayoutSnapshot
from roomlayout.domain.services import attachment, geometry, openings


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "furniture[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
        data: The validated document when there are no errors
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    data: LayoutDocument | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the document has no blocking errors."""
        return len(self.errors) == 0

    @property
    def success(self) -> bool:
        """True when the document migrated, parsed and passed every check."""
        return self.is_valid and self.data is not None

    @property
    def has_warnings(self) -> bool:
        """Check if the document has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_unique_ids(snapshot: LayoutSnapshot) -> ValidationResult:
    """Report ids used more than once within furniture, doors or windows."""
    result = ValidationResult()
    groups = (
        ("furniture", [f.id for f in snapshot.furniture]),
        ("doors", [d.id for d in snapshot.doors]),
        ("windows", [w.id for w in snapshot.windows]),
    )
    for name, ids in groups:
        counts = Counter(ids)
        for index, entity_id in enumerate(ids):
            if counts[entity_id] > 1:
                result.add_error(
                    f"{name}[{index}].id", f"Duplicate id '{entity_id}'", entity_id
                )
    return result


def check_attachments(snapshot: LayoutSnapshot) -> ValidationResult:
    """Check parent references of attached furniture.

    A reference to a missing item is only a warning: importing the layout
    detaches such orphans. Attaching to a non-parent type, or to an item
    that is itself attached, is an error.
    """
    result = ValidationResult()
    by_id = {f.id: f for f in snapshot.furniture}
    for index, item in enumerate(snapshot.furniture):
        if item.parent_id is None:
            continue
        path = f"furniture[{index}].parentId"
        parent = by_id.get(item.parent_id)
        if parent is None:
            result.add_warning(
                path,
                f"Parent '{item.parent_id}' does not exist",
                suggestion="The item will be detached on import",
            )
            continue
        if not attachment.is_parent_type(parent.type):
            result.add_error(
                path,
                f"Parent '{parent.id}' of type '{parent.type.value}' cannot host attachments",
                item.parent_id,
            )
        elif parent.parent_id is not None:
            result.add_error(
                path,
                f"Parent '{parent.id}' is itself attached; attachments are single-level",
                item.parent_id,
            )
        if not attachment.is_attachable_type(item.type):
            result.add_warning(
                f"furniture[{index}].type",
                f"Type '{item.type.value}' is not normally attachable",
            )
    return result


def check_openings(snapshot: LayoutSnapshot) -> ValidationResult:
    """Check every door and window against its wall and its neighbours.

    Door/window overlaps are reported once, on the door.
    """
    result = ValidationResult()
    room = snapshot.room
    for index, door in enumerate(snapshot.doors):
        check = openings.validate_door(door, snapshot.doors, snapshot.windows, room)
        if not check.valid:
            result.add_error(f"doors[{index}]", check.error or "Invalid door placement")
    for index, window in enumerate(snapshot.windows):
        check = openings.validate_window(window, (), snapshot.windows, room)
        if not check.valid:
            result.add_error(
                f"windows[{index}]", check.error or "Invalid window placement"
            )
    return result


def check_furniture_placement(snapshot: LayoutSnapshot) -> ValidationResult:
    """Warn about furniture outside the room or colliding with other items."""
    result = ValidationResult()
    room = snapshot.room
    index_of = {item.id: index for index, item in enumerate(snapshot.furniture)}
    names = {item.id: item.name or item.id for item in snapshot.furniture}
    for index, item in enumerate(snapshot.furniture):
        if not geometry.rotated_bounds(item).is_within(room.width, room.height):
            result.add_warning(
                f"furniture[{index}]",
                f"'{names[item.id]}' extends outside the room",
                suggestion="Move the item inside the room boundaries",
            )
    for collision in find_collisions(snapshot):
        result.add_warning(
            f"furniture[{index_of[collision.first_id]}]",
            f"'{names[collision.first_id]}' overlaps '{names[collision.second_id]}'",
        )
    return result


def validate_layout(document: LayoutDocument) -> ValidationResult:
    """Run every cross-entity check on a structurally valid document."""
    snapshot = document_to_snapshot(document)
    result = ValidationResult()
    result.merge(check_unique_ids(snapshot))
    result.merge(check_attachments(snapshot))
    result.merge(check_openings(snapshot))
    result.merge(check_furniture_placement(snapshot))
    if result.is_valid:
        result.data = document
    return result


def validate_document(data: Any) -> ValidationResult:
    """Migrate and fully validate raw layout JSON.

    Migration runs first; structural errors from the schema are collected
    in one pass; cross-entity checks run only on a structurally valid
    document. ``success`` is True only if migration succeeded and no error
    remains.

    Args:
        data: Parsed JSON of a layout document (any supported version).

    Returns:
        ValidationResult with the validated document in ``data`` on success.
    """
    result = ValidationResult()
    migrated = migrate(data)
    if not migrated.success:
        for path, message in migrated.errors:
            value = data.get("version") if isinstance(data, dict) else None
            result.add_error(path, message, value if path == "version" else None)
        return result

    try:
        document = LayoutDocument.model_validate(migrated.document)
    except PydanticValidationError as e:
        for detail in extract_validation_errors(e):
            result.add_error(detail["path"], detail["message"], detail.get("value"))
        return result

    return validate_layout(document)
