"""Version-tagged migration chain for layout documents.

Each supported version except the latest maps to exactly one upgrade step
producing the next version. ``migrate`` follows the chain until the latest
version is reached; an unknown version is rejected rather than passed
through. Migration operates on plain JSON data (before schema validation)
and never mutates its input.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from roomlayout.application.config.schemas.base import (
    LATEST_VERSION,
    SUPPORTED_VERSIONS,
)
from roomlayout.domain.value_objects import FurnitureType, capability_for

logger = logging.getLogger(__name__)

MigrationStep = Callable[[dict[str, Any]], dict[str, Any]]


class MigrationError(Exception):
    """Raised when a document cannot be migrated.

    Attributes:
        path: JSON path of the offending field.
        message: Human-readable reason.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


@dataclass
class MigrationResult:
    """Outcome of ``migrate``.

    Attributes:
        document: Latest-version JSON data, or None on failure.
        errors: Failures as ``(path, message)`` pairs.
        applied: Versions that were upgraded from, in order.
    """

    document: dict[str, Any] | None = None
    errors: list[tuple[str, str]] = field(default_factory=list)
    applied: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.document is not None and not self.errors


def _category_for(type_value: Any) -> str | None:
    try:
        return capability_for(FurnitureType(type_value)).category.value
    except ValueError:
        # Unknown type; schema validation reports it.
        return None


def _migrate_1_1_0_to_1_2_0(doc: dict[str, Any]) -> dict[str, Any]:
    """Add attachment fields, furniture category and door type defaults."""
    for item in doc.get("furniture") or []:
        if not isinstance(item, dict):
            continue
        item.setdefault("parentId", None)
        item.setdefault("attachOffsetX", None)
        item.setdefault("attachOffsetY", None)
        if "category" not in item:
            item["category"] = _category_for(item.get("type"))
    for door in doc.get("doors") or []:
        if not isinstance(door, dict):
            continue
        door.setdefault("doorType", "swing")
        door.setdefault("slideDirection", "right")
    doc["version"] = "1.2.0"
    return doc


MIGRATIONS: dict[str, tuple[str, MigrationStep]] = {
    "1.1.0": ("1.2.0", _migrate_1_1_0_to_1_2_0),
}


def _upgrade(data: Any) -> tuple[dict[str, Any], list[str]]:
    if not isinstance(data, dict):
        raise MigrationError("", "Layout document must be a JSON object")
    version = data.get("version")
    if version is None:
        raise MigrationError("version", "Missing document version")
    if version not in SUPPORTED_VERSIONS:
        raise MigrationError(
            "version",
            f"Unsupported document version {version!r}. "
            f"Supported versions: {list(SUPPORTED_VERSIONS)}",
        )

    doc = copy.deepcopy(data)
    applied: list[str] = []
    while doc["version"] != LATEST_VERSION:
        current = doc["version"]
        target, step = MIGRATIONS[current]
        logger.debug(f"Migrating layout document {current} -> {target}")
        doc = step(doc)
        applied.append(current)
    return doc, applied


def migrate(data: Any) -> MigrationResult:
    """Upgrade a layout document to the latest version.

    Args:
        data: Parsed JSON of a layout document of any supported version.

    Returns:
        MigrationResult holding the upgraded copy, or the errors that
        prevented migration. Migrating an already-latest document returns
        an equal copy.
    """
    try:
        doc, applied = _upgrade(data)
    except MigrationError as e:
        logger.debug(f"Layout migration rejected: {e}")
        return MigrationResult(errors=[(e.path, e.message)])
    if applied:
        logger.info(f"Migrated layout document from {applied[0]} to {LATEST_VERSION}")
    return MigrationResult(document=doc, applied=applied)
