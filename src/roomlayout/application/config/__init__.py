"""Layout document schema, migration, loading and validation.

This package handles the persisted JSON form of a layout. It includes
Pydantic models for schema validation, a version-tagged migration chain,
a loader with comprehensive error handling, cross-entity checks, and
adapters to and from the domain entities.

Public API:
    - LayoutDocument: Root document model
    - RoomConfig, FurnitureConfig, DoorConfig, WindowConfig: Entity models
    - migrate: Upgrade a document to the latest version
    - load_layout: Load a document from a JSON file
    - load_layout_from_dict: Load a document from a dictionary
    - LayoutError: Exception for loading errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_document: Migrate and fully validate raw JSON
    - document_to_snapshot: Convert a document to a domain snapshot
    - snapshot_to_document: Convert a domain snapshot to a document

Example:
    >>> from pathlib import Path
    >>> from roomlayout.application.config import load_layout, LayoutError
    >>>
    >>> try:
    ...     doc = load_layout(Path("bedroom.json"))
    ...     print(f"Room: {doc.room.width}x{doc.room.height}")
    ... except LayoutError as e:
    ...     print(f"Error: {e}")
"""

from roomlayout.application.config.adapter import (
    document_to_snapshot,
    snapshot_to_document,
    utc_now_iso,
)
from roomlayout.application.config.loader import (
    LayoutError,
    load_layout,
    load_layout_from_dict,
    parse_layout,
    read_layout_json,
)
from roomlayout.application.config.migration import (
    MigrationError,
    MigrationResult,
    migrate,
)
from roomlayout.application.config.schemas import (
    LATEST_VERSION,
    SUPPORTED_VERSIONS,
    DoorConfig,
    FurnitureConfig,
    LayoutDocument,
    LayoutMetaConfig,
    RoomConfig,
    WindowConfig,
)
from roomlayout.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_document,
    validate_layout,
)

__all__ = [
    "DoorConfig",
    "FurnitureConfig",
    "LATEST_VERSION",
    "LayoutDocument",
    "LayoutError",
    "LayoutMetaConfig",
    "MigrationError",
    "MigrationResult",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WindowConfig",
    "document_to_snapshot",
    "load_layout",
    "load_layout_from_dict",
    "migrate",
    "parse_layout",
    "read_layout_json",
    "snapshot_to_document",
    "utc_now_iso",
    "validate_document",
    "validate_layout",
]
