"""Shared constants and base model for layout document schemas.

The document is exchanged as camelCase JSON; every model declares
snake_case fields and accepts either spelling on input. Domain enums are
used directly so that the schema and the domain agree on allowed values.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Supported document versions
# Version 1.1.0: Room, furniture, doors and windows
# Version 1.2.0: Furniture attachment (parentId, attachOffsetX/Y), furniture
#   category, door type and slide direction
SUPPORTED_VERSIONS: tuple[str, ...] = ("1.1.0", "1.2.0")
LATEST_VERSION: str = SUPPORTED_VERSIONS[-1]

HEX_COLOR_PATTERN: str = r"^#[0-9A-Fa-f]{6}$"

# Minimum dimensions in millimetres
MIN_ROOM_SIZE: float = 1000.0
MIN_WALL_THICKNESS: float = 50.0
MIN_CEILING_HEIGHT: float = 2000.0
MIN_GRID_SIZE: float = 50.0
MIN_FURNITURE_SIZE: float = 100.0
MIN_DOOR_WIDTH: float = 500.0
MIN_DOOR_HEIGHT: float = 1800.0
MIN_DOOR_THICKNESS: float = 20.0
MAX_DOOR_OPEN_ANGLE: float = 120.0
MIN_WINDOW_SIZE: float = 300.0


class LayoutModel(BaseModel):
    """Base for every document model: camelCase aliases, unknown keys rejected."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )
