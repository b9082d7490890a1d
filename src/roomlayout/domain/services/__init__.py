"""Domain services for the layout engine.

This package provides the pure computation core:
- geometry: rotated footprints and height-aware SAT collision
- polygon_clipper: overlap polygons for highlighting
- placement: grid snapping and room-boundary constraints
- openings: door/window placement rules and door kinematics
- attachment: parent/child offsets, edge snapping, exclusion sets
- history: bounded undo/redo stacks

Services are imported as modules (``from roomlayout.domain.services import
geometry``) because several of them expose short, generic function names.
"""

from . import attachment, geometry, history, openings, placement, polygon_clipper

__all__ = [
    "attachment",
    "geometry",
    "history",
    "openings",
    "placement",
    "polygon_clipper",
]
