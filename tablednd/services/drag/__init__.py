"""Drag building blocks: geometry, direction filtering, hierarchy editing and targeting."""

from tablednd.services.drag.direction import Direction, DirectionFilter
from tablednd.services.drag.geometry import GeometryProbe, Point
from tablednd.services.drag.hierarchy import HierarchyEditor
from tablednd.services.drag.targeting import DropTargetFinder

__all__ = [
    "Direction",
    "DirectionFilter",
    "GeometryProbe",
    "Point",
    "HierarchyEditor",
    "DropTargetFinder",
]
