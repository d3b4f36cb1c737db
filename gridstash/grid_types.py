"""Value types shared by the inventory grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INDEX_NONE = -1


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vector2:
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def distance(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0


@dataclass(frozen=True)
class IntPoint:
    x: int = 0
    y: int = 0

    def __add__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: int | float) -> IntPoint | Vector2:
        """Integer scaling keeps a point; float scaling gives a vector."""
        if isinstance(scale, int):
            return IntPoint(self.x * scale, self.y * scale)
        if isinstance(scale, float):
            return Vector2(self.x * scale, self.y * scale)
        return NotImplemented

    __rmul__ = __mul__

    def to_vector(self) -> Vector2:
        return Vector2(float(self.x), float(self.y))


class ItemCategory(Enum):
    EQUIPPABLE = "Equippable"
    NONE = "None"


@dataclass
class SlotAvailability:
    index: int = INDEX_NONE
    amount_to_fill: int = 0
    item_at_index: bool = False


@dataclass
class SlotAvailabilityResult:
    item: Any = None
    total_room_to_fill: int = 0
    remainder: int = 0
    stackable: bool = False
    slot_availabilities: list[SlotAvailability] = field(default_factory=list)


class TileQuadrant(Enum):
    TOP_LEFT = "Top Left"
    TOP_RIGHT = "Top Right"
    BOTTOM_LEFT = "Bottom Left"
    BOTTOM_RIGHT = "Bottom Right"
    INVALID = "Invalid"


@dataclass
class TileParameters:
    tile_coordinates: IntPoint = IntPoint()
    tile_index: int = INDEX_NONE
    quadrant: TileQuadrant = TileQuadrant.INVALID


@dataclass
class SpaceQueryResult:
    has_space: bool = False
    valid_item: Any = None
    upper_left_index: int = INDEX_NONE