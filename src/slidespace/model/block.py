"""Block class representing a piece on the puzzle grid."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from slidespace.errors import ValidationError


class Orientation(Enum):
    """Movement constraint of a block."""

    HORIZONTAL = "H"  # may only change x
    VERTICAL = "V"  # may only change y
    FREE = "F"  # either axis, one axis per move

    @classmethod
    def parse(cls, value: object) -> Self:
        """Parse an orientation tag ("H", "V" or "F").

        Raises:
            ValidationError: If the tag is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            tag = value.strip().upper()
            if tag == "FREE":
                tag = "F"
            for member in cls:
                if member.value == tag:
                    return member
        raise ValidationError("orientation", value, "one of 'H', 'V', 'F'")

    @property
    def directions(self) -> tuple[str, ...]:
        """Direction labels in enumeration order."""
        if self is Orientation.HORIZONTAL:
            return ("left", "right")
        if self is Orientation.VERTICAL:
            return ("up", "down")
        return ("left", "right", "up", "down")


# Unit step (dx, dy) for each direction label
DIRECTION_DELTAS: dict[str, tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


@dataclass(frozen=True)
class Block:
    """A rectangular block with its initial placement.

    Attributes:
        id: Unique, stable identifier
        x: Initial column of the top-left cell
        y: Initial row of the top-left cell
        w: Width in grid cells
        h: Height in grid cells
        orientation: Movement constraint
        is_target: Whether this block's exit defines puzzle success
    """

    id: str
    x: int
    y: int
    w: int
    h: int
    orientation: Orientation = Orientation.HORIZONTAL
    is_target: bool = False

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> Self:
        """Create a Block from its JSON-style dictionary.

        Args:
            data: Mapping with id, x, y, w, h, orientation and optional isTarget
            index: Position in the block list, used in error messages

        Returns:
            A new Block instance

        Raises:
            ValidationError: If a field is missing or malformed
        """
        prefix = f"blocks[{index}]"
        if not isinstance(data, dict):
            raise ValidationError(prefix, data, "object")

        for key in ("id", "x", "y", "w", "h", "orientation"):
            if key not in data:
                raise ValidationError(f"{prefix}.{key}", None, "required field")

        block_id = data["id"]
        if not isinstance(block_id, str) or not block_id:
            raise ValidationError(f"{prefix}.id", block_id, "non-empty string")

        values: dict[str, int] = {}
        for key, minimum in (("x", 0), ("y", 0), ("w", 1), ("h", 1)):
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{prefix}.{key}", value, "integer")
            if value < minimum:
                raise ValidationError(f"{prefix}.{key}", value, f"integer >= {minimum}")
            values[key] = value

        is_target = data.get("isTarget", data.get("is_target", False))
        if not isinstance(is_target, bool):
            raise ValidationError(f"{prefix}.isTarget", is_target, "boolean")

        return cls(
            id=block_id,
            orientation=Orientation.parse(data["orientation"]),
            is_target=is_target,
            **values,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON-style board structure."""
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "orientation": self.orientation.value,
        }
        if self.is_target:
            data["isTarget"] = True
        return data

    def cells(self, x: int, y: int) -> list[tuple[int, int]]:
        """Grid cells covered by this block with its top-left at (x, y)."""
        return [(x + dx, y + dy) for dy in range(self.h) for dx in range(self.w)]

    def __repr__(self) -> str:
        """String representation of the block."""
        target = ", target" if self.is_target else ""
        return f"Block({self.id}, {self.orientation.value}, ({self.x},{self.y}) {self.w}x{self.h}{target})"
