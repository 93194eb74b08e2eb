"""Configurations and moves.

A configuration is an immutable, ordered mapping from block id to the
block's top-left cell. Iteration follows board order; equality and hashing
follow the canonical key, which sorts by block id so that key ordering never
depends on insertion order.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Self

from slidespace.model.block import Block, Orientation


@dataclass(frozen=True)
class Move:
    """A single move of one block along one axis.

    Attributes:
        block_id: Block that moved
        x: Resulting column of the block
        y: Resulting row of the block
        direction: "left", "right", "up" or "down"
        distance: Number of cells travelled
    """

    block_id: str
    x: int
    y: int
    direction: str
    distance: int = 1

    @property
    def label(self) -> str:
        """Short human-readable description, e.g. "A right"."""
        return f"{self.block_id} {self.direction}"

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.block_id,
            "x": self.x,
            "y": self.y,
            "direction": self.direction,
            "distance": self.distance,
        }


def canonical_key(positions: Iterable[tuple[str, tuple[int, int]]]) -> str:
    """Serialize (block id, position) pairs sorted by block id.

    Args:
        positions: Pairs of block id and (x, y)

    Returns:
        Deduplication key such as "A:1,1|B:0,0"
    """
    return "|".join(f"{block_id}:{x},{y}" for block_id, (x, y) in sorted(positions))


class Configuration(Mapping[str, tuple[int, int]]):
    """One arrangement of every block on the board."""

    __slots__ = ("_items", "_index", "_key")

    def __init__(self, positions: Iterable[tuple[str, tuple[int, int]]]) -> None:
        """Initialize a configuration.

        Args:
            positions: (block id, (x, y)) pairs in board order
        """
        self._items: tuple[tuple[str, tuple[int, int]], ...] = tuple(
            (block_id, (int(x), int(y))) for block_id, (x, y) in positions
        )
        self._index: dict[str, int] = {block_id: i for i, (block_id, _) in enumerate(self._items)}
        self._key = canonical_key(self._items)

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block]) -> Self:
        """Create the configuration described by the blocks' initial placement."""
        return cls((block.id, (block.x, block.y)) for block in blocks)

    @property
    def key(self) -> str:
        """Canonical serialization used as the deduplication key."""
        return self._key

    def __getitem__(self, block_id: str) -> tuple[int, int]:
        return self._items[self._index[block_id]][1]

    def __iter__(self) -> Iterator[str]:
        return (block_id for block_id, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        """Equality based on the canonical key."""
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        """Hash based on the canonical key."""
        return hash(self._key)

    def apply_move(self, move: Move) -> Self:
        """Derive the configuration that results from a move.

        Args:
            move: Move to apply

        Returns:
            A new configuration; this one is left untouched
        """
        if move.block_id not in self._index:
            raise KeyError(move.block_id)
        return type(self)(
            (block_id, (move.x, move.y) if block_id == move.block_id else position)
            for block_id, position in self._items
        )

    def offset(self, block: Block) -> int:
        """Scalar offset of a block along its constrained axis.

        Horizontal blocks report x, vertical blocks report y. Free blocks
        report x + y, so two free positions on the same anti-diagonal share
        an offset.
        """
        x, y = self[block.id]
        if block.orientation is Orientation.HORIZONTAL:
            return x
        if block.orientation is Orientation.VERTICAL:
            return y
        return x + y

    def occupancy(self, blocks: Iterable[Block], width: int, height: int) -> list[list[str | None]]:
        """Rasterize the configuration onto a height x width grid.

        Cells outside the grid are ignored; later blocks overwrite earlier
        ones, so callers checking legality should use ``is_legal``.
        """
        grid: list[list[str | None]] = [[None] * width for _ in range(height)]
        for block in blocks:
            x, y = self[block.id]
            for cx, cy in block.cells(x, y):
                if 0 <= cx < width and 0 <= cy < height:
                    grid[cy][cx] = block.id
        return grid

    def is_legal(self, blocks: Iterable[Block], width: int, height: int) -> bool:
        """Check that every block is in-bounds and no two blocks overlap."""
        occupied: set[tuple[int, int]] = set()
        for block in blocks:
            x, y = self[block.id]
            if x < 0 or y < 0 or x + block.w > width or y + block.h > height:
                return False
            for cell in block.cells(x, y):
                if cell in occupied:
                    return False
                occupied.add(cell)
        return True

    def to_dict(self) -> dict[str, list[int]]:
        """Serialize to {block id: [x, y]} in board order."""
        return {block_id: [x, y] for block_id, (x, y) in self._items}

    def __repr__(self) -> str:
        return f"Configuration({self._key})"
