"""Board class: grid dimensions plus the blocks placed on it."""

from dataclasses import dataclass
from typing import Any, Self

from slidespace.errors import ValidationError
from slidespace.model.block import Block
from slidespace.model.state import Configuration


@dataclass(frozen=True)
class Board:
    """A sliding-block puzzle board.

    Attributes:
        width: Number of grid columns (W)
        height: Number of grid rows (H)
        blocks: Blocks in board order; this order drives move enumeration
    """

    width: int
    height: int
    blocks: tuple[Block, ...]

    @classmethod
    def from_dict(cls, data: Any, require_target: bool = False) -> Self:
        """Create and validate a Board from the JSON-style structure.

        Args:
            data: Mapping with W, H and a blocks list
            require_target: Reject boards without an isTarget block

        Returns:
            A validated Board

        Raises:
            ValidationError: If the board is malformed
        """
        if not isinstance(data, dict):
            raise ValidationError("board", data, "object")

        dims: dict[str, int] = {}
        for key in ("W", "H"):
            if key not in data:
                raise ValidationError(key, None, "required field")
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError(key, value, "positive integer")
            dims[key] = value

        raw_blocks = data.get("blocks")
        if not isinstance(raw_blocks, list):
            raise ValidationError("blocks", raw_blocks, "list of blocks")

        blocks = tuple(Block.from_dict(item, index=i) for i, item in enumerate(raw_blocks))
        board = cls(width=dims["W"], height=dims["H"], blocks=blocks)
        board.validate(require_target=require_target)
        return board

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON-style board structure."""
        return {
            "W": self.width,
            "H": self.height,
            "blocks": [block.to_dict() for block in self.blocks],
        }

    def validate(self, require_target: bool = False) -> None:
        """Check the board's preconditions for exploration.

        Args:
            require_target: Whether a target block is mandatory

        Raises:
            ValidationError: On duplicate ids, out-of-bounds placement,
                overlapping footprints or a missing target
        """
        seen: set[str] = set()
        owner: dict[tuple[int, int], str] = {}
        for block in self.blocks:
            if block.id in seen:
                raise ValidationError("blocks.id", block.id, "unique block id")
            seen.add(block.id)

            if block.x < 0 or block.y < 0 or block.x + block.w > self.width or block.y + block.h > self.height:
                raise ValidationError(
                    f"blocks[{block.id}]",
                    (block.x, block.y, block.w, block.h),
                    f"footprint inside {self.width}x{self.height} grid",
                )

            for cell in block.cells(block.x, block.y):
                if cell in owner:
                    raise ValidationError(
                        f"blocks[{block.id}]",
                        cell,
                        f"cell not already occupied by block {owner[cell]!r}",
                    )
                owner[cell] = block.id

        if require_target and self.target is None:
            raise ValidationError("blocks.isTarget", None, "at least one target block")

    @property
    def target(self) -> Block | None:
        """The first block flagged as target, if any."""
        for block in self.blocks:
            if block.is_target:
                return block
        return None

    def initial_configuration(self) -> Configuration:
        """Configuration described by the blocks' initial placement."""
        return Configuration.from_blocks(self.blocks)

    def is_solved(self, configuration: Configuration) -> bool:
        """Check whether the target block's trailing edge reaches the right boundary."""
        target = self.target
        if target is None:
            return False
        x, _ = configuration[target.id]
        return x + target.w == self.width

    def render(self, configuration: Configuration | None = None) -> str:
        """Draw a configuration as text, one line per grid row.

        Empty cells are '.', occupied cells show the first character of the
        block id.
        """
        if configuration is None:
            configuration = self.initial_configuration()
        grid = configuration.occupancy(self.blocks, self.width, self.height)
        return "\n".join("".join(cell[0] if cell else "." for cell in row) for row in grid)
