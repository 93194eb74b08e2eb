"""Built-in puzzle boards."""

from typing import Any

from slidespace.model.board import Board

PRESETS: dict[str, dict[str, Any]] = {
    "Simple 4x4": {
        "W": 4,
        "H": 4,
        "blocks": [
            {"id": "A", "x": 1, "y": 1, "w": 2, "h": 1, "orientation": "H", "isTarget": True},
            {"id": "B", "x": 0, "y": 0, "w": 1, "h": 2, "orientation": "V"},
            {"id": "C", "x": 3, "y": 0, "w": 1, "h": 2, "orientation": "V"},
            {"id": "D", "x": 1, "y": 3, "w": 2, "h": 1, "orientation": "H"},
        ],
    },
    "Classic 6x6": {
        "W": 6,
        "H": 6,
        "blocks": [
            {"id": "A", "x": 1, "y": 2, "w": 2, "h": 1, "orientation": "H", "isTarget": True},
            {"id": "B", "x": 0, "y": 0, "w": 1, "h": 2, "orientation": "V"},
            {"id": "C", "x": 1, "y": 0, "w": 2, "h": 1, "orientation": "H"},
            {"id": "D", "x": 3, "y": 1, "w": 1, "h": 2, "orientation": "V"},
            {"id": "E", "x": 4, "y": 0, "w": 2, "h": 1, "orientation": "H"},
            {"id": "F", "x": 5, "y": 1, "w": 1, "h": 2, "orientation": "V"},
            {"id": "G", "x": 0, "y": 3, "w": 2, "h": 1, "orientation": "H"},
            {"id": "H", "x": 2, "y": 4, "w": 1, "h": 2, "orientation": "V"},
        ],
    },
    "Hard Puzzle": {
        "W": 5,
        "H": 5,
        "blocks": [
            {"id": "A", "x": 1, "y": 2, "w": 2, "h": 1, "orientation": "H", "isTarget": True},
            {"id": "B", "x": 0, "y": 0, "w": 2, "h": 1, "orientation": "H"},
            {"id": "C", "x": 3, "y": 0, "w": 1, "h": 3, "orientation": "V"},
            {"id": "D", "x": 4, "y": 0, "w": 1, "h": 2, "orientation": "V"},
            {"id": "E", "x": 0, "y": 1, "w": 1, "h": 2, "orientation": "V"},
            {"id": "F", "x": 1, "y": 1, "w": 1, "h": 1, "orientation": "H"},
            {"id": "G", "x": 1, "y": 3, "w": 3, "h": 1, "orientation": "H"},
            {"id": "H", "x": 4, "y": 4, "w": 1, "h": 1, "orientation": "H"},
        ],
    },
    # Free-exploration boards without a target block
    "Open 8x8": {
        "W": 8,
        "H": 8,
        "blocks": [
            {"id": "A", "x": 4, "y": 3, "w": 2, "h": 1, "orientation": "H"},
            {"id": "B", "x": 3, "y": 5, "w": 1, "h": 2, "orientation": "V"},
            {"id": "C", "x": 3, "y": 3, "w": 1, "h": 2, "orientation": "V"},
            {"id": "D", "x": 1, "y": 1, "w": 2, "h": 2, "orientation": "H"},
        ],
    },
    "Crowded 6x6": {
        "W": 6,
        "H": 6,
        "blocks": [
            {"id": "A", "x": 2, "y": 0, "w": 3, "h": 1, "orientation": "H"},
            {"id": "B", "x": 5, "y": 0, "w": 1, "h": 2, "orientation": "V"},
            {"id": "C", "x": 3, "y": 2, "w": 2, "h": 1, "orientation": "H"},
            {"id": "D", "x": 3, "y": 3, "w": 2, "h": 1, "orientation": "H"},
            {"id": "E", "x": 5, "y": 2, "w": 1, "h": 3, "orientation": "V"},
            {"id": "F", "x": 2, "y": 3, "w": 1, "h": 3, "orientation": "V"},
            {"id": "G", "x": 3, "y": 5, "w": 3, "h": 1, "orientation": "H"},
        ],
    },
}

DEFAULT_PRESET = "Simple 4x4"


def preset_names() -> list[str]:
    return list(PRESETS)


def load_preset(name: str) -> Board:
    """Build the named preset board.

    Raises:
        KeyError: If no preset has that name
    """
    return Board.from_dict(PRESETS[name])
