"""Model layer for slidespace.

This module contains the data models for boards, blocks, configurations
and moves.
"""

from slidespace.model.block import Block, Orientation
from slidespace.model.board import Board
from slidespace.model.state import Configuration, Move, canonical_key

__all__ = ["Block", "Orientation", "Board", "Configuration", "Move", "canonical_key"]
