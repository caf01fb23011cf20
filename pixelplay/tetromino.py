"""Tetromino pieces: their types, starting shapes, movement and rotation."""

from __future__ import annotations

import random
from enum import IntEnum

Cell = tuple[int, int]

START_ROW = 0
START_COL = 5


class BlockType(IntEnum):
    """Kinds of board cell and falling piece."""

    NONE = 0
    L = 1
    J = 2
    O = 3
    S = 4
    Z = 5
    T = 6
    I = 7


# Offsets from the start cell; the first entry is the start cell itself and
# the second is the pivot that rotations turn around.
_SHAPES: dict[BlockType, tuple[Cell, ...]] = {
    BlockType.NONE: ((0, 0),),
    BlockType.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
    BlockType.J: ((0, 0), (1, 0), (2, 0), (2, -1)),
    BlockType.L: ((0, 0), (1, 0), (2, 0), (2, 1)),
    BlockType.O: ((0, 0), (0, 1), (1, 1), (1, 0)),
    BlockType.S: ((0, 0), (0, 1), (1, 0), (1, -1)),
    BlockType.T: ((0, 0), (0, -1), (0, 1), (1, 0)),
    BlockType.Z: ((0, 0), (0, -1), (1, 0), (1, 1)),
}


class Block:
    """A falling piece, held as the (row, col) cells it covers."""

    def __init__(self, block_type: BlockType) -> None:
        self.block_type = BlockType(block_type)
        self.positions: list[Cell] = [
            (START_ROW + dr, START_COL + dc) for dr, dc in _SHAPES[self.block_type]
        ]
        self.previous_positions: list[Cell] = []
        self.rotation_state = 0

    def __repr__(self) -> str:
        return f"Block({self.block_type.name}, {self.positions})"

    def _shift(self, drow: int, dcol: int) -> None:
        self.previous_positions = list(self.positions)
        self.positions = [(row + drow, col + dcol) for row, col in self.positions]

    def move_down(self) -> None:
        """Move the piece one row down."""
        self._shift(1, 0)

    def move_right(self) -> None:
        """Move the piece one column right."""
        self._shift(0, 1)

    def move_left(self) -> None:
        """Move the piece one column left."""
        self._shift(0, -1)

    def rotate_left(self) -> None:
        """Turn the piece a quarter turn around its pivot cell; O pieces stay put."""
        if self.block_type is BlockType.O:
            return
        self.previous_positions = list(self.positions)
        pivot_row, pivot_col = self.previous_positions[1]
        self.positions = [
            (pivot_row - (col - pivot_col), pivot_col + (row - pivot_row))
            for row, col in self.previous_positions
        ]

    def rotate_right(self) -> None:
        """Turn the piece a quarter turn the other way; O pieces stay put."""
        if self.block_type is BlockType.O:
            return
        self.previous_positions = list(self.positions)
        pivot_row, pivot_col = self.previous_positions[1]
        self.positions = [
            (pivot_row + (col - pivot_col), pivot_col - (row - pivot_row))
            for row, col in self.previous_positions
        ]


def make_block(block_type: BlockType) -> Block:
    """Return a new piece of the given type at the start position."""
    return Block(block_type)


def random_block(rng: random.Random | None = None) -> Block:
    """Return a new piece of a uniformly chosen type (never NONE)."""
    chooser = rng if rng is not None else random.Random()
    return Block(BlockType(chooser.randint(1, 7)))