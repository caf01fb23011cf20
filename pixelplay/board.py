"""The Tetris playing field: a grid of cells and the rules for moving pieces in it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .tetromino import BlockType, Cell

COLS = 12
ROWS = 22
LINE_OFFSET = 1

Color = tuple[int, int, int, int]

_COLORS: dict[BlockType, Color] = {
    BlockType.NONE: (255, 255, 255, 255),
    BlockType.O: (255, 255, 0, 255),
    BlockType.I: (57, 199, 204, 255),
    BlockType.J: (215, 91, 222, 255),
    BlockType.L: (214, 133, 26, 255),
    BlockType.S: (186, 30, 13, 255),
    BlockType.Z: (77, 219, 82, 255),
    BlockType.T: (142, 0, 161, 255),
}

_PREVIEWS: dict[BlockType, tuple[Cell, ...]] = {
    BlockType.O: ((1, 1), (1, 2), (2, 1), (2, 2)),
    BlockType.I: ((0, 2), (1, 2), (2, 2), (3, 2)),
    BlockType.J: ((1, 2), (2, 2), (3, 2), (3, 1)),
    BlockType.L: ((1, 1), (2, 1), (3, 1), (3, 2)),
    BlockType.S: ((2, 3), (2, 2), (3, 2), (3, 1)),
    BlockType.Z: ((2, 0), (2, 1), (3, 1), (3, 2)),
    BlockType.T: ((2, 3), (2, 1), (2, 2), (3, 2)),
}


def block_color(block_type: BlockType) -> Color:
    """Return the RGBA colour a cell of this type is drawn in."""
    return _COLORS.get(BlockType(block_type), (0, 0, 0, 255))


def preview_cells(block_type: BlockType) -> tuple[Cell, ...]:
    """Return the cells of the 4x4 next-piece preview that this type fills."""
    return _PREVIEWS.get(BlockType(block_type), ())


class GameBoard:
    """A ROWS x COLS grid of cell types laid out on a screen of given size."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.cell_width = screen_height // ROWS
        self._cells: list[list[BlockType]] = []
        self.reset()

    @staticmethod
    def _empty_row() -> list[BlockType]:
        return [BlockType.NONE] * COLS

    def reset(self) -> None:
        """Empty every cell."""
        self._cells = [self._empty_row() for _ in range(ROWS)]

    def rows(self) -> list[list[BlockType]]:
        """Return a copy of the grid, top row first."""
        return [list(row) for row in self._cells]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise IndexError(f"cell ({row}, {col}) is outside the board")

    def cell(self, row: int, col: int) -> BlockType:
        """Return the type held at (row, col)."""
        self._check(row, col)
        return self._cells[row][col]

    def set_cell(self, row: int, col: int, block_type: BlockType) -> None:
        """Store a type at (row, col)."""
        self._check(row, col)
        self._cells[row][col] = BlockType(block_type)

    def update_block_position(
        self,
        block_type: BlockType,
        positions: Iterable[Cell],
        previous_positions: Iterable[Cell],
    ) -> None:
        """Clear a piece's previous cells and paint its current ones."""
        for row, col in previous_positions:
            if row < ROWS:
                self.set_cell(row, col, BlockType.NONE)
        for row, col in positions:
            if row < ROWS:
                self.set_cell(row, col, block_type)

    def in_bounds(self, cell: Cell) -> bool:
        """Tell whether a (row, col) cell lies on the board."""
        row, col = cell
        return 0 <= row < ROWS and 0 <= col < COLS

    def _fits(self, positions: Sequence[Cell], targets: Iterable[Cell]) -> bool:
        own = set(positions)
        for target in targets:
            if target in own:
                continue
            if not self.in_bounds(target):
                return False
            if self.cell(*target) is not BlockType.NONE:
                return False
        return True

    def can_move_down(self, positions: Sequence[Cell]) -> bool:
        """Tell whether the piece may move one row down."""
        return self._fits(positions, ((r + 1, c) for r, c in positions))

    def can_move_left(self, positions: Sequence[Cell]) -> bool:
        """Tell whether the piece may move one column left."""
        return self._fits(positions, ((r, c - 1) for r, c in positions))

    def can_move_right(self, positions: Sequence[Cell]) -> bool:
        """Tell whether the piece may move one column right."""
        return self._fits(positions, ((r, c + 1) for r, c in positions))

    def can_rotate_right(self, positions: Sequence[Cell]) -> bool:
        """Tell whether the piece may turn right around its pivot cell."""
        pivot_row, pivot_col = positions[1]
        return self._fits(
            positions,
            (
                (pivot_row + (c - pivot_col), pivot_col - (r - pivot_row))
                for r, c in positions
            ),
        )

    def can_rotate_left(self, positions: Sequence[Cell]) -> bool:
        """Tell whether the piece may turn left around its pivot cell."""
        pivot_row, pivot_col = positions[1]
        return self._fits(
            positions,
            (
                (pivot_row - (c - pivot_col), pivot_col + (r - pivot_row))
                for r, c in positions
            ),
        )

    def clear_full_rows(self) -> int:
        """Remove every full row, dropping the rows above it; return how many went."""
        cleared = 0
        row = ROWS - 1
        while row >= 0:
            if all(kind is not BlockType.NONE for kind in self._cells[row]):
                del self._cells[row]
                self._cells.insert(0, self._empty_row())
                cleared += 1
            else:
                row -= 1
        return cleared

    def cell_rect(self, row: int, col: int) -> tuple[int, int, int, int]:
        """Return the (x, y, w, h) screen rectangle of a cell, centred horizontally."""
        cw = self.cell_width
        left = self.screen_width // 2 - (COLS * cw) // 2
        return (
            cw * col + LINE_OFFSET + left,
            cw * row + LINE_OFFSET,
            cw - LINE_OFFSET,
            cw - LINE_OFFSET,
        )