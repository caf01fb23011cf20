"""A playable Tetris game built on the board and piece rules."""

from __future__ import annotations

import argparse
import itertools
import random
from collections.abc import Callable, Sequence

import pygame

from .board import COLS, ROWS, GameBoard, block_color, preview_cells
from .tetromino import Block, BlockType, Cell, random_block

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

FPS = 60
FRAME_DELAY_MS = 1000.0 / FPS
UPDATE_DELAY_NORMAL_MS = FRAME_DELAY_MS * 25.0
UPDATE_DELAY_FAST_MS = FRAME_DELAY_MS * 3.0

PREVIEW_SIZE = 4
PREVIEW_ROW_OFFSET = 1
PREVIEW_COL_OFFSET = 14


class TetrisGame:
    """Game state: the board, the falling piece and the piece that comes next."""

    def __init__(
        self,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.board = GameBoard(screen_width, screen_height)
        self.current: Block = random_block(self._rng)
        self.next_block: Block = random_block(self._rng)
        self.lines_cleared = 0
        self.sync_board()

    def reset(self) -> None:
        """Empty the board and start a fresh falling piece."""
        self.board.reset()
        self.current = random_block(self._rng)
        self.lines_cleared = 0
        self.sync_board()

    def _try(
        self,
        allowed: Callable[[Sequence[Cell]], bool],
        move: Callable[[], None],
    ) -> bool:
        if not allowed(self.current.positions):
            return False
        move()
        self.sync_board()
        return True

    def move_left(self) -> bool:
        """Move the falling piece left if it fits; tell whether it moved."""
        return self._try(self.board.can_move_left, self.current.move_left)

    def move_right(self) -> bool:
        """Move the falling piece right if it fits; tell whether it moved."""
        return self._try(self.board.can_move_right, self.current.move_right)

    def rotate_left(self) -> bool:
        """Turn the falling piece left if it fits; tell whether it turned."""
        return self._try(self.board.can_rotate_left, self.current.rotate_left)

    def rotate_right(self) -> bool:
        """Turn the falling piece right if it fits; tell whether it turned."""
        return self._try(self.board.can_rotate_right, self.current.rotate_right)

    def step(self) -> bool:
        """Advance gravity by one row.

        Returns True when the piece could not fall and landed, in which case
        the next piece takes its place and full rows are cleared.
        """
        if self.board.can_move_down(self.current.positions):
            self.current.move_down()
            self.sync_board()
            return False
        self.current = self.next_block
        self.next_block = random_block(self._rng)
        self.lines_cleared += self.board.clear_full_rows()
        self.sync_board()
        return True

    def sync_board(self) -> None:
        """Paint the falling piece onto the board at its current cells."""
        self.board.update_block_position(
            self.current.block_type,
            self.current.positions,
            self.current.previous_positions,
        )


def draw_board(surface: pygame.Surface, board: GameBoard) -> None:
    """Draw every board cell onto a surface."""
    grid = board.rows()
    for row, col in itertools.product(range(ROWS), range(COLS)):
        pygame.draw.rect(surface, block_color(grid[row][col]), board.cell_rect(row, col))


def draw_next_block(
    surface: pygame.Surface, board: GameBoard, block_type: BlockType
) -> None:
    """Draw the 4x4 preview of the next piece to the right of the board."""
    filled = set(preview_cells(block_type))
    for row, col in itertools.product(range(PREVIEW_SIZE), range(PREVIEW_SIZE)):
        kind = block_type if (row, col) in filled else BlockType.NONE
        rect = board.cell_rect(row + PREVIEW_ROW_OFFSET, col + PREVIEW_COL_OFFSET)
        pygame.draw.rect(surface, block_color(kind), rect)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until Escape is pressed or the window closes."""
    parser = argparse.ArgumentParser(prog="pixelplay-tetris", description="Play Tetris.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="window height")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Tetris")
        game = TetrisGame(args.width, args.height)
        clock = pygame.time.Clock()
        actions: dict[int, Callable[[], object]] = {
            pygame.K_BACKSPACE: game.reset,
            pygame.K_d: game.move_right,
            pygame.K_a: game.move_left,
            pygame.K_q: game.rotate_left,
            pygame.K_e: game.rotate_right,
        }

        draw_next_block(screen, game.board, game.next_block.block_type)
        last_update = pygame.time.get_ticks()
        running = True
        while running:
            fast = pygame.key.get_pressed()[pygame.K_s]
            delay = UPDATE_DELAY_FAST_MS if fast else UPDATE_DELAY_NORMAL_MS

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in actions:
                        actions[event.key]()

            now = pygame.time.get_ticks()
            if now - last_update > delay:
                if game.step():
                    draw_next_block(screen, game.board, game.next_block.block_type)
                last_update = pygame.time.get_ticks()

            game.sync_board()
            draw_board(screen, game.board)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0