import random

import pygame
import pytest

from pixelplay.board import COLS, ROWS, block_color, preview_cells
from pixelplay.tetris import TetrisGame, draw_board, draw_next_block
from pixelplay.tetromino import BlockType, make_block


def painted_cells(game):
    return {
        (r, c)
        for r in range(ROWS)
        for c in range(COLS)
        if game.board.cell(r, c) is not BlockType.NONE
    }


def place(game, block_type):
    game.board.reset()
    game.current = make_block(block_type)
    game.sync_board()


def land(game):
    before = list(game.current.positions)
    for _ in range(ROWS + 5):
        if game.step():
            return before
        before = list(game.current.positions)
    raise AssertionError("piece never landed")


@pytest.fixture
def game():
    return TetrisGame(rng=random.Random(3))


def test_new_game_paints_current_piece(game):
    assert painted_cells(game) == set(game.current.positions)


def test_move_left_shifts_piece_on_board(game):
    place(game, BlockType.I)
    old = list(game.current.positions)
    assert game.move_left() is True
    assert game.current.positions == [(r, c - 1) for r, c in old]
    assert painted_cells(game) == set(game.current.positions)
    assert all(game.board.cell(r, c) is BlockType.I for r, c in game.current.positions)


def test_move_left_stops_at_wall(game):
    place(game, BlockType.I)
    while game.move_left():
        pass
    assert min(c for _, c in game.current.positions) == 0
    assert game.move_left() is False


def test_move_right_stops_at_wall(game):
    place(game, BlockType.I)
    while game.move_right():
        pass
    assert max(c for _, c in game.current.positions) == COLS - 1
    assert game.move_right() is False


def test_rotate_right_matches_piece_rotation(game):
    place(game, BlockType.I)
    expected = make_block(BlockType.I)
    expected.rotate_right()
    assert game.rotate_right() is True
    assert game.current.positions == expected.positions
    assert painted_cells(game) == set(expected.positions)


def test_rotate_left_blocked_by_obstacle(game):
    place(game, BlockType.I)
    rotated = make_block(BlockType.I)
    rotated.rotate_left()
    target = next(p for p in rotated.positions if p not in game.current.positions)
    game.board.set_cell(*target, BlockType.T)
    before = list(game.current.positions)
    assert game.rotate_left() is False
    assert game.current.positions == before


def test_piece_lands_on_floor(game):
    place(game, BlockType.O)
    before = land(game)
    assert max(r for r, _ in before) == ROWS - 1
    assert all(game.board.cell(r, c) is BlockType.O for r, c in before)


def test_landing_promotes_next_block(game):
    upcoming = game.next_block
    land(game)
    assert game.current is upcoming
    assert set(game.current.positions) <= painted_cells(game)


def test_full_row_is_cleared(game):
    place(game, BlockType.O)
    for col in range(COLS):
        game.board.set_cell(ROWS - 1, col, BlockType.T)
    before = land(game)
    assert game.lines_cleared == 1
    assert all(game.board.cell(r + 1, c) is BlockType.O for r, c in before)
    o_cols = {c for _, c in before}
    for col in range(COLS):
        expected = BlockType.O if col in o_cols else BlockType.NONE
        assert game.board.cell(ROWS - 1, col) is expected


def test_reset_clears_board(game):
    land(game)
    game.reset()
    assert painted_cells(game) == set(game.current.positions)
    assert game.lines_cleared == 0


def test_same_seed_same_pieces():
    a = TetrisGame(rng=random.Random(11))
    b = TetrisGame(rng=random.Random(11))
    assert a.current.block_type == b.current.block_type
    assert a.next_block.block_type == b.next_block.block_type


def centre(rect):
    x, y, w, h = rect
    return (x + w // 2, y + h // 2)


def test_draw_board_colours_cells(game):
    place(game, BlockType.I)
    surface = pygame.Surface((game.board.screen_width, game.board.screen_height))
    draw_board(surface, game.board)
    row, col = game.current.positions[0]
    assert tuple(surface.get_at(centre(game.board.cell_rect(row, col)))) == block_color(BlockType.I)
    assert tuple(surface.get_at(centre(game.board.cell_rect(0, 0)))) == block_color(BlockType.NONE)


def test_draw_next_block_preview(game):
    surface = pygame.Surface((game.board.screen_width, game.board.screen_height))
    draw_next_block(surface, game.board, BlockType.O)
    cells = preview_cells(BlockType.O)
    for r, c in cells:
        pixel = surface.get_at(centre(game.board.cell_rect(r + 1, c + 14)))
        assert tuple(pixel) == block_color(BlockType.O)
    assert (0, 0) not in cells
    empty = surface.get_at(centre(game.board.cell_rect(1, 14)))
    assert tuple(empty) == block_color(BlockType.NONE)