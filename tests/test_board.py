import pytest

from pixelplay.board import (
    COLS,
    ROWS,
    GameBoard,
    block_color,
    preview_cells,
)
from pixelplay.tetromino import BlockType, make_block


@pytest.fixture
def board():
    return GameBoard(1920, 1080)


def fill_row(board, row, kind=BlockType.I):
    for col in range(COLS):
        board.set_cell(row, col, kind)


def test_new_board_is_empty(board):
    grid = board.rows()
    assert len(grid) == ROWS
    assert all(len(row) == COLS for row in grid)
    assert all(cell is BlockType.NONE for row in grid for cell in row)


def test_set_and_get_cell_round_trip(board):
    board.set_cell(3, 4, BlockType.S)
    assert board.cell(3, 4) is BlockType.S
    board.reset()
    assert board.cell(3, 4) is BlockType.NONE


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (ROWS, 0), (0, COLS)])
def test_out_of_range_cells_raise(board, row, col):
    with pytest.raises(IndexError):
        board.cell(row, col)
    with pytest.raises(IndexError):
        board.set_cell(row, col, BlockType.T)


def test_in_bounds_edges(board):
    assert board.in_bounds((0, 0))
    assert board.in_bounds((ROWS - 1, COLS - 1))
    assert not board.in_bounds((ROWS, 0))
    assert not board.in_bounds((0, -1))


def test_update_block_position_moves_piece(board):
    block = make_block(BlockType.L)
    board.update_block_position(block.block_type, block.positions, [])
    block.move_down()
    board.update_block_position(block.block_type, block.positions, block.previous_positions)
    painted = {
        (r, c)
        for r, row in enumerate(board.rows())
        for c, cell in enumerate(row)
        if cell is BlockType.L
    }
    assert painted == set(block.positions)


def test_piece_stops_at_floor(board):
    block = make_block(BlockType.O)
    board.update_block_position(block.block_type, block.positions, [])
    drops = 0
    while board.can_move_down(block.positions):
        block.move_down()
        board.update_block_position(block.block_type, block.positions, block.previous_positions)
        drops += 1
    assert max(r for r, _ in block.positions) == ROWS - 1
    assert drops == ROWS - 2


def test_piece_blocked_by_occupied_cell(board):
    block = make_block(BlockType.I)
    bottom_row, col = block.positions[-1]
    board.set_cell(bottom_row + 1, col, BlockType.T)
    assert not board.can_move_down(block.positions)


def test_side_walls_block_movement(board):
    left = [(5, 0), (6, 0), (7, 0), (8, 0)]
    right = [(5, COLS - 1), (6, COLS - 1), (7, COLS - 1), (8, COLS - 1)]
    assert not board.can_move_left(left)
    assert board.can_move_right(left)
    assert not board.can_move_right(right)
    assert board.can_move_left(right)


def test_rotation_checks(board):
    block = make_block(BlockType.T)
    board.update_block_position(block.block_type, block.positions, [])
    # Pivot sits on the top row, so turning would push a cell above the board.
    assert not board.can_rotate_left(block.positions) or not board.can_rotate_right(block.positions)
    block.move_down()
    block.move_down()
    board.update_block_position(block.block_type, block.positions, block.previous_positions)
    assert board.can_rotate_left(block.positions)
    assert board.can_rotate_right(block.positions)


def test_clear_full_rows_drops_rows_above(board):
    fill_row(board, ROWS - 1)
    fill_row(board, ROWS - 2)
    board.set_cell(ROWS - 3, 2, BlockType.Z)
    cleared = board.clear_full_rows()
    assert cleared == 2
    assert board.cell(ROWS - 1, 2) is BlockType.Z
    assert sum(cell is not BlockType.NONE for row in board.rows() for cell in row) == 1


def test_clear_full_rows_leaves_partial_rows(board):
    fill_row(board, ROWS - 1)
    board.set_cell(ROWS - 1, 0, BlockType.NONE)
    before = board.rows()
    assert board.clear_full_rows() == 0
    assert board.rows() == before


def test_cell_rect_spacing(board):
    x0, y0, w, h = board.cell_rect(0, 0)
    x1, _, _, _ = board.cell_rect(0, 1)
    _, y1, _, _ = board.cell_rect(1, 0)
    assert x1 - x0 == board.cell_width
    assert y1 - y0 == board.cell_width
    assert w == h == board.cell_width - 1
    assert board.cell_width == 1080 // ROWS


def test_cell_rect_is_centred(board):
    left = board.cell_rect(0, 0)[0] - 1
    right_edge = board.cell_rect(0, COLS - 1)[0] - 1 + board.cell_width
    assert abs((left + right_edge) - board.screen_width) <= 1


def test_block_colors():
    assert block_color(BlockType.NONE) == (255, 255, 255, 255)
    assert block_color(BlockType.O) == (255, 255, 0, 255)
    colors = {block_color(t) for t in BlockType}
    assert len(colors) == len(BlockType)


def test_preview_cells():
    assert set(preview_cells(BlockType.O)) == {(1, 1), (1, 2), (2, 1), (2, 2)}
    assert preview_cells(BlockType.NONE) == ()
    for kind in BlockType:
        if kind is BlockType.NONE:
            continue
        cells = preview_cells(kind)
        assert len(set(cells)) == 4
        assert all(0 <= r < 4 and 0 <= c < 4 for r, c in cells)