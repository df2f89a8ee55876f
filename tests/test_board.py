import random

import pytest

from fourinarow.core.board import Board
from fourinarow.errors import ColumnFull, InvalidColumn, MoveError


def test_new_board_is_empty():
    b = Board()
    assert (b.rows, b.cols) == (6, 7)
    assert all(b.cell_at(r, c) is None for r in range(6) for c in range(7))
    assert b.is_empty()
    assert not b.is_full()
    assert b.valid_moves() == list(range(7))


def test_drop_lands_in_lowest_empty_cell():
    b = Board()
    assert b.drop_disc(3, "X") == 5
    assert b.drop_disc(3, "O") == 4
    assert b.cell_at(5, 3) == "X"
    assert b.cell_at(4, 3) == "O"
    assert b.cell_at(3, 3) is None


@pytest.mark.parametrize("n", range(1, 7))
def test_n_drops_fill_exactly_the_bottom_n_rows(n):
    b = Board()
    for i in range(n):
        b.drop_disc(2, "X" if i % 2 == 0 else "O")

    occupied = [r for r in range(b.rows) if b.cell_at(r, 2) is not None]
    assert occupied == list(range(b.rows - n, b.rows))
    assert b.height(2) == n
    # neighbours untouched
    assert all(b.cell_at(r, c) is None for r in range(6) for c in range(7) if c != 2)


def test_drop_into_full_column_raises_column_full():
    b = Board()
    for i in range(6):
        b.drop_disc(0, "X" if i % 2 == 0 else "O")
    assert b.is_column_full(0)
    with pytest.raises(ColumnFull) as exc:
        b.drop_disc(0, "X")
    assert exc.value.column == 0


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_drop_out_of_range_raises_invalid_column(col):
    with pytest.raises(InvalidColumn):
        Board().drop_disc(col, "X")


def test_move_errors_are_value_errors():
    assert issubclass(InvalidColumn, MoveError)
    assert issubclass(ColumnFull, MoveError)
    assert issubclass(MoveError, ValueError)


def test_remove_top_disc_undoes_drop_bit_for_bit():
    rng = random.Random(7)
    b = Board()
    marker = "X"
    while not b.is_full():
        col = rng.choice(b.valid_moves())
        before = [row[:] for row in b.grid]
        b.drop_disc(col, marker)
        b.remove_top_disc(col)
        assert b.grid == before

        # advance the game for real
        b.drop_disc(col, marker)
        marker = "O" if marker == "X" else "X"


def test_remove_top_disc_on_empty_column_raises():
    with pytest.raises(ValueError):
        Board().remove_top_disc(4)


def test_cell_at_is_bounds_checked():
    b = Board()
    with pytest.raises(IndexError):
        b.cell_at(6, 0)
    with pytest.raises(IndexError):
        b.cell_at(0, -1)


def test_is_full_only_when_every_cell_is_taken(draw_board):
    assert draw_board.is_full()
    draw_board.remove_top_disc(6)
    assert not draw_board.is_full()


def test_board_owns_its_grid():
    grid = [[None] * 7 for _ in range(6)]
    b = Board(grid=grid)
    grid[5][0] = "X"
    assert b.cell_at(5, 0) is None

    c = b.copy()
    c.drop_disc(0, "O")
    assert b.cell_at(5, 0) is None


def test_wrong_grid_shape_is_rejected():
    with pytest.raises(ValueError):
        Board(grid=[[None] * 7 for _ in range(5)])
