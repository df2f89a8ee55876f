import random

from fourinarow.ai.heuristic import HeuristicPlayer, winning_column
from fourinarow.ai.random_player import RandomPlayer
from fourinarow.core.board import Board


def test_prefers_win_over_block(make_board):
    b = make_board([
        ".......",
        ".......",
        ".......",
        "......X",
        "O.....X",
        "O.....X",
    ])
    # O cannot win yet; X threatens column 6, so O blocks.
    p = HeuristicPlayer(marker="O", rng=random.Random(0))
    assert p.choose_column(b) == 6
    assert p.last_info["reason"] == "block"

    b.drop_disc(0, "O")
    assert p.choose_column(b) == 0
    assert p.last_info["reason"] == "win"


def test_center_then_random(make_board):
    p = HeuristicPlayer(marker="X", rng=random.Random(3))
    assert p.choose_column(Board()) == 3
    assert p.last_info["reason"] == "center"

    b = make_board([
        "...X...",
        "...O...",
        "...X...",
        "...O...",
        "...X...",
        "...O...",
    ])
    col = p.choose_column(b)
    assert col != 3 and col in b.valid_moves()
    assert p.last_info["reason"] == "random"


def test_winning_column_does_not_touch_board(make_board):
    b = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".XXX...",
    ])
    before = [row[:] for row in b.grid]
    assert winning_column(b, "X") == 0
    assert winning_column(b, "O") is None
    assert b.grid == before


def test_random_player_only_plays_legal_columns(make_board):
    b = make_board([
        "X.....O",
        "O.....X",
        "X.....O",
        "O.....X",
        "X.....O",
        "O.....X",
    ])
    p = RandomPlayer(marker="X", rng=random.Random(5))
    for _ in range(50):
        assert p.choose_column(b) in range(1, 6)
