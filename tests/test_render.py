import pytest

from fourinarow import config
from fourinarow.ui.render import board_lines, render


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


def test_board_lines_plain(plain, make_board):
    b = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XX...",
    ])
    lines = board_lines(b)
    assert lines[0] == "   1 2 3 4 5 6 7"
    assert lines[5] == " | · · · O · · · |"
    assert lines[6] == " | · · X X · · · |"
    assert len(lines) == b.rows + 2


def test_highlight_marks_winning_cells(plain, make_board):
    b = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "XXXX...",
    ])
    lines = board_lines(b, highlight=[(5, 0), (5, 1), (5, 2), (5, 3)])
    assert lines[6] == " | x x x x · · · |"


def test_render_is_read_only(plain, make_board, capsys):
    b = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "O..X...",
    ])
    before = [row[:] for row in b.grid]
    render(b, "X: Player 1 | O: Computer")
    out = capsys.readouterr().out
    assert "FOUR IN A ROW" in out
    assert "Computer" in out
    assert b.grid == before


def test_color_codes_when_enabled(monkeypatch, make_board):
    monkeypatch.setattr(config, "USE_COLOR", True)
    b = make_board(["......."] * 5 + ["X......"])
    assert "\033[31m" in board_lines(b)[6]
