import io
import random

import pytest

from fourinarow import config
from fourinarow.main import main
from fourinarow.ui.menu import build_players, run_menu
from fourinarow.ai.minimax import ComputerPlayer
from fourinarow.ui.human import HumanPlayer


@pytest.fixture(autouse=True)
def plain(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


def test_mode_decides_the_second_player():
    rng = random.Random(0)
    p1, p2 = build_players("two_player", rng)
    assert isinstance(p1, HumanPlayer) and isinstance(p2, HumanPlayer)
    assert (p1.marker, p2.marker) == ("X", "O")

    p1, p2 = build_players("vs_computer", rng, depth=2)
    assert isinstance(p2, ComputerPlayer)
    assert p2.depth == 2 and p2.rng is rng


def test_two_player_game_then_quit(capsys):
    answers = iter(["1", "1", "2", "1", "2", "1", "2", "1", "n"])
    run_menu(random.Random(0), ask=lambda prompt: next(answers))

    out = capsys.readouterr().out
    assert "Player 1 wins!" in out
    assert next(answers, None) is None


def test_play_again_starts_a_fresh_board(capsys):
    first = ["1", "1", "2", "1", "2", "1", "2", "1", "y"]
    # X scatters over columns 1-2, O stacks column 7
    second = ["1", "1", "7", "2", "7", "1", "7", "2", "7", "n"]
    answers = iter(first + second)
    run_menu(random.Random(0), ask=lambda prompt: next(answers))

    out = capsys.readouterr().out
    assert "Player 1 wins!" in out
    assert "Player 2 wins!" in out


def test_main_exits_cleanly_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--no-color", "--no-clear", "--seed", "1"]) == 0
    assert "Thank you for playing!" in capsys.readouterr().out
