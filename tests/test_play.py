from __future__ import annotations

import io

import chess

from chessbot import AIPlayer, Game
from play import create_parser, main, run_human, run_selfplay

from conftest import ONLY_MOVE_MATES_FEN, STALEMATE_FEN


def test_parser_defaults():
    args = create_parser().parse_args([])
    assert args.mode == "selfplay"
    assert args.depth == 4
    assert args.max_moves is None


def test_selfplay_stops_at_move_cap():
    game = Game()
    out = io.StringIO()
    run_selfplay(game, AIPlayer(depth=1), max_moves=2, out=out)
    assert len(game.board.move_stack) == 2
    assert "Result: * (in_progress)" in out.getvalue()


def test_selfplay_until_mate():
    game = Game(ONLY_MOVE_MATES_FEN)
    out = io.StringIO()
    run_selfplay(game, AIPlayer(depth=1), out=out)
    text = out.getvalue()
    assert "d1f2" in text
    assert "Result: 0-1 (black_checkmates)" in text


def test_selfplay_on_finished_game_prints_result():
    out = io.StringIO()
    run_selfplay(Game(STALEMATE_FEN), AIPlayer(depth=1), out=out)
    assert "Result: 1/2-1/2 (stalemate)" in out.getvalue()


def test_human_is_reprompted_after_bad_move():
    game = Game()
    inp = io.StringIO("e2e5\ne2e4\nquit\n")
    out = io.StringIO()
    run_human(game, AIPlayer(depth=1), chess.WHITE, inp=inp, out=out)
    assert "Illegal move: 'e2e5'" in out.getvalue()
    # Human move plus the engine's reply
    assert game.board.move_stack[0] == chess.Move.from_uci("e2e4")
    assert len(game.board.move_stack) == 2


def test_engine_moves_first_for_black_human():
    game = Game()
    out = io.StringIO()
    run_human(game, AIPlayer(depth=1), chess.BLACK, inp=io.StringIO(""), out=out)
    assert len(game.board.move_stack) == 1
    assert "Engine plays" in out.getvalue()


def test_main_selfplay(capsys):
    assert main(["--depth", "1", "--max-moves", "1"]) == 0
    assert "Result: *" in capsys.readouterr().out
