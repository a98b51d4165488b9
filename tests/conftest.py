from __future__ import annotations

import chess
import pytest

from chessbot import Game
from web import create_app


# Black's knight on d1 is the only piece that can move, and Nf2 smothers h1.
ONLY_MOVE_MATES_FEN = "k7/2RN4/8/8/8/2p1p3/1pP1P1PP/1B1n2RK b - - 0 1"
FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
SCHOLARS_MATE_FEN = "r1bqkb1r/pppp1Qpp/2n2n2/4p3/2B1P3/8/PPPP1PPP/RNB1K1NR b KQkq - 0 4"
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
BARE_KINGS_FEN = "8/8/8/8/8/8/8/K6k w - - 0 1"
# Black's rook on d8 attacks the white queen and is not defended
HANGING_ROOK_FEN = "3r3k/8/8/8/8/8/8/3QK3 w - - 0 1"


@pytest.fixture
def board() -> chess.Board:
    return chess.Board()


@pytest.fixture
def game() -> Game:
    return Game()


@pytest.fixture
def client():
    app = create_app({"SEARCH_DEPTH": 1, "TESTING": True})
    return app.test_client()
