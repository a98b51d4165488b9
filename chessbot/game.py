from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

import logging

import chess

from .evaluator import Evaluator

if TYPE_CHECKING:
    from .ai import AIPlayer


logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when an externally supplied move cannot be played."""

    def __init__(self, move_text: str) -> None:
        super().__init__(f"Illegal move: {move_text}")
        self.move_text = move_text


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WHITE_CHECKMATES = "white_checkmates"
    BLACK_CHECKMATES = "black_checkmates"
    STALEMATE = "stalemate"
    DRAW = "draw"


def game_status(board: chess.Board) -> GameStatus:
    """Classify ``board`` by its python-chess outcome."""
    outcome = board.outcome()
    if outcome is None:
        return GameStatus.IN_PROGRESS
    if outcome.termination == chess.Termination.CHECKMATE:
        if outcome.winner == chess.WHITE:
            return GameStatus.WHITE_CHECKMATES
        return GameStatus.BLACK_CHECKMATES
    if outcome.termination == chess.Termination.STALEMATE:
        return GameStatus.STALEMATE
    # Insufficient material, seventy-five moves, fivefold repetition
    return GameStatus.DRAW


class Game:
    """Wraps python-chess Board and exposes a clean interface for drivers.

    This class owns the mutable game state. Moves reach the board either from
    outside (``apply_move`` / ``push_uci``) or from an ``AIPlayer``
    (``play_ai_move``); nothing else mutates it.
    """

    def __init__(self, starting_fen: Optional[str] = None) -> None:
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        self.last_move_was_capture: bool = False

    def reset(self, starting_fen: Optional[str] = None) -> None:
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        self.last_move_was_capture = False

    def get_full_fen(self) -> str:
        return self.board.fen()

    def get_turn_color(self) -> str:
        return "white" if self.board.turn == chess.WHITE else "black"

    def get_legal_moves(self) -> List[str]:
        return [move.uci() for move in self.board.legal_moves]

    def status(self) -> GameStatus:
        return game_status(self.board)

    def is_game_over(self) -> bool:
        return self.status() != GameStatus.IN_PROGRESS

    def get_result(self) -> Optional[str]:
        if not self.is_game_over():
            return None
        # Returns result like '1-0', '0-1', or '1/2-1/2'
        return self.board.result()

    def evaluation(self) -> int:
        """Material balance from the side to move's point of view."""
        return Evaluator.evaluate(self.board, self.board.turn)

    def push_uci(self, uci: str) -> None:
        move = self._parse(uci)
        if move is None:
            logger.debug("Rejected move %r", uci)
            raise IllegalMoveError(uci)

        self.last_move_was_capture = self.board.is_capture(move)
        self.board.push(move)
        logger.debug("Applied move %s", move.uci())

    def apply_move(self, text: str) -> bool:
        """Play an externally supplied move; False means it was rejected."""
        try:
            self.push_uci(text)
        except IllegalMoveError:
            return False
        return True

    def play_ai_move(self, ai: AIPlayer) -> Optional[chess.Move]:
        """Let ``ai`` choose and play the next move."""
        if self.is_game_over():
            return None
        # Capture status has to be read from the position before the move
        before = self.board.copy(stack=False)
        move = ai.choose_move(self.board)
        if move is None:
            return None
        self.last_move_was_capture = before.is_capture(move)
        return move

    def render(self) -> str:
        """Board diagram followed by the material score for the side to move."""
        return f"{self.board} {self.evaluation()}"

    def snapshot(self) -> Dict[str, object]:
        last_uci: Optional[str] = None
        if self.board.move_stack:
            last_uci = self.board.move_stack[-1].uci()

        in_check = self.board.is_check()
        check_square: Optional[str] = None
        if in_check:
            king_sq = self.board.king(self.board.turn)
            if king_sq is not None:
                check_square = chess.SQUARE_NAMES[king_sq]

        return {
            "fen": self.get_full_fen(),
            "turn": self.get_turn_color(),
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "status": self.status().value,
            "evaluation": self.evaluation(),
            "last_move": last_uci,
            "in_check": in_check,
            "check_square": check_square,
            "last_move_capture": self.last_move_was_capture,
        }

    def _parse(self, text: str) -> Optional[chess.Move]:
        text = text.strip()
        try:
            move = chess.Move.from_uci(text)
        except ValueError:
            move = None

        if move is not None:
            if move in self.board.legal_moves:
                return move
            return self._auto_queen(move)

        # Not coordinate notation, try SAN ("Nf3", "exd5", "O-O")
        try:
            move = self.board.parse_san(text)
        except ValueError:
            return None
        # "--", "Z0" and "@@@@" parse as a null move
        return move if move else None

    def _auto_queen(self, move: chess.Move) -> Optional[chess.Move]:
        # Auto-queen promotion if user sends e7e8 or similar without suffix
        if move.promotion is not None:
            return None
        piece = self.board.piece_at(move.from_square)
        if piece and piece.piece_type == chess.PAWN:
            to_rank = chess.square_rank(move.to_square)
            if (piece.color == chess.WHITE and to_rank == 7) or (
                piece.color == chess.BLACK and to_rank == 0
            ):
                promo_move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)
                if promo_move in self.board.legal_moves:
                    return promo_move
        return None
