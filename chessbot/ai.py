from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import logging

import chess

from .evaluator import Evaluator


logger = logging.getLogger(__name__)

# One above the 32-bit minimum so that negating a score never leaves the range.
MIN_SCORE = -(2**31) + 1
MAX_SCORE = 2**31 - 1

DEFAULT_DEPTH = 4


@dataclass
class SearchResult:
    best_move: Optional[chess.Move]
    score: int
    nodes: int
    scored_moves: Optional[List[Tuple[chess.Move, int]]] = None


def partition_moves(board: chess.Board) -> Tuple[List[chess.Move], List[chess.Move]]:
    """Split the legal moves of ``board`` into captures and quiet moves.

    A capture is a move whose destination holds an opponent piece, so en
    passant lands in the quiet list. Both lists keep python-chess's
    generation order.
    """
    targets = board.occupied_co[not board.turn]
    captures: List[chess.Move] = []
    quiet: List[chess.Move] = []
    for move in board.legal_moves:
        if chess.BB_SQUARES[move.to_square] & targets:
            captures.append(move)
        else:
            quiet.append(move)
    return captures, quiet


class AIPlayer:
    """Fixed-depth negamax with alpha-beta pruning and capture-first ordering."""

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.nodes = 0

    def choose_move(self, board: chess.Board) -> Optional[chess.Move]:
        """Pick the best move for the side to move and push it onto ``board``.

        Returns None and leaves the board alone when there is no legal move.
        """
        result = self.analyse(board)
        if result.best_move is None:
            logger.debug("No legal move for %s", _color_name(board.turn))
            return None

        board.push(result.best_move)
        return result.best_move

    def analyse(self, board: chess.Board) -> SearchResult:
        """Score every root move without touching ``board``.

        ``scored_moves`` is ranked best first; equal scores keep enumeration
        order (captures, then quiet moves), which decides ties.
        """
        self.nodes = 0
        # Search on a copy so the caller's board is never seen mid-search
        search_board = board.copy()
        captures, quiet = partition_moves(search_board)

        scored_moves: List[Tuple[chess.Move, int]] = []
        for move in captures + quiet:
            search_board.push(move)
            try:
                score = -self.search(search_board, self.depth, MIN_SCORE, MAX_SCORE)
            finally:
                search_board.pop()
            scored_moves.append((move, score))

        if not scored_moves:
            return SearchResult(
                best_move=None,
                score=Evaluator.evaluate(board, board.turn),
                nodes=self.nodes,
                scored_moves=[],
            )

        # sorted() is stable with reverse=True, so ties keep enumeration order
        ranked = sorted(scored_moves, key=lambda t: t[1], reverse=True)
        best_move, best_score = ranked[0]
        logger.info(
            "%s plays %s score=%d candidates=%d captures=%d nodes=%d",
            _color_name(board.turn),
            best_move.uci(),
            best_score,
            len(ranked),
            len(captures),
            self.nodes,
        )
        return SearchResult(
            best_move=best_move,
            score=best_score,
            nodes=self.nodes,
            scored_moves=ranked,
        )

    def search(self, board: chess.Board, depth: int, alpha: int, beta: int) -> int:
        """Negamax value of ``board`` for the side to move.

        ``board`` is pushed and popped during the search but is back in its
        original position when this returns.
        """
        self.nodes += 1
        if depth == 0:
            return Evaluator.evaluate(board, board.turn)

        captures, quiet = partition_moves(board)
        if not captures and not quiet:
            # Checkmate or stalemate: scored on material alone
            return Evaluator.evaluate(board, board.turn)

        best = MIN_SCORE
        for moves in (captures, quiet):
            for move in moves:
                board.push(move)
                try:
                    score = -self.search(board, depth - 1, -beta, -alpha)
                finally:
                    board.pop()
                best = max(best, score)
                alpha = max(alpha, score)
                # A cutoff ends this pass only; quiet moves still get a look
                if alpha >= beta:
                    break
        return best


def _color_name(color: chess.Color) -> str:
    return "white" if color == chess.WHITE else "black"
