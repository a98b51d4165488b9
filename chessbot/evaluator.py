from __future__ import annotations

from typing import Dict

import chess


class Evaluator:
    """Material-only evaluation for chess positions.

    Scores are relative: positive favors the color passed in, negative favors
    its opponent. Units are whole pawns.
    """

    # Material values. The king is never captured, so it counts for nothing;
    # checkmate is left to the search's terminal handling.
    MATERIAL_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 1,
        chess.KNIGHT: 3,
        chess.BISHOP: 3,
        chess.ROOK: 5,
        chess.QUEEN: 9,
        chess.KING: 0,
    }

    @classmethod
    def evaluate(cls, board: chess.Board, color: chess.Color) -> int:
        white = 0
        black = 0

        for square in chess.SQUARES:
            piece = board.piece_at(square)
            if piece is None:
                continue
            if piece.color == chess.WHITE:
                white += cls.MATERIAL_VALUES[piece.piece_type]
            else:
                black += cls.MATERIAL_VALUES[piece.piece_type]

        if color == chess.WHITE:
            return white - black
        return black - white

    @classmethod
    def material(cls, board: chess.Board, color: chess.Color) -> int:
        """Sum of material values for one side only."""
        score = 0
        for piece_type, value in cls.MATERIAL_VALUES.items():
            score += value * len(board.pieces(piece_type, color))
        return score
