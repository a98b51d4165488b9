"""Chess engine package providing game state, evaluation, and AI search.

Modules:
- game: Board and game orchestration atop python-chess
- evaluator: Material-only evaluation function for positions
- ai: Fixed-depth negamax with alpha-beta pruning and capture-first ordering
"""

from .game import Game, GameStatus, IllegalMoveError, game_status
from .ai import AIPlayer, SearchResult, partition_moves
from .evaluator import Evaluator

__all__ = [
    "Game",
    "GameStatus",
    "IllegalMoveError",
    "game_status",
    "AIPlayer",
    "SearchResult",
    "partition_moves",
    "Evaluator",
]
