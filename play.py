#!/usr/bin/env python3
"""
Play chess in the terminal.

Usage:
    python play.py                      # engine plays itself
    python play.py --mode white         # you play white against the engine
    python play.py --mode black --depth 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

import chess

from chessbot import AIPlayer, Game
from chessbot.ai import DEFAULT_DEPTH


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='negamax-chess',
        description='Fixed-depth negamax chess engine'
    )
    parser.add_argument('--mode', '-m', choices=['selfplay', 'white', 'black'],
                        default='selfplay', help='Who plays: engine vs engine, or your color')
    parser.add_argument('--depth', '-d', type=int, default=DEFAULT_DEPTH,
                        help=f'Search depth in plies (default: {DEFAULT_DEPTH})')
    parser.add_argument('--max-moves', type=int, default=None,
                        help='Stop self-play after this many half-moves')
    parser.add_argument('--fen', default=None, help='Start from this position')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    return parser


def run_selfplay(game: Game, ai: AIPlayer, max_moves: Optional[int] = None,
                 out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    print(game.render(), file=out)
    played = 0
    while not game.is_game_over():
        if max_moves is not None and played >= max_moves:
            break
        move = game.play_ai_move(ai)
        if move is None:
            break
        played += 1
        print(f"\n{move.uci()}", file=out)
        print(game.render(), file=out)
    print(f"\nResult: {game.get_result() or '*'} ({game.status().value})", file=out)


def run_human(game: Game, ai: AIPlayer, human: chess.Color,
              inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    if inp is None:
        inp = sys.stdin
    if out is None:
        out = sys.stdout
    print(game.render(), file=out)
    while not game.is_game_over():
        if game.board.turn != human:
            move = game.play_ai_move(ai)
            if move is None:
                break
            print(f"\nEngine plays {move.uci()}", file=out)
            print(game.render(), file=out)
            continue

        print("Your move: ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            return
        text = line.strip()
        if text == "quit":
            return
        if not game.apply_move(text):
            print(f"Illegal move: {text!r}, try again", file=out)
            continue
        print(game.render(), file=out)
    print(f"\nResult: {game.get_result() or '*'} ({game.status().value})", file=out)


def main(argv: Optional[list] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    try:
        ai = AIPlayer(depth=args.depth)
        game = Game(args.fen)
    except ValueError as exc:
        parser.error(str(exc))

    if args.mode == 'selfplay':
        run_selfplay(game, ai, args.max_moves)
    else:
        human = chess.WHITE if args.mode == 'white' else chess.BLACK
        run_human(game, ai, human)
    return 0


if __name__ == '__main__':
    sys.exit(main())
