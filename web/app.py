from __future__ import annotations

from typing import Any, Mapping, Optional

import logging
import threading

from flask import Flask, jsonify, request

from chessbot import AIPlayer, Game, IllegalMoveError
from chessbot.ai import DEFAULT_DEPTH


logger = logging.getLogger(__name__)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(SEARCH_DEPTH=DEFAULT_DEPTH, MAX_DEPTH=5)
    # CHESSBOT_SEARCH_DEPTH=3 and friends
    app.config.from_prefixed_env("CHESSBOT")
    if config:
        app.config.update(config)

    game = Game()
    # The dev server handles requests on several threads
    game_lock = threading.Lock()

    def json_payload() -> Mapping[str, Any]:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def requested_depth(data: Mapping[str, Any]) -> int:
        depth = int(data.get("depth", app.config["SEARCH_DEPTH"]))
        return max(1, min(depth, int(app.config["MAX_DEPTH"])))

    def reply_with_ai(depth: int) -> Optional[str]:
        move = game.play_ai_move(AIPlayer(depth=depth))
        return move.uci() if move else None

    @app.get("/api/state")
    def api_state():
        with game_lock:
            return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = json_payload()
        fen = data.get("fen")
        color = data.get("color") or "white"
        if not isinstance(color, str) or (fen is not None and not isinstance(fen, str)):
            return jsonify({"error": "fen and color must be strings"}), 400

        try:
            depth = requested_depth(data)
        except (TypeError, ValueError) as exc:
            return jsonify({"error": f"Invalid depth: {exc}"}), 400

        with game_lock:
            try:
                # Reset game (optionally from FEN)
                game.reset(fen)
            except ValueError as exc:
                return jsonify({"error": str(exc)}), 400

            ai_move_uci = None
            pre_fen: str | None = None
            # If player chose black, AI (white) makes the first move immediately
            if color.lower() == "black" and not game.is_game_over():
                # Capture starting position to allow frontend to animate the first AI move
                pre_fen = game.get_full_fen()
                ai_move_uci = reply_with_ai(depth)

            snap = game.snapshot()
        snap["ai_move"] = ai_move_uci
        if pre_fen is not None:
            snap["pre_fen"] = pre_fen
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = json_payload()
        uci = payload.get("move")
        if not uci:
            return jsonify({"error": "Missing move"}), 400
        if not isinstance(uci, str):
            return jsonify({"error": f"Illegal move: {uci!r}"}), 400

        try:
            depth = requested_depth(payload)
        except (TypeError, ValueError) as exc:
            return jsonify({"error": f"Invalid depth: {exc}"}), 400

        with game_lock:
            try:
                game.push_uci(uci)
            except IllegalMoveError as exc:
                logger.info("Rejected move %r", exc.move_text)
                return jsonify({"error": str(exc)}), 400

            ai_move_uci = None
            if not game.is_game_over():
                ai_move_uci = reply_with_ai(depth)

            snap = game.snapshot()
        snap["ai_move"] = ai_move_uci
        return jsonify(snap)

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(host="0.0.0.0", port=5000, debug=True)
