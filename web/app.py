from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional

import chess
from flask import Flask, jsonify, request

from chessai import ChessAI, Difficulty, Game


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(CHESSAI_DIFFICULTY=Difficulty.MEDIUM.value)
    # e.g. FLASK_CHESSAI_DIFFICULTY=hard
    app.config.from_prefixed_env()
    if config:
        app.config.from_mapping(config)

    game = Game()
    ai = ChessAI(app.config["CHESSAI_DIFFICULTY"])
    # One game and one AI are shared by every request
    lock = threading.Lock()

    def state(ai_move: Optional[str] = None) -> Dict[str, Any]:
        snap = game.snapshot()
        snap["difficulty"] = ai.difficulty.value
        snap["ai_move"] = ai_move
        return snap

    def reply() -> Optional[str]:
        move = game.play_ai_move(ai)
        if move is None:
            return None
        app.logger.info("AI (%s) played %s", ai.difficulty.value, move)
        return move.uci()

    def json_body() -> Dict[str, Any]:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object")
        return data

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        with lock:
            return jsonify(state())

    @app.post("/api/new")
    def api_new():
        data = json_body()
        fen = data.get("fen")
        color = data.get("color") or "white"
        if not isinstance(color, str) or color.lower() not in ("white", "black"):
            raise ValueError(f"Unknown color: {color!r}")
        if fen is not None and not isinstance(fen, str):
            raise ValueError(f"Invalid FEN: {fen!r}")

        with lock:
            if data.get("difficulty"):
                ai.set_difficulty(data["difficulty"])
            ai_color = chess.BLACK if color.lower() == "white" else chess.WHITE
            try:
                game.reset(fen, ai_color=ai_color)
            except ValueError:
                game.reset(ai_color=ai_color)
                raise ValueError(f"Invalid FEN: {fen}") from None

            # Capture starting position so the frontend can animate the AI's first move
            pre_fen = game.get_full_fen()
            ai_move = reply()
            snap = state(ai_move)
            if ai_move is not None:
                snap["pre_fen"] = pre_fen
            return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = json_body()
        uci = payload.get("move")
        if not uci:
            return jsonify({"error": "Missing move"}), 400
        if not isinstance(uci, str):
            raise ValueError(f"Illegal move: {uci!r}")

        with lock:
            if payload.get("difficulty"):
                ai.set_difficulty(payload["difficulty"])
            game.push_uci(uci)
            return jsonify(state(reply()))

    @app.post("/api/difficulty")
    def api_difficulty():
        payload = json_body()
        with lock:
            ai.set_difficulty(payload.get("difficulty", ""))
            return jsonify({"difficulty": ai.difficulty.value})

    @app.get("/api/hint")
    def api_hint():
        with lock:
            move = game.hint(ai)
        if move is None:
            return jsonify({"hint": None})
        return jsonify({"hint": {"uci": move.uci(), "san": move.san}})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(host="0.0.0.0", port=5000, debug=True)
