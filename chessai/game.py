from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

import chess

from .ai import ChessAI
from .rules import Move


logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    uci: str
    san: str
    played_by: str


def color_name(color: chess.Color) -> str:
    return "white" if color == chess.WHITE else "black"


class Game:
    """A single-player game: a human on one side, the AI on the other.

    Owns the mutable board and the move history. The AI only ever sees
    the board; it never changes it.
    """

    def __init__(self, starting_fen: Optional[str] = None, ai_color: chess.Color = chess.BLACK) -> None:
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        self.ai_color = ai_color
        self.last_move_was_capture: bool = False
        self.history: List[MoveRecord] = []

    def reset(self, starting_fen: Optional[str] = None, ai_color: Optional[chess.Color] = None) -> None:
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        if ai_color is not None:
            self.ai_color = ai_color
        self.last_move_was_capture = False
        self.history = []

    def get_full_fen(self) -> str:
        return self.board.fen()

    def get_turn_color(self) -> str:
        return color_name(self.board.turn)

    def get_legal_moves(self) -> List[str]:
        return [move.uci() for move in self.board.legal_moves]

    def is_game_over(self) -> bool:
        return self.board.is_game_over(claim_draw=True)

    def get_result(self) -> Optional[str]:
        if not self.is_game_over():
            return None
        # '1-0', '0-1' or '1/2-1/2'
        return self.board.result(claim_draw=True)

    def is_ai_turn(self) -> bool:
        return self.board.turn == self.ai_color

    def push_uci(self, uci: str) -> None:
        try:
            move = chess.Move.from_uci(uci)
        except ValueError:
            raise ValueError(f"Illegal move: {uci}") from None

        if move not in self.board.legal_moves and len(uci) == 4:
            # Auto-queen promotion if the client sends e7e8 without a suffix
            piece = self.board.piece_at(move.from_square)
            if piece and piece.piece_type == chess.PAWN:
                to_rank = chess.square_rank(move.to_square)
                if (piece.color == chess.WHITE and to_rank == 7) or (
                    piece.color == chess.BLACK and to_rank == 0
                ):
                    move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)

        if move not in self.board.legal_moves:
            raise ValueError(f"Illegal move: {uci}")
        self._push(move)

    def play_ai_move(self, ai: ChessAI) -> Optional[Move]:
        """Let the AI move if it is its turn and the game is still running."""
        if self.is_game_over() or not self.is_ai_turn():
            return None
        move = ai.get_best_move(self.board)
        if move is None:
            return None
        self._push(move.to_chess())
        logger.debug("AI (%s) played %s", color_name(self.ai_color), move)
        return move

    def hint(self, ai: ChessAI) -> Optional[Move]:
        """Suggest a move for the human without playing it."""
        if self.is_game_over() or self.is_ai_turn():
            return None
        return ai.get_best_move(self.board)

    def _push(self, move: chess.Move) -> None:
        record = MoveRecord(uci=move.uci(), san=self.board.san(move), played_by=color_name(self.board.turn))
        self.last_move_was_capture = self.board.is_capture(move)
        self.board.push(move)
        self.history.append(record)

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
            "ai_color": color_name(self.ai_color),
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "last_move": last_uci,
            "in_check": in_check,
            "check_square": check_square,
            "last_move_capture": self.last_move_was_capture,
            "history": [asdict(r) for r in self.history],
        }
