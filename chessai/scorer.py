from __future__ import annotations

from typing import Dict, FrozenSet, Optional

import chess

from .rules import Move, RulesEngine


# Kings are never captured, so they carry no capture value here
CAPTURE_VALUES: Dict[chess.PieceType, int] = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
}

CENTER_SQUARES: FrozenSet[chess.Square] = frozenset([chess.D4, chess.E4, chess.D5, chess.E5])


class MoveScorer:
    """One-ply heuristic used to rank the moves of the side choosing a move."""

    CAPTURE_MULTIPLIER = 10
    CENTER_BONUS = 2
    CHECK_BONUS = 5
    CHECKMATE_BONUS = 1000

    def __init__(self, rules: Optional[RulesEngine] = None) -> None:
        self.rules = rules or RulesEngine()

    def score(self, position: chess.Board, move: Move) -> float:
        after = self.rules.apply_move(position, move)
        score = 0

        if move.captured is not None:
            score += CAPTURE_VALUES.get(move.captured, 0) * self.CAPTURE_MULTIPLIER

        if move.to_square in CENTER_SQUARES:
            score += self.CENTER_BONUS

        if self.rules.is_check(after):
            score += self.CHECK_BONUS

        # Stacks with the check bonus
        if self.rules.is_checkmate(after):
            score += self.CHECKMATE_BONUS

        return score
