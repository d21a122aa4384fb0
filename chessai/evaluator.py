from __future__ import annotations

from typing import Dict, Optional

import chess

from .rules import RulesEngine


MATE_SCORE = 10000


class Evaluator:
    """Static evaluation for chess positions.

    Positive scores favor White, negative scores favor Black. One pawn of
    material is worth one unit; checkmate is worth ``MATE_SCORE``.
    """

    MATERIAL_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 1,
        chess.KNIGHT: 3,
        chess.BISHOP: 3,
        chess.ROOK: 5,
        chess.QUEEN: 9,
        chess.KING: 100,
    }

    CENTER_BONUS = 0.5
    MOBILITY_WEIGHT = 0.1

    def __init__(self, rules: Optional[RulesEngine] = None) -> None:
        self.rules = rules or RulesEngine()

    def evaluate(self, position: chess.Board) -> float:
        rules = self.rules
        if rules.is_checkmate(position):
            # The side to move is the one that got mated
            return -MATE_SCORE if rules.side_to_move(position) == chess.WHITE else MATE_SCORE
        if rules.is_stalemate(position) or rules.is_draw(position):
            return 0

        grid = rules.board_contents(position)
        score = 0.0

        for row in grid:
            for cell in row:
                if cell is None:
                    continue
                color, piece_type = cell
                value = self.MATERIAL_VALUES.get(piece_type, 0)
                score += value if color == chess.WHITE else -value

        mid_rank = len(grid) // 2
        mid_file = len(grid[0]) // 2
        for rank in (mid_rank - 1, mid_rank):
            for file in (mid_file - 1, mid_file):
                cell = grid[rank][file]
                if cell is not None:
                    score += self.CENTER_BONUS if cell[0] == chess.WHITE else -self.CENTER_BONUS

        # Only the side to move contributes its mobility
        mobility = len(rules.generate_legal_moves(position))
        if rules.side_to_move(position) == chess.WHITE:
            score += self.MOBILITY_WEIGHT * mobility
        else:
            score -= self.MOBILITY_WEIGHT * mobility

        return score


def evaluate(position: chess.Board) -> float:
    return Evaluator().evaluate(position)
